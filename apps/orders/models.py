"""
Model registration for Django; the models live in infrastructure.models.
"""
from .infrastructure.models import OrderEventModel, OrderModel

__all__ = ['OrderModel', 'OrderEventModel']
