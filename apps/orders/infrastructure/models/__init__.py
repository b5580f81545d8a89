# Django models
from .order_model import OrderModel, OrderEventModel

__all__ = ['OrderModel', 'OrderEventModel']
