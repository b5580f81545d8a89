# Repository interfaces
from .order_event_repository import OrderEventRepository
from .order_repository import OrderRepository

__all__ = ['OrderRepository', 'OrderEventRepository']
