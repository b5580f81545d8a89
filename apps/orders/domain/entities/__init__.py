# Domain entities
from .order import Order
from .order_event import OrderEvent

__all__ = ['Order', 'OrderEvent']
