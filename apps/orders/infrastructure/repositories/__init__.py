# Repository implementations
from .django_order_event_repository import DjangoOrderEventRepository
from .django_order_repository import DjangoOrderRepository

__all__ = ['DjangoOrderRepository', 'DjangoOrderEventRepository']
