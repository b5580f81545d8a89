# Domain events
from .order_placed import OrderPlaced
from .order_status_changed import OrderStatusChanged, PaymentStatusChanged

__all__ = ['OrderPlaced', 'OrderStatusChanged', 'PaymentStatusChanged']
