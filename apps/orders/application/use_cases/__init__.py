# Use cases
from .add_order_event import AddOrderEventUseCase
from .confirm_payment import ConfirmPaymentUseCase
from .get_order import GetOrderUseCase, ListOrdersUseCase
from .get_order_progress import GetOrderProgressUseCase, GetTrackingStatsUseCase
from .list_order_events import ListOrderEventsUseCase
from .place_order import PlaceOrderUseCase
from .quote_price import QuotePriceUseCase
from .update_order_status import UpdateOrderStatusUseCase
from .update_payment_status import UpdatePaymentStatusUseCase

__all__ = [
    'AddOrderEventUseCase',
    'ConfirmPaymentUseCase',
    'GetOrderUseCase',
    'ListOrdersUseCase',
    'GetOrderProgressUseCase',
    'GetTrackingStatsUseCase',
    'ListOrderEventsUseCase',
    'PlaceOrderUseCase',
    'QuotePriceUseCase',
    'UpdateOrderStatusUseCase',
    'UpdatePaymentStatusUseCase',
]
