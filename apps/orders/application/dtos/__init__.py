# DTOs
from .order_dto import (
    AddOrderEventDTO,
    ListOrdersDTO,
    OrderDTO,
    OrderEventDTO,
    OrderLookupDTO,
    PaymentInstructionsDTO,
    PlacedOrderDTO,
    PlaceOrderDTO,
    PriceQuoteDTO,
    ProgressDTO,
    QuotePriceDTO,
    UpdateOrderStatusDTO,
    UpdatePaymentStatusDTO,
)

__all__ = [
    'AddOrderEventDTO',
    'ListOrdersDTO',
    'OrderDTO',
    'OrderEventDTO',
    'OrderLookupDTO',
    'PaymentInstructionsDTO',
    'PlacedOrderDTO',
    'PlaceOrderDTO',
    'PriceQuoteDTO',
    'ProgressDTO',
    'QuotePriceDTO',
    'UpdateOrderStatusDTO',
    'UpdatePaymentStatusDTO',
]
