# Serializers
from .order_serializer import (
    CakeConfigurationSerializer,
    DeliveryAddressSerializer,
    OrderCreateSerializer,
    OrderEventCreateSerializer,
    OrderEventSerializer,
    OrderListQuerySerializer,
    OrderSerializer,
    OrderUpdateSerializer,
    PlacedOrderSerializer,
    PriceQuoteRequestSerializer,
    PriceQuoteSerializer,
    ProgressSerializer,
    TrackingStatsSerializer,
)

__all__ = [
    'CakeConfigurationSerializer',
    'DeliveryAddressSerializer',
    'OrderCreateSerializer',
    'OrderEventCreateSerializer',
    'OrderEventSerializer',
    'OrderListQuerySerializer',
    'OrderSerializer',
    'OrderUpdateSerializer',
    'PlacedOrderSerializer',
    'PriceQuoteRequestSerializer',
    'PriceQuoteSerializer',
    'ProgressSerializer',
    'TrackingStatsSerializer',
]
