"""
Order status value objects.
"""
from enum import Enum
from typing import Tuple


class OrderStatus(str, Enum):
    """Fulfillment stage of an order, declared in forward order."""
    PENDING = 'pending'
    CONFIRMED = 'confirmed'
    PREPARING = 'preparing'
    BAKING = 'baking'
    DECORATING = 'decorating'
    READY = 'ready'
    OUT_FOR_DELIVERY = 'out_for_delivery'
    DELIVERED = 'delivered'
    CANCELLED = 'cancelled'

    @classmethod
    def pipeline(cls) -> Tuple['OrderStatus', ...]:
        """Statuses an order moves through, excluding cancellation."""
        return tuple(status for status in cls if status is not cls.CANCELLED)

    @classmethod
    def choices(cls):
        return [(status.value, status.label) for status in cls]

    @property
    def is_terminal(self) -> bool:
        return self in (OrderStatus.DELIVERED, OrderStatus.CANCELLED)

    @property
    def position(self) -> int:
        """Index in the pipeline; -1 for cancelled."""
        pipeline = OrderStatus.pipeline()
        return pipeline.index(self) if self in pipeline else -1

    @property
    def label(self) -> str:
        return _STATUS_LABELS.get(self) or self.value.title()


_STATUS_LABELS = {OrderStatus.OUT_FOR_DELIVERY: 'Out for Delivery'}


class PaymentStatus(str, Enum):
    """Payment collection state, independent of fulfillment."""
    PENDING = 'pending'
    PAID = 'paid'
    REFUNDED = 'refunded'
    FAILED = 'failed'

    @classmethod
    def choices(cls):
        return [(status.value, status.value.title()) for status in cls]


class DeliveryWindow(str, Enum):
    """Time-of-day window for delivery."""
    MORNING = 'morning'
    AFTERNOON = 'afternoon'
    EVENING = 'evening'

    @classmethod
    def choices(cls):
        return [(window.value, window.value.title()) for window in cls]
