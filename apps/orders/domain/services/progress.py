"""
Read-only projections of an order's fulfillment state.

Nothing here is stored: progress and countdowns are recomputed from the
current status, the delivery date and the caller's clock on every read.
"""
import math
from dataclasses import dataclass
from datetime import date, datetime, time, timedelta
from enum import Enum
from typing import Dict, Iterable, Union

from ..value_objects.order_status import OrderStatus

PROGRESS_BY_STATUS = {
    OrderStatus.PENDING: 15,
    OrderStatus.CONFIRMED: 25,
    OrderStatus.PREPARING: 40,
    OrderStatus.BAKING: 60,
    OrderStatus.DECORATING: 80,
    OrderStatus.READY: 90,
    OrderStatus.OUT_FOR_DELIVERY: 95,
    OrderStatus.DELIVERED: 100,
    OrderStatus.CANCELLED: 0,
}

IN_PROGRESS_STATUSES = (
    OrderStatus.CONFIRMED,
    OrderStatus.PREPARING,
    OrderStatus.BAKING,
    OrderStatus.DECORATING,
)
READY_STATUSES = (OrderStatus.READY, OrderStatus.OUT_FOR_DELIVERY)


class CountdownUrgency(str, Enum):
    OVERDUE = 'overdue'
    TODAY = 'today'
    HOURS = 'hours'
    DAYS = 'days'


class DeliveryUrgency(str, Enum):
    OVERDUE = 'overdue'
    TODAY = 'today'
    TOMORROW = 'tomorrow'
    URGENT = 'urgent'
    NORMAL = 'normal'


@dataclass(frozen=True)
class DeliveryCountdown:
    label: str
    urgency: CountdownUrgency


def progress_percent(status: Union[OrderStatus, str]) -> int:
    """Percentage of the fulfillment pipeline completed, 0..100."""
    return PROGRESS_BY_STATUS[OrderStatus(status)]


def status_label(status: Union[OrderStatus, str]) -> str:
    return OrderStatus(status).label


def _as_datetime(moment: Union[date, datetime], tzinfo) -> datetime:
    if isinstance(moment, datetime):
        if moment.tzinfo is None and tzinfo is not None:
            return moment.replace(tzinfo=tzinfo)
        return moment
    return datetime.combine(moment, time.min, tzinfo=tzinfo)


def _remaining(delivery_date: Union[date, datetime], now: datetime) -> timedelta:
    return _as_datetime(delivery_date, now.tzinfo) - now


def delivery_countdown(delivery_date: Union[date, datetime], now: datetime) -> DeliveryCountdown:
    """
    Customer-facing countdown to delivery.

    A bare date counts from midnight at the start of that day, in the
    timezone of ``now``.
    """
    remaining = _remaining(delivery_date, now)
    if remaining < timedelta(0):
        return DeliveryCountdown(label='passed', urgency=CountdownUrgency.OVERDUE)

    days = remaining.days
    hours = remaining.seconds // 3600
    if days > 0:
        return DeliveryCountdown(
            label=f"{days} day{'s' if days > 1 else ''} to go",
            urgency=CountdownUrgency.DAYS,
        )
    if hours > 0:
        return DeliveryCountdown(
            label=f"{hours} hour{'s' if hours > 1 else ''} to go",
            urgency=CountdownUrgency.HOURS,
        )
    return DeliveryCountdown(label='today', urgency=CountdownUrgency.TODAY)


def delivery_urgency(delivery_date: Union[date, datetime], now: datetime) -> DeliveryUrgency:
    """Kitchen-facing urgency, from whole days left rounded up."""
    days_left = math.ceil(_remaining(delivery_date, now) / timedelta(days=1))
    if days_left < 0:
        return DeliveryUrgency.OVERDUE
    if days_left == 0:
        return DeliveryUrgency.TODAY
    if days_left == 1:
        return DeliveryUrgency.TOMORROW
    if days_left <= 2:
        return DeliveryUrgency.URGENT
    return DeliveryUrgency.NORMAL


def tracking_stats(statuses: Iterable[Union[OrderStatus, str]]) -> Dict[str, int]:
    """Counts shown on the admin tracking dashboard."""
    stats = {'total': 0, 'pending': 0, 'in_progress': 0, 'ready': 0, 'delivered': 0}
    for raw in statuses:
        status = OrderStatus(raw)
        stats['total'] += 1
        if status is OrderStatus.PENDING:
            stats['pending'] += 1
        elif status in IN_PROGRESS_STATUSES:
            stats['in_progress'] += 1
        elif status in READY_STATUSES:
            stats['ready'] += 1
        elif status is OrderStatus.DELIVERED:
            stats['delivered'] += 1
    return stats


