"""
Order status changed domain events.
"""
from dataclasses import dataclass
from typing import Optional
from uuid import UUID

from shared.domain import DomainEvent


@dataclass(frozen=True)
class OrderStatusChanged(DomainEvent):
    """Event raised when order status changes."""
    order_id: UUID
    old_status: str
    new_status: str
    changed_by: Optional[str] = None


@dataclass(frozen=True)
class PaymentStatusChanged(DomainEvent):
    """Event raised when payment status changes."""
    order_id: UUID
    old_status: str
    new_status: str
