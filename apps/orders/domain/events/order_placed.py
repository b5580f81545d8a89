"""
Order placed domain event.
"""
from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from uuid import UUID

from shared.domain import DomainEvent


@dataclass(frozen=True)
class OrderPlaced(DomainEvent):
    """Raised when a customer places an order; the kitchen is notified from it."""
    order_id: UUID
    order_number: str
    customer_id: str
    total_amount: Decimal
    delivery_date: date
    delivery_time_window: str
