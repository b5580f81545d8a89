"""
Order event entity.
"""
from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional
from uuid import UUID

from shared.domain import utc_now

STATUS_UPDATED = "status_updated"
PAYMENT_CONFIRMED = "payment_confirmed"


@dataclass(frozen=True)
class OrderEvent:
    """
    One entry in an order's audit trail.

    Events are immutable; ``id`` is assigned by the event log on append and is
    None until then.
    """
    order_id: UUID
    event_type: str
    description: str = ""
    notes: Optional[str] = None
    estimated_completion: Optional[datetime] = None
    actual_completion: Optional[datetime] = None
    created_by: Optional[str] = None
    created_at: datetime = field(default_factory=utc_now)
    id: Optional[int] = None

    @classmethod
    def status_updated(
        cls,
        order_id: UUID,
        status: str,
        created_by: Optional[str],
        notes: Optional[str] = None,
        estimated_completion: Optional[datetime] = None,
        at: Optional[datetime] = None,
    ) -> 'OrderEvent':
        return cls(
            order_id=order_id,
            event_type=STATUS_UPDATED,
            description=f"Order status updated to {status}",
            notes=notes,
            estimated_completion=estimated_completion,
            created_by=created_by,
            created_at=at or utc_now(),
        )

