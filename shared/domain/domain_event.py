"""
Domain event base class.
"""
from dataclasses import dataclass, field, fields
from datetime import datetime, timezone
from typing import Any, Dict
from uuid import UUID, uuid4


@dataclass(frozen=True, kw_only=True)
class DomainEvent:
    """
    Something that happened to an aggregate.

    Aggregates collect these while they change; the application layer
    publishes them once the change is committed.
    """
    event_id: UUID = field(default_factory=uuid4)
    occurred_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @property
    def event_type(self) -> str:
        return self.__class__.__name__

    def payload(self) -> Dict[str, Any]:
        """Event-specific fields, without the envelope."""
        return {
            f.name: getattr(self, f.name)
            for f in fields(self)
            if f.name not in ('event_id', 'occurred_at')
        }
