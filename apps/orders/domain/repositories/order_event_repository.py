"""
Order event repository interface.
"""
from abc import ABC, abstractmethod
from typing import List
from uuid import UUID

from ..entities.order_event import OrderEvent


class OrderEventRepository(ABC):
    """
    Append-only log of order events.

    Events are never updated or deleted.
    """

    @abstractmethod
    def append(self, event: OrderEvent) -> OrderEvent:
        """Store an event and return it with its assigned id."""
        pass

    @abstractmethod
    def list_for_order(self, order_id: UUID) -> List[OrderEvent]:
        """All events of an order, oldest first."""
        pass
