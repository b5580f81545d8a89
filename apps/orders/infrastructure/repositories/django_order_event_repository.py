"""
Django ORM implementation of OrderEventRepository.
"""
from typing import List
from uuid import UUID

from shared.infrastructure.persistence import translate_database_errors
from ...domain.entities.order_event import OrderEvent
from ...domain.repositories.order_event_repository import OrderEventRepository
from ..models.order_model import OrderEventModel


class DjangoOrderEventRepository(OrderEventRepository):
    """Django ORM based order event log."""

    def append(self, event: OrderEvent) -> OrderEvent:
        with translate_database_errors('append order event'):
            model = OrderEventModel.objects.create(
                order_id=event.order_id,
                event_type=event.event_type,
                description=event.description,
                notes=event.notes,
                estimated_completion=event.estimated_completion,
                actual_completion=event.actual_completion,
                created_by=event.created_by,
                created_at=event.created_at,
            )
        return self._to_entity(model)

    def list_for_order(self, order_id: UUID) -> List[OrderEvent]:
        with translate_database_errors('list order events'):
            models = list(OrderEventModel.objects.filter(order_id=order_id).order_by('created_at', 'id'))
        return [self._to_entity(model) for model in models]

    def _to_entity(self, model: OrderEventModel) -> OrderEvent:
        return OrderEvent(
            id=model.id,
            order_id=model.order_id,
            event_type=model.event_type,
            description=model.description,
            notes=model.notes,
            estimated_completion=model.estimated_completion,
            actual_completion=model.actual_completion,
            created_by=model.created_by,
            created_at=model.created_at,
        )
