"""
Add order event use case.
"""
import logging
from dataclasses import dataclass, field
from datetime import datetime
from typing import Callable

from django.utils import timezone

from shared.application import UseCase, UseCaseResult
from shared.domain import ValidationError
from ...domain.entities.order_event import OrderEvent
from ...domain.repositories.order_event_repository import OrderEventRepository
from ...domain.repositories.order_repository import OrderRepository
from ..dtos.order_dto import AddOrderEventDTO, OrderEventDTO
from .order_lookup import load_order

logger = logging.getLogger(__name__)


@dataclass
class AddOrderEventUseCase(UseCase[AddOrderEventDTO, OrderEventDTO]):
    """Append a free-form tracking note; the order itself is not modified."""

    order_repository: OrderRepository
    event_repository: OrderEventRepository
    clock: Callable[[], datetime] = field(default_factory=lambda: timezone.now)

    def execute(self, input_dto: AddOrderEventDTO) -> UseCaseResult[OrderEventDTO]:
        if not (input_dto.event_type or '').strip():
            raise ValidationError("Event type is required", field='event_type')
        if not (input_dto.description or '').strip():
            raise ValidationError("Event description is required", field='description')

        order = load_order(self.order_repository, input_dto.order_id)
        event = self.event_repository.append(
            OrderEvent(
                order_id=order.id,
                event_type=input_dto.event_type.strip(),
                description=input_dto.description.strip(),
                notes=input_dto.notes or None,
                estimated_completion=input_dto.estimated_completion,
                actual_completion=input_dto.actual_completion,
                created_by=input_dto.created_by,
                created_at=self.clock(),
            )
        )
        logger.info(f"Event '{event.event_type}' added to order {order.order_number} by {event.created_by}")
        return UseCaseResult.ok(OrderEventDTO.from_entity(event))
