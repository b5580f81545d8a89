"""
Update order status use case.
"""
import logging
from dataclasses import dataclass, field
from datetime import datetime
from typing import Callable, Optional

from django.db import transaction
from django.utils import timezone

from shared.application import UseCase, UseCaseResult
from ...conf import current_transition_policy
from ...domain.repositories.order_event_repository import OrderEventRepository
from ...domain.repositories.order_repository import OrderRepository
from ...domain.services.transition_policy import TransitionPolicy
from ...domain.value_objects import OrderStatus
from ...signals import publish_domain_events
from ..dtos.order_dto import OrderDTO, UpdateOrderStatusDTO
from .order_lookup import load_order

logger = logging.getLogger(__name__)


@dataclass
class UpdateOrderStatusUseCase(UseCase[UpdateOrderStatusDTO, OrderDTO]):
    """
    Move an order through the fulfillment pipeline.

    The status write and its status_updated event are committed together.
    Concurrent updates are last-write-wins.
    """

    order_repository: OrderRepository
    event_repository: OrderEventRepository
    policy: Optional[TransitionPolicy] = None
    clock: Callable[[], datetime] = field(default_factory=lambda: timezone.now)

    def execute(self, input_dto: UpdateOrderStatusDTO) -> UseCaseResult[OrderDTO]:
        policy = self.policy or current_transition_policy()
        new_status = OrderStatus(input_dto.status)

        with transaction.atomic():
            order = load_order(self.order_repository, input_dto.order_id)
            old_status = order.status
            event = order.change_status(
                new_status,
                changed_by=input_dto.staff_id,
                notes=input_dto.notes,
                estimated_completion=input_dto.estimated_completion,
                policy=policy,
                at=self.clock(),
            )
            saved_order = self.order_repository.save(order)
            self.event_repository.append(event)
            publish_domain_events(order.clear_domain_events())

        logger.info(
            f"Order {saved_order.order_number} status {old_status.value} -> {new_status.value} "
            f"by staff {input_dto.staff_id}"
        )
        return UseCaseResult.ok(OrderDTO.from_entity(saved_order))
