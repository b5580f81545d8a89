"""
Confirm payment use case.
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
from ...signals import publish_domain_events
from ..dtos.order_dto import OrderDTO, OrderLookupDTO
from .order_lookup import load_order

logger = logging.getLogger(__name__)


@dataclass
class ConfirmPaymentUseCase(UseCase[OrderLookupDTO, OrderDTO]):
    """Customer reports that they have paid for their order."""

    order_repository: OrderRepository
    event_repository: OrderEventRepository
    policy: Optional[TransitionPolicy] = None
    clock: Callable[[], datetime] = field(default_factory=lambda: timezone.now)

    def execute(self, input_dto: OrderLookupDTO) -> UseCaseResult[OrderDTO]:
        policy = self.policy or current_transition_policy()

        with transaction.atomic():
            order = load_order(self.order_repository, input_dto.order_id, input_dto.customer_id)
            events = order.confirm_payment(input_dto.customer_id, policy=policy, at=self.clock())
            saved_order = self.order_repository.save(order)
            for event in events:
                self.event_repository.append(event)
            publish_domain_events(order.clear_domain_events())

        logger.info(f"Payment confirmed for order {saved_order.order_number}")
        return UseCaseResult.ok(OrderDTO.from_entity(saved_order))
