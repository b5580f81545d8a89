"""
Update payment status use case.
"""
import logging
from dataclasses import dataclass, field
from datetime import datetime
from typing import Callable

from django.db import transaction
from django.utils import timezone

from shared.application import UseCase, UseCaseResult
from ...domain.repositories.order_repository import OrderRepository
from ...domain.value_objects import PaymentStatus
from ...signals import publish_domain_events
from ..dtos.order_dto import OrderDTO, UpdatePaymentStatusDTO
from .order_lookup import load_order

logger = logging.getLogger(__name__)


@dataclass
class UpdatePaymentStatusUseCase(UseCase[UpdatePaymentStatusDTO, OrderDTO]):
    """Set payment status, independently of fulfillment status."""

    order_repository: OrderRepository
    clock: Callable[[], datetime] = field(default_factory=lambda: timezone.now)

    def execute(self, input_dto: UpdatePaymentStatusDTO) -> UseCaseResult[OrderDTO]:
        new_status = PaymentStatus(input_dto.payment_status)

        with transaction.atomic():
            order = load_order(self.order_repository, input_dto.order_id)
            order.change_payment_status(new_status, at=self.clock())
            saved_order = self.order_repository.save(order)
            publish_domain_events(order.clear_domain_events())

        logger.info(f"Order {saved_order.order_number} payment status set to {new_status.value}")
        return UseCaseResult.ok(OrderDTO.from_entity(saved_order))
