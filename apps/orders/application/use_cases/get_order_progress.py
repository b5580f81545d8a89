"""
Progress and tracking use cases.
"""
from dataclasses import dataclass, field
from datetime import datetime
from typing import Callable, Dict

from django.utils import timezone

from shared.application import UseCase, UseCaseResult
from ...domain.repositories.order_repository import OrderRepository
from ...domain.services.progress import (
    delivery_countdown,
    delivery_urgency,
    progress_percent,
    tracking_stats,
)
from ..dtos.order_dto import OrderLookupDTO, ProgressDTO
from .order_lookup import load_order


@dataclass
class GetOrderProgressUseCase(UseCase[OrderLookupDTO, ProgressDTO]):
    """Use case projecting an order's progress; it never writes."""

    order_repository: OrderRepository
    clock: Callable[[], datetime] = field(default_factory=lambda: timezone.now)

    def execute(self, input_dto: OrderLookupDTO) -> UseCaseResult[ProgressDTO]:
        order = load_order(self.order_repository, input_dto.order_id, input_dto.customer_id)
        now = self.clock()
        countdown = delivery_countdown(order.delivery_date, now)
        return UseCaseResult.ok(
            ProgressDTO(
                order_id=order.id,
                status=order.status.value,
                status_label=order.status.label,
                percent=progress_percent(order.status),
                countdown_label=countdown.label,
                countdown_urgency=countdown.urgency.value,
                delivery_urgency=delivery_urgency(order.delivery_date, now).value,
            )
        )


@dataclass
class GetTrackingStatsUseCase(UseCase[None, Dict[str, int]]):
    """Use case for the kitchen tracking dashboard counters."""

    order_repository: OrderRepository

    def execute(self, input_dto: None = None) -> UseCaseResult[Dict[str, int]]:
        return UseCaseResult.ok(tracking_stats(self.order_repository.list_statuses()))
