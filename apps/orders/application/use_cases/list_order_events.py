"""
List order events use case.
"""
from dataclasses import dataclass
from typing import List

from shared.application import UseCase, UseCaseResult
from ...domain.repositories.order_event_repository import OrderEventRepository
from ...domain.repositories.order_repository import OrderRepository
from ..dtos.order_dto import OrderEventDTO, OrderLookupDTO
from .order_lookup import load_order


@dataclass
class ListOrderEventsUseCase(UseCase[OrderLookupDTO, List[OrderEventDTO]]):
    """Use case for reading an order's audit trail, oldest first."""

    order_repository: OrderRepository
    event_repository: OrderEventRepository

    def execute(self, input_dto: OrderLookupDTO) -> UseCaseResult[List[OrderEventDTO]]:
        order = load_order(self.order_repository, input_dto.order_id, input_dto.customer_id)
        events = self.event_repository.list_for_order(order.id)
        return UseCaseResult.ok([OrderEventDTO.from_entity(event) for event in events])
