"""
Order read use cases.
"""
from dataclasses import dataclass
from typing import List

from shared.application import UseCase, UseCaseResult
from ...domain.repositories.order_repository import OrderRepository
from ...domain.value_objects import OrderStatus
from ..dtos.order_dto import ListOrdersDTO, OrderDTO, OrderLookupDTO
from .order_lookup import load_order


@dataclass
class GetOrderUseCase(UseCase[OrderLookupDTO, OrderDTO]):
    """Use case for fetching one order."""

    order_repository: OrderRepository

    def execute(self, input_dto: OrderLookupDTO) -> UseCaseResult[OrderDTO]:
        order = load_order(self.order_repository, input_dto.order_id, input_dto.customer_id)
        return UseCaseResult.ok(OrderDTO.from_entity(order))


@dataclass
class ListOrdersUseCase(UseCase[ListOrdersDTO, List[OrderDTO]]):
    """Use case for listing orders, newest first."""

    order_repository: OrderRepository

    def execute(self, input_dto: ListOrdersDTO) -> UseCaseResult[List[OrderDTO]]:
        orders = self.order_repository.find_all(
            customer_id=input_dto.customer_id,
            status=OrderStatus(input_dto.status) if input_dto.status else None,
            offset=input_dto.offset,
            limit=input_dto.limit,
        )
        return UseCaseResult.ok([OrderDTO.from_entity(order) for order in orders])
