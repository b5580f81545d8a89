"""
Shared order lookup for use cases.
"""
from typing import Optional
from uuid import UUID

from ...domain.entities.order import Order
from ...domain.exceptions import OrderNotFoundError
from ...domain.repositories.order_repository import OrderRepository


def load_order(
    order_repository: OrderRepository,
    order_id: UUID,
    customer_id: Optional[str] = None,
) -> Order:
    """
    Fetch an order or raise OrderNotFoundError.

    When customer_id is given, another customer's order is reported as
    missing rather than forbidden.
    """
    order = order_repository.find_by_id(order_id)
    if order is None:
        raise OrderNotFoundError(order_id)
    if customer_id is not None and order.customer_id != str(customer_id):
        raise OrderNotFoundError(order_id)
    return order
