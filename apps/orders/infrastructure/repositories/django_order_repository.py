"""
Django ORM implementation of OrderRepository.
"""
from decimal import Decimal
from typing import List, Optional
from uuid import UUID

from django.db import IntegrityError, transaction

from shared.infrastructure.persistence import translate_database_errors
from ...domain.entities.order import Order
from ...domain.exceptions import OrderNumberConflictError
from ...domain.repositories.order_repository import OrderRepository
from ...domain.value_objects import (
    CakeConfiguration,
    CakeFlavor,
    CakeShape,
    CakeSize,
    Customization,
    DeliveryAddress,
    DeliveryWindow,
    Money,
    OrderNumber,
    OrderStatus,
    PaymentStatus,
)
from ..models.order_model import OrderModel


class DjangoOrderRepository(OrderRepository):
    """Django ORM based order repository implementation."""

    def save(self, order: Order) -> Order:
        """Save an order entity."""
        config = order.cake_config
        with translate_database_errors('save order'):
            try:
                with transaction.atomic():
                    model, created = OrderModel.objects.update_or_create(
                        id=order.id,
                        defaults={
                            'order_number': order.order_number.value,
                            'customer_id': order.customer_id,
                            'flavor': config.flavor.value,
                            'size': config.size.value,
                            'shape': config.shape.value,
                            'layers': config.layers,
                            'tiers': config.tiers,
                            'customization': config.customization.to_dict() if config.customization else None,
                            'occasion': config.occasion or '',
                            'total_amount': order.total_amount.amount,
                            'currency': order.total_amount.currency,
                            'status': order.status.value,
                            'payment_status': order.payment_status.value,
                            'payment_method': order.payment_method,
                            'delivery_date': order.delivery_date,
                            'delivery_time_window': order.delivery_time_window.value,
                            'delivery_address': order.delivery_address.to_dict(),
                            'special_instructions': order.special_instructions,
                            'created_at': order.created_at,
                            'updated_at': order.updated_at,
                        }
                    )
            except IntegrityError as e:
                if self._order_number_taken(order):
                    raise OrderNumberConflictError(order.order_number.value) from e
                raise
        return self._to_entity(model)

    def _order_number_taken(self, order: Order) -> bool:
        return OrderModel.objects.filter(
            order_number=order.order_number.value,
        ).exclude(id=order.id).exists()

    def find_by_id(self, order_id: UUID) -> Optional[Order]:
        """Find an order by ID."""
        with translate_database_errors('find order'):
            try:
                model = OrderModel.objects.get(id=order_id)
            except OrderModel.DoesNotExist:
                return None
        return self._to_entity(model)

    def find_by_order_number(self, order_number: str) -> Optional[Order]:
        """Find an order by order number."""
        with translate_database_errors('find order'):
            try:
                model = OrderModel.objects.get(order_number=order_number)
            except OrderModel.DoesNotExist:
                return None
        return self._to_entity(model)

    def find_all(
        self,
        customer_id: Optional[str] = None,
        status: Optional[OrderStatus] = None,
        offset: int = 0,
        limit: int = 20,
    ) -> List[Order]:
        """Find orders with optional filters."""
        queryset = OrderModel.objects.all()
        if customer_id is not None:
            queryset = queryset.filter(customer_id=str(customer_id))
        if status is not None:
            queryset = queryset.filter(status=OrderStatus(status).value)
        with translate_database_errors('list orders'):
            models = list(queryset.order_by('-created_at')[offset:offset + limit])
        return [self._to_entity(model) for model in models]

    def list_statuses(self) -> List[OrderStatus]:
        with translate_database_errors('list order statuses'):
            values = list(OrderModel.objects.values_list('status', flat=True))
        return [OrderStatus(value) for value in values]

    def _to_entity(self, model: OrderModel) -> Order:
        """Convert Django model to domain entity."""
        return Order(
            id=model.id,
            order_number=OrderNumber(value=model.order_number),
            customer_id=model.customer_id,
            cake_config=CakeConfiguration(
                flavor=CakeFlavor(model.flavor),
                size=CakeSize(model.size),
                shape=CakeShape(model.shape),
                layers=model.layers,
                tiers=model.tiers,
                customization=Customization.from_dict(model.customization),
                occasion=model.occasion or None,
            ),
            total_amount=Money(amount=Decimal(model.total_amount), currency=model.currency),
            delivery_address=DeliveryAddress.from_dict(model.delivery_address),
            delivery_date=model.delivery_date,
            delivery_time_window=DeliveryWindow(model.delivery_time_window),
            special_instructions=model.special_instructions,
            status=OrderStatus(model.status),
            payment_status=PaymentStatus(model.payment_status),
            payment_method=model.payment_method,
            created_at=model.created_at,
            updated_at=model.updated_at,
        )
