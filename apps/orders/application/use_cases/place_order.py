"""
Place order use case.
"""
import logging
from dataclasses import dataclass, field
from datetime import datetime
from typing import Callable

from django.db import transaction
from django.utils import timezone

from shared.application import UseCase, UseCaseResult
from shared.domain import ValidationError
from ...conf import orders_settings
from ...domain.entities.order import Order
from ...domain.exceptions import OrderNumberConflictError
from ...domain.repositories.order_repository import OrderRepository
from ...domain.services.pricing import apply_customization_surcharges, compute_price
from ...domain.value_objects import CakeConfiguration, DeliveryAddress, DeliveryWindow
from ...signals import publish_domain_events
from ..dtos.order_dto import OrderDTO, PaymentInstructionsDTO, PlacedOrderDTO, PlaceOrderDTO

logger = logging.getLogger(__name__)

# Tries at generating an order number nobody else holds
ORDER_NUMBER_ATTEMPTS = 2


@dataclass
class PlaceOrderUseCase(UseCase[PlaceOrderDTO, PlacedOrderDTO]):
    """Use case for placing a new cake order."""

    order_repository: OrderRepository
    clock: Callable[[], datetime] = field(default_factory=lambda: timezone.now)

    def execute(self, input_dto: PlaceOrderDTO) -> UseCaseResult[PlacedOrderDTO]:
        # Validate before anything is priced or stored
        config = CakeConfiguration.from_dict(input_dto.cake_config).ensure_complete()
        address = DeliveryAddress.from_dict(input_dto.delivery_address)
        try:
            window = DeliveryWindow(input_dto.delivery_time_window)
        except ValueError:
            raise ValidationError(
                f"Unknown delivery time window '{input_dto.delivery_time_window}'",
                field='delivery_time_window',
            ) from None

        total = compute_price(
            config,
            base_price=input_dto.catalog_base_price,
            currency=orders_settings.CURRENCY,
        )
        if orders_settings.CHARGE_CUSTOMIZATION:
            total = apply_customization_surcharges(total, config.customization)

        now = self.clock()
        for attempt in range(1, ORDER_NUMBER_ATTEMPTS + 1):
            order = Order.place(
                customer_id=input_dto.customer_id,
                cake_config=config,
                total_amount=total,
                delivery_address=address,
                delivery_date=input_dto.delivery_date,
                delivery_time_window=window,
                special_instructions=input_dto.special_instructions,
                payment_method=orders_settings.PAYMENT_METHOD,
                at=now,
            )
            try:
                with transaction.atomic():
                    saved_order = self.order_repository.save(order)
                    publish_domain_events(order.clear_domain_events())
                break
            except OrderNumberConflictError:
                if attempt == ORDER_NUMBER_ATTEMPTS:
                    raise
                logger.warning(f"Order number {order.order_number} already taken, generating another")

        logger.info(
            f"Order {saved_order.order_number} placed by customer {saved_order.customer_id} "
            f"for {saved_order.total_amount.formatted}"
        )
        return UseCaseResult.ok(
            PlacedOrderDTO(
                order=OrderDTO.from_entity(saved_order),
                payment_instructions=self._payment_instructions(saved_order),
            )
        )

    def _payment_instructions(self, order: Order) -> PaymentInstructionsDTO:
        phone_number = orders_settings.PAYMENT_PHONE_NUMBER
        amount = order.total_amount
        reference = order.order_number.value
        return PaymentInstructionsDTO(
            method=order.payment_method,
            phone_number=phone_number,
            amount=amount.amount,
            reference=reference,
            instructions=[
                'Dial *115# on your Airtel phone',
                'Select option 5 (Send Money)',
                f'Enter recipient number: {phone_number}',
                f'Enter amount: {amount.currency} {amount.amount}',
                f'Reference: {reference}',
                'Follow prompts to complete payment',
                'Confirm the payment once the transaction is done',
            ],
        )
