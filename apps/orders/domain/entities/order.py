"""
Order entity (Aggregate Root).
"""
from dataclasses import dataclass
from datetime import date, datetime
from typing import List, Optional

from shared.domain import AggregateRoot, utc_now
from ..events.order_placed import OrderPlaced
from ..events.order_status_changed import OrderStatusChanged, PaymentStatusChanged
from ..exceptions import InvalidOrderStateError, PaymentAlreadyConfirmedError
from ..services.transition_policy import PermissiveTransitionPolicy, TransitionPolicy
from ..value_objects.cake_configuration import CakeConfiguration
from ..value_objects.delivery_address import DeliveryAddress
from ..value_objects.money import Money
from ..value_objects.order_number import OrderNumber
from ..value_objects.order_status import DeliveryWindow, OrderStatus, PaymentStatus
from .order_event import PAYMENT_CONFIRMED, OrderEvent

DEFAULT_PAYMENT_METHOD = "airtel_money"


@dataclass(eq=False)
class Order(AggregateRoot):
    """
    A placed cake order.

    Status and payment status only change through change_status(),
    change_payment_status() and confirm_payment(). total_amount is fixed when
    the order is placed and is never recomputed.
    """
    order_number: OrderNumber
    customer_id: str
    cake_config: CakeConfiguration
    total_amount: Money
    delivery_address: DeliveryAddress
    delivery_date: date
    delivery_time_window: DeliveryWindow = DeliveryWindow.MORNING
    special_instructions: str = ""
    status: OrderStatus = OrderStatus.PENDING
    payment_status: PaymentStatus = PaymentStatus.PENDING
    payment_method: str = DEFAULT_PAYMENT_METHOD

    @classmethod
    def place(
        cls,
        customer_id: str,
        cake_config: CakeConfiguration,
        total_amount: Money,
        delivery_address: DeliveryAddress,
        delivery_date: date,
        delivery_time_window: DeliveryWindow = DeliveryWindow.MORNING,
        special_instructions: str = "",
        payment_method: str = DEFAULT_PAYMENT_METHOD,
        at: Optional[datetime] = None,
    ) -> 'Order':
        """Factory method to create a new order in the pending state."""
        at = at or utc_now()
        order = cls(
            order_number=OrderNumber.generate(at),
            customer_id=str(customer_id),
            cake_config=cake_config.ensure_complete(),
            total_amount=total_amount,
            delivery_address=delivery_address,
            delivery_date=delivery_date,
            delivery_time_window=delivery_time_window,
            special_instructions=special_instructions or "",
            payment_method=payment_method,
            created_at=at,
            updated_at=at,
        )
        order.add_domain_event(
            OrderPlaced(
                order_id=order.id,
                order_number=order.order_number.value,
                customer_id=order.customer_id,
                total_amount=order.total_amount.amount,
                delivery_date=order.delivery_date,
                delivery_time_window=order.delivery_time_window.value,
            )
        )
        return order

    def change_status(
        self,
        new_status: OrderStatus,
        changed_by: Optional[str],
        notes: Optional[str] = None,
        estimated_completion: Optional[datetime] = None,
        policy: Optional[TransitionPolicy] = None,
        at: Optional[datetime] = None,
    ) -> OrderEvent:
        """Move the order to new_status and return the audit entry to append."""
        new_status = OrderStatus(new_status)
        (policy or PermissiveTransitionPolicy()).check(self.status, new_status)
        at = at or utc_now()
        old_status = self.status
        self.status = new_status
        self.touch(at)
        self.add_domain_event(
            OrderStatusChanged(
                order_id=self.id,
                old_status=old_status.value,
                new_status=new_status.value,
                changed_by=changed_by,
            )
        )
        return OrderEvent.status_updated(
            order_id=self.id,
            status=new_status.value,
            created_by=changed_by,
            notes=notes,
            estimated_completion=estimated_completion,
            at=at,
        )

    def change_payment_status(self, new_status: PaymentStatus, at: Optional[datetime] = None) -> None:
        """Update payment status; payment changes leave no audit entry."""
        new_status = PaymentStatus(new_status)
        old_status = self.payment_status
        self.payment_status = new_status
        self.touch(at)
        self.add_domain_event(
            PaymentStatusChanged(
                order_id=self.id,
                old_status=old_status.value,
                new_status=new_status.value,
            )
        )

    def confirm_payment(
        self,
        confirmed_by: Optional[str],
        policy: Optional[TransitionPolicy] = None,
        at: Optional[datetime] = None,
    ) -> List[OrderEvent]:
        """
        Customer reports payment.

        A pending order also becomes confirmed. Returns the audit entries to
        append, status change first.
        """
        if self.payment_status is PaymentStatus.PAID:
            raise PaymentAlreadyConfirmedError(self.order_number.value)
        if self.status is OrderStatus.CANCELLED:
            raise InvalidOrderStateError("confirm payment for", self.status.value)
        at = at or utc_now()
        events = []
        if self.status is OrderStatus.PENDING:
            events.append(self.change_status(OrderStatus.CONFIRMED, confirmed_by, policy=policy, at=at))
        self.change_payment_status(PaymentStatus.PAID, at=at)
        events.append(
            OrderEvent(
                order_id=self.id,
                event_type=PAYMENT_CONFIRMED,
                description=f"Customer confirmed {self.payment_method_label} payment",
                created_by=confirmed_by,
                created_at=at,
            )
        )
        return events

    @property
    def is_terminal(self) -> bool:
        return self.status.is_terminal

    @property
    def payment_method_label(self) -> str:
        return self.payment_method.replace('_', ' ').title()
