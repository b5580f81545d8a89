"""
Order DTOs.
"""
from dataclasses import dataclass, field
from datetime import date, datetime
from decimal import Decimal
from typing import Any, Dict, List, Optional
from uuid import UUID

from ...domain.entities.order import Order
from ...domain.entities.order_event import OrderEvent
from ...domain.services.pricing import PriceBreakdown


@dataclass
class PlaceOrderDTO:
    """DTO for placing an order."""
    customer_id: str
    cake_config: Dict[str, Any]
    delivery_address: Dict[str, Any]
    delivery_date: date
    delivery_time_window: str = 'morning'
    special_instructions: str = ''
    # Catalog price replacing the size table; the HTTP API never sets it.
    catalog_base_price: Optional[Decimal] = None


@dataclass
class UpdateOrderStatusDTO:
    """DTO for a staff status change."""
    order_id: UUID
    status: str
    staff_id: Optional[str]
    notes: Optional[str] = None
    estimated_completion: Optional[datetime] = None


@dataclass
class UpdatePaymentStatusDTO:
    """DTO for a staff payment status change."""
    order_id: UUID
    payment_status: str


@dataclass
class AddOrderEventDTO:
    """DTO for a free-form tracking note."""
    order_id: UUID
    event_type: str
    description: str
    created_by: Optional[str]
    notes: Optional[str] = None
    estimated_completion: Optional[datetime] = None
    actual_completion: Optional[datetime] = None


@dataclass
class OrderLookupDTO:
    """DTO identifying an order, optionally scoped to its customer."""
    order_id: UUID
    customer_id: Optional[str] = None


@dataclass
class ListOrdersDTO:
    """DTO for listing orders."""
    customer_id: Optional[str] = None
    status: Optional[str] = None
    offset: int = 0
    limit: int = 20


@dataclass
class OrderEventDTO:
    """DTO for order event output."""
    id: Optional[int]
    order_id: UUID
    event_type: str
    description: str
    notes: Optional[str]
    estimated_completion: Optional[datetime]
    actual_completion: Optional[datetime]
    created_by: Optional[str]
    created_at: datetime

    @classmethod
    def from_entity(cls, event: OrderEvent) -> 'OrderEventDTO':
        """Create DTO from entity."""
        return cls(
            id=event.id,
            order_id=event.order_id,
            event_type=event.event_type,
            description=event.description,
            notes=event.notes,
            estimated_completion=event.estimated_completion,
            actual_completion=event.actual_completion,
            created_by=event.created_by,
            created_at=event.created_at,
        )


@dataclass
class OrderDTO:
    """DTO for order output."""
    id: UUID
    order_number: str
    customer_id: str
    cake_config: Dict[str, Any]
    servings: Optional[List[int]]
    total_amount: Decimal
    currency: str
    total_formatted: str
    status: str
    status_label: str
    payment_status: str
    payment_method: str
    delivery_date: date
    delivery_time_window: str
    delivery_address: Dict[str, Any]
    special_instructions: str
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_entity(cls, order: Order) -> 'OrderDTO':
        """Create DTO from entity."""
        servings = order.cake_config.servings
        return cls(
            id=order.id,
            order_number=order.order_number.value,
            customer_id=order.customer_id,
            cake_config=order.cake_config.to_dict(),
            servings=list(servings) if servings else None,
            total_amount=order.total_amount.amount,
            currency=order.total_amount.currency,
            total_formatted=order.total_amount.formatted,
            status=order.status.value,
            status_label=order.status.label,
            payment_status=order.payment_status.value,
            payment_method=order.payment_method,
            delivery_date=order.delivery_date,
            delivery_time_window=order.delivery_time_window.value,
            delivery_address=order.delivery_address.to_dict(),
            special_instructions=order.special_instructions,
            created_at=order.created_at,
            updated_at=order.updated_at,
        )


@dataclass
class PaymentInstructionsDTO:
    """How the customer pays for a freshly placed order."""
    method: str
    phone_number: str
    amount: Decimal
    reference: str
    instructions: List[str] = field(default_factory=list)


@dataclass
class PlacedOrderDTO:
    """DTO returned after placing an order."""
    order: OrderDTO
    payment_instructions: PaymentInstructionsDTO


@dataclass
class ProgressDTO:
    """Read-only progress projection of an order."""
    order_id: UUID
    status: str
    status_label: str
    percent: int
    countdown_label: str
    countdown_urgency: str
    delivery_urgency: str


@dataclass
class PriceQuoteDTO:
    """Price of a (possibly incomplete) cake configuration."""
    base_price: Decimal
    flavor_multiplier: Decimal
    flavor_premium_percent: int
    layer_multiplier: Decimal
    tier_multiplier: Decimal
    surcharges: Decimal
    total_amount: Decimal
    currency: str
    total_formatted: str
    is_complete: bool

    @classmethod
    def from_breakdown(cls, breakdown: PriceBreakdown, total, is_complete: bool) -> 'PriceQuoteDTO':
        return cls(
            base_price=breakdown.base_price,
            flavor_multiplier=breakdown.flavor_multiplier,
            flavor_premium_percent=breakdown.flavor_premium_percent,
            layer_multiplier=breakdown.layer_multiplier,
            tier_multiplier=breakdown.tier_multiplier,
            surcharges=total.amount - breakdown.total.amount,
            total_amount=total.amount,
            currency=total.currency,
            total_formatted=total.formatted,
            is_complete=is_complete,
        )


@dataclass
class QuotePriceDTO:
    """DTO for pricing a configuration without placing an order."""
    cake_config: Dict[str, Any]
    include_customization: bool = False
