"""
Order Django ORM models.
"""
import uuid

from django.db import models
from django.utils import timezone

from ...domain.value_objects import (
    CakeFlavor,
    CakeShape,
    CakeSize,
    DeliveryWindow,
    OrderStatus,
    PaymentStatus,
)


def _enum_choices(enum_class):
    return [(member.value, member.value) for member in enum_class]


class OrderModel(models.Model):
    """Order model."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    order_number = models.CharField(max_length=32, unique=True, db_index=True)
    customer_id = models.CharField(max_length=64, db_index=True)

    # Cake configuration
    flavor = models.CharField(max_length=20, choices=_enum_choices(CakeFlavor))
    size = models.CharField(max_length=8, choices=_enum_choices(CakeSize))
    shape = models.CharField(max_length=10, choices=_enum_choices(CakeShape))
    layers = models.PositiveSmallIntegerField(default=1)
    tiers = models.PositiveSmallIntegerField(default=1)
    customization = models.JSONField(null=True, blank=True)
    occasion = models.CharField(max_length=100, blank=True)

    total_amount = models.DecimalField(max_digits=12, decimal_places=2)
    currency = models.CharField(max_length=3, default='ZMW')
    status = models.CharField(
        max_length=20, choices=OrderStatus.choices(), default=OrderStatus.PENDING.value, db_index=True
    )
    payment_status = models.CharField(
        max_length=10, choices=PaymentStatus.choices(), default=PaymentStatus.PENDING.value
    )
    payment_method = models.CharField(max_length=30, default='airtel_money')

    # Delivery information
    delivery_date = models.DateField()
    delivery_time_window = models.CharField(
        max_length=10, choices=DeliveryWindow.choices(), default=DeliveryWindow.MORNING.value
    )
    delivery_address = models.JSONField()
    special_instructions = models.TextField(blank=True)

    created_at = models.DateTimeField(default=timezone.now, db_index=True)
    updated_at = models.DateTimeField(default=timezone.now)

    class Meta:
        db_table = 'orders'
        ordering = ['-created_at']

    def __str__(self):
        return self.order_number


class OrderEventModel(models.Model):
    """Order event model; rows are only ever inserted."""

    id = models.BigAutoField(primary_key=True)
    order = models.ForeignKey(OrderModel, on_delete=models.PROTECT, related_name='events')
    event_type = models.CharField(max_length=100)
    description = models.TextField(blank=True)
    notes = models.TextField(null=True, blank=True)
    estimated_completion = models.DateTimeField(null=True, blank=True)
    actual_completion = models.DateTimeField(null=True, blank=True)
    created_by = models.CharField(max_length=64, null=True, blank=True)
    created_at = models.DateTimeField(default=timezone.now)

    class Meta:
        db_table = 'order_events'
        ordering = ['created_at', 'id']
        indexes = [
            models.Index(fields=['order', 'created_at']),
        ]

    def __str__(self):
        return f"{self.order_id} {self.event_type}"
