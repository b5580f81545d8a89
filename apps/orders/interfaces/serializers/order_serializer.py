"""
Order serializers.
"""
from rest_framework import serializers

from ...domain.value_objects import (
    CakeFlavor,
    CakeShape,
    CakeSize,
    DeliveryWindow,
    OrderStatus,
    PaymentStatus,
)
from ...domain.value_objects.cake_configuration import MAX_STACK, MIN_STACK


class CakeSizeField(serializers.ChoiceField):
    """Size choice that also accepts the 8\" notation."""

    def __init__(self, **kwargs):
        super().__init__(choices=[size.value for size in CakeSize], **kwargs)

    def to_internal_value(self, data):
        try:
            return CakeSize.parse(data).value
        except ValueError:
            self.fail('invalid_choice', input=data)


class CustomizationSerializer(serializers.Serializer):
    """Serializer for cake customization."""
    message = serializers.CharField(max_length=200, required=False, allow_blank=True)
    colors = serializers.ListField(child=serializers.CharField(max_length=50), required=False)
    decorations = serializers.ListField(child=serializers.CharField(max_length=100), required=False)
    dietary = serializers.ListField(child=serializers.CharField(max_length=50), required=False)


class CakeConfigurationSerializer(serializers.Serializer):
    """Serializer for a complete cake configuration."""
    flavor = serializers.ChoiceField(choices=[flavor.value for flavor in CakeFlavor])
    size = CakeSizeField()
    shape = serializers.ChoiceField(choices=[shape.value for shape in CakeShape])
    layers = serializers.IntegerField(min_value=MIN_STACK, max_value=MAX_STACK, default=1)
    tiers = serializers.IntegerField(min_value=MIN_STACK, max_value=MAX_STACK, default=1)
    customization = CustomizationSerializer(required=False, allow_null=True)
    occasion = serializers.CharField(max_length=100, required=False, allow_blank=True, allow_null=True)


class CakeDraftSerializer(CakeConfigurationSerializer):
    """Serializer for a configuration that is still being designed."""
    flavor = serializers.ChoiceField(choices=[flavor.value for flavor in CakeFlavor], required=False)
    size = CakeSizeField(required=False)
    shape = serializers.ChoiceField(choices=[shape.value for shape in CakeShape], required=False)


class DeliveryAddressSerializer(serializers.Serializer):
    """Serializer for a delivery address."""
    label = serializers.CharField(max_length=50, default='Home')
    street = serializers.CharField(max_length=255)
    area = serializers.CharField(max_length=255, required=False, allow_blank=True)
    city = serializers.CharField(max_length=100)
    landmark = serializers.CharField(max_length=255, required=False, allow_blank=True)
    phone = serializers.CharField(max_length=20, required=False, allow_blank=True)


class OrderCreateSerializer(serializers.Serializer):
    """Serializer for placing an order."""
    cake_config = CakeConfigurationSerializer()
    delivery_date = serializers.DateField()
    delivery_time_window = serializers.ChoiceField(
        choices=[window.value for window in DeliveryWindow], default=DeliveryWindow.MORNING.value
    )
    delivery_address = DeliveryAddressSerializer()
    special_instructions = serializers.CharField(required=False, allow_blank=True, default='')


class PriceQuoteRequestSerializer(serializers.Serializer):
    """Serializer for a price quote request."""
    cake_config = CakeDraftSerializer()
    include_customization = serializers.BooleanField(default=False)


class PriceQuoteSerializer(serializers.Serializer):
    """Serializer for price quote output."""
    base_price = serializers.DecimalField(max_digits=12, decimal_places=2, read_only=True)
    flavor_multiplier = serializers.DecimalField(max_digits=4, decimal_places=2, read_only=True)
    flavor_premium_percent = serializers.IntegerField(read_only=True)
    layer_multiplier = serializers.DecimalField(max_digits=4, decimal_places=2, read_only=True)
    tier_multiplier = serializers.DecimalField(max_digits=4, decimal_places=2, read_only=True)
    surcharges = serializers.DecimalField(max_digits=12, decimal_places=2, read_only=True)
    total_amount = serializers.DecimalField(max_digits=12, decimal_places=2, read_only=True)
    currency = serializers.CharField(read_only=True)
    total_formatted = serializers.CharField(read_only=True)
    is_complete = serializers.BooleanField(read_only=True)


class OrderSerializer(serializers.Serializer):
    """Serializer for order output."""
    id = serializers.UUIDField(read_only=True)
    order_number = serializers.CharField(read_only=True)
    customer_id = serializers.CharField(read_only=True)
    cake_config = CakeConfigurationSerializer(read_only=True)
    servings = serializers.ListField(child=serializers.IntegerField(), read_only=True, allow_null=True)
    total_amount = serializers.DecimalField(max_digits=12, decimal_places=2, read_only=True)
    currency = serializers.CharField(read_only=True)
    total_formatted = serializers.CharField(read_only=True)
    status = serializers.CharField(read_only=True)
    status_label = serializers.CharField(read_only=True)
    payment_status = serializers.CharField(read_only=True)
    payment_method = serializers.CharField(read_only=True)
    delivery_date = serializers.DateField(read_only=True)
    delivery_time_window = serializers.CharField(read_only=True)
    delivery_address = DeliveryAddressSerializer(read_only=True)
    special_instructions = serializers.CharField(read_only=True)
    created_at = serializers.DateTimeField(read_only=True)
    updated_at = serializers.DateTimeField(read_only=True)


class PaymentInstructionsSerializer(serializers.Serializer):
    """Serializer for payment instructions."""
    method = serializers.CharField(read_only=True)
    phone_number = serializers.CharField(read_only=True)
    amount = serializers.DecimalField(max_digits=12, decimal_places=2, read_only=True)
    reference = serializers.CharField(read_only=True)
    instructions = serializers.ListField(child=serializers.CharField(), read_only=True)


class PlacedOrderSerializer(serializers.Serializer):
    """Serializer for a freshly placed order."""
    order = OrderSerializer(read_only=True)
    payment_instructions = PaymentInstructionsSerializer(read_only=True)


class OrderEventSerializer(serializers.Serializer):
    """Serializer for order event output."""
    id = serializers.IntegerField(read_only=True)
    order_id = serializers.UUIDField(read_only=True)
    event_type = serializers.CharField(read_only=True)
    description = serializers.CharField(read_only=True)
    notes = serializers.CharField(read_only=True, allow_null=True)
    estimated_completion = serializers.DateTimeField(read_only=True, allow_null=True)
    actual_completion = serializers.DateTimeField(read_only=True, allow_null=True)
    created_by = serializers.CharField(read_only=True, allow_null=True)
    created_at = serializers.DateTimeField(read_only=True)


class OrderEventCreateSerializer(serializers.Serializer):
    """Serializer for adding a manual order event."""
    event_type = serializers.CharField(max_length=100)
    description = serializers.CharField()
    notes = serializers.CharField(required=False, allow_blank=True, allow_null=True)
    estimated_completion = serializers.DateTimeField(required=False, allow_null=True)
    actual_completion = serializers.DateTimeField(required=False, allow_null=True)


class OrderUpdateSerializer(serializers.Serializer):
    """Serializer for a staff status and/or payment status change."""
    status = serializers.ChoiceField(choices=[status.value for status in OrderStatus], required=False)
    payment_status = serializers.ChoiceField(
        choices=[status.value for status in PaymentStatus], required=False
    )
    notes = serializers.CharField(required=False, allow_blank=True, allow_null=True)
    estimated_completion = serializers.DateTimeField(required=False, allow_null=True)

    def validate(self, attrs):
        if not attrs.get('status') and not attrs.get('payment_status'):
            raise serializers.ValidationError('No valid fields to update')
        return attrs


class OrderListQuerySerializer(serializers.Serializer):
    """Serializer for order list filters."""
    status = serializers.ChoiceField(choices=[status.value for status in OrderStatus], required=False)


class ProgressSerializer(serializers.Serializer):
    """Serializer for order progress output."""
    order_id = serializers.UUIDField(read_only=True)
    status = serializers.CharField(read_only=True)
    status_label = serializers.CharField(read_only=True)
    percent = serializers.IntegerField(read_only=True)
    countdown_label = serializers.CharField(read_only=True)
    countdown_urgency = serializers.CharField(read_only=True)
    delivery_urgency = serializers.CharField(read_only=True)


class TrackingStatsSerializer(serializers.Serializer):
    """Serializer for tracking dashboard counters."""
    total = serializers.IntegerField(read_only=True)
    pending = serializers.IntegerField(read_only=True)
    in_progress = serializers.IntegerField(read_only=True)
    ready = serializers.IntegerField(read_only=True)
    delivered = serializers.IntegerField(read_only=True)
