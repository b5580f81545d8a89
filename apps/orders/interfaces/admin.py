"""
Orders admin configuration.

Orders are read-only here: status and payment changes go through the staff
API so that every status change lands in the event log.
"""
from django.contrib import admin

from ..infrastructure.models.order_model import OrderEventModel, OrderModel


class OrderEventInline(admin.TabularInline):
    """Inline for order events."""
    model = OrderEventModel
    extra = 0
    can_delete = False
    readonly_fields = (
        'event_type', 'description', 'notes', 'estimated_completion',
        'actual_completion', 'created_by', 'created_at',
    )

    def has_add_permission(self, request, obj=None):
        return False


@admin.register(OrderModel)
class OrderAdmin(admin.ModelAdmin):
    """Admin configuration for Order model."""
    list_display = ('order_number', 'customer_id', 'status', 'payment_status', 'total_amount', 'delivery_date', 'created_at')
    list_filter = ('status', 'payment_status', 'delivery_date', 'created_at')
    search_fields = ('order_number', 'customer_id')
    ordering = ('-created_at',)
    inlines = [OrderEventInline]

    def get_readonly_fields(self, request, obj=None):
        return [field.name for field in self.model._meta.fields]

    def has_add_permission(self, request):
        return False

    def has_delete_permission(self, request, obj=None):
        return False
