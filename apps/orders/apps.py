"""
Orders app configuration.
Cake orders, their fulfillment pipeline and audit trail.
"""
from django.apps import AppConfig


class OrdersConfig(AppConfig):
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'apps.orders'
    label = 'orders'
    verbose_name = 'Orders'

    def ready(self):
        from .interfaces import admin  # noqa: F401
