"""
Orders API v1 URLs.
"""
from django.urls import path

from .views import (
    AdminOrderDetailView,
    AdminOrderEventListCreateView,
    AdminOrderListView,
    AdminTrackingStatsView,
    ConfirmPaymentView,
    OrderDetailView,
    OrderEventListView,
    OrderListCreateView,
    OrderProgressView,
    PriceQuoteView,
)

urlpatterns = [
    # Customer
    path('orders/', OrderListCreateView.as_view(), name='order-list-create'),
    path('orders/quote/', PriceQuoteView.as_view(), name='order-quote'),
    path('orders/<uuid:order_id>/', OrderDetailView.as_view(), name='order-detail'),
    path('orders/<uuid:order_id>/events/', OrderEventListView.as_view(), name='order-events'),
    path('orders/<uuid:order_id>/progress/', OrderProgressView.as_view(), name='order-progress'),
    path('orders/<uuid:order_id>/confirm-payment/', ConfirmPaymentView.as_view(), name='order-confirm-payment'),

    # Staff
    path('admin/orders/', AdminOrderListView.as_view(), name='admin-order-list'),
    path('admin/orders/tracking/', AdminTrackingStatsView.as_view(), name='admin-order-tracking'),
    path('admin/orders/<uuid:order_id>/', AdminOrderDetailView.as_view(), name='admin-order-detail'),
    path(
        'admin/orders/<uuid:order_id>/events/',
        AdminOrderEventListCreateView.as_view(),
        name='admin-order-events',
    ),
]
