"""
Pytest configuration and fixtures.
"""
from datetime import date

import pytest


ORDER_PAYLOAD = {
    'cake_config': {
        'flavor': 'Vanilla',
        'size': '8in',
        'shape': 'Round',
        'layers': 1,
        'tiers': 1,
    },
    'delivery_date': '2030-01-15',
    'delivery_time_window': 'afternoon',
    'delivery_address': {
        'street': '12 Kabulonga Road',
        'area': 'Kabulonga',
        'city': 'Lusaka',
        'phone': '0977000000',
    },
    'special_instructions': 'Ring the bell twice',
}


@pytest.fixture
def api_client():
    """Create an API client for testing."""
    from rest_framework.test import APIClient
    return APIClient()


@pytest.fixture
def customer(django_user_model):
    return django_user_model.objects.create_user(
        email='customer@example.com',
        username='customer',
        password='testpass123',
    )


@pytest.fixture
def staff_user(django_user_model):
    return django_user_model.objects.create_user(
        email='staff@example.com',
        username='staff',
        password='testpass123',
        is_staff=True,
    )


@pytest.fixture
def authenticated_client(api_client, customer):
    """Create an API client authenticated as a customer."""
    api_client.force_authenticate(user=customer)
    return api_client


@pytest.fixture
def other_client(django_user_model):
    """API client for a second customer."""
    from rest_framework.test import APIClient
    user = django_user_model.objects.create_user(
        email='other@example.com',
        username='other',
        password='testpass123',
    )
    client = APIClient()
    client.force_authenticate(user=user)
    return client


@pytest.fixture
def staff_client(staff_user):
    """API client authenticated as staff."""
    from rest_framework.test import APIClient
    client = APIClient()
    client.force_authenticate(user=staff_user)
    return client


@pytest.fixture
def order_payload():
    return {
        **ORDER_PAYLOAD,
        'cake_config': dict(ORDER_PAYLOAD['cake_config']),
        'delivery_address': dict(ORDER_PAYLOAD['delivery_address']),
    }


@pytest.fixture
def place_order(db):
    """Place an order through the use case and return its OrderDTO."""
    from apps.orders.application.dtos import PlaceOrderDTO
    from apps.orders.application.use_cases import PlaceOrderUseCase
    from apps.orders.infrastructure.repositories import DjangoOrderRepository

    def _place(customer_id='1', **cake_config):
        config = {**ORDER_PAYLOAD['cake_config'], **cake_config}
        result = PlaceOrderUseCase(order_repository=DjangoOrderRepository()).execute(
            PlaceOrderDTO(
                customer_id=str(customer_id),
                cake_config=config,
                delivery_address=dict(ORDER_PAYLOAD['delivery_address']),
                delivery_date=date(2030, 1, 15),
            )
        )
        return result.data.order

    return _place
