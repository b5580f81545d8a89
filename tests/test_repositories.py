"""
Tests for the Django ORM repositories.
"""
from datetime import date, datetime, timedelta, timezone
from decimal import Decimal

import pytest
from django.db import DatabaseError

from apps.orders.domain.entities import Order, OrderEvent
from apps.orders.domain.value_objects import (
    CakeConfiguration,
    DeliveryAddress,
    DeliveryWindow,
    Money,
    OrderStatus,
)
from apps.orders.infrastructure.models import OrderModel
from apps.orders.infrastructure.repositories import DjangoOrderEventRepository, DjangoOrderRepository
from shared.domain import PersistenceError

pytestmark = pytest.mark.django_db

PLACED_AT = datetime(2030, 1, 1, 9, 0, tzinfo=timezone.utc)


def new_order(customer_id='1', at=PLACED_AT, **config):
    return Order.place(
        customer_id=customer_id,
        cake_config=CakeConfiguration.from_dict({
            'flavor': 'Red Velvet', 'size': '10in', 'shape': 'Heart', 'layers': 2, 'tiers': 3,
            'customization': {'message': 'Congratulations', 'colors': ['gold', 'white']},
            'occasion': 'Graduation',
            **config,
        }),
        total_amount=Money(Decimal('243')),
        delivery_address=DeliveryAddress(
            street='8 Addis Ababa Dr', city='Lusaka', area='Longacres', landmark='the roundabout',
        ),
        delivery_date=date(2030, 1, 20),
        delivery_time_window=DeliveryWindow.EVENING,
        special_instructions='Keep refrigerated',
        at=at,
    )


class TestDjangoOrderRepository:
    def test_save_and_find_round_trip(self):
        repository = DjangoOrderRepository()
        order = new_order()
        repository.save(order)

        found = repository.find_by_id(order.id)

        assert found == order
        assert found.order_number == order.order_number
        assert found.cake_config == order.cake_config
        assert found.delivery_address == order.delivery_address
        assert found.total_amount == Money(Decimal('243'))
        assert found.delivery_time_window is DeliveryWindow.EVENING
        assert found.status is OrderStatus.PENDING
        assert found.created_at == PLACED_AT

    def test_find_by_order_number(self):
        repository = DjangoOrderRepository()
        order = repository.save(new_order())

        assert repository.find_by_order_number(order.order_number.value).id == order.id
        assert repository.find_by_order_number('DB-00000000-XXXXXX') is None

    def test_save_updates_existing_row(self):
        repository = DjangoOrderRepository()
        order = repository.save(new_order())
        order.change_status(OrderStatus.DECORATING, changed_by='staff-1')
        repository.save(order)

        assert OrderModel.objects.count() == 1
        assert repository.find_by_id(order.id).status is OrderStatus.DECORATING

    def test_find_all_newest_first_with_window(self):
        repository = DjangoOrderRepository()
        orders = [repository.save(new_order(at=PLACED_AT + timedelta(hours=i))) for i in range(3)]

        newest_two = repository.find_all(limit=2)
        rest = repository.find_all(offset=2, limit=2)

        assert [order.id for order in newest_two] == [orders[2].id, orders[1].id]
        assert [order.id for order in rest] == [orders[0].id]

    def test_list_statuses(self):
        repository = DjangoOrderRepository()
        repository.save(new_order())
        order = repository.save(new_order())
        order.change_status(OrderStatus.READY, changed_by='staff-1')
        repository.save(order)

        assert sorted(repository.list_statuses()) == [OrderStatus.PENDING, OrderStatus.READY]

    def test_database_errors_become_persistence_errors(self, monkeypatch):
        def fail(*args, **kwargs):
            raise DatabaseError('connection reset')

        monkeypatch.setattr(OrderModel.objects, 'get', fail)

        with pytest.raises(PersistenceError) as excinfo:
            DjangoOrderRepository().find_by_id(new_order().id)
        assert excinfo.value.operation == 'find order'
        assert excinfo.value.code == 'PERSISTENCE_ERROR'


class TestDjangoOrderEventRepository:
    def test_append_assigns_id(self):
        order = DjangoOrderRepository().save(new_order())

        event = DjangoOrderEventRepository().append(
            OrderEvent.status_updated(order.id, 'baking', created_by='staff-1', at=PLACED_AT)
        )

        assert event.id is not None
        assert event.description == 'Order status updated to baking'

    def test_list_is_ordered_by_creation(self):
        order = DjangoOrderRepository().save(new_order())
        events = DjangoOrderEventRepository()
        events.append(OrderEvent(order_id=order.id, event_type='note', description='second',
                                 created_at=PLACED_AT + timedelta(minutes=5)))
        events.append(OrderEvent(order_id=order.id, event_type='note', description='first',
                                 created_at=PLACED_AT))
        events.append(OrderEvent(order_id=order.id, event_type='note', description='third',
                                 created_at=PLACED_AT + timedelta(minutes=5)))

        assert [event.description for event in events.list_for_order(order.id)] == ['first', 'second', 'third']

    def test_events_belong_to_one_order(self):
        repository = DjangoOrderRepository()
        first = repository.save(new_order())
        second = repository.save(new_order())
        DjangoOrderEventRepository().append(OrderEvent(order_id=first.id, event_type='note', description='x'))

        assert DjangoOrderEventRepository().list_for_order(second.id) == []
