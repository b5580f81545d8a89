"""
Tests for order use cases against the Django ORM repositories.
"""
import uuid
from datetime import date, datetime, timezone
from decimal import Decimal

import pytest

from apps.orders.application.dtos import (
    AddOrderEventDTO,
    ListOrdersDTO,
    OrderLookupDTO,
    PlaceOrderDTO,
    QuotePriceDTO,
    UpdateOrderStatusDTO,
    UpdatePaymentStatusDTO,
)
from apps.orders.application.use_cases import (
    AddOrderEventUseCase,
    ConfirmPaymentUseCase,
    GetOrderProgressUseCase,
    GetOrderUseCase,
    GetTrackingStatsUseCase,
    ListOrderEventsUseCase,
    ListOrdersUseCase,
    PlaceOrderUseCase,
    QuotePriceUseCase,
    UpdateOrderStatusUseCase,
    UpdatePaymentStatusUseCase,
)
from apps.orders.domain.events import OrderStatusChanged
from apps.orders.domain.exceptions import (
    InvalidCakeConfigurationError,
    InvalidStatusTransitionError,
    OrderNotFoundError,
    OrderNumberConflictError,
    TerminalOrderError,
)
from apps.orders.domain.services.transition_policy import StrictTransitionPolicy
from apps.orders.domain.value_objects import OrderNumber
from apps.orders.infrastructure.repositories import DjangoOrderEventRepository, DjangoOrderRepository
from apps.orders.signals import order_domain_event
from shared.domain import PersistenceError, ValidationError

pytestmark = pytest.mark.django_db

NOW = datetime(2030, 1, 14, 9, 0, tzinfo=timezone.utc)


def update_status(order_id, status, staff_id='staff-a', notes=None, policy=None):
    use_case = UpdateOrderStatusUseCase(
        order_repository=DjangoOrderRepository(),
        event_repository=DjangoOrderEventRepository(),
        policy=policy,
    )
    return use_case.execute(
        UpdateOrderStatusDTO(order_id=order_id, status=status, staff_id=staff_id, notes=notes)
    ).data


def list_events(order_id, customer_id=None):
    use_case = ListOrderEventsUseCase(
        order_repository=DjangoOrderRepository(),
        event_repository=DjangoOrderEventRepository(),
    )
    return use_case.execute(OrderLookupDTO(order_id=order_id, customer_id=customer_id)).data


def progress(order_id):
    use_case = GetOrderProgressUseCase(order_repository=DjangoOrderRepository(), clock=lambda: NOW)
    return use_case.execute(OrderLookupDTO(order_id=order_id)).data


class TestPlaceOrder:
    def test_prices_and_stores_order(self, place_order):
        order = place_order(customer_id='7')

        assert order.total_amount == Decimal('85')
        assert order.total_formatted == 'K85'
        assert order.status == 'pending'
        assert order.payment_status == 'pending'
        assert order.servings == [10, 12]
        assert DjangoOrderRepository().find_by_id(order.id) is not None
        assert list_events(order.id) == []

    def test_returns_payment_instructions(self):
        result = PlaceOrderUseCase(
            order_repository=DjangoOrderRepository(), clock=lambda: NOW,
        ).execute(
            PlaceOrderDTO(
                customer_id='7',
                cake_config={'flavor': 'Chocolate', 'size': '6in', 'shape': 'Square', 'layers': 2},
                delivery_address={'street': '3 Lumumba Rd', 'city': 'Lusaka'},
                delivery_date=date(2030, 1, 20),
                delivery_time_window='evening',
            )
        )
        placed = result.data

        assert result.success
        assert placed.order.total_amount == Decimal('86')
        assert placed.order.order_number.startswith('DB-20300114-')
        assert placed.order.delivery_time_window == 'evening'
        assert placed.payment_instructions.reference == placed.order.order_number
        assert placed.payment_instructions.phone_number == '0974147414'
        assert placed.payment_instructions.amount == Decimal('86')

    def test_incomplete_configuration_is_not_stored(self):
        with pytest.raises(InvalidCakeConfigurationError):
            PlaceOrderUseCase(order_repository=DjangoOrderRepository()).execute(
                PlaceOrderDTO(
                    customer_id='7',
                    cake_config={'flavor': 'Vanilla', 'size': '8in'},
                    delivery_address={'street': '3 Lumumba Rd', 'city': 'Lusaka'},
                    delivery_date=date(2030, 1, 20),
                )
            )
        assert DjangoOrderRepository().find_all() == []

    def test_unknown_delivery_window(self):
        with pytest.raises(ValidationError) as excinfo:
            PlaceOrderUseCase(order_repository=DjangoOrderRepository()).execute(
                PlaceOrderDTO(
                    customer_id='7',
                    cake_config={'flavor': 'Vanilla', 'size': '8in', 'shape': 'Round'},
                    delivery_address={'street': '3 Lumumba Rd', 'city': 'Lusaka'},
                    delivery_date=date(2030, 1, 20),
                    delivery_time_window='midnight',
                )
            )
        assert excinfo.value.field == 'delivery_time_window'

    def test_customization_surcharge_when_enabled(self, settings):
        settings.ORDERS = {**settings.ORDERS, 'CHARGE_CUSTOMIZATION': True}
        result = PlaceOrderUseCase(order_repository=DjangoOrderRepository()).execute(
            PlaceOrderDTO(
                customer_id='7',
                cake_config={
                    'flavor': 'Vanilla', 'size': '8in', 'shape': 'Round',
                    'customization': {'message': 'Happy Birthday'},
                },
                delivery_address={'street': '3 Lumumba Rd', 'city': 'Lusaka'},
                delivery_date=date(2030, 1, 20),
            )
        )
        assert result.data.order.total_amount == Decimal('105')

    def test_catalog_base_price_replaces_size_table(self):
        result = PlaceOrderUseCase(order_repository=DjangoOrderRepository()).execute(
            PlaceOrderDTO(
                customer_id='7',
                cake_config={'flavor': 'Strawberry', 'size': '8in', 'shape': 'Round'},
                delivery_address={'street': '3 Lumumba Rd', 'city': 'Lusaka'},
                delivery_date=date(2030, 1, 20),
                catalog_base_price=Decimal('150'),
            )
        )

        assert result.data.order.total_amount == Decimal('165')
        assert result.data.payment_instructions.amount == Decimal('165')
        stored = DjangoOrderRepository().find_by_id(result.data.order.id)
        assert stored.total_amount.amount == Decimal('165')

    def test_regenerates_taken_order_number(self, place_order, monkeypatch):
        taken = place_order().order_number
        numbers = iter([taken, 'DB-20300114-FRESH1'])
        monkeypatch.setattr(OrderNumber, 'generate', classmethod(lambda cls, at=None: cls(next(numbers))))

        order = place_order(customer_id='8')

        assert order.order_number == 'DB-20300114-FRESH1'
        assert len(DjangoOrderRepository().find_all()) == 2

    def test_gives_up_when_order_numbers_keep_colliding(self, place_order, monkeypatch):
        taken = place_order().order_number
        monkeypatch.setattr(OrderNumber, 'generate', classmethod(lambda cls, at=None: cls(taken)))

        with pytest.raises(OrderNumberConflictError) as excinfo:
            place_order(customer_id='8')
        assert excinfo.value.code == 'ORDER_NUMBER_CONFLICT'
        assert len(DjangoOrderRepository().find_all()) == 1


class TestOrderLifecycle:
    def test_status_scenario(self, place_order):
        order = place_order()
        assert order.total_amount == Decimal('85')

        updated = update_status(order.id, 'confirmed', staff_id='staff-a')
        events = list_events(order.id)
        assert updated.status == 'confirmed'
        assert len(events) == 1
        assert progress(order.id).percent == 25

        update_status(order.id, 'baking', staff_id='staff-b', notes='in oven')
        events = list_events(order.id)
        assert len(events) == 2
        assert events[-1].notes == 'in oven'
        assert events[-1].created_by == 'staff-b'
        assert events[0].description == 'Order status updated to confirmed'
        assert progress(order.id).percent == 60

        cancelled = update_status(order.id, 'cancelled')
        assert cancelled.status == 'cancelled'
        assert progress(order.id).percent == 0
        with pytest.raises(TerminalOrderError):
            update_status(order.id, 'baking')
        assert len(list_events(order.id)) == 3

    def test_same_status_is_recorded(self, place_order):
        order = place_order()
        update_status(order.id, 'baking')
        update_status(order.id, 'baking', notes='still in oven')
        assert len(list_events(order.id)) == 2

    def test_strict_policy_records_repeated_status(self, place_order):
        order = place_order()
        update_status(order.id, 'baking', policy=StrictTransitionPolicy())
        update_status(order.id, 'baking', notes='still in oven', policy=StrictTransitionPolicy())
        assert len(list_events(order.id)) == 2

    def test_failed_event_append_rolls_back_status(self, place_order, monkeypatch):
        def fail(self, event):
            raise PersistenceError('disk full', operation='append order event')

        order = place_order()
        monkeypatch.setattr(DjangoOrderEventRepository, 'append', fail)

        with pytest.raises(PersistenceError):
            update_status(order.id, 'baking')
        assert DjangoOrderRepository().find_by_id(order.id).status.value == 'pending'
        assert list_events(order.id) == []

    def test_failed_payment_event_rolls_back_confirmation(self, place_order, monkeypatch):
        original_append = DjangoOrderEventRepository.append
        calls = []

        def fail_second(self, event):
            calls.append(event)
            if len(calls) == 2:
                raise PersistenceError('disk full', operation='append order event')
            return original_append(self, event)

        order = place_order(customer_id='9')
        monkeypatch.setattr(DjangoOrderEventRepository, 'append', fail_second)
        use_case = ConfirmPaymentUseCase(
            order_repository=DjangoOrderRepository(),
            event_repository=DjangoOrderEventRepository(),
        )

        with pytest.raises(PersistenceError):
            use_case.execute(OrderLookupDTO(order_id=order.id, customer_id='9'))
        stored = DjangoOrderRepository().find_by_id(order.id)
        assert (stored.status.value, stored.payment_status.value) == ('pending', 'pending')
        assert list_events(order.id) == []

    def test_strict_policy_rejects_backward_move(self, place_order):
        order = place_order()
        update_status(order.id, 'ready', policy=StrictTransitionPolicy())

        with pytest.raises(InvalidStatusTransitionError):
            update_status(order.id, 'baking', policy=StrictTransitionPolicy())
        assert GetOrderUseCase(order_repository=DjangoOrderRepository()).execute(
            OrderLookupDTO(order_id=order.id)
        ).data.status == 'ready'
        assert len(list_events(order.id)) == 1

    def test_strict_policy_from_settings(self, settings, place_order):
        settings.ORDERS = {**settings.ORDERS, 'TRANSITION_POLICY': 'strict'}
        order = place_order()
        update_status(order.id, 'baking')

        with pytest.raises(InvalidStatusTransitionError):
            update_status(order.id, 'pending')

    def test_unknown_order(self):
        with pytest.raises(OrderNotFoundError):
            update_status(uuid.uuid4(), 'baking')

    def test_payment_status_appends_no_event(self, place_order):
        order = place_order()
        result = UpdatePaymentStatusUseCase(order_repository=DjangoOrderRepository()).execute(
            UpdatePaymentStatusDTO(order_id=order.id, payment_status='paid')
        )

        assert result.data.payment_status == 'paid'
        assert result.data.status == 'pending'
        assert list_events(order.id) == []

    def test_confirm_payment(self, place_order):
        order = place_order(customer_id='9')
        use_case = ConfirmPaymentUseCase(
            order_repository=DjangoOrderRepository(),
            event_repository=DjangoOrderEventRepository(),
        )
        confirmed = use_case.execute(OrderLookupDTO(order_id=order.id, customer_id='9')).data

        assert confirmed.status == 'confirmed'
        assert confirmed.payment_status == 'paid'
        assert [event.event_type for event in list_events(order.id)] == ['status_updated', 'payment_confirmed']

    def test_confirm_payment_for_other_customer(self, place_order):
        order = place_order(customer_id='9')
        use_case = ConfirmPaymentUseCase(
            order_repository=DjangoOrderRepository(),
            event_repository=DjangoOrderEventRepository(),
        )
        with pytest.raises(OrderNotFoundError):
            use_case.execute(OrderLookupDTO(order_id=order.id, customer_id='10'))


class TestOrderEvents:
    def test_add_manual_event(self, place_order):
        order = place_order()
        use_case = AddOrderEventUseCase(
            order_repository=DjangoOrderRepository(),
            event_repository=DjangoOrderEventRepository(),
        )
        event = use_case.execute(
            AddOrderEventDTO(
                order_id=order.id,
                event_type='decoration_started',
                description='Piping the message',
                created_by='staff-a',
                notes='blue icing',
            )
        ).data

        assert event.id is not None
        assert event.order_id == order.id
        [stored] = list_events(order.id)
        assert stored.event_type == 'decoration_started'
        assert stored.notes == 'blue icing'
        order_after = GetOrderUseCase(order_repository=DjangoOrderRepository()).execute(
            OrderLookupDTO(order_id=order.id)
        ).data
        assert order_after.status == 'pending'

    def test_blank_description_rejected(self, place_order):
        order = place_order()
        use_case = AddOrderEventUseCase(
            order_repository=DjangoOrderRepository(),
            event_repository=DjangoOrderEventRepository(),
        )
        with pytest.raises(ValidationError):
            use_case.execute(
                AddOrderEventDTO(order_id=order.id, event_type='note', description='  ', created_by='staff-a')
            )

    def test_events_hidden_from_other_customers(self, place_order):
        order = place_order(customer_id='1')
        with pytest.raises(OrderNotFoundError):
            list_events(order.id, customer_id='2')


class TestReadModels:
    def test_list_orders_filters(self, place_order):
        first = place_order(customer_id='1')
        place_order(customer_id='1')
        place_order(customer_id='2')
        update_status(first.id, 'baking')

        use_case = ListOrdersUseCase(order_repository=DjangoOrderRepository())
        assert len(use_case.execute(ListOrdersDTO(customer_id='1')).data) == 2
        assert len(use_case.execute(ListOrdersDTO()).data) == 3
        baking = use_case.execute(ListOrdersDTO(status='baking')).data
        assert [order.id for order in baking] == [first.id]

    def test_get_order_for_other_customer(self, place_order):
        order = place_order(customer_id='1')
        with pytest.raises(OrderNotFoundError):
            GetOrderUseCase(order_repository=DjangoOrderRepository()).execute(
                OrderLookupDTO(order_id=order.id, customer_id='2')
            )

    def test_progress_projection(self, place_order):
        order = place_order()
        projection = progress(order.id)

        assert projection.status == 'pending'
        assert projection.status_label == 'Pending'
        assert projection.percent == 15
        assert projection.countdown_label == '15 hours to go'
        assert projection.countdown_urgency == 'hours'
        assert projection.delivery_urgency == 'tomorrow'

    def test_tracking_stats(self, place_order):
        orders = [place_order() for _ in range(4)]
        update_status(orders[0].id, 'baking')
        update_status(orders[1].id, 'out_for_delivery')
        update_status(orders[2].id, 'delivered')

        stats = GetTrackingStatsUseCase(order_repository=DjangoOrderRepository()).execute().data
        assert stats == {'total': 4, 'pending': 1, 'in_progress': 1, 'ready': 1, 'delivered': 1}

    def test_quote_partial_configuration(self):
        quote = QuotePriceUseCase().execute(QuotePriceDTO(cake_config={'flavor': 'Fruit'})).data

        assert quote.base_price == Decimal('65')
        assert quote.flavor_premium_percent == 30
        assert quote.total_amount == Decimal('85')
        assert quote.is_complete is False

    def test_quote_with_customization(self):
        quote = QuotePriceUseCase().execute(
            QuotePriceDTO(
                cake_config={'size': '4in', 'customization': {'decorations': ['pearls']}},
                include_customization=True,
            )
        ).data

        assert quote.surcharges == Decimal('30')
        assert quote.total_amount == Decimal('75')


class TestDomainEventPublishing:
    def test_status_change_published_on_commit(self, place_order, django_capture_on_commit_callbacks):
        order = place_order()
        received = []

        def receiver(sender, event, **kwargs):
            received.append(event)

        order_domain_event.connect(receiver)
        try:
            with django_capture_on_commit_callbacks(execute=True):
                update_status(order.id, 'baking', staff_id='staff-a')
        finally:
            order_domain_event.disconnect(receiver)

        [event] = received
        assert isinstance(event, OrderStatusChanged)
        assert event.order_id == order.id
        assert event.new_status == 'baking'
        assert event.changed_by == 'staff-a'

    def test_failing_receiver_does_not_undo_write(self, place_order, django_capture_on_commit_callbacks):
        order = place_order()

        def broken_receiver(sender, event, **kwargs):
            raise RuntimeError('sms gateway down')

        order_domain_event.connect(broken_receiver)
        try:
            with django_capture_on_commit_callbacks(execute=True):
                update_status(order.id, 'ready')
        finally:
            order_domain_event.disconnect(broken_receiver)

        assert DjangoOrderRepository().find_by_id(order.id).status.value == 'ready'
