"""
Tests for the cake pricing engine.
"""
from decimal import Decimal

import pytest

from apps.orders.domain.services.pricing import (
    FALLBACK_BASE_PRICE,
    apply_customization_surcharges,
    compute_price,
    price_breakdown,
)
from apps.orders.domain.value_objects import CakeConfiguration, CakeFlavor, CakeSize, Customization, Money


def make_config(**overrides):
    values = {'flavor': 'Vanilla', 'size': '8in', 'shape': 'Round', 'layers': 1, 'tiers': 1}
    values.update(overrides)
    return CakeConfiguration.from_dict(values)


class TestComputePrice:
    def test_plain_vanilla_eight_inch(self):
        assert compute_price(make_config()) == Money(Decimal('85'))

    def test_two_layer_chocolate_six_inch_rounds_half_up(self):
        # 65 * 1.1 * 1.2 = 85.8
        price = compute_price(make_config(size='6in', flavor='Chocolate', layers=2))
        assert price.amount == Decimal('86')

    def test_tiers_multiply(self):
        # 120 * 1.3 * 1.2 * 1.3 = 243.36
        price = compute_price(make_config(size='10in', flavor='Fruit', layers=3, tiers=2))
        assert price.amount == Decimal('243')

    def test_is_deterministic(self):
        config = make_config(size='4in', flavor='Choco-mint', layers=2, tiers=3)
        assert compute_price(config) == compute_price(config)

    @pytest.mark.parametrize('flavor', [flavor.value for flavor in CakeFlavor])
    def test_monotonic_in_size(self, flavor):
        prices = [
            compute_price(make_config(flavor=flavor, size=size.value)).amount
            for size in CakeSize
        ]
        assert prices == sorted(prices)

    def test_empty_configuration_is_priced(self):
        price = compute_price(CakeConfiguration())
        assert price.amount == FALLBACK_BASE_PRICE
        assert price.amount > 0

    def test_unlisted_flavor_has_no_premium(self):
        assert compute_price(make_config(flavor='Red Velvet')).amount == Decimal('85')

    def test_catalog_price_replaces_size_table(self):
        price = compute_price(make_config(flavor='Strawberry'), base_price=Decimal('100'))
        assert price.amount == Decimal('110')

    def test_negative_catalog_price_is_clamped(self):
        assert compute_price(make_config(), base_price=Decimal('-5')).amount == Decimal('0')

    def test_customization_does_not_change_price(self):
        decorated = make_config(customization={'message': 'Happy Birthday', 'decorations': ['sprinkles']})
        assert compute_price(decorated) == compute_price(make_config())

    def test_currency_is_carried(self):
        assert compute_price(make_config(), currency='USD').currency == 'USD'


class TestPriceBreakdown:
    def test_reports_factors(self):
        breakdown = price_breakdown(make_config(size='6in', flavor='Choco-mint', tiers=2))

        assert breakdown.base_price == Decimal('65')
        assert breakdown.flavor_multiplier == Decimal('1.2')
        assert breakdown.flavor_premium_percent == 20
        assert breakdown.layer_multiplier == Decimal('1.0')
        assert breakdown.tier_multiplier == Decimal('1.3')
        assert breakdown.total.amount == Decimal('101')


class TestCustomizationSurcharges:
    def test_message_and_decorations(self):
        customization = Customization(message='Happy 30th', decorations=('roses',))
        price = apply_customization_surcharges(Money(Decimal('85')), customization)
        assert price.amount == Decimal('135')

    def test_message_only(self):
        price = apply_customization_surcharges(Money(Decimal('85')), Customization(message='Hi'))
        assert price.amount == Decimal('105')

    def test_no_customization(self):
        assert apply_customization_surcharges(Money(Decimal('85')), None).amount == Decimal('85')


class TestMoney:
    def test_formatted_kwacha(self):
        assert Money(Decimal('1250')).formatted == 'K1,250'

    def test_negative_amount_rejected(self):
        with pytest.raises(ValueError):
            Money(Decimal('-1'))

    def test_cannot_add_different_currencies(self):
        with pytest.raises(ValueError):
            Money(Decimal('1')).add(Money(Decimal('1'), currency='USD'))
