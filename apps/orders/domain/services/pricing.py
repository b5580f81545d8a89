"""
Cake pricing engine.

compute_price() is a pure function of the four structural fields of a
configuration (size, flavor, layers, tiers). It never raises: partially
designed cakes are priced with fallbacks so the designer can show a running
estimate.
"""
from dataclasses import dataclass
from decimal import Decimal
from typing import Optional

from ..value_objects.cake_configuration import CakeConfiguration, CakeFlavor, CakeSize, Customization
from ..value_objects.money import DEFAULT_CURRENCY, Money

SIZE_BASE_PRICES = {
    CakeSize.FOUR_INCH: Decimal('45'),
    CakeSize.SIX_INCH: Decimal('65'),
    CakeSize.EIGHT_INCH: Decimal('85'),
    CakeSize.TEN_INCH: Decimal('120'),
}
# Used when no size has been picked yet.
FALLBACK_BASE_PRICE = SIZE_BASE_PRICES[CakeSize.SIX_INCH]

FLAVOR_MULTIPLIERS = {
    CakeFlavor.VANILLA: Decimal('1.0'),
    CakeFlavor.STRAWBERRY: Decimal('1.1'),
    CakeFlavor.CHOCOLATE: Decimal('1.1'),
    CakeFlavor.CHOCO_MINT: Decimal('1.2'),
    CakeFlavor.MINT: Decimal('1.1'),
    CakeFlavor.BANANA: Decimal('1.1'),
    CakeFlavor.FRUIT: Decimal('1.3'),
}
DEFAULT_FLAVOR_MULTIPLIER = Decimal('1.0')

LAYER_MULTIPLIER = Decimal('1.2')
TIER_MULTIPLIER = Decimal('1.3')

MESSAGE_SURCHARGE = Decimal('20')
DECORATIONS_SURCHARGE = Decimal('30')


@dataclass(frozen=True)
class PriceBreakdown:
    """How a price was assembled, for quotes."""
    base_price: Decimal
    flavor_multiplier: Decimal
    layer_multiplier: Decimal
    tier_multiplier: Decimal
    total: Money

    @property
    def flavor_premium_percent(self) -> int:
        return int((self.flavor_multiplier - 1) * 100)


def price_breakdown(
    config: CakeConfiguration,
    base_price: Optional[Decimal] = None,
    currency: str = DEFAULT_CURRENCY,
) -> PriceBreakdown:
    """Price a configuration and keep the intermediate factors."""
    if base_price is None:
        base_price = SIZE_BASE_PRICES.get(config.size, FALLBACK_BASE_PRICE)
    base_price = max(Decimal(str(base_price)), Decimal('0'))
    flavor_multiplier = FLAVOR_MULTIPLIERS.get(config.flavor, DEFAULT_FLAVOR_MULTIPLIER)
    layer_multiplier = LAYER_MULTIPLIER if (config.layers or 1) > 1 else Decimal('1.0')
    tier_multiplier = TIER_MULTIPLIER if (config.tiers or 1) > 1 else Decimal('1.0')

    total = (
        Money(amount=base_price, currency=currency)
        .multiply(flavor_multiplier)
        .multiply(layer_multiplier)
        .multiply(tier_multiplier)
        .rounded()
    )
    return PriceBreakdown(
        base_price=base_price,
        flavor_multiplier=flavor_multiplier,
        layer_multiplier=layer_multiplier,
        tier_multiplier=tier_multiplier,
        total=total,
    )


def compute_price(
    config: CakeConfiguration,
    base_price: Optional[Decimal] = None,
    currency: str = DEFAULT_CURRENCY,
) -> Money:
    """
    Price a cake configuration.

    Args:
        config: Configuration to price; may be incomplete.
        base_price: Catalog price that replaces the size table.
        currency: Currency of the result.

    Returns:
        Price rounded half-up to a whole currency unit.
    """
    return price_breakdown(config, base_price=base_price, currency=currency).total


def apply_customization_surcharges(price: Money, customization: Optional[Customization]) -> Money:
    """Add the fixed surcharges for a written message and for decorations."""
    if customization is None:
        return price
    surcharge = Decimal('0')
    if customization.message:
        surcharge += MESSAGE_SURCHARGE
    if customization.decorations:
        surcharge += DECORATIONS_SURCHARGE
    return price.add(Money(amount=surcharge, currency=price.currency))
