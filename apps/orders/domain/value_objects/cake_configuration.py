"""
Cake configuration value objects.
"""
from dataclasses import dataclass
from enum import Enum
from typing import Any, Mapping, Optional, Tuple

from shared.domain import ValueObject
from ..exceptions import InvalidCakeConfigurationError

MIN_STACK = 1
MAX_STACK = 3


class CakeFlavor(str, Enum):
    VANILLA = 'Vanilla'
    STRAWBERRY = 'Strawberry'
    CHOCOLATE = 'Chocolate'
    CHOCO_MINT = 'Choco-mint'
    MINT = 'Mint'
    BANANA = 'Banana'
    FRUIT = 'Fruit'
    RED_VELVET = 'Red Velvet'
    CUSTOM = 'Custom'


class CakeSize(str, Enum):
    FOUR_INCH = '4in'
    SIX_INCH = '6in'
    EIGHT_INCH = '8in'
    TEN_INCH = '10in'

    @classmethod
    def parse(cls, value: str) -> 'CakeSize':
        """Accept both '8in' and the storefront's '8"' notation."""
        text = str(value).strip()
        if text.endswith('"'):
            text = f"{text[:-1]}in"
        return cls(text)

    @property
    def servings(self) -> Tuple[int, int]:
        return _SERVINGS[self]


_SERVINGS = {
    CakeSize.FOUR_INCH: (2, 4),
    CakeSize.SIX_INCH: (6, 8),
    CakeSize.EIGHT_INCH: (10, 12),
    CakeSize.TEN_INCH: (15, 20),
}


class CakeShape(str, Enum):
    ROUND = 'Round'
    SQUARE = 'Square'
    HEART = 'Heart'


@dataclass(frozen=True)
class Customization(ValueObject):
    """Optional decoration choices for a cake."""
    message: str = ""
    colors: Tuple[str, ...] = ()
    decorations: Tuple[str, ...] = ()
    dietary: Tuple[str, ...] = ()

    @classmethod
    def from_dict(cls, data: Optional[Mapping[str, Any]]) -> Optional['Customization']:
        if not data:
            return None
        return cls(
            message=(data.get('message') or '').strip(),
            colors=tuple(data.get('colors') or ()),
            decorations=tuple(data.get('decorations') or ()),
            dietary=tuple(data.get('dietary') or ()),
        )


@dataclass(frozen=True)
class CakeConfiguration(ValueObject):
    """
    A customer's structural and flavor choices for a cake.

    Drafts may leave flavor, size or shape unset while the customer is still
    designing; ensure_complete() is the gate before an order is placed.
    """
    flavor: Optional[CakeFlavor] = None
    size: Optional[CakeSize] = None
    shape: Optional[CakeShape] = None
    layers: int = 1
    tiers: int = 1
    customization: Optional[Customization] = None
    occasion: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Optional[Mapping[str, Any]]) -> 'CakeConfiguration':
        """Build a draft configuration, dropping values that do not parse."""
        data = data or {}
        return cls(
            flavor=_lenient(CakeFlavor, data.get('flavor')),
            size=_lenient(CakeSize.parse, data.get('size')),
            shape=_lenient(CakeShape, data.get('shape')),
            layers=_stack_count(data.get('layers')),
            tiers=_stack_count(data.get('tiers')),
            customization=Customization.from_dict(data.get('customization')),
            occasion=data.get('occasion') or None,
        )

    @property
    def is_complete(self) -> bool:
        return all((self.flavor, self.size, self.shape))

    @property
    def servings(self) -> Optional[Tuple[int, int]]:
        return self.size.servings if self.size else None

    def ensure_complete(self) -> 'CakeConfiguration':
        """Raise InvalidCakeConfigurationError unless this can be ordered."""
        for name in ('flavor', 'size', 'shape'):
            if getattr(self, name) is None:
                raise InvalidCakeConfigurationError(f"Cake {name} is required", field=name)
        for name in ('layers', 'tiers'):
            value = getattr(self, name)
            if not MIN_STACK <= value <= MAX_STACK:
                raise InvalidCakeConfigurationError(
                    f"Cake {name} must be between {MIN_STACK} and {MAX_STACK}", field=name
                )
        return self


def _lenient(parser, value):
    if value in (None, ''):
        return None
    try:
        return parser(value)
    except ValueError:
        return None


def _stack_count(value) -> int:
    try:
        count = int(value)
    except (TypeError, ValueError):
        return MIN_STACK
    return max(count, MIN_STACK)
