"""
Money value object.
"""
from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal

from shared.domain import ValueObject

DEFAULT_CURRENCY = "ZMW"


@dataclass(frozen=True)
class Money(ValueObject):
    """Money value object with currency."""
    amount: Decimal
    currency: str = DEFAULT_CURRENCY

    def __post_init__(self):
        # Convert to Decimal if needed
        if not isinstance(self.amount, Decimal):
            object.__setattr__(self, 'amount', Decimal(str(self.amount)))
        if self.amount < 0:
            raise ValueError("Money amount cannot be negative")

    def add(self, other: 'Money') -> 'Money':
        """Add two money values."""
        if self.currency != other.currency:
            raise ValueError("Cannot add different currencies")
        return Money(amount=self.amount + other.amount, currency=self.currency)

    def multiply(self, factor) -> 'Money':
        """Multiply money by a factor."""
        return Money(amount=self.amount * Decimal(str(factor)), currency=self.currency)

    def rounded(self) -> 'Money':
        """Round half-up to a whole currency unit."""
        return Money(
            amount=self.amount.quantize(Decimal('1'), rounding=ROUND_HALF_UP),
            currency=self.currency,
        )

    @property
    def formatted(self) -> str:
        """Get formatted money string."""
        if self.currency == "ZMW":
            return f"K{self.amount:,.0f}"
        return f"{self.currency} {self.amount:,.2f}"
