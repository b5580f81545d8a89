"""
Order number value object.
"""
import random
import string
from dataclasses import dataclass
from datetime import datetime

from shared.domain import ValueObject


@dataclass(frozen=True)
class OrderNumber(ValueObject):
    """Human-readable order reference, also used as the payment reference."""
    value: str

    @classmethod
    def generate(cls, at: datetime = None) -> 'OrderNumber':
        """Generate a new order number."""
        date_part = (at or datetime.now()).strftime("%Y%m%d")
        random_part = ''.join(random.choices(string.ascii_uppercase + string.digits, k=6))
        return cls(value=f"DB-{date_part}-{random_part}")

    def __str__(self) -> str:
        return self.value
