"""
Delivery address value object.
"""
from dataclasses import dataclass
from typing import Any, Mapping

from shared.domain import ValueObject
from ..exceptions import InvalidDeliveryAddressError


@dataclass(frozen=True)
class DeliveryAddress(ValueObject):
    """Where and to whom a cake is delivered."""
    street: str
    city: str
    label: str = "Home"
    area: str = ""
    landmark: str = ""
    phone: str = ""

    def __post_init__(self):
        for name in ('street', 'city'):
            if not (getattr(self, name) or '').strip():
                raise InvalidDeliveryAddressError(f"Delivery {name} is required", field=name)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> 'DeliveryAddress':
        if not data:
            raise InvalidDeliveryAddressError("Delivery address is required", field='delivery_address')
        return cls(
            street=data.get('street') or '',
            city=data.get('city') or '',
            label=data.get('label') or 'Home',
            area=data.get('area') or '',
            landmark=data.get('landmark') or '',
            phone=data.get('phone') or '',
        )

    @property
    def full_address(self) -> str:
        """Get the full address string."""
        address = ", ".join(part for part in (self.street, self.area, self.city) if part)
        if self.landmark:
            address += f" (near {self.landmark})"
        return address
