"""
Base value object class for DDD.
"""
from abc import ABC
from dataclasses import asdict, dataclass
from enum import Enum
from typing import Any, Dict


def _plain(value: Any) -> Any:
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, (list, tuple)):
        return [_plain(item) for item in value]
    if isinstance(value, dict):
        return {key: _plain(item) for key, item in value.items()}
    return value


@dataclass(frozen=True)
class ValueObject(ABC):
    """
    Base value object class.
    Value objects are immutable and compared by their attributes.
    """

    def to_dict(self) -> Dict[str, Any]:
        """Return a JSON-friendly dict; enums collapse to their values."""
        return _plain(asdict(self))
