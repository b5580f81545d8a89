"""
Rules for which status changes the lifecycle controller accepts.
"""
from abc import ABC, abstractmethod

from ..exceptions import InvalidStatusTransitionError, TerminalOrderError
from ..value_objects.order_status import OrderStatus


class TransitionPolicy(ABC):
    """Decides whether an order may move from one status to another."""

    def __init__(self, lock_terminal: bool = True):
        self.lock_terminal = lock_terminal

    def check(self, current: OrderStatus, target: OrderStatus) -> None:
        """Raise if moving from current to target is not allowed."""
        if self.lock_terminal and current.is_terminal:
            raise TerminalOrderError(current.value)
        self._check(current, target)

    @abstractmethod
    def _check(self, current: OrderStatus, target: OrderStatus) -> None:
        pass


class PermissiveTransitionPolicy(TransitionPolicy):
    """Staff may set any status at any time."""

    def _check(self, current: OrderStatus, target: OrderStatus) -> None:
        return None


class StrictTransitionPolicy(TransitionPolicy):
    """Only forward moves along the pipeline, repeats of the current status, or cancellation."""

    def _check(self, current: OrderStatus, target: OrderStatus) -> None:
        if target is current:
            return
        if target is OrderStatus.CANCELLED and not current.is_terminal:
            return
        if current.position < 0 or target.position <= current.position:
            raise InvalidStatusTransitionError(current.value, target.value)


POLICIES = {
    'permissive': PermissiveTransitionPolicy,
    'strict': StrictTransitionPolicy,
}


def get_transition_policy(name: str = 'permissive', lock_terminal: bool = True) -> TransitionPolicy:
    try:
        policy_class = POLICIES[name]
    except KeyError:
        raise ValueError(f"Unknown order transition policy '{name}'") from None
    return policy_class(lock_terminal=lock_terminal)
