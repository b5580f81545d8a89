"""
Order domain exceptions.
"""
from shared.domain.exceptions import (
    EntityNotFoundError,
    InvalidOperationError,
    PersistenceError,
    ValidationError,
)


class OrderNotFoundError(EntityNotFoundError):
    """Raised when an order is not found."""

    def __init__(self, identifier: str):
        super().__init__(entity_name="Order", entity_id=str(identifier), code="ORDER_NOT_FOUND")
        self.identifier = str(identifier)


class InvalidCakeConfigurationError(ValidationError):
    """Raised when a cake configuration cannot be ordered."""


class InvalidDeliveryAddressError(ValidationError):
    """Raised when delivery details are missing or malformed."""


class InvalidOrderStateError(InvalidOperationError):
    """Raised when an order operation is invalid for the current state."""

    def __init__(self, operation: str, current_state: str, code: str = "INVALID_ORDER_STATE"):
        super().__init__(
            message=f"Cannot {operation} order in '{current_state}' state",
            operation=operation,
            state=current_state,
            code=code,
        )


class TerminalOrderError(InvalidOrderStateError):
    """Raised when a delivered or cancelled order is moved to another status."""

    def __init__(self, current_state: str):
        super().__init__("change status of", current_state, code="ORDER_TERMINAL")


class InvalidStatusTransitionError(InvalidOrderStateError):
    """Raised by the strict policy for a transition outside the pipeline."""

    def __init__(self, current_state: str, target_state: str):
        super().__init__(f"move to '{target_state}' an", current_state, code="INVALID_STATUS_TRANSITION")
        self.target_state = target_state


class PaymentAlreadyConfirmedError(InvalidOperationError):
    """Raised when a customer confirms payment for an already paid order."""

    def __init__(self, order_number: str):
        super().__init__(
            message=f"Payment for order '{order_number}' is already confirmed",
            operation="confirm_payment",
            state="paid",
            code="PAYMENT_ALREADY_CONFIRMED",
        )


class OrderNumberConflictError(PersistenceError):
    """Raised when a generated order number is already taken."""

    def __init__(self, order_number: str):
        super().__init__(message=f"Order number '{order_number}' is already in use", operation="save order")
        self.code = "ORDER_NUMBER_CONFLICT"
        self.order_number = order_number
