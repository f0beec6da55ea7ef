"""Domain errors for the payments module."""

from core.errors import (
    ErrorCode,
    NotFoundError,
    ResourceExhaustedError,
    ValidationError,
)


class InvalidCustomerError(ValidationError):
    """Raised when the buyer is missing name, email or cpf."""

    def __init__(self) -> None:
        super().__init__("Incomplete customer data", code=ErrorCode.INVALID_CUSTOMER)


class EmptyCartError(ValidationError):
    """Raised when an order has no items."""

    def __init__(self) -> None:
        super().__init__("No items in cart", code=ErrorCode.EMPTY_CART)


class InvalidItemError(ValidationError):
    """Raised when a cart entry carries a malformed field."""

    def __init__(self, field: str) -> None:
        super().__init__(f"Invalid item field: {field}")
        self.field = field


class InvalidKeyKindError(ValidationError):
    def __init__(self, kind: str) -> None:
        super().__init__("Unsupported PIX key type", code=ErrorCode.INVALID_KEY_KIND)
        self.kind = kind


class DuplicateKeyError(ValidationError):
    """Raised when a key string is already registered."""

    def __init__(self) -> None:
        super().__init__("PIX key already registered", code=ErrorCode.DUPLICATE_KEY)


class KeyCapacityError(ResourceExhaustedError):
    """Raised when the registry already holds the maximum number of keys."""

    def __init__(self, limit: int) -> None:
        super().__init__(
            code=ErrorCode.KEY_CAPACITY_REACHED,
            message=f"Limit of {limit} PIX keys reached",
        )
        self.limit = limit


class NoKeyAvailableError(ResourceExhaustedError):
    """Raised when an order is created while no key is active."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.NO_KEY_AVAILABLE,
            message="No PIX key available",
        )


class KeyNotFoundError(NotFoundError):
    def __init__(self, key_id: str) -> None:
        super().__init__(code=ErrorCode.KEY_NOT_FOUND, message="PIX key not found")
        self.key_id = key_id


class OrderNotFoundError(NotFoundError):
    """Raised when neither an order id nor an order code matches."""

    def __init__(self, order_id_or_code: str) -> None:
        super().__init__(code=ErrorCode.ORDER_NOT_FOUND, message="Order not found")
        self.order_id_or_code = order_id_or_code
