"""Domain error codes and the error taxonomy shared by every app."""

from dataclasses import dataclass
from enum import Enum


class ErrorCode(Enum):
    """Domain error codes."""

    MISSING_FIELDS = "MISSING_FIELDS"
    INVALID_PAYLOAD = "INVALID_PAYLOAD"
    INVALID_AMOUNT = "INVALID_AMOUNT"
    INVALID_CUSTOMER = "INVALID_CUSTOMER"
    EMPTY_CART = "EMPTY_CART"
    INVALID_KEY_KIND = "INVALID_KEY_KIND"
    DUPLICATE_KEY = "DUPLICATE_KEY"
    ORDER_NOT_FOUND = "ORDER_NOT_FOUND"
    KEY_NOT_FOUND = "KEY_NOT_FOUND"
    KEY_CAPACITY_REACHED = "KEY_CAPACITY_REACHED"
    NO_KEY_AVAILABLE = "NO_KEY_AVAILABLE"
    UNAUTHORIZED = "UNAUTHORIZED"
    INTERNAL_ERROR = "INTERNAL_ERROR"


@dataclass(frozen=True)
class DomainError(Exception):
    """Base domain error with code and user-safe message."""

    code: ErrorCode
    message: str

    def __str__(self) -> str:
        return f"{self.code.value}: {self.message}"


class ValidationError(DomainError):
    """Malformed or missing input."""

    def __init__(self, message: str, code: ErrorCode = ErrorCode.INVALID_PAYLOAD) -> None:
        super().__init__(code=code, message=message)


class MissingFieldsError(ValidationError):
    """Raised when required request fields are absent or empty."""

    def __init__(self, *fields: str) -> None:
        super().__init__(
            f"Required fields: {', '.join(fields)}",
            code=ErrorCode.MISSING_FIELDS,
        )
        self.fields = fields


class InvalidAmountError(ValidationError):
    """Raised when a monetary amount cannot be parsed or is negative."""

    def __init__(self, field: str) -> None:
        super().__init__(f"Invalid amount for {field}", code=ErrorCode.INVALID_AMOUNT)
        self.field = field


class NotFoundError(DomainError):
    """Unknown identifier."""


class ResourceExhaustedError(DomainError):
    """A bounded resource is full or empty."""


class UnauthorizedError(DomainError):
    """Raised when a shared secret does not match."""

    def __init__(self) -> None:
        super().__init__(code=ErrorCode.UNAUTHORIZED, message="Invalid access key")


class InternalError(DomainError):
    """Unexpected failure; the message never carries the original detail."""

    def __init__(self) -> None:
        super().__init__(code=ErrorCode.INTERNAL_ERROR, message="Internal server error")
