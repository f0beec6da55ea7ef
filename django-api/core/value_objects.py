"""Domain primitives shared by the payments and analytics apps."""

from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from typing import Any, Self

from core.errors import InvalidAmountError

# Largest amount a single payload may carry.
MAX_AMOUNT = Decimal("999999999999.99")


@dataclass(frozen=True)
class Money:
    """Price representation with validation."""

    amount: Decimal

    def __post_init__(self) -> None:
        if not self.amount.is_finite():
            raise ValueError("Money amount must be finite")
        if self.amount < 0:
            raise ValueError("Money amount cannot be negative")

    def __str__(self) -> str:
        return f"{self.amount:.2f}"

    def __add__(self, other: "Money") -> "Money":
        return Money(self.amount + other.amount)

    def __mul__(self, quantity: int) -> "Money":
        return Money(self.amount * quantity)

    @classmethod
    def zero(cls) -> Self:
        return cls(Decimal("0"))

    @classmethod
    def parse(cls, value: Any, field: str = "amount") -> Self:
        """Build Money from a JSON scalar.

        Raises:
            InvalidAmountError: If the value is not a number between zero
                and MAX_AMOUNT.
        """
        if isinstance(value, bool) or not isinstance(value, (int, float, str, Decimal)):
            raise InvalidAmountError(field)
        try:
            money = cls(Decimal(str(value)))
        except (InvalidOperation, ValueError) as exc:
            raise InvalidAmountError(field) from exc
        if money.amount > MAX_AMOUNT:
            raise InvalidAmountError(field)
        return money
