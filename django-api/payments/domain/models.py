"""Domain models for PIX keys and ticket orders.

These are pure domain objects. State transitions produce new instances
with ``dataclasses.replace``; stores hold whatever instance was saved last.
"""

from collections.abc import Mapping
from dataclasses import dataclass
from datetime import datetime
from typing import Any, Self

from core.value_objects import Money
from payments.domain.errors import InvalidItemError
from payments.domain.value_objects import KeyKind, OrderStatus, digits_only


@dataclass(frozen=True)
class PaymentKey:
    """Domain representation of a registered PIX key."""

    id: str
    key: str
    kind: KeyKind
    name: str
    active: bool
    created_at: datetime
    updated_at: datetime | None = None


@dataclass(frozen=True)
class PaymentKeySnapshot:
    """Copy of a PaymentKey taken when it is assigned to an order."""

    id: str
    key: str
    kind: KeyKind
    name: str

    @classmethod
    def of(cls, payment_key: PaymentKey) -> Self:
        return cls(
            id=payment_key.id,
            key=payment_key.key,
            kind=payment_key.kind,
            name=payment_key.name,
        )


@dataclass(frozen=True)
class Customer:
    name: str
    email: str
    national_id: str
    phone: str

    @classmethod
    def from_payload(cls, payload: Mapping[str, Any]) -> Self:
        """Normalize the buyer fields; cpf and phone keep digits only."""
        return cls(
            name=payload["name"],
            email=payload["email"],
            national_id=digits_only(payload["cpf"]),
            phone=digits_only(payload.get("phone")),
        )


@dataclass(frozen=True)
class LineItem:
    title: str
    unit_price: Money | None
    quantity: int

    @property
    def subtotal(self) -> Money:
        """Unpriced entries contribute nothing."""
        if self.unit_price is None:
            return Money.zero()
        return self.unit_price * self.quantity

    @classmethod
    def from_payload(cls, payload: Mapping[str, Any]) -> Self:
        """Normalize one cart entry.

        The price is read from ``unitPrice`` and falls back to
        ``unit_price`` when ``unitPrice`` is absent or null. An entry with
        neither is kept without a price.
        """
        price = payload.get("unitPrice")
        if price is None:
            price = payload.get("unit_price")
        quantity = payload.get("quantity", 1)
        if isinstance(quantity, bool) or not isinstance(quantity, int) or quantity < 0:
            raise InvalidItemError("quantity")
        return cls(
            title=payload.get("title") or "",
            unit_price=None if price is None else Money.parse(price, field="unitPrice"),
            quantity=quantity,
        )


@dataclass(frozen=True)
class Order:
    """Domain representation of a ticket order."""

    id: str
    code: str
    customer: Customer
    items: tuple[LineItem, ...]
    total: Money
    payment_key: PaymentKeySnapshot
    status: OrderStatus
    created_at: datetime
    expires_at: datetime
    paid_at: datetime | None = None
