"""Store interfaces (repository pattern).

Stores must be swappable and return domain models. Each store exposes
``atomic()``, a re-entrant lock that services hold for the whole of one
operation.
"""

from abc import ABC, abstractmethod
from contextlib import AbstractContextManager

from payments.domain import Order, PaymentKey


class PaymentKeyStore(ABC):
    """Interface for PIX key persistence operations."""

    @abstractmethod
    def atomic(self) -> AbstractContextManager:
        """Return the context manager guarding one logical operation."""
        ...

    @abstractmethod
    def list_keys(self) -> list[PaymentKey]:
        """Return all keys in registration order."""
        ...

    @abstractmethod
    def list_active(self) -> list[PaymentKey]:
        """Return active keys in registration order."""
        ...

    @abstractmethod
    def get_key(self, key_id: str) -> PaymentKey | None:
        """Return a key by ID, or None if not found."""
        ...

    @abstractmethod
    def find_by_key(self, key: str) -> PaymentKey | None:
        """Return the key registered with this key string, or None."""
        ...

    @abstractmethod
    def count(self) -> int:
        ...

    @abstractmethod
    def save(self, payment_key: PaymentKey) -> None:
        """Insert a key, or replace the key with the same ID in place."""
        ...

    @abstractmethod
    def delete(self, key_id: str) -> bool:
        """Remove a key. Returns False if it did not exist."""
        ...


class OrderStore(ABC):
    """Interface for order persistence operations."""

    @abstractmethod
    def atomic(self) -> AbstractContextManager:
        """Return the context manager guarding one logical operation."""
        ...

    @abstractmethod
    def save(self, order: Order) -> None:
        """Insert an order, or replace the order with the same ID."""
        ...

    @abstractmethod
    def get_by_id(self, order_id: str) -> Order | None:
        ...

    @abstractmethod
    def get_by_code(self, code: str) -> Order | None:
        """Return the first order stored with this code, or None."""
        ...

    @abstractmethod
    def list_orders(self) -> list[Order]:
        """Return all orders in insertion order."""
        ...

    @abstractmethod
    def count(self) -> int:
        ...
