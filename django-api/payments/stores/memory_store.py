"""In-process implementations of the payments stores.

Nothing survives a restart.
"""

import threading
from contextlib import AbstractContextManager

from payments.domain import Order, PaymentKey
from payments.stores.interfaces import OrderStore, PaymentKeyStore


class InMemoryPaymentKeyStore(PaymentKeyStore):
    """Dict-backed key store; dicts keep registration order."""

    def __init__(self) -> None:
        self._keys: dict[str, PaymentKey] = {}
        self._lock = threading.RLock()

    def atomic(self) -> AbstractContextManager:
        return self._lock

    def list_keys(self) -> list[PaymentKey]:
        return list(self._keys.values())

    def list_active(self) -> list[PaymentKey]:
        return [k for k in self._keys.values() if k.active]

    def get_key(self, key_id: str) -> PaymentKey | None:
        return self._keys.get(key_id)

    def find_by_key(self, key: str) -> PaymentKey | None:
        return next((k for k in self._keys.values() if k.key == key), None)

    def count(self) -> int:
        return len(self._keys)

    def save(self, payment_key: PaymentKey) -> None:
        self._keys[payment_key.id] = payment_key

    def delete(self, key_id: str) -> bool:
        return self._keys.pop(key_id, None) is not None


class InMemoryOrderStore(OrderStore):
    """Orders by ID, with a secondary index by code."""

    def __init__(self) -> None:
        self._orders: dict[str, Order] = {}
        self._ids_by_code: dict[str, str] = {}
        self._lock = threading.RLock()

    def atomic(self) -> AbstractContextManager:
        return self._lock

    def save(self, order: Order) -> None:
        self._orders[order.id] = order
        # On a code collision the earliest order keeps the code.
        self._ids_by_code.setdefault(order.code, order.id)

    def get_by_id(self, order_id: str) -> Order | None:
        return self._orders.get(order_id)

    def get_by_code(self, code: str) -> Order | None:
        order_id = self._ids_by_code.get(code)
        return self._orders.get(order_id) if order_id is not None else None

    def list_orders(self) -> list[Order]:
        return list(self._orders.values())

    def count(self) -> int:
        return len(self._orders)
