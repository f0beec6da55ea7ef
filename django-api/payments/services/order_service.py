"""Order service - creation, key assignment and the pending -> paid transition.

Services:
- Depend only on interfaces (stores) and injected ports
- Validate domain invariants
- Return domain models or raise domain errors
"""

import logging
import random
from collections.abc import Mapping, Sequence
from dataclasses import replace
from datetime import timedelta
from functools import reduce
from typing import Any

from core.ports import Clock, IdFactory, new_id, utcnow
from core.value_objects import Money
from payments.domain import Customer, LineItem, Order, OrderStatus, PaymentKeySnapshot
from payments.domain.errors import (
    EmptyCartError,
    InvalidCustomerError,
    InvalidItemError,
    NoKeyAvailableError,
    OrderNotFoundError,
)
from payments.domain.value_objects import generate_order_code
from payments.services.key_service import KeyService
from payments.stores.interfaces import OrderStore

logger = logging.getLogger(__name__)

ORDER_TTL = timedelta(minutes=30)
REQUIRED_CUSTOMER_FIELDS = ("name", "email", "cpf")


class OrderService:
    """Service for ticket order operations."""

    def __init__(
        self,
        store: OrderStore,
        keys: KeyService,
        rng: random.Random | None = None,
        clock: Clock = utcnow,
        id_factory: IdFactory = new_id,
        ttl: timedelta = ORDER_TTL,
    ) -> None:
        self._store = store
        self._keys = keys
        self._rng = rng or random.Random()
        self._clock = clock
        self._new_id = id_factory
        self._ttl = ttl

    def create(
        self,
        customer: Mapping[str, Any] | None,
        items: Sequence[Mapping[str, Any]] | None,
        total: Any = None,
    ) -> Order:
        """Create a pending order and assign it a random active PIX key.

        ``total`` is taken as supplied; when omitted it is the sum of the
        item subtotals.

        Raises:
            InvalidCustomerError: If name, email or cpf is missing.
            EmptyCartError: If there are no items.
            InvalidItemError / InvalidAmountError: If an item or the total is malformed.
            NoKeyAvailableError: If no PIX key is active.
        """
        if not isinstance(customer, Mapping) or not all(
            customer.get(field) for field in REQUIRED_CUSTOMER_FIELDS
        ):
            raise InvalidCustomerError()
        if not isinstance(items, Sequence) or isinstance(items, str) or not items:
            raise EmptyCartError()
        if not all(isinstance(item, Mapping) for item in items):
            raise InvalidItemError("items")

        buyer = Customer.from_payload(customer)
        line_items = tuple(LineItem.from_payload(item) for item in items)
        if total is None:
            amount = reduce(lambda acc, item: acc + item.subtotal, line_items, Money.zero())
        else:
            amount = Money.parse(total, field="total")

        with self._store.atomic():
            payment_key = self._keys.select_random()
            if payment_key is None:
                logger.error("Order rejected: no active PIX key")
                raise NoKeyAvailableError()

            created_at = self._clock()
            order = Order(
                id=self._new_id(),
                code=generate_order_code(created_at, self._rng),
                customer=buyer,
                items=line_items,
                total=amount,
                payment_key=PaymentKeySnapshot.of(payment_key),
                status=OrderStatus.PENDING,
                created_at=created_at,
                expires_at=created_at + self._ttl,
            )
            self._store.save(order)

        logger.info("Order %s created with %d item(s)", order.code, len(line_items))
        return order

    def confirm(self, order_id_or_code: str) -> Order:
        """Mark an order as paid.

        Confirming an order that is already paid succeeds again and
        overwrites ``paid_at``.

        Raises:
            OrderNotFoundError: If neither the ID nor the code matches.
        """
        with self._store.atomic():
            order = self._find(order_id_or_code)
            paid = replace(order, status=OrderStatus.PAID, paid_at=self._clock())
            self._store.save(paid)

        logger.info("Payment confirmed for order %s", paid.code)
        return paid

    def get(self, order_id_or_code: str) -> Order:
        """Raises OrderNotFoundError if neither the ID nor the code matches."""
        with self._store.atomic():
            return self._find(order_id_or_code)

    def list_summaries(self) -> list[Order]:
        """Return every order in insertion order."""
        with self._store.atomic():
            return self._store.list_orders()

    def count(self) -> int:
        with self._store.atomic():
            return self._store.count()

    def _find(self, order_id_or_code: str) -> Order:
        order = self._store.get_by_id(order_id_or_code) or self._store.get_by_code(
            order_id_or_code
        )
        if order is None:
            raise OrderNotFoundError(order_id_or_code)
        return order
