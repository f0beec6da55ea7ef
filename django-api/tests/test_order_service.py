"""Unit tests for OrderService.

These test order creation, key assignment and the pending -> paid transition.
Run with: pytest tests/test_order_service.py -v
"""

from datetime import timedelta
from decimal import Decimal

import pytest

from core.errors import ErrorCode, InvalidAmountError, ResourceExhaustedError
from core.value_objects import Money
from payments.domain import OrderStatus
from payments.domain.errors import (
    EmptyCartError,
    InvalidCustomerError,
    InvalidItemError,
    NoKeyAvailableError,
    OrderNotFoundError,
)


@pytest.fixture
def active_key(key_service):
    return key_service.add_key("pix@example.com", "email", "Box Office")


class TestCreateOrder:
    """Tests for OrderService.create."""

    def test_create_returns_pending_order(self, order_service, active_key, customer, items, clock):
        order = order_service.create(customer, items, 540.50)

        assert order.status is OrderStatus.PENDING
        assert order.created_at == clock.now
        assert order.expires_at == order.created_at + timedelta(minutes=30)
        assert order.paid_at is None
        assert order.total.amount == Decimal("540.5")
        assert order.code.startswith("GM-")

    def test_create_assigns_snapshot_of_active_key(self, order_service, active_key, customer, items):
        order = order_service.create(customer, items, 540.50)

        assert order.payment_key.id == active_key.id
        assert order.payment_key.key == "pix@example.com"
        assert order.payment_key.name == "Box Office"

    def test_assigned_key_is_always_active(self, order_service, key_service, customer, items):
        keys = [key_service.add_key(f"k{n}", "random", f"K{n}") for n in range(4)]
        key_service.update_key(keys[1].id, active=False)
        key_service.update_key(keys[3].id, active=False)

        assigned = {order_service.create(customer, items).payment_key.id for _ in range(30)}

        assert assigned <= {keys[0].id, keys[2].id}

    def test_key_edits_do_not_change_existing_orders(
        self, order_service, key_service, active_key, customer, items
    ):
        order = order_service.create(customer, items, 10)

        key_service.update_key(active_key.id, key="changed@example.com", name="Changed")
        key_service.remove_key(active_key.id)

        stored = order_service.get(order.id)
        assert stored.payment_key.key == "pix@example.com"
        assert stored.payment_key.name == "Box Office"

    def test_create_normalizes_customer_and_items(self, order_service, active_key, customer, items):
        order = order_service.create(customer, items, 540.50)

        assert order.customer.national_id == "12345678909"
        assert order.customer.phone == "11987654321"
        assert [i.unit_price.amount for i in order.items] == [Decimal("120.0"), Decimal("300.50")]
        assert [i.quantity for i in order.items] == [2, 1]

    def test_missing_total_is_sum_of_items(self, order_service, active_key, customer, items):
        order = order_service.create(customer, items)
        assert order.total.amount == Decimal("540.50")

    @pytest.mark.parametrize("missing", ["name", "email", "cpf"])
    def test_incomplete_customer(self, order_service, active_key, customer, items, missing):
        customer[missing] = ""
        with pytest.raises(InvalidCustomerError) as exc_info:
            order_service.create(customer, items, 10)
        assert exc_info.value.code is ErrorCode.INVALID_CUSTOMER

    def test_missing_customer(self, order_service, active_key, items):
        with pytest.raises(InvalidCustomerError):
            order_service.create(None, items, 10)

    @pytest.mark.parametrize("cart", [[], None, "ticket"])
    def test_empty_cart(self, order_service, active_key, customer, cart):
        with pytest.raises(EmptyCartError) as exc_info:
            order_service.create(customer, cart, 10)
        assert exc_info.value.code is ErrorCode.EMPTY_CART

    def test_cart_entries_must_be_objects(self, order_service, active_key, customer):
        with pytest.raises(InvalidItemError):
            order_service.create(customer, ["ticket"], 10)

    def test_malformed_total(self, order_service, active_key, customer, items):
        with pytest.raises(InvalidAmountError):
            order_service.create(customer, items, "ten")

    def test_total_above_limit_is_rejected_before_saving(
        self, order_service, active_key, customer, items
    ):
        with pytest.raises(InvalidAmountError):
            order_service.create(customer, items, 10**13)
        assert order_service.count() == 0

    def test_unpriced_item_is_accepted(self, order_service, active_key, customer):
        order = order_service.create(customer, [{"title": "Cortesia", "quantity": 1}])

        assert order.status is OrderStatus.PENDING
        assert order.items[0].unit_price is None
        assert order.total == Money.zero()

    def test_no_keys_registered(self, order_service, customer, items):
        with pytest.raises(NoKeyAvailableError) as exc_info:
            order_service.create(customer, items, 10)
        assert exc_info.value.code is ErrorCode.NO_KEY_AVAILABLE

    def test_only_inactive_keys(self, order_service, key_service, active_key, customer, items):
        key_service.update_key(active_key.id, active=False)

        with pytest.raises(ResourceExhaustedError):
            order_service.create(customer, items, 10)
        assert order_service.count() == 0


class TestConfirmOrder:
    """Tests for OrderService.confirm."""

    def test_confirm_by_id(self, order_service, active_key, customer, items, clock):
        order = order_service.create(customer, items, 10)
        paid_at = clock.advance(minutes=3)

        paid = order_service.confirm(order.id)

        assert paid.status is OrderStatus.PAID
        assert paid.paid_at == paid_at

    def test_confirm_by_code_is_visible_by_both_accessors(
        self, order_service, active_key, customer, items
    ):
        order = order_service.create(customer, items, 10)

        order_service.confirm(order.code)

        by_id = order_service.get(order.id)
        by_code = order_service.get(order.code)
        assert by_id == by_code
        assert by_id.status is OrderStatus.PAID

    def test_confirm_unknown_order(self, order_service):
        with pytest.raises(OrderNotFoundError) as exc_info:
            order_service.confirm("GM-NOPE-0000")
        assert exc_info.value.code is ErrorCode.ORDER_NOT_FOUND

    def test_reconfirm_overwrites_paid_at(self, order_service, active_key, customer, items, clock):
        order = order_service.create(customer, items, 10)
        first = order_service.confirm(order.id).paid_at
        clock.advance(minutes=10)

        second = order_service.confirm(order.code)

        assert second.status is OrderStatus.PAID
        assert second.paid_at == first + timedelta(minutes=10)

    def test_confirm_keeps_key_snapshot(self, order_service, active_key, customer, items):
        order = order_service.create(customer, items, 10)
        assert order_service.confirm(order.id).payment_key == order.payment_key


class TestReadOrders:
    def test_get_unknown_order(self, order_service):
        with pytest.raises(OrderNotFoundError):
            order_service.get("missing")

    def test_list_summaries_in_insertion_order(self, order_service, active_key, customer, items):
        created = [order_service.create(customer, items, n) for n in range(3)]

        assert [o.id for o in order_service.list_summaries()] == [o.id for o in created]
        assert order_service.count() == 3
