"""Tests for placing orders and the orders store."""

from datetime import UTC, datetime

import pytest
from menu.product.catalog import DEFAULT_CATALOG
from menu.product.options import CartOptionSelection
from ordering.cart.cart import CartItem
from ordering.cart.pricing import compute_cart_summary, derive_cart_lines
from ordering.order.creation import create_order, option_label, place_order
from ordering.order.order import CustomerInfo, PaymentMethod
from ordering.order.samples import seed_sample_orders
from ordering.order.status import clear_orders, get_order, list_orders, mark_served, update_status
from shared.exceptions import ObjectNotFoundError, ValidationError

LARGE = CartOptionSelection(group="Ukuran", label="Large", price_delta=5000)
SMALL = CartOptionSelection(group="Ukuran", label="Small", price_delta=-3000)
LESS_ICE = CartOptionSelection(group="Level Es", label="Less Ice")


def _priced(items):
    lines = derive_cart_lines(items, DEFAULT_CATALOG)
    return lines, compute_cart_summary(lines)


class TestOptionLabel:
    def test_priced_option(self):
        assert option_label(LARGE) == "Large (+Rp 5.000)"

    def test_discounted_option(self):
        assert option_label(SMALL) == "Small (-Rp 3.000)"

    def test_free_option(self):
        assert option_label(LESS_ICE) == "Less Ice"


class TestPlaceOrder:
    def test_places_pending_order(self):
        lines, summary = _priced([CartItem(product_id="pistachio-latte", quantity=2, options=[LARGE, LESS_ICE])])
        order = place_order(lines, summary, table_id="M-01", customer_info=CustomerInfo(name="Budi"))

        assert order.id == f"ORD-{int(order.created_at.timestamp() * 1000)}"
        assert order.status == "pending"
        assert order.payment_method == "qris"
        assert order.payment_status == "paid"
        assert order.table_id == "M-01"
        assert order.total == summary.total
        assert order.total_label == summary.total_label

        (item,) = order.items
        assert item.name == "Pistachio Latte"
        assert item.quantity == 2
        assert item.unit_price == 60000
        assert item.line_price_label == "Rp 120.000"
        assert item.category == "Pistachio Series"
        assert item.options == ["Large (+Rp 5.000)", "Less Ice"]

        assert get_order(order.id) is order

    def test_cash_payment_method(self):
        lines, summary = _priced([CartItem(product_id="kenya-aa")])
        order = place_order(lines, summary, payment_method=PaymentMethod.CASH)
        assert order.payment_method == "cash"

    def test_empty_cart_is_rejected(self):
        with pytest.raises(ValidationError):
            place_order([], compute_cart_summary([]))

    def test_orders_in_the_same_millisecond_keep_distinct_ids(self):
        now = datetime(2026, 1, 1, tzinfo=UTC)
        lines, summary = _priced([CartItem(product_id="matcha-latte")])

        first = place_order(lines, summary, now=now)
        second = place_order(lines, summary, now=now)

        assert first.id == "ORD-1767225600000"
        assert second.id == "ORD-1767225600000-2"
        assert len(list_orders()) == 2


class TestBackendCreateOrder:
    def test_requires_id(self):
        with pytest.raises(ValidationError) as exc_info:
            create_order(table_id="M-01")
        assert exc_info.value.first_message == "id wajib diisi"

    def test_stores_payload_with_created_at(self):
        order = create_order(
            id="ORD-EXT-1",
            table_id="M-02",
            items=[{"name": "Matcha Latte", "quantity": 1, "linePriceLabel": "Rp 50.000"}],
            total=50000,
            status="ready",
        )
        assert order.created_at is not None
        assert order.items[0].line_price_label == "Rp 50.000"
        assert order.status == "ready"
        assert get_order("ORD-EXT-1").total == 50000

    def test_accepts_items_without_name(self):
        order = create_order(id="ORD-EXT-2", items=[{"productId": "x", "qty": 2}], total=10)
        (item,) = order.items
        assert item.product_id == "x"
        assert item.name == ""
        assert item.to_dict()["qty"] == 2
        assert get_order("ORD-EXT-2") is order


class TestOrdersStore:
    def _place(self, product_id="matcha-latte"):
        lines, summary = _priced([CartItem(product_id=product_id)])
        return place_order(lines, summary)

    def test_list_newest_first(self):
        first = create_order(id="ORD-1")
        second = create_order(id="ORD-2")
        first.created_at = datetime(2024, 4, 8, 9, 0, tzinfo=UTC)
        second.created_at = datetime(2024, 4, 8, 9, 5, tzinfo=UTC)
        assert [order.id for order in list_orders()] == ["ORD-2", "ORD-1"]

    def test_update_status(self):
        order = self._place()
        update_status(order.id, "preparing")
        assert get_order(order.id).status == "preparing"

    def test_update_to_same_status_is_a_no_op(self):
        order = self._place()
        update_status(order.id, "pending")
        assert get_order(order.id).status == "pending"

    def test_unknown_status(self):
        order = self._place()
        with pytest.raises(ValidationError):
            update_status(order.id, "lost")

    def test_mark_served(self):
        order = self._place()
        mark_served(order.id)
        assert get_order(order.id).status == "served"

    def test_unknown_order(self):
        with pytest.raises(ObjectNotFoundError):
            mark_served("ORD-0")

    def test_clear_orders(self):
        self._place()
        assert clear_orders() == 1
        assert list_orders() == []


class TestSampleOrders:
    def test_seeds_demonstration_orders(self):
        now = datetime(2024, 4, 8, 12, 0, tzinfo=UTC)
        orders = seed_sample_orders(now)

        assert [order.status for order in orders] == ["preparing", "pending", "ready"]
        assert [order.id for order in orders] == [
            "ORD-1712577600000-1",
            "ORD-1712577600000-2",
            "ORD-1712577600000-3",
        ]
        assert orders[0].customer_info.name == "Budi Santoso"
        assert orders[0].total_label == "Rp 80.300"
        assert orders[2].table_id is None
        assert [order.id for order in list_orders()][0] == "ORD-1712577600000-3"

    def test_seeding_twice_does_not_share_items(self):
        first = seed_sample_orders(datetime(2024, 4, 8, 12, 0, tzinfo=UTC))
        second = seed_sample_orders(datetime(2024, 4, 8, 12, 1, tzinfo=UTC))
        first[0].items[0].quantity = 9
        assert second[0].items[0].quantity == 2
