"""Unit tests for the Order aggregate and its business rules."""

import pytest

from plantngo.domain.exceptions import EntityNotFoundError, ValidationError
from plantngo.domain.model.order import Order, OrderItem, OrderStatus
from plantngo.domain.model.value_objects import Money, Quantity


def _make_item(product_id: int = 1, qty: int = 1, price: str = "4.50") -> OrderItem:
    """Helper to build a valid line item."""
    return OrderItem(
        product_id=product_id,
        product_name=f"Product {product_id}",
        quantity=Quantity(qty),
        unit_price=Money.of(price),
    )


class TestOpenOrder:

    def test_new_order_is_pending_and_empty(self):
        order = Order.open_for("alice")
        assert order.id is None  # assigned by repository
        assert order.status == OrderStatus.PENDING
        assert order.is_open
        assert order.total == Money.of("0")

    def test_blank_customer_rejected(self):
        with pytest.raises(ValidationError, match="Customer username"):
            Order.open_for("  ")


class TestOrderTotal:

    def test_total_is_sum_of_quantity_times_price(self):
        order = Order.open_for("alice")
        order.add_item(_make_item(1, qty=3, price="4.50"))
        order.add_item(_make_item(2, qty=2, price="10.00"))
        assert order.total == Money.of("33.50")

    def test_same_product_merges_into_one_line(self):
        order = Order.open_for("alice")
        order.add_item(_make_item(1, qty=2))
        merged = order.add_item(_make_item(1, qty=3))
        assert len(order.items) == 1
        assert merged.quantity == Quantity(5)
        assert order.total == Money.of("22.50")

    def test_removing_item_updates_total(self):
        order = Order.open_for("alice")
        order.add_item(_make_item(1, qty=2, price="5.00"))
        order.add_item(_make_item(2, qty=1, price="3.00"))
        order.remove_item(1)
        assert order.total == Money.of("3.00")

    def test_removing_unknown_item_raises(self):
        order = Order.open_for("alice")
        with pytest.raises(EntityNotFoundError, match="Order Item not found"):
            order.remove_item(42)


class TestOrderStatus:

    def test_confirmed_order_cannot_gain_items(self):
        order = Order.open_for("alice")
        order.change_status(OrderStatus.CONFIRMED)
        with pytest.raises(ValidationError, match="CONFIRMED"):
            order.add_item(_make_item())

    def test_terminal_status_is_final(self):
        order = Order.open_for("alice")
        order.change_status(OrderStatus.CANCELLED)
        with pytest.raises(ValidationError, match="Cannot change order in CANCELLED"):
            order.change_status(OrderStatus.PENDING)

    def test_setting_same_terminal_status_is_allowed(self):
        order = Order.open_for("alice")
        order.change_status(OrderStatus.COMPLETED)
        order.change_status(OrderStatus.COMPLETED)
        assert order.status == OrderStatus.COMPLETED
