"""Order aggregate.

The Order owns its line items. A customer has at most one PENDING
("open") order; new purchases are appended to it.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from decimal import Decimal
from enum import Enum

from plantngo.domain.exceptions import EntityNotFoundError, ValidationError
from plantngo.domain.model.value_objects import Money, Quantity


class OrderStatus(Enum):
    PENDING = "PENDING"
    CONFIRMED = "CONFIRMED"
    COMPLETED = "COMPLETED"
    CANCELLED = "CANCELLED"


TERMINAL_STATUSES = (OrderStatus.COMPLETED, OrderStatus.CANCELLED)


@dataclass
class OrderItem:
    """One product in an order.

    ``unit_price`` is the product price captured when the line was added;
    later price changes do not reach existing orders.
    """

    product_id: int
    product_name: str
    quantity: Quantity
    unit_price: Money

    @property
    def line_total(self) -> Money:
        return self.unit_price * self.quantity.value


@dataclass
class Order:
    """Aggregate root for customer orders.

    ``__init__`` does no validation so the repository can reconstitute
    persisted orders; use ``Order.open_for()`` for new ones.
    """

    id: int | None
    customer_username: str
    items: list[OrderItem] = field(default_factory=list)
    status: OrderStatus = OrderStatus.PENDING
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @staticmethod
    def open_for(customer_username: str) -> Order:
        if not customer_username or not customer_username.strip():
            raise ValidationError("Customer username is required")
        return Order(id=None, customer_username=customer_username.strip())

    @property
    def is_open(self) -> bool:
        return self.status == OrderStatus.PENDING

    # --- Line items -----------------------------------------------------------

    def add_item(self, item: OrderItem) -> OrderItem:
        """Append a line, or top up the quantity of an existing one."""
        self._assert_open()
        for i, existing in enumerate(self.items):
            if existing.product_id == item.product_id:
                merged = OrderItem(
                    product_id=existing.product_id,
                    product_name=existing.product_name,
                    quantity=Quantity(existing.quantity.value + item.quantity.value),
                    unit_price=existing.unit_price,
                )
                self.items[i] = merged
                return merged
        self.items.append(item)
        return item

    def remove_item(self, product_id: int) -> OrderItem:
        self._assert_open()
        for i, item in enumerate(self.items):
            if item.product_id == product_id:
                return self.items.pop(i)
        raise EntityNotFoundError("Order Item")

    # --- State transitions ----------------------------------------------------

    def change_status(self, status: OrderStatus) -> None:
        if self.status in TERMINAL_STATUSES and status != self.status:
            raise ValidationError(
                f"Cannot change order in {self.status.value} status"
            )
        self.status = status

    # --- Computed properties --------------------------------------------------

    @property
    def total(self) -> Money:
        result = Money(Decimal("0.00"))
        for item in self.items:
            result = result + item.line_total
        return result

    def _assert_open(self) -> None:
        if not self.is_open:
            raise ValidationError(
                f"Cannot modify items of order in {self.status.value} status"
            )
