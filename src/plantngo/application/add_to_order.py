"""Application service: Add to Order use case.

Appends a line to the customer's open (PENDING) order, creating the
order first if the customer has none open.
"""

from __future__ import annotations

import structlog

from plantngo.application.dto import OrderDTO, to_order_dto
from plantngo.domain.exceptions import EntityNotFoundError
from plantngo.domain.model.order import Order, OrderItem
from plantngo.domain.model.value_objects import Quantity
from plantngo.domain.repository.account_repository import CustomerRepository
from plantngo.domain.repository.order_repository import OrderRepository
from plantngo.domain.repository.product_repository import ProductRepository

logger = structlog.get_logger(__name__)


class AddToOrderHandler:

    def __init__(
        self,
        order_repo: OrderRepository,
        product_repo: ProductRepository,
        customer_repo: CustomerRepository,
    ) -> None:
        self._order_repo = order_repo
        self._product_repo = product_repo
        self._customer_repo = customer_repo

    def handle(self, customer_username: str, product_id: int, quantity: int) -> OrderDTO:
        customer = self._customer_repo.get_by_username(customer_username)
        if customer is None:
            raise EntityNotFoundError("Customer")
        product = self._product_repo.get_by_id(product_id)
        if product is None:
            raise EntityNotFoundError("Product")

        item = OrderItem(
            product_id=product.id,  # type: ignore[arg-type]
            product_name=product.name,
            quantity=Quantity(quantity),
            unit_price=product.price,  # <-- price snapshot
        )

        order = self._open_order_for(customer.username)
        created = order is None
        if order is None:
            order = Order.open_for(customer.username)
        order.add_item(item)
        self._order_repo.save(order)

        logger.info(
            "order_item_added",
            order_id=order.id,
            new_order=created,
            product_id=product.id,
            quantity=quantity,
            total=str(order.total.amount),
        )
        return to_order_dto(order)

    def _open_order_for(self, customer_username: str) -> Order | None:
        for order in self._order_repo.list_by_customer(customer_username):
            if order.is_open:
                return order
        return None
