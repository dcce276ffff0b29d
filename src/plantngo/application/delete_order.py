"""Application services: Delete Order and Delete Order Item use cases."""

from __future__ import annotations

import structlog

from plantngo.application.dto import OrderDTO, to_order_dto
from plantngo.domain.exceptions import EntityNotFoundError
from plantngo.domain.repository.order_repository import OrderRepository

logger = structlog.get_logger(__name__)


class DeleteOrderHandler:

    def __init__(self, order_repo: OrderRepository) -> None:
        self._order_repo = order_repo

    def handle(self, order_id: int) -> None:
        order = self._order_repo.get_by_id(order_id)
        if order is None:
            raise EntityNotFoundError("Order")
        self._order_repo.delete(order)
        logger.info("order_deleted", order_id=order_id)


class DeleteOrderItemHandler:

    def __init__(self, order_repo: OrderRepository) -> None:
        self._order_repo = order_repo

    def handle(self, order_id: int, product_id: int) -> OrderDTO:
        """Drop one product's line from an open order; the total follows."""
        order = self._order_repo.get_by_id(order_id)
        if order is None:
            raise EntityNotFoundError("Order")

        order.remove_item(product_id)
        self._order_repo.save(order)
        logger.info(
            "order_item_deleted",
            order_id=order_id,
            product_id=product_id,
            total=str(order.total.amount),
        )
        return to_order_dto(order)
