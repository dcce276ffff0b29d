"""Application service: Update Order Status use case."""

from __future__ import annotations

import structlog

from plantngo.application.dto import OrderDTO, to_order_dto
from plantngo.domain.exceptions import EntityNotFoundError, ValidationError
from plantngo.domain.model.order import OrderStatus
from plantngo.domain.repository.order_repository import OrderRepository

logger = structlog.get_logger(__name__)


class UpdateOrderHandler:

    def __init__(self, order_repo: OrderRepository) -> None:
        self._order_repo = order_repo

    def handle(self, order_id: int, status: str) -> OrderDTO:
        order = self._order_repo.get_by_id(order_id)
        if order is None:
            raise EntityNotFoundError("Order")

        try:
            new_status = OrderStatus(status.upper())
        except ValueError as exc:
            raise ValidationError(f"Unknown order status: {status!r}") from exc

        previous = order.status
        order.change_status(new_status)
        self._order_repo.save(order)
        logger.info(
            "order_status_changed",
            order_id=order.id,
            previous=previous.value,
            status=new_status.value,
        )
        return to_order_dto(order)
