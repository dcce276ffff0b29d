"""Application service: order queries."""

from __future__ import annotations

from plantngo.application.dto import OrderDTO, to_order_dto
from plantngo.domain.exceptions import EntityNotFoundError
from plantngo.domain.repository.order_repository import OrderRepository


class ShowOrdersHandler:

    def __init__(self, order_repo: OrderRepository) -> None:
        self._order_repo = order_repo

    def get(self, order_id: int) -> OrderDTO:
        order = self._order_repo.get_by_id(order_id)
        if order is None:
            raise EntityNotFoundError("Order")
        return to_order_dto(order)

    def all(self) -> list[OrderDTO]:
        return [to_order_dto(o) for o in self._order_repo.list_all()]

    def by_customer(self, customer_username: str) -> list[OrderDTO]:
        return [to_order_dto(o) for o in self._order_repo.list_by_customer(customer_username)]
