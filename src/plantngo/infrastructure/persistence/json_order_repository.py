"""JSON-file-backed implementation of OrderRepository."""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from pathlib import Path

from plantngo.domain.model.order import Order, OrderItem, OrderStatus
from plantngo.domain.model.value_objects import Money, Quantity
from plantngo.domain.repository.order_repository import OrderRepository
from plantngo.infrastructure.persistence.json_file import JsonFile


class JsonOrderRepository(OrderRepository):

    def __init__(self, file_path: Path) -> None:
        self._file = JsonFile(file_path)

    # --- OrderRepository interface --------------------------------------------

    def get_by_id(self, order_id: int) -> Order | None:
        for raw in self._file.load_raw():
            if raw["id"] == order_id:
                return self._to_domain(raw)
        return None

    def list_all(self) -> list[Order]:
        return [self._to_domain(raw) for raw in self._file.load_raw()]

    def list_by_customer(self, customer_username: str) -> list[Order]:
        return [
            self._to_domain(raw)
            for raw in self._file.load_raw()
            if raw["customer_username"] == customer_username
        ]

    def save(self, order: Order) -> None:
        orders = self._file.load_raw()
        if order.id is None:
            order.id = JsonFile.next_id(orders)
        self._file.upsert(orders, self._to_raw(order), key="id")

    def delete(self, order: Order) -> None:
        self._file.remove("id", order.id)

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(order: Order) -> dict:
        return {
            "id": order.id,
            "customer_username": order.customer_username,
            "status": order.status.value,
            "created_at": order.created_at.isoformat(),
            "items": [
                {
                    "product_id": item.product_id,
                    "product_name": item.product_name,
                    "quantity": item.quantity.value,
                    "unit_price": str(item.unit_price.amount),
                    "currency": item.unit_price.currency,
                }
                for item in order.items
            ],
        }

    @staticmethod
    def _to_domain(raw: dict) -> Order:
        items = [
            OrderItem(
                product_id=i["product_id"],
                product_name=i["product_name"],
                quantity=Quantity(i["quantity"]),
                unit_price=Money(Decimal(i["unit_price"]), i.get("currency", "SGD")),
            )
            for i in raw["items"]
        ]
        return Order(
            id=raw["id"],
            customer_username=raw["customer_username"],
            items=items,
            status=OrderStatus(raw["status"]),
            created_at=datetime.fromisoformat(raw["created_at"]),
        )
