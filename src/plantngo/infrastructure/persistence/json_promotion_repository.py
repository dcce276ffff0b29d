"""JSON-file-backed implementation of PromotionRepository."""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from pathlib import Path

from plantngo.domain.model.promotion import Promotion
from plantngo.domain.model.value_objects import ActivationWindow
from plantngo.domain.repository.promotion_repository import PromotionRepository
from plantngo.infrastructure.persistence.json_file import JsonFile


class JsonPromotionRepository(PromotionRepository):

    def __init__(self, file_path: Path) -> None:
        self._file = JsonFile(file_path)

    def get_by_id(self, promotion_id: int) -> Promotion | None:
        for raw in self._file.load_raw():
            if raw["id"] == promotion_id:
                return self._to_domain(raw)
        return None

    def get_by_promocode(self, promocode: str) -> Promotion | None:
        for raw in self._file.load_raw():
            if raw["promocode"] == promocode:
                return self._to_domain(raw)
        return None

    def list_all(self) -> list[Promotion]:
        return [self._to_domain(raw) for raw in self._file.load_raw()]

    def list_by_merchant(self, merchant_username: str) -> list[Promotion]:
        return [p for p in self.list_all() if p.merchant_username == merchant_username]

    def save(self, promotion: Promotion) -> None:
        records = self._file.load_raw()
        if promotion.id is None:
            promotion.id = JsonFile.next_id(records)
        self._file.upsert(records, self._to_raw(promotion), key="id")

    def delete(self, promotion: Promotion) -> None:
        self._file.remove("id", promotion.id)

    @staticmethod
    def _to_raw(promotion: Promotion) -> dict:
        return {
            "id": promotion.id,
            "merchant_username": promotion.merchant_username,
            "promocode": promotion.promocode,
            "promo_value": str(promotion.promo_value),
            "start": promotion.window.start.isoformat(),
            "end": promotion.window.end.isoformat(),
            "product_ids": list(promotion.product_ids),
            "url": promotion.url,
        }

    @staticmethod
    def _to_domain(raw: dict) -> Promotion:
        return Promotion(
            id=raw["id"],
            merchant_username=raw["merchant_username"],
            promocode=raw["promocode"],
            promo_value=Decimal(raw["promo_value"]),
            window=ActivationWindow(
                datetime.fromisoformat(raw["start"]),
                datetime.fromisoformat(raw["end"]),
            ),
            product_ids=raw.get("product_ids", []),
            url=raw.get("url"),
        )
