"""Promotion: a merchant's promocode discount across selected products."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal

from plantngo.domain.exceptions import ValidationError
from plantngo.domain.model.value_objects import ActivationWindow


@dataclass
class Promotion:

    id: int | None
    merchant_username: str
    promocode: str
    promo_value: Decimal
    window: ActivationWindow
    product_ids: list[int] = field(default_factory=list)
    url: str | None = None

    def __post_init__(self) -> None:
        if not self.promocode or not self.promocode.strip():
            raise ValidationError("Promocode is required")
        _check_value(self.promo_value)

    def is_active_at(self, moment: datetime) -> bool:
        return self.window.contains(moment)

    def update(
        self,
        promo_value: Decimal | None = None,
        window: ActivationWindow | None = None,
        url: str | None = None,
    ) -> None:
        if promo_value is not None:
            _check_value(promo_value)
            self.promo_value = promo_value
        if window is not None:
            self.window = window
        if url is not None:
            self.url = url


def _check_value(value: Decimal) -> None:
    if value <= Decimal("0"):
        raise ValidationError("Promotion value must be positive")
