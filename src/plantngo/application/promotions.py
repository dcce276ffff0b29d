"""Application services: Promotion use cases."""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal

import structlog

from plantngo.application.clock import Clock, utc_now
from plantngo.domain.exceptions import (
    AlreadyExistsError,
    EntityNotFoundError,
    ValidationError,
)
from plantngo.domain.model.promotion import Promotion
from plantngo.domain.model.value_objects import ActivationWindow, to_decimal
from plantngo.domain.repository.account_repository import MerchantRepository
from plantngo.domain.repository.product_repository import ProductRepository
from plantngo.domain.repository.promotion_repository import PromotionRepository

logger = structlog.get_logger(__name__)


class AddPromotionHandler:

    def __init__(
        self,
        promotion_repo: PromotionRepository,
        merchant_repo: MerchantRepository,
        product_repo: ProductRepository,
    ) -> None:
        self._promotion_repo = promotion_repo
        self._merchant_repo = merchant_repo
        self._product_repo = product_repo

    def handle(
        self,
        merchant_username: str,
        promocode: str,
        promo_value: str | int | Decimal,
        start: datetime,
        end: datetime,
        product_ids: list[int] | None = None,
        url: str | None = None,
    ) -> Promotion:
        merchant = self._merchant_repo.get_by_username(merchant_username)
        if merchant is None:
            raise EntityNotFoundError("Merchant")
        if self._promotion_repo.get_by_promocode(promocode.strip()) is not None:
            raise AlreadyExistsError("Promotion")

        # Every promoted product must be one of the merchant's own.
        owned = {p.id for p in self._product_repo.list_by_merchant(merchant.username)}
        for product_id in product_ids or []:
            if product_id not in owned:
                raise ValidationError(
                    f"Product #{product_id} is not sold by {merchant.username}"
                )

        promotion = Promotion(
            id=None,
            merchant_username=merchant.username,
            promocode=promocode.strip(),
            promo_value=to_decimal(promo_value, "promotion value"),
            window=ActivationWindow(start, end),
            product_ids=list(product_ids or []),
            url=url,
        )
        self._promotion_repo.save(promotion)
        logger.info(
            "promotion_added",
            promotion_id=promotion.id,
            promocode=promotion.promocode,
            merchant=merchant.username,
        )
        return promotion


class UpdatePromotionHandler:

    def __init__(self, promotion_repo: PromotionRepository) -> None:
        self._promotion_repo = promotion_repo

    def handle(
        self,
        promotion_id: int,
        promo_value: str | int | Decimal | None = None,
        start: datetime | None = None,
        end: datetime | None = None,
        url: str | None = None,
    ) -> Promotion:
        promotion = self._promotion_repo.get_by_id(promotion_id)
        if promotion is None:
            raise EntityNotFoundError("Promotion")

        window = None
        if start is not None or end is not None:
            window = ActivationWindow(
                start if start is not None else promotion.window.start,
                end if end is not None else promotion.window.end,
            )
        promotion.update(
            promo_value=(
                to_decimal(promo_value, "promotion value")
                if promo_value is not None
                else None
            ),
            window=window,
            url=url,
        )
        self._promotion_repo.save(promotion)
        logger.info("promotion_updated", promotion_id=promotion.id)
        return promotion


class DeletePromotionHandler:

    def __init__(self, promotion_repo: PromotionRepository) -> None:
        self._promotion_repo = promotion_repo

    def handle(self, promotion_id: int) -> None:
        promotion = self._promotion_repo.get_by_id(promotion_id)
        if promotion is None:
            raise EntityNotFoundError("Promotion")
        self._promotion_repo.delete(promotion)
        logger.info("promotion_deleted", promotion_id=promotion_id)


class ShowPromotionsHandler:

    def __init__(self, promotion_repo: PromotionRepository, clock: Clock = utc_now) -> None:
        self._promotion_repo = promotion_repo
        self._clock = clock

    def all(self) -> list[Promotion]:
        return self._promotion_repo.list_all()

    def get(self, promotion_id: int) -> Promotion:
        promotion = self._promotion_repo.get_by_id(promotion_id)
        if promotion is None:
            raise EntityNotFoundError("Promotion")
        return promotion

    def by_promocode(self, promocode: str) -> Promotion:
        promotion = self._promotion_repo.get_by_promocode(promocode)
        if promotion is None:
            raise EntityNotFoundError("Promotion")
        return promotion

    def by_merchant(self, merchant_username: str) -> list[Promotion]:
        return self._promotion_repo.list_by_merchant(merchant_username)

    def active(self) -> list[Promotion]:
        now = self._clock()
        return [p for p in self._promotion_repo.list_all() if p.is_active_at(now)]
