"""Domain service: Carbon Footprint.

Keeps ``Product.carbon_emission`` and ``Merchant.carbon_rating`` in step
with a product's ingredient associations.

Callers use a two-phase approach so no half-applied change is ever
persisted:
  Phase 1 — ``recalculate()`` reads and computes both derived values
            without touching any entity.  Every failure happens here.
  Phase 2 — the caller mutates the association set, then ``commit()``
            writes both derived values and saves product and merchant.
"""

from __future__ import annotations

import dataclasses
from collections.abc import Iterable
from dataclasses import dataclass
from decimal import Decimal

import structlog

from plantngo.domain.exceptions import EntityNotFoundError
from plantngo.domain.model.merchant import Merchant
from plantngo.domain.model.product import Product, ProductIngredient
from plantngo.domain.repository.account_repository import MerchantRepository
from plantngo.domain.repository.product_repository import ProductRepository
from plantngo.domain.service.emission_aggregator import (
    compute_merchant_rating,
    compute_product_emission,
)

logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class CarbonFootprint:
    """Derived values computed in phase 1, applied in phase 2."""

    carbon_emission: Decimal
    merchant: Merchant
    carbon_rating: Decimal


class CarbonFootprintService:

    def __init__(
        self,
        product_repo: ProductRepository,
        merchant_repo: MerchantRepository,
    ) -> None:
        self._product_repo = product_repo
        self._merchant_repo = merchant_repo

    def merchant_of(self, product: Product) -> Merchant:
        merchant = self._merchant_repo.get_by_username(product.merchant_username)
        if merchant is None:
            raise EntityNotFoundError("Merchant")
        return merchant

    def recalculate(
        self,
        product: Product,
        associations: Iterable[ProductIngredient],
    ) -> CarbonFootprint:
        """Compute the emission and rating that *associations* would produce."""
        emission = compute_product_emission(associations)
        merchant = self.merchant_of(product)

        # The merchant's list with this product's would-be emission in place.
        # The product is always counted, even if storage lags behind.
        preview = dataclasses.replace(product, carbon_emission=emission)
        products: list[Product] = []
        for p in self._product_repo.list_by_merchant(merchant.username):
            products.append(preview if p.id == product.id else p)
        if all(p.id != product.id for p in products):
            products.append(preview)

        rating = compute_merchant_rating(products)
        return CarbonFootprint(
            carbon_emission=emission,
            merchant=merchant,
            carbon_rating=rating,
        )

    def commit(self, product: Product, footprint: CarbonFootprint) -> None:
        product.carbon_emission = footprint.carbon_emission
        footprint.merchant.carbon_rating = footprint.carbon_rating
        self._product_repo.save(product)
        self._merchant_repo.save(footprint.merchant)
        logger.debug(
            "carbon_footprint_committed",
            product_id=product.id,
            carbon_emission=str(footprint.carbon_emission),
            merchant=footprint.merchant.username,
            carbon_rating=str(footprint.carbon_rating),
        )

    def refresh_merchant_rating(self, merchant: Merchant) -> None:
        """Re-derive a merchant's rating from its stored products.

        Used when products are added or removed outright; a merchant left
        with no products gets no rating.
        """
        products = self._product_repo.list_by_merchant(merchant.username)
        merchant.carbon_rating = compute_merchant_rating(products) if products else None
        self._merchant_repo.save(merchant)
