"""Application service: Update Product Ingredient use case."""

from __future__ import annotations

from decimal import Decimal

import structlog

from plantngo.application.composition import load_product_and_ingredient
from plantngo.domain.exceptions import EntityNotFoundError
from plantngo.domain.model.product import ProductIngredient
from plantngo.domain.model.value_objects import to_decimal
from plantngo.domain.repository.account_repository import MerchantRepository
from plantngo.domain.repository.ingredient_repository import IngredientRepository
from plantngo.domain.repository.product_repository import (
    ProductIngredientRepository,
    ProductRepository,
)
from plantngo.domain.service.carbon_footprint_service import CarbonFootprintService

logger = structlog.get_logger(__name__)


class UpdateProductIngredientHandler:

    def __init__(
        self,
        product_repo: ProductRepository,
        ingredient_repo: IngredientRepository,
        association_repo: ProductIngredientRepository,
        merchant_repo: MerchantRepository,
    ) -> None:
        self._product_repo = product_repo
        self._ingredient_repo = ingredient_repo
        self._association_repo = association_repo
        self._footprint = CarbonFootprintService(product_repo, merchant_repo)

    def handle(
        self,
        product_id: int,
        ingredient_name: str,
        serving_qty: str | int | Decimal,
    ) -> ProductIngredient:
        """Change the serving quantity of an existing association."""
        product, ingredient = load_product_and_ingredient(
            self._product_repo, self._ingredient_repo, product_id, ingredient_name
        )
        existing = self._association_repo.get(product.id, ingredient.name)  # type: ignore[arg-type]
        if existing is None:
            raise EntityNotFoundError("Product Ingredient")

        updated = ProductIngredient(
            product_id=existing.product_id,
            ingredient=existing.ingredient,
            serving_qty=to_decimal(serving_qty, "serving quantity"),
        )

        # Phase 1: compute with the replacement in place of the old entry
        composition = {**product.product_ingredients, ingredient.name: updated}
        footprint = self._footprint.recalculate(product, composition.values())

        # Phase 2: mutate and persist
        if product.has_ingredient(ingredient.name):
            updated = product.replace_serving_qty(ingredient.name, updated.serving_qty)
        else:
            product.add_ingredient(updated)
        self._association_repo.save(updated)
        self._footprint.commit(product, footprint)

        logger.info(
            "product_ingredient_updated",
            product_id=product.id,
            ingredient=ingredient.name,
            serving_qty=str(updated.serving_qty),
            carbon_emission=str(product.carbon_emission),
        )
        return updated
