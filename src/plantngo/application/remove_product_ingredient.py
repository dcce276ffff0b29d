"""Application service: Remove Ingredient from Product use case.

The association must exist both in storage and in the product's loaded
composition; a mismatch means the caller is working from stale state.
"""

from __future__ import annotations

import structlog

from plantngo.application.composition import load_product_and_ingredient
from plantngo.domain.exceptions import EntityNotFoundError
from plantngo.domain.repository.account_repository import MerchantRepository
from plantngo.domain.repository.ingredient_repository import IngredientRepository
from plantngo.domain.repository.product_repository import (
    ProductIngredientRepository,
    ProductRepository,
)
from plantngo.domain.service.carbon_footprint_service import CarbonFootprintService

logger = structlog.get_logger(__name__)


class RemoveProductIngredientHandler:

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

    def handle(self, product_id: int, ingredient_name: str) -> None:
        product, ingredient = load_product_and_ingredient(
            self._product_repo, self._ingredient_repo, product_id, ingredient_name
        )
        association = self._association_repo.get(product.id, ingredient.name)  # type: ignore[arg-type]
        if association is None or not product.has_ingredient(ingredient.name):
            raise EntityNotFoundError("Product Ingredient")

        # Phase 1
        composition = {
            name: pi
            for name, pi in product.product_ingredients.items()
            if name != ingredient.name
        }
        footprint = self._footprint.recalculate(product, composition.values())

        # Phase 2
        product.remove_ingredient(ingredient.name)
        self._association_repo.delete(association)
        self._footprint.commit(product, footprint)

        logger.info(
            "product_ingredient_removed",
            product_id=product.id,
            ingredient=ingredient.name,
            carbon_emission=str(product.carbon_emission),
        )
