"""Application service: Add Ingredient to Product use case.

Creates the association, then re-derives the product's carbon emission
and its merchant's carbon rating in the same call.
"""

from __future__ import annotations

from decimal import Decimal

import structlog

from plantngo.application.composition import load_product_and_ingredient
from plantngo.domain.exceptions import AlreadyExistsError
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


class AddProductIngredientHandler:

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
        product, ingredient = load_product_and_ingredient(
            self._product_repo, self._ingredient_repo, product_id, ingredient_name
        )
        if self._association_repo.exists(product.id, ingredient.name):  # type: ignore[arg-type]
            raise AlreadyExistsError("Product Ingredient")

        association = ProductIngredient(
            product_id=product.id,  # type: ignore[arg-type]
            ingredient=ingredient,
            serving_qty=to_decimal(serving_qty, "serving quantity"),
        )

        # Phase 1: compute against the would-be composition
        composition = [*product.product_ingredients.values(), association]
        footprint = self._footprint.recalculate(product, composition)

        # Phase 2: mutate and persist
        product.add_ingredient(association)
        self._association_repo.save(association)
        self._footprint.commit(product, footprint)

        logger.info(
            "product_ingredient_added",
            product_id=product.id,
            ingredient=ingredient.name,
            serving_qty=str(association.serving_qty),
            carbon_emission=str(product.carbon_emission),
        )
        return association
