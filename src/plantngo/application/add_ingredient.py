"""Application service: Add Ingredient use case."""

from __future__ import annotations

from decimal import Decimal

import structlog

from plantngo.domain.exceptions import AlreadyExistsError
from plantngo.domain.model.ingredient import Ingredient
from plantngo.domain.model.value_objects import to_decimal
from plantngo.domain.repository.ingredient_repository import IngredientRepository

logger = structlog.get_logger(__name__)


class AddIngredientHandler:

    def __init__(self, ingredient_repo: IngredientRepository) -> None:
        self._ingredient_repo = ingredient_repo

    def handle(self, name: str, emission_per_gram: str | int | Decimal) -> Ingredient:
        if self._ingredient_repo.get_by_name(name.strip()) is not None:
            raise AlreadyExistsError("Ingredient")

        ingredient = Ingredient(
            name=name.strip(),
            emission_per_gram=to_decimal(emission_per_gram, "emission per gram"),
        )
        self._ingredient_repo.save(ingredient)
        logger.info(
            "ingredient_added",
            ingredient=ingredient.name,
            emission_per_gram=str(ingredient.emission_per_gram),
        )
        return ingredient


class ShowIngredientsHandler:

    def __init__(self, ingredient_repo: IngredientRepository) -> None:
        self._ingredient_repo = ingredient_repo

    def handle(self) -> list[Ingredient]:
        return sorted(self._ingredient_repo.list_all(), key=lambda i: i.name.lower())
