"""JSON-file-backed implementation of IngredientRepository."""

from __future__ import annotations

from decimal import Decimal
from pathlib import Path

from plantngo.domain.model.ingredient import Ingredient
from plantngo.domain.repository.ingredient_repository import IngredientRepository
from plantngo.infrastructure.persistence.json_file import JsonFile


class JsonIngredientRepository(IngredientRepository):

    def __init__(self, file_path: Path) -> None:
        self._file = JsonFile(file_path)

    def get_by_name(self, name: str) -> Ingredient | None:
        for raw in self._file.load_raw():
            if raw["name"].lower() == name.lower():
                return self._to_domain(raw)
        return None

    def list_all(self) -> list[Ingredient]:
        return [self._to_domain(raw) for raw in self._file.load_raw()]

    def save(self, ingredient: Ingredient) -> None:
        self._file.upsert(
            self._file.load_raw(),
            {
                "name": ingredient.name,
                "emission_per_gram": str(ingredient.emission_per_gram),
            },
            key="name",
        )

    @staticmethod
    def _to_domain(raw: dict) -> Ingredient:
        return Ingredient(
            name=raw["name"],
            emission_per_gram=Decimal(raw["emission_per_gram"]),
        )
