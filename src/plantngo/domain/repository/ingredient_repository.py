"""Abstract repository for Ingredient reference data."""

from __future__ import annotations

from abc import ABC, abstractmethod

from plantngo.domain.model.ingredient import Ingredient


class IngredientRepository(ABC):

    @abstractmethod
    def get_by_name(self, name: str) -> Ingredient | None:
        """Return an ingredient by name (case-insensitive), or None."""

    @abstractmethod
    def list_all(self) -> list[Ingredient]:
        """Return every ingredient."""

    @abstractmethod
    def save(self, ingredient: Ingredient) -> None:
        """Persist an ingredient."""
