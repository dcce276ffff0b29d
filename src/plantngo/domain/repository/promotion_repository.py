"""Abstract repository for Promotion."""

from __future__ import annotations

from abc import ABC, abstractmethod

from plantngo.domain.model.promotion import Promotion


class PromotionRepository(ABC):

    @abstractmethod
    def get_by_id(self, promotion_id: int) -> Promotion | None:
        """Return a promotion by ID, or None."""

    @abstractmethod
    def get_by_promocode(self, promocode: str) -> Promotion | None:
        """Return a promotion by its promocode, or None."""

    @abstractmethod
    def list_all(self) -> list[Promotion]:
        """Return every promotion."""

    @abstractmethod
    def list_by_merchant(self, merchant_username: str) -> list[Promotion]:
        """Return the promotions run by a merchant."""

    @abstractmethod
    def save(self, promotion: Promotion) -> None:
        """Persist a new or updated promotion, assigning an ID if needed."""

    @abstractmethod
    def delete(self, promotion: Promotion) -> None:
        """Remove a promotion."""
