"""Abstract repositories for products and their ingredient associations.

Defined in the domain layer so the domain never depends on
infrastructure. Concrete implementations (JSON, in-memory) live
elsewhere.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from plantngo.domain.model.product import Product, ProductIngredient


class ProductRepository(ABC):

    @abstractmethod
    def get_by_id(self, product_id: int) -> Product | None:
        """Return a product by its ID, or None if not found."""

    @abstractmethod
    def list_all(self) -> list[Product]:
        """Return every product."""

    @abstractmethod
    def list_by_merchant(self, merchant_username: str) -> list[Product]:
        """Return the products owned by a merchant."""

    @abstractmethod
    def save(self, product: Product) -> None:
        """Persist a new or updated product, assigning an ID if needed."""

    @abstractmethod
    def delete(self, product: Product) -> None:
        """Remove a product together with its ingredient associations."""


class ProductIngredientRepository(ABC):

    @abstractmethod
    def get(self, product_id: int, ingredient_name: str) -> ProductIngredient | None:
        """Return the association for the pair, or None."""

    @abstractmethod
    def exists(self, product_id: int, ingredient_name: str) -> bool:
        """True if the pair already has an association."""

    @abstractmethod
    def list_all(self) -> list[ProductIngredient]:
        """Return every association across all products."""

    @abstractmethod
    def save(self, association: ProductIngredient) -> None:
        """Persist a new or updated association."""

    @abstractmethod
    def delete(self, association: ProductIngredient) -> None:
        """Remove an association."""
