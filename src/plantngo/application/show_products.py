"""Application service: product read accessors (queries)."""

from __future__ import annotations

from plantngo.application.dto import ProductDTO, to_product_dto
from plantngo.domain.exceptions import EntityNotFoundError
from plantngo.domain.model.product import ProductIngredient
from plantngo.domain.repository.product_repository import (
    ProductIngredientRepository,
    ProductRepository,
)


class ShowProductsHandler:

    def __init__(
        self,
        product_repo: ProductRepository,
        association_repo: ProductIngredientRepository,
    ) -> None:
        self._product_repo = product_repo
        self._association_repo = association_repo

    def get_product(self, product_id: int) -> ProductDTO:
        product = self._product_repo.get_by_id(product_id)
        if product is None:
            raise EntityNotFoundError("Product")
        return to_product_dto(product)

    def get_all_products(self) -> list[ProductDTO]:
        return [to_product_dto(p) for p in self._product_repo.list_all()]

    def get_products_by_merchant(self, merchant_username: str) -> list[ProductDTO]:
        """A merchant's products, lowest carbon emission first."""
        products = sorted(
            self._product_repo.list_by_merchant(merchant_username),
            key=lambda p: p.carbon_emission,
        )
        return [to_product_dto(p) for p in products]

    def get_all_product_ingredients(self) -> list[ProductIngredient]:
        return self._association_repo.list_all()
