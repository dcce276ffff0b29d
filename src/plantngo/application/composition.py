"""Lookups shared by the product composition use cases."""

from __future__ import annotations

from plantngo.domain.exceptions import EntityNotFoundError
from plantngo.domain.model.ingredient import Ingredient
from plantngo.domain.model.product import Product
from plantngo.domain.repository.ingredient_repository import IngredientRepository
from plantngo.domain.repository.product_repository import ProductRepository


def load_product_and_ingredient(
    product_repo: ProductRepository,
    ingredient_repo: IngredientRepository,
    product_id: int,
    ingredient_name: str,
) -> tuple[Product, Ingredient]:
    product = product_repo.get_by_id(product_id)
    if product is None:
        raise EntityNotFoundError("Product")
    ingredient = ingredient_repo.get_by_name(ingredient_name)
    if ingredient is None:
        raise EntityNotFoundError("Ingredient")
    return product, ingredient
