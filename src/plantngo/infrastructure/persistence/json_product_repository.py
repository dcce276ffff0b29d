"""JSON-file-backed implementations of the product repositories.

Products and their ingredient associations share ``products.json``:
each product record embeds its associations together with a snapshot
of the ingredient's emission factor.
"""

from __future__ import annotations

from decimal import Decimal
from pathlib import Path

from plantngo.domain.model.ingredient import Ingredient
from plantngo.domain.model.product import Product, ProductIngredient
from plantngo.domain.model.value_objects import Money
from plantngo.domain.repository.product_repository import (
    ProductIngredientRepository,
    ProductRepository,
)
from plantngo.infrastructure.persistence.json_file import JsonFile


class JsonProductRepository(ProductRepository):

    def __init__(self, file_path: Path) -> None:
        self._file = JsonFile(file_path)

    # --- ProductRepository interface ------------------------------------------

    def get_by_id(self, product_id: int) -> Product | None:
        for raw in self._file.load_raw():
            if raw["id"] == product_id:
                return _to_domain(raw)
        return None

    def list_all(self) -> list[Product]:
        return [_to_domain(raw) for raw in self._file.load_raw()]

    def list_by_merchant(self, merchant_username: str) -> list[Product]:
        return [
            _to_domain(raw)
            for raw in self._file.load_raw()
            if raw["merchant_username"] == merchant_username
        ]

    def save(self, product: Product) -> None:
        records = self._file.load_raw()
        if product.id is None:
            product.id = JsonFile.next_id(records)
            for association in product.product_ingredients.values():
                association.product_id = product.id
        self._file.upsert(records, _to_raw(product), key="id")

    def delete(self, product: Product) -> None:
        # Associations live inside the record, so they go with it.
        self._file.remove("id", product.id)


class JsonProductIngredientRepository(ProductIngredientRepository):

    def __init__(self, file_path: Path) -> None:
        self._file = JsonFile(file_path)

    def get(self, product_id: int, ingredient_name: str) -> ProductIngredient | None:
        for raw in self._file.load_raw():
            if raw["id"] == product_id:
                for entry in raw.get("ingredients", []):
                    if entry["name"] == ingredient_name:
                        return _association_to_domain(product_id, entry)
        return None

    def exists(self, product_id: int, ingredient_name: str) -> bool:
        return self.get(product_id, ingredient_name) is not None

    def list_all(self) -> list[ProductIngredient]:
        return [
            _association_to_domain(raw["id"], entry)
            for raw in self._file.load_raw()
            for entry in raw.get("ingredients", [])
        ]

    def save(self, association: ProductIngredient) -> None:
        records = self._file.load_raw()
        for raw in records:
            if raw["id"] == association.product_id:
                entries = [
                    e for e in raw.get("ingredients", [])
                    if e["name"] != association.ingredient.name
                ]
                entries.append(_association_to_raw(association))
                raw["ingredients"] = entries
                self._file.persist_raw(records)
                return
        raise KeyError(f"No stored product #{association.product_id}")

    def delete(self, association: ProductIngredient) -> None:
        records = self._file.load_raw()
        for raw in records:
            if raw["id"] == association.product_id:
                raw["ingredients"] = [
                    e for e in raw.get("ingredients", [])
                    if e["name"] != association.ingredient.name
                ]
        self._file.persist_raw(records)


# --- Serialization --------------------------------------------------------------


def _association_to_raw(association: ProductIngredient) -> dict:
    return {
        "name": association.ingredient.name,
        "emission_per_gram": str(association.ingredient.emission_per_gram),
        "serving_qty": str(association.serving_qty),
    }


def _association_to_domain(product_id: int, entry: dict) -> ProductIngredient:
    return ProductIngredient(
        product_id=product_id,
        ingredient=Ingredient(
            name=entry["name"],
            emission_per_gram=Decimal(entry["emission_per_gram"]),
        ),
        serving_qty=Decimal(entry["serving_qty"]),
    )


def _to_raw(product: Product) -> dict:
    return {
        "id": product.id,
        "name": product.name,
        "price": str(product.price.amount),
        "currency": product.price.currency,
        "description": product.description,
        "merchant_username": product.merchant_username,
        "category": product.category,
        "carbon_emission": str(product.carbon_emission),
        "image_url": product.image_url,
        "flavour_type": product.flavour_type,
        "ingredients": [
            _association_to_raw(pi) for pi in product.product_ingredients.values()
        ],
    }


def _to_domain(raw: dict) -> Product:
    associations = [
        _association_to_domain(raw["id"], entry) for entry in raw.get("ingredients", [])
    ]
    return Product(
        id=raw["id"],
        name=raw["name"],
        price=Money(Decimal(raw["price"]), raw.get("currency", "SGD")),
        description=raw.get("description", ""),
        merchant_username=raw["merchant_username"],
        category=raw["category"],
        carbon_emission=Decimal(raw.get("carbon_emission", "0")),
        image_url=raw.get("image_url"),
        flavour_type=raw.get("flavour_type"),
        product_ingredients={pi.ingredient.name: pi for pi in associations},
    )
