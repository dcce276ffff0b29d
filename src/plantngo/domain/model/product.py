"""Product aggregate and its ingredient associations.

A product owns its ProductIngredient associations (deleting a product
deletes them). ``carbon_emission`` is a derived field: nothing in this
module recomputes it. The CarbonFootprintService sets it explicitly at
the end of every composition change.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal

from plantngo.domain.exceptions import (
    AlreadyExistsError,
    EntityNotFoundError,
    ValidationError,
)
from plantngo.domain.model.ingredient import Ingredient
from plantngo.domain.model.value_objects import Money


@dataclass(eq=False)
class ProductIngredient:
    """A product contains an ingredient at ``serving_qty`` grams.

    Identity is the (product_id, ingredient name) pair, not the object.
    """

    product_id: int
    ingredient: Ingredient
    serving_qty: Decimal

    def __post_init__(self) -> None:
        _check_serving_qty(self.serving_qty)

    @property
    def key(self) -> tuple[int, str]:
        return (self.product_id, self.ingredient.name)

    @property
    def emission(self) -> Decimal:
        return self.serving_qty * self.ingredient.emission_per_gram

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ProductIngredient):
            return NotImplemented
        return self.key == other.key

    def __hash__(self) -> int:
        return hash(self.key)


def _check_serving_qty(serving_qty: Decimal) -> None:
    if not serving_qty.is_finite():
        raise ValidationError(f"Serving quantity must be finite, got {serving_qty}")
    if serving_qty <= Decimal("0"):
        raise ValidationError("Serving quantity must be positive")


@dataclass
class Product:
    """A product in a merchant's catalog.

    ``product_ingredients`` is keyed by ingredient name, so a product can
    hold at most one association per ingredient.
    """

    id: int | None
    name: str
    price: Money
    description: str
    merchant_username: str
    category: str
    carbon_emission: Decimal = Decimal("0")
    image_url: str | None = None
    flavour_type: str | None = None
    product_ingredients: dict[str, ProductIngredient] = field(default_factory=dict)

    # --- Factory (used for NEW products only) ---------------------------------

    @staticmethod
    def create(
        name: str,
        price: Money,
        description: str,
        merchant_username: str,
        category: str,
        image_url: str | None = None,
        flavour_type: str | None = None,
    ) -> Product:
        if not name or not name.strip():
            raise ValidationError("Product name is required")
        if not category or not category.strip():
            raise ValidationError("Product category is required")
        _check_price(price)
        return Product(
            id=None,
            name=name.strip(),
            price=price,
            description=description or "",
            merchant_username=merchant_username,
            category=category.strip(),
            image_url=image_url,
            flavour_type=flavour_type,
        )

    # --- Composition ----------------------------------------------------------

    def has_ingredient(self, ingredient_name: str) -> bool:
        return ingredient_name in self.product_ingredients

    def add_ingredient(self, association: ProductIngredient) -> None:
        if association.product_id != self.id:
            raise ValidationError(
                f"Association belongs to product #{association.product_id}, "
                f"not #{self.id}"
            )
        if self.has_ingredient(association.ingredient.name):
            raise AlreadyExistsError("Product Ingredient")
        self.product_ingredients[association.ingredient.name] = association

    def replace_serving_qty(self, ingredient_name: str, serving_qty: Decimal) -> ProductIngredient:
        """Swap in a fresh association carrying the new serving quantity."""
        current = self.product_ingredients.get(ingredient_name)
        if current is None:
            raise EntityNotFoundError("Product Ingredient")
        updated = ProductIngredient(
            product_id=current.product_id,
            ingredient=current.ingredient,
            serving_qty=serving_qty,
        )
        del self.product_ingredients[ingredient_name]
        self.product_ingredients[ingredient_name] = updated
        return updated

    def remove_ingredient(self, ingredient_name: str) -> ProductIngredient:
        association = self.product_ingredients.pop(ingredient_name, None)
        if association is None:
            raise EntityNotFoundError("Product Ingredient")
        return association

    # --- Details --------------------------------------------------------------

    def update_details(
        self,
        name: str | None = None,
        price: Money | None = None,
        description: str | None = None,
        image_url: str | None = None,
        flavour_type: str | None = None,
    ) -> None:
        """Apply a partial update; ``None`` leaves a field untouched."""
        if name is not None:
            if not name.strip():
                raise ValidationError("Product name is required")
            self.name = name.strip()
        if price is not None:
            _check_price(price)
            self.price = price
        if description is not None:
            self.description = description
        if image_url is not None:
            self.image_url = image_url
        if flavour_type is not None:
            self.flavour_type = flavour_type


def _check_price(price: Money) -> None:
    if price.amount <= 0:
        raise ValidationError("Product price must be greater than zero")
