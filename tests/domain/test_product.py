"""Unit tests for the Product aggregate and its ingredient associations."""

from decimal import Decimal

import pytest

from plantngo.domain.exceptions import (
    AlreadyExistsError,
    EntityNotFoundError,
    ValidationError,
)
from plantngo.domain.model.ingredient import Ingredient
from plantngo.domain.model.product import Product, ProductIngredient
from plantngo.domain.model.value_objects import Money

OATS = Ingredient("Oats", Decimal("0.3"))


def _product() -> Product:
    return Product(
        id=7,
        name="Granola",
        price=Money.of("6.00"),
        description="Crunchy",
        merchant_username="greengrocer",
        category="Breakfast",
    )


class TestIngredient:

    def test_negative_emission_rejected(self):
        with pytest.raises(ValidationError, match="cannot be negative"):
            Ingredient("Oats", Decimal("-0.1"))

    def test_blank_name_rejected(self):
        with pytest.raises(ValidationError, match="name is required"):
            Ingredient("  ", Decimal("0.1"))

    def test_zero_emission_allowed(self):
        assert Ingredient("Water", Decimal("0")).emission_per_gram == 0

    @pytest.mark.parametrize("factor", ["NaN", "Infinity"])
    def test_non_finite_emission_rejected(self, factor):
        with pytest.raises(ValidationError, match="must be finite"):
            Ingredient("Beef", Decimal(factor))


class TestProductIngredient:

    @pytest.mark.parametrize("grams", ["0", "-5"])
    def test_serving_qty_must_be_positive(self, grams):
        with pytest.raises(ValidationError, match="Serving quantity must be positive"):
            ProductIngredient(product_id=7, ingredient=OATS, serving_qty=Decimal(grams))

    @pytest.mark.parametrize("grams", ["NaN", "Infinity"])
    def test_serving_qty_must_be_finite(self, grams):
        with pytest.raises(ValidationError, match="must be finite"):
            ProductIngredient(product_id=7, ingredient=OATS, serving_qty=Decimal(grams))

    def test_identity_is_the_pair(self):
        a = ProductIngredient(product_id=7, ingredient=OATS, serving_qty=Decimal("10"))
        b = ProductIngredient(product_id=7, ingredient=OATS, serving_qty=Decimal("99"))
        assert a == b
        assert len({a, b}) == 1

    def test_emission(self):
        a = ProductIngredient(product_id=7, ingredient=OATS, serving_qty=Decimal("40"))
        assert a.emission == Decimal("12.0")


class TestProductCreate:

    def test_new_product_has_no_id_and_zero_emission(self):
        product = Product.create(
            name=" Granola ",
            price=Money.of("6"),
            description="",
            merchant_username="greengrocer",
            category="Breakfast",
        )
        assert product.id is None
        assert product.name == "Granola"
        assert product.carbon_emission == Decimal("0")
        assert product.product_ingredients == {}

    def test_zero_price_rejected(self):
        with pytest.raises(ValidationError, match="greater than zero"):
            Product.create("Free lunch", Money.of("0"), "", "greengrocer", "Mains")

    def test_category_required(self):
        with pytest.raises(ValidationError, match="category is required"):
            Product.create("Granola", Money.of("6"), "", "greengrocer", "")


class TestProductComposition:

    def test_add_ingredient(self):
        product = _product()
        product.add_ingredient(ProductIngredient(7, OATS, Decimal("40")))
        assert product.has_ingredient("Oats")

    def test_add_does_not_touch_emission(self):
        product = _product()
        product.add_ingredient(ProductIngredient(7, OATS, Decimal("40")))
        assert product.carbon_emission == Decimal("0")

    def test_duplicate_rejected(self):
        product = _product()
        product.add_ingredient(ProductIngredient(7, OATS, Decimal("40")))
        with pytest.raises(AlreadyExistsError, match="Product Ingredient already exists"):
            product.add_ingredient(ProductIngredient(7, OATS, Decimal("10")))
        assert product.product_ingredients["Oats"].serving_qty == Decimal("40")

    def test_association_for_other_product_rejected(self):
        with pytest.raises(ValidationError, match="belongs to product #8"):
            _product().add_ingredient(ProductIngredient(8, OATS, Decimal("40")))

    def test_replace_serving_qty(self):
        product = _product()
        product.add_ingredient(ProductIngredient(7, OATS, Decimal("40")))
        updated = product.replace_serving_qty("Oats", Decimal("55"))
        assert updated.serving_qty == Decimal("55")
        assert product.product_ingredients["Oats"] is updated

    def test_replace_missing_raises(self):
        with pytest.raises(EntityNotFoundError, match="Product Ingredient not found"):
            _product().replace_serving_qty("Oats", Decimal("5"))

    def test_remove_ingredient(self):
        product = _product()
        product.add_ingredient(ProductIngredient(7, OATS, Decimal("40")))
        removed = product.remove_ingredient("Oats")
        assert removed.ingredient == OATS
        assert not product.has_ingredient("Oats")

    def test_remove_missing_raises(self):
        with pytest.raises(EntityNotFoundError):
            _product().remove_ingredient("Oats")


class TestUpdateDetails:

    def test_partial_update(self):
        product = _product()
        product.update_details(price=Money.of("7.25"), flavour_type="Sweet")
        assert product.price == Money.of("7.25")
        assert product.flavour_type == "Sweet"
        assert product.name == "Granola"

    def test_blank_name_rejected(self):
        with pytest.raises(ValidationError, match="name is required"):
            _product().update_details(name=" ")
