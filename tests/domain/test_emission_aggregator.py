"""Unit tests for the Emission Aggregator."""

from decimal import Decimal

import pytest

from plantngo.domain.exceptions import InvalidStateError
from plantngo.domain.model.ingredient import Ingredient
from plantngo.domain.model.product import Product, ProductIngredient
from plantngo.domain.model.value_objects import Money
from plantngo.domain.service.emission_aggregator import (
    compute_merchant_rating,
    compute_product_emission,
)

FLOUR = Ingredient("Flour", Decimal("0.5"))
SUGAR = Ingredient("Sugar", Decimal("0.2"))
MILK = Ingredient("Milk", Decimal("0.1"))


def _assoc(ingredient: Ingredient, grams: str) -> ProductIngredient:
    return ProductIngredient(product_id=1, ingredient=ingredient, serving_qty=Decimal(grams))


def _product(product_id: int, emission: str) -> Product:
    return Product(
        id=product_id,
        name=f"Product {product_id}",
        price=Money.of("5.00"),
        description="",
        merchant_username="greengrocer",
        category="Bakery",
        carbon_emission=Decimal(emission),
    )


class TestComputeProductEmission:

    def test_empty_composition_is_zero(self):
        assert compute_product_emission([]) == Decimal("0")

    def test_sums_serving_times_factor(self):
        associations = [_assoc(FLOUR, "100"), _assoc(SUGAR, "50")]
        assert compute_product_emission(associations) == Decimal("60.0")

    def test_adding_milk(self):
        associations = [_assoc(FLOUR, "100"), _assoc(SUGAR, "50"), _assoc(MILK, "200")]
        assert compute_product_emission(associations) == Decimal("80.0")

    def test_accepts_any_iterable_without_mutating_it(self):
        associations = {"Flour": _assoc(FLOUR, "100"), "Sugar": _assoc(SUGAR, "50")}
        before = dict(associations)
        compute_product_emission(associations.values())
        assert associations == before
        assert associations["Flour"].serving_qty == Decimal("100")

    def test_decimal_arithmetic_is_exact(self):
        associations = [_assoc(Ingredient("Salt", Decimal("0.1")), "3")]
        assert compute_product_emission(associations) == Decimal("0.3")


class TestComputeMerchantRating:

    def test_single_product(self):
        assert compute_merchant_rating([_product(1, "80.0")]) == Decimal("80.0")

    def test_mean_of_products(self):
        products = [_product(1, "60"), _product(2, "20"), _product(3, "10")]
        assert compute_merchant_rating(products) == Decimal("30")

    def test_empty_list_fails(self):
        with pytest.raises(InvalidStateError):
            compute_merchant_rating([])
