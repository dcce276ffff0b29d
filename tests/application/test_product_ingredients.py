"""Integration tests for the product composition use cases.

Uses in-memory fake repositories, no file I/O.
"""

from decimal import Decimal

import pytest

from plantngo.application.add_product_ingredient import AddProductIngredientHandler
from plantngo.application.remove_product_ingredient import (
    RemoveProductIngredientHandler,
)
from plantngo.application.update_product_ingredient import (
    UpdateProductIngredientHandler,
)
from plantngo.domain.exceptions import (
    AlreadyExistsError,
    EntityNotFoundError,
    ValidationError,
)
from plantngo.domain.model.ingredient import Ingredient
from plantngo.domain.model.merchant import Merchant
from plantngo.domain.model.product import Product, ProductIngredient
from plantngo.domain.model.value_objects import Money
from tests.fakes import (
    FakeIngredientRepository,
    FakeMerchantRepository,
    FakeProductIngredientRepository,
    FakeProductRepository,
)

FLOUR = Ingredient("Flour", Decimal("0.5"))
SUGAR = Ingredient("Sugar", Decimal("0.2"))
MILK = Ingredient("Milk", Decimal("0.1"))


class World:
    """Merchant M owning product P = {Flour 100g, Sugar 50g} (emission 60)."""

    def __init__(self, extra_products: list[Product] | None = None) -> None:
        self.merchant = Merchant("greengrocer", "shop@example.com", "Green Grocer")
        self.product = Product(
            id=1,
            name="Pancake",
            price=Money.of("4.50"),
            description="Fluffy",
            merchant_username="greengrocer",
            category="Bakery",
        )
        seeded = [
            ProductIngredient(1, FLOUR, Decimal("100")),
            ProductIngredient(1, SUGAR, Decimal("50")),
        ]
        for association in seeded:
            self.product.add_ingredient(association)
        self.product.carbon_emission = Decimal("60.0")
        self.merchant.carbon_rating = Decimal("60.0")

        self.associations = FakeProductIngredientRepository(seeded)
        self.products = FakeProductRepository(
            [self.product, *(extra_products or [])], self.associations
        )
        self.ingredients = FakeIngredientRepository([FLOUR, SUGAR, MILK])
        self.merchants = FakeMerchantRepository([self.merchant])

    def _args(self):
        return (self.products, self.ingredients, self.associations, self.merchants)

    def add(self) -> AddProductIngredientHandler:
        return AddProductIngredientHandler(*self._args())

    def update(self) -> UpdateProductIngredientHandler:
        return UpdateProductIngredientHandler(*self._args())

    def remove(self) -> RemoveProductIngredientHandler:
        return RemoveProductIngredientHandler(*self._args())


class TestAddProductIngredient:

    def test_adding_milk_raises_emission_to_80(self):
        world = World()
        association = world.add().handle(1, "Milk", "200")

        assert association.serving_qty == Decimal("200")
        assert association.ingredient == MILK
        assert world.product.carbon_emission == Decimal("80.0")

    def test_only_product_sets_merchant_rating(self):
        world = World()
        world.add().handle(1, "Milk", 200)
        assert world.merchant.carbon_rating == Decimal("80.0")

    def test_rating_is_mean_over_all_merchant_products(self):
        other = Product(
            id=2,
            name="Salad",
            price=Money.of("6.00"),
            description="",
            merchant_username="greengrocer",
            category="Mains",
            carbon_emission=Decimal("20"),
        )
        world = World(extra_products=[other])
        world.add().handle(1, "Milk", "200")
        # (80 + 20) / 2
        assert world.merchant.carbon_rating == Decimal("50")

    def test_association_is_persisted(self):
        world = World()
        world.add().handle(1, "Milk", "200")
        assert world.associations.exists(1, "Milk")
        assert world.product.has_ingredient("Milk")

    def test_ingredient_lookup_is_case_insensitive(self):
        world = World()
        association = world.add().handle(1, "milk", "200")
        assert association.ingredient.name == "Milk"
        assert world.product.has_ingredient("Milk")

    def test_unknown_product(self):
        world = World()
        with pytest.raises(EntityNotFoundError, match="Product not found") as exc_info:
            world.add().handle(99, "Milk", "200")
        assert exc_info.value.entity == "Product"

    def test_unknown_ingredient(self):
        world = World()
        with pytest.raises(EntityNotFoundError, match="Ingredient not found"):
            world.add().handle(1, "Saffron", "1")

    def test_duplicate_pair_rejected_and_state_unchanged(self):
        world = World()
        with pytest.raises(AlreadyExistsError, match="Product Ingredient already exists"):
            world.add().handle(1, "Flour", "300")

        assert world.product.product_ingredients["Flour"].serving_qty == Decimal("100")
        assert world.associations.get(1, "Flour").serving_qty == Decimal("100")
        assert world.product.carbon_emission == Decimal("60.0")
        assert world.merchant.carbon_rating == Decimal("60.0")

    def test_non_positive_serving_rejected(self):
        world = World()
        with pytest.raises(ValidationError, match="must be positive"):
            world.add().handle(1, "Milk", "0")
        assert not world.product.has_ingredient("Milk")

    @pytest.mark.parametrize("grams", ["NaN", "Infinity"])
    def test_non_finite_serving_rejected_and_state_unchanged(self, grams):
        world = World()
        with pytest.raises(ValidationError, match="Invalid serving quantity"):
            world.add().handle(1, "Milk", grams)

        assert not world.product.has_ingredient("Milk")
        assert world.product.carbon_emission == Decimal("60.0")
        assert world.merchant.carbon_rating == Decimal("60.0")

    def test_missing_merchant_leaves_product_untouched(self):
        world = World()
        world.merchants = FakeMerchantRepository([])
        with pytest.raises(EntityNotFoundError, match="Merchant not found"):
            world.add().handle(1, "Milk", "200")

        assert not world.product.has_ingredient("Milk")
        assert not world.associations.exists(1, "Milk")
        assert world.product.carbon_emission == Decimal("60.0")


class TestUpdateProductIngredient:

    def test_changing_serving_recomputes_both_fields(self):
        world = World()
        updated = world.update().handle(1, "Sugar", "150")

        assert updated.serving_qty == Decimal("150")
        # 100 × 0.5 + 150 × 0.2
        assert world.product.carbon_emission == Decimal("80.0")
        assert world.merchant.carbon_rating == Decimal("80.0")
        assert world.associations.get(1, "Sugar").serving_qty == Decimal("150")

    def test_association_set_keeps_one_entry_per_ingredient(self):
        world = World()
        world.update().handle(1, "Sugar", "150")
        assert sorted(world.product.product_ingredients) == ["Flour", "Sugar"]

    def test_nonexistent_pair_rejected_and_state_unchanged(self):
        world = World()
        with pytest.raises(EntityNotFoundError, match="Product Ingredient not found"):
            world.update().handle(1, "Milk", "10")

        assert not world.product.has_ingredient("Milk")
        assert world.product.carbon_emission == Decimal("60.0")
        assert world.merchant.carbon_rating == Decimal("60.0")

    def test_unknown_product(self):
        with pytest.raises(EntityNotFoundError, match="Product not found"):
            World().update().handle(5, "Sugar", "10")

    def test_invalid_serving_leaves_old_value(self):
        world = World()
        with pytest.raises(ValidationError):
            world.update().handle(1, "Sugar", "-1")
        assert world.product.product_ingredients["Sugar"].serving_qty == Decimal("50")


class TestRemoveProductIngredient:

    def test_removing_restores_previous_values(self):
        world = World()
        world.add().handle(1, "Milk", "200")
        world.remove().handle(1, "Milk")

        assert world.product.carbon_emission == Decimal("60.0")
        assert world.merchant.carbon_rating == Decimal("60.0")
        assert not world.product.has_ingredient("Milk")
        assert not world.associations.exists(1, "Milk")

    def test_add_then_remove_round_trip_is_exact(self):
        world = World()
        before = world.product.carbon_emission
        world.add().handle(1, "Milk", "33.3")
        world.remove().handle(1, "Milk")
        assert world.product.carbon_emission == before

    def test_removing_everything_yields_zero(self):
        world = World()
        world.remove().handle(1, "Flour")
        world.remove().handle(1, "Sugar")
        assert world.product.carbon_emission == Decimal("0")
        assert world.merchant.carbon_rating == Decimal("0")

    def test_missing_pair(self):
        world = World()
        with pytest.raises(EntityNotFoundError, match="Product Ingredient not found"):
            world.remove().handle(1, "Milk")

    def test_stale_storage_entry_not_in_product_is_rejected(self):
        world = World()
        # Storage knows the pair, the loaded product does not.
        world.associations.save(ProductIngredient(1, MILK, Decimal("200")))

        with pytest.raises(EntityNotFoundError, match="Product Ingredient not found"):
            world.remove().handle(1, "Milk")
        assert world.product.carbon_emission == Decimal("60.0")
        assert world.associations.exists(1, "Milk")
