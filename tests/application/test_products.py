"""Integration tests for product catalog use cases."""

from decimal import Decimal

import pytest

from plantngo.application.add_product import AddProductHandler, ImageUpload
from plantngo.application.delete_product import DeleteProductHandler
from plantngo.application.dto import UpdateProductSpec
from plantngo.application.show_products import ShowProductsHandler
from plantngo.application.update_product import UpdateProductHandler
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
    FakeFileStorage,
    FakeMerchantRepository,
    FakeProductIngredientRepository,
    FakeProductRepository,
)


def _product(product_id: int, name: str, emission: str, merchant: str = "greengrocer") -> Product:
    return Product(
        id=product_id,
        name=name,
        price=Money.of("5.00"),
        description="",
        merchant_username=merchant,
        category="Mains",
        carbon_emission=Decimal(emission),
    )


def _setup(products: list[Product] | None = None):
    merchant = Merchant("greengrocer", "shop@example.com", "Green Grocer")
    associations = FakeProductIngredientRepository()
    product_repo = FakeProductRepository(products or [], associations)
    merchant_repo = FakeMerchantRepository([merchant])
    return merchant, product_repo, merchant_repo, associations


class TestAddProduct:

    def test_adds_product_with_zero_emission(self):
        _, product_repo, merchant_repo, _ = _setup()
        dto = AddProductHandler(product_repo, merchant_repo, FakeFileStorage()).handle(
            "greengrocer", "Tofu Bowl", "8.90", "Silken tofu", "Mains"
        )
        assert dto.id == 1
        assert dto.price == "$8.90"
        assert dto.carbon_emission == "0"
        assert product_repo.get_by_id(1).name == "Tofu Bowl"

    def test_new_product_pulls_merchant_rating_down(self):
        merchant, product_repo, merchant_repo, _ = _setup([_product(1, "Burger", "40")])
        merchant.carbon_rating = Decimal("40")
        AddProductHandler(product_repo, merchant_repo, FakeFileStorage()).handle(
            "greengrocer", "Tofu Bowl", "8.90", "", "Mains"
        )
        assert merchant.carbon_rating == Decimal("20")

    def test_unknown_merchant(self):
        _, product_repo, merchant_repo, _ = _setup()
        with pytest.raises(EntityNotFoundError, match="Merchant not found"):
            AddProductHandler(product_repo, merchant_repo, FakeFileStorage()).handle(
                "nobody", "Tofu Bowl", "8.90", "", "Mains"
            )

    def test_duplicate_name_for_merchant_rejected(self):
        _, product_repo, merchant_repo, _ = _setup([_product(1, "Burger", "40")])
        with pytest.raises(AlreadyExistsError, match="Product already exists"):
            AddProductHandler(product_repo, merchant_repo, FakeFileStorage()).handle(
                "greengrocer", "burger", "9.00", "", "Mains"
            )

    def test_non_positive_price_rejected(self):
        _, product_repo, merchant_repo, _ = _setup()
        with pytest.raises(ValidationError, match="greater than zero"):
            AddProductHandler(product_repo, merchant_repo, FakeFileStorage()).handle(
                "greengrocer", "Water", "0", "", "Drinks"
            )

    def test_image_is_uploaded(self):
        _, product_repo, merchant_repo, _ = _setup()
        storage = FakeFileStorage()
        dto = AddProductHandler(product_repo, merchant_repo, storage).handle(
            "greengrocer",
            "Tofu Bowl",
            "8.90",
            "",
            "Mains",
            image=ImageUpload(b"\x89PNG", "bowl.png", "image/png"),
        )
        assert storage.uploads == [(b"\x89PNG", "bowl.png", "image/png")]
        assert dto.image_url == "memory://uploads/1/bowl.png"

    def test_no_image_leaves_storage_untouched(self):
        _, product_repo, merchant_repo, _ = _setup()
        storage = FakeFileStorage()
        dto = AddProductHandler(product_repo, merchant_repo, storage).handle(
            "greengrocer", "Tofu Bowl", "8.90", "", "Mains"
        )
        assert storage.uploads == []
        assert dto.image_url is None

    @pytest.mark.parametrize("price", ["NaN", "Infinity"])
    def test_non_finite_price_rejected(self, price):
        _, product_repo, merchant_repo, _ = _setup()
        with pytest.raises(ValidationError, match="Invalid money amount"):
            AddProductHandler(product_repo, merchant_repo, FakeFileStorage()).handle(
                "greengrocer", "Water", price, "", "Drinks"
            )
        assert product_repo.list_all() == []


class TestUpdateProduct:

    def test_partial_update(self):
        _, product_repo, _, _ = _setup([_product(1, "Burger", "40")])
        dto = UpdateProductHandler(product_repo, FakeFileStorage()).handle(
            1, UpdateProductSpec(price="6.50", flavour_type="Smoky")
        )
        assert dto.price == "$6.50"
        assert dto.flavour_type == "Smoky"
        assert dto.name == "Burger"

    def test_emission_is_not_updatable(self):
        _, product_repo, _, _ = _setup([_product(1, "Burger", "40")])
        dto = UpdateProductHandler(product_repo, FakeFileStorage()).handle(
            1, UpdateProductSpec(name="Big Burger")
        )
        assert dto.carbon_emission == "40"

    def test_replacement_image_is_uploaded(self):
        _, product_repo, _, _ = _setup([_product(1, "Burger", "40")])
        storage = FakeFileStorage()
        dto = UpdateProductHandler(product_repo, storage).handle(
            1, UpdateProductSpec(), image=ImageUpload(b"jpg", "burger.jpg", "image/jpeg")
        )
        assert dto.image_url == "memory://uploads/1/burger.jpg"

    def test_bad_price_uploads_nothing(self):
        _, product_repo, _, _ = _setup([_product(1, "Burger", "40")])
        storage = FakeFileStorage()
        with pytest.raises(ValidationError):
            UpdateProductHandler(product_repo, storage).handle(
                1, UpdateProductSpec(price="NaN"), image=ImageUpload(b"jpg", "burger.jpg")
            )
        assert storage.uploads == []
        assert product_repo.get_by_id(1).price == Money.of("5.00")

    def test_unknown_product(self):
        _, product_repo, _, _ = _setup()
        with pytest.raises(EntityNotFoundError, match="Product not found"):
            UpdateProductHandler(product_repo, FakeFileStorage()).handle(
                3, UpdateProductSpec(name="x")
            )


class TestDeleteProduct:

    def test_delete_cascades_associations_and_refreshes_rating(self):
        merchant, product_repo, merchant_repo, associations = _setup(
            [_product(1, "Burger", "40"), _product(2, "Salad", "10")]
        )
        associations.save(ProductIngredient(1, Ingredient("Beef", Decimal("0.4")), Decimal("100")))
        merchant.carbon_rating = Decimal("25")

        DeleteProductHandler(product_repo, merchant_repo).handle(1)

        assert product_repo.get_by_id(1) is None
        assert associations.list_all() == []
        assert merchant.carbon_rating == Decimal("10")

    def test_deleting_last_product_clears_rating(self):
        merchant, product_repo, merchant_repo, _ = _setup([_product(1, "Burger", "40")])
        merchant.carbon_rating = Decimal("40")
        DeleteProductHandler(product_repo, merchant_repo).handle(1)
        assert merchant.carbon_rating is None

    def test_unknown_product(self):
        _, product_repo, merchant_repo, _ = _setup()
        with pytest.raises(EntityNotFoundError):
            DeleteProductHandler(product_repo, merchant_repo).handle(1)


class TestShowProducts:

    def test_by_merchant_sorted_by_emission(self):
        _, product_repo, _, associations = _setup([
            _product(1, "Burger", "40"),
            _product(2, "Salad", "10"),
            _product(3, "Steak", "90", merchant="butcher"),
            _product(4, "Soup", "25"),
        ])
        handler = ShowProductsHandler(product_repo, associations)
        names = [p.name for p in handler.get_products_by_merchant("greengrocer")]
        assert names == ["Salad", "Soup", "Burger"]

    def test_get_all_and_get_one(self):
        _, product_repo, _, associations = _setup([_product(1, "Burger", "40")])
        handler = ShowProductsHandler(product_repo, associations)
        assert [p.id for p in handler.get_all_products()] == [1]
        assert handler.get_product(1).name == "Burger"
        with pytest.raises(EntityNotFoundError):
            handler.get_product(2)

    def test_dto_lists_ingredients_by_key_only(self):
        product = _product(1, "Burger", "40")
        product.add_ingredient(ProductIngredient(1, Ingredient("Beef", Decimal("0.4")), Decimal("100")))
        _, product_repo, _, associations = _setup([product])

        dto = ShowProductsHandler(product_repo, associations).get_product(1)
        assert dto.merchant_username == "greengrocer"
        [line] = dto.ingredients
        assert line.ingredient_name == "Beef"
        assert line.emission == "40.0"
