"""Data Transfer Objects — plain containers that cross layer boundaries.

DTOs refer to related entities by key (merchant username, product ID,
ingredient name) and never embed back-references, so they serialize
without cycles.
"""

from __future__ import annotations

from dataclasses import dataclass

from plantngo.domain.model.order import Order
from plantngo.domain.model.product import Product


@dataclass(frozen=True)
class ProductIngredientDTO:
    ingredient_name: str
    serving_qty: str
    emission_per_gram: str
    emission: str


@dataclass(frozen=True)
class ProductDTO:
    """Output: a product with its composition."""

    id: int
    name: str
    price: str  # formatted, e.g. "$4.50"
    description: str
    merchant_username: str
    category: str
    carbon_emission: str
    image_url: str | None
    flavour_type: str | None
    ingredients: list[ProductIngredientDTO]


@dataclass(frozen=True)
class UpdateProductSpec:
    """Input: fields to change on a product; ``None`` means unchanged."""

    name: str | None = None
    price: str | None = None
    description: str | None = None
    image_url: str | None = None
    flavour_type: str | None = None


@dataclass(frozen=True)
class OrderItemDTO:
    product_id: int
    product_name: str
    quantity: int
    unit_price: str
    line_total: str


@dataclass(frozen=True)
class OrderDTO:
    """Output: a complete order as displayed to the user."""

    id: int
    customer_username: str
    status: str
    items: list[OrderItemDTO]
    total: str
    created_at: str


# --- Mapping ------------------------------------------------------------------


def to_product_dto(product: Product) -> ProductDTO:
    return ProductDTO(
        id=product.id,  # type: ignore[arg-type]
        name=product.name,
        price=str(product.price),
        description=product.description,
        merchant_username=product.merchant_username,
        category=product.category,
        carbon_emission=str(product.carbon_emission),
        image_url=product.image_url,
        flavour_type=product.flavour_type,
        ingredients=[
            ProductIngredientDTO(
                ingredient_name=pi.ingredient.name,
                serving_qty=str(pi.serving_qty),
                emission_per_gram=str(pi.ingredient.emission_per_gram),
                emission=str(pi.emission),
            )
            for pi in product.product_ingredients.values()
        ],
    )


def to_order_dto(order: Order) -> OrderDTO:
    return OrderDTO(
        id=order.id,  # type: ignore[arg-type]
        customer_username=order.customer_username,
        status=order.status.value,
        items=[
            OrderItemDTO(
                product_id=item.product_id,
                product_name=item.product_name,
                quantity=item.quantity.value,
                unit_price=str(item.unit_price),
                line_total=str(item.line_total),
            )
            for item in order.items
        ],
        total=str(order.total),
        created_at=order.created_at.strftime("%Y-%m-%d %H:%M UTC"),
    )
