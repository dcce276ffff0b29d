"""Emission Aggregator: pure carbon arithmetic.

Both functions read their inputs and return a value; they never mutate
products or associations. Recomputation is always over the whole set.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from decimal import Decimal

from plantngo.domain.exceptions import InvalidStateError
from plantngo.domain.model.product import Product, ProductIngredient


def compute_product_emission(associations: Iterable[ProductIngredient]) -> Decimal:
    """Total emission of one unit of product, in the ingredients' unit.

    ``Σ serving_qty × emission_per_gram``; zero for an empty composition.
    """
    total = Decimal("0")
    for association in associations:
        total += association.serving_qty * association.ingredient.emission_per_gram
    return total


def compute_merchant_rating(products: Sequence[Product]) -> Decimal:
    """Mean ``carbon_emission`` across a merchant's products.

    Raises InvalidStateError for an empty sequence; a merchant without
    products has no rating rather than a rating of zero.
    """
    if not products:
        raise InvalidStateError("Cannot compute a carbon rating without products")
    total = sum((p.carbon_emission for p in products), Decimal("0"))
    return total / Decimal(len(products))
