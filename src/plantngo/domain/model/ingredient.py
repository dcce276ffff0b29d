"""Ingredient reference data.

Ingredients are created once with their emission factor and never
mutated afterwards; products refer to them by name.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

from plantngo.domain.exceptions import ValidationError


@dataclass(frozen=True)
class Ingredient:

    name: str
    emission_per_gram: Decimal

    def __post_init__(self) -> None:
        if not self.name or not self.name.strip():
            raise ValidationError("Ingredient name is required")
        if not self.emission_per_gram.is_finite():
            raise ValidationError(
                f"Emission per gram must be finite, got {self.emission_per_gram}"
            )
        if self.emission_per_gram < Decimal("0"):
            raise ValidationError(
                f"Emission per gram cannot be negative, got {self.emission_per_gram}"
            )
