"""Merchant and Customer accounts.

Authentication lives elsewhere; these records only carry what the
ordering and carbon-rating rules need.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

from plantngo.domain.exceptions import ValidationError


def _check_account(username: str, email: str) -> None:
    if not username or not username.strip():
        raise ValidationError("Username is required")
    if not email or "@" not in email:
        raise ValidationError(f"Invalid email address: {email!r}")


@dataclass
class Merchant:
    """A store listing products.

    ``carbon_rating`` is the mean carbon emission of the merchant's
    products, or ``None`` while the merchant has no products.
    """

    username: str
    email: str
    company: str
    carbon_rating: Decimal | None = None

    def __post_init__(self) -> None:
        _check_account(self.username, self.email)


@dataclass
class Customer:

    username: str
    email: str
    green_pts: int = 0

    def __post_init__(self) -> None:
        _check_account(self.username, self.email)

    def update_account(self, username: str | None = None, email: str | None = None) -> None:
        new_username = username.strip() if username is not None else self.username
        new_email = email if email is not None else self.email
        _check_account(new_username, new_email)
        self.username = new_username
        self.email = new_email
