"""Abstract repositories for merchant and customer accounts."""

from __future__ import annotations

from abc import ABC, abstractmethod

from plantngo.domain.model.merchant import Customer, Merchant


class MerchantRepository(ABC):

    @abstractmethod
    def get_by_username(self, username: str) -> Merchant | None:
        """Return a merchant by username, or None."""

    @abstractmethod
    def exists_by_username(self, username: str) -> bool:
        """True if a merchant holds this username."""

    @abstractmethod
    def save(self, merchant: Merchant) -> None:
        """Persist a new or updated merchant."""


class CustomerRepository(ABC):

    @abstractmethod
    def get_by_username(self, username: str) -> Customer | None:
        """Return a customer by username, or None."""

    @abstractmethod
    def get_by_email(self, email: str) -> Customer | None:
        """Return a customer by email, or None."""

    @abstractmethod
    def exists_by_username(self, username: str) -> bool:
        """True if a customer holds this username."""

    @abstractmethod
    def list_all(self) -> list[Customer]:
        """Return every customer."""

    @abstractmethod
    def save(self, customer: Customer, previous_username: str | None = None) -> None:
        """Persist a customer; ``previous_username`` handles renames."""

    @abstractmethod
    def delete_by_username(self, username: str) -> None:
        """Remove a customer."""
