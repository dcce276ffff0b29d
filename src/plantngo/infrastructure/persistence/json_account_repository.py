"""JSON-file-backed implementations of the account repositories."""

from __future__ import annotations

from decimal import Decimal
from pathlib import Path

from plantngo.domain.model.merchant import Customer, Merchant
from plantngo.domain.repository.account_repository import (
    CustomerRepository,
    MerchantRepository,
)
from plantngo.infrastructure.persistence.json_file import JsonFile


class JsonMerchantRepository(MerchantRepository):

    def __init__(self, file_path: Path) -> None:
        self._file = JsonFile(file_path)

    def get_by_username(self, username: str) -> Merchant | None:
        for raw in self._file.load_raw():
            if raw["username"] == username:
                return self._to_domain(raw)
        return None

    def exists_by_username(self, username: str) -> bool:
        return self.get_by_username(username) is not None

    def save(self, merchant: Merchant) -> None:
        self._file.upsert(self._file.load_raw(), self._to_raw(merchant), key="username")

    @staticmethod
    def _to_raw(merchant: Merchant) -> dict:
        return {
            "username": merchant.username,
            "email": merchant.email,
            "company": merchant.company,
            "carbon_rating": (
                str(merchant.carbon_rating) if merchant.carbon_rating is not None else None
            ),
        }

    @staticmethod
    def _to_domain(raw: dict) -> Merchant:
        rating = raw.get("carbon_rating")
        return Merchant(
            username=raw["username"],
            email=raw["email"],
            company=raw.get("company", ""),
            carbon_rating=Decimal(rating) if rating is not None else None,
        )


class JsonCustomerRepository(CustomerRepository):

    def __init__(self, file_path: Path) -> None:
        self._file = JsonFile(file_path)

    def get_by_username(self, username: str) -> Customer | None:
        for raw in self._file.load_raw():
            if raw["username"] == username:
                return self._to_domain(raw)
        return None

    def get_by_email(self, email: str) -> Customer | None:
        for raw in self._file.load_raw():
            if raw["email"].lower() == email.lower():
                return self._to_domain(raw)
        return None

    def exists_by_username(self, username: str) -> bool:
        return self.get_by_username(username) is not None

    def list_all(self) -> list[Customer]:
        return [self._to_domain(raw) for raw in self._file.load_raw()]

    def save(self, customer: Customer, previous_username: str | None = None) -> None:
        records = self._file.load_raw()
        if previous_username is not None and previous_username != customer.username:
            records = [r for r in records if r["username"] != previous_username]
        self._file.upsert(records, self._to_raw(customer), key="username")

    def delete_by_username(self, username: str) -> None:
        self._file.remove("username", username)

    @staticmethod
    def _to_raw(customer: Customer) -> dict:
        return {
            "username": customer.username,
            "email": customer.email,
            "green_pts": customer.green_pts,
        }

    @staticmethod
    def _to_domain(raw: dict) -> Customer:
        return Customer(
            username=raw["username"],
            email=raw["email"],
            green_pts=raw.get("green_pts", 0),
        )
