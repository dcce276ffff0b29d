"""Application service: Register Merchant / Customer use cases.

Usernames are unique across merchants *and* customers.
"""

from __future__ import annotations

import structlog

from plantngo.domain.exceptions import AlreadyExistsError, EntityNotFoundError
from plantngo.domain.model.merchant import Customer, Merchant
from plantngo.domain.repository.account_repository import (
    CustomerRepository,
    MerchantRepository,
)

logger = structlog.get_logger(__name__)


def username_taken(
    username: str,
    merchant_repo: MerchantRepository,
    customer_repo: CustomerRepository,
) -> bool:
    return merchant_repo.exists_by_username(username) or customer_repo.exists_by_username(
        username
    )


class RegisterMerchantHandler:

    def __init__(
        self,
        merchant_repo: MerchantRepository,
        customer_repo: CustomerRepository,
    ) -> None:
        self._merchant_repo = merchant_repo
        self._customer_repo = customer_repo

    def handle(self, username: str, email: str, company: str) -> Merchant:
        merchant = Merchant(username=username.strip(), email=email, company=company)
        if username_taken(merchant.username, self._merchant_repo, self._customer_repo):
            raise AlreadyExistsError("Username")
        self._merchant_repo.save(merchant)
        logger.info("merchant_registered", merchant=merchant.username)
        return merchant


class RegisterCustomerHandler:

    def __init__(
        self,
        merchant_repo: MerchantRepository,
        customer_repo: CustomerRepository,
    ) -> None:
        self._merchant_repo = merchant_repo
        self._customer_repo = customer_repo

    def handle(self, username: str, email: str) -> Customer:
        customer = Customer(username=username.strip(), email=email)
        if username_taken(customer.username, self._merchant_repo, self._customer_repo):
            raise AlreadyExistsError("Username")
        self._customer_repo.save(customer)
        logger.info("customer_registered", customer=customer.username)
        return customer


class ShowMerchantHandler:

    def __init__(self, merchant_repo: MerchantRepository) -> None:
        self._merchant_repo = merchant_repo

    def handle(self, username: str) -> Merchant:
        merchant = self._merchant_repo.get_by_username(username)
        if merchant is None:
            raise EntityNotFoundError("Merchant")
        return merchant
