"""Application services: customer account queries and maintenance."""

from __future__ import annotations

import structlog

from plantngo.application.register_account import username_taken
from plantngo.domain.exceptions import AlreadyExistsError, EntityNotFoundError
from plantngo.domain.model.merchant import Customer
from plantngo.domain.repository.account_repository import (
    CustomerRepository,
    MerchantRepository,
)
from plantngo.domain.repository.order_repository import OrderRepository

logger = structlog.get_logger(__name__)


class ShowCustomersHandler:

    def __init__(self, customer_repo: CustomerRepository) -> None:
        self._customer_repo = customer_repo

    def all(self) -> list[Customer]:
        return self._customer_repo.list_all()

    def by_username(self, username: str) -> Customer:
        customer = self._customer_repo.get_by_username(username)
        if customer is None:
            raise EntityNotFoundError("Customer")
        return customer

    def by_email(self, email: str) -> Customer:
        customer = self._customer_repo.get_by_email(email)
        if customer is None:
            raise EntityNotFoundError("Customer")
        return customer


class UpdateCustomerHandler:

    def __init__(
        self,
        merchant_repo: MerchantRepository,
        customer_repo: CustomerRepository,
        order_repo: OrderRepository,
    ) -> None:
        self._merchant_repo = merchant_repo
        self._customer_repo = customer_repo
        self._order_repo = order_repo

    def handle(
        self,
        username: str,
        new_username: str | None = None,
        new_email: str | None = None,
    ) -> Customer:
        """Rename a customer and/or change their email.

        Orders refer to their customer by username, so a rename carries
        the customer's orders over to the new name.
        """
        customer = self._customer_repo.get_by_username(username)
        if customer is None:
            raise EntityNotFoundError("Customer")

        renaming = new_username is not None and new_username.strip() != customer.username
        if renaming and username_taken(
            new_username.strip(), self._merchant_repo, self._customer_repo  # type: ignore[union-attr]
        ):
            raise AlreadyExistsError("Username")

        customer.update_account(username=new_username, email=new_email)
        self._customer_repo.save(customer, previous_username=username)
        moved = 0
        if customer.username != username:
            for order in self._order_repo.list_by_customer(username):
                order.customer_username = customer.username
                self._order_repo.save(order)
                moved += 1
        logger.info(
            "customer_updated",
            customer=customer.username,
            previous=username,
            orders_moved=moved,
        )
        return customer


class DeleteCustomerHandler:

    def __init__(
        self,
        customer_repo: CustomerRepository,
        order_repo: OrderRepository,
    ) -> None:
        self._customer_repo = customer_repo
        self._order_repo = order_repo

    def handle(self, username: str) -> None:
        """Delete a customer together with all of their orders."""
        if not self._customer_repo.exists_by_username(username):
            raise EntityNotFoundError("Customer")

        orders = self._order_repo.list_by_customer(username)
        for order in orders:
            self._order_repo.delete(order)
        self._customer_repo.delete_by_username(username)
        logger.info("customer_deleted", customer=username, orders_deleted=len(orders))
