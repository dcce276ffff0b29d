"""CLI commands for ingredients, merchants and customers."""

from __future__ import annotations

import click

from plantngo.application.add_ingredient import AddIngredientHandler, ShowIngredientsHandler
from plantngo.application.manage_customers import (
    DeleteCustomerHandler,
    ShowCustomersHandler,
    UpdateCustomerHandler,
)
from plantngo.application.register_account import (
    RegisterCustomerHandler,
    RegisterMerchantHandler,
    ShowMerchantHandler,
)
from plantngo.domain.exceptions import DomainException
from plantngo.infrastructure.bootstrap import (
    customer_repository,
    ingredient_repository,
    merchant_repository,
    order_repository,
)
from plantngo.infrastructure.cli._common import echo_table


# --- Ingredients ----------------------------------------------------------------


@click.command("add")
@click.option("--name", required=True, help="Ingredient name.")
@click.option("--emission", required=True, help="Carbon emission per gram.")
def ingredient_add(name: str, emission: str) -> None:
    """Register an ingredient and its emission factor."""
    handler = AddIngredientHandler(ingredient_repo=ingredient_repository())

    try:
        ingredient = handler.handle(name, emission)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Ingredient '{ingredient.name}' added ({ingredient.emission_per_gram}/g)")


@click.command("list")
def ingredient_list() -> None:
    """List all ingredients."""
    ingredients = ShowIngredientsHandler(ingredient_repository()).handle()
    if not ingredients:
        click.echo("No ingredients found.")
        return
    echo_table(
        [("Name", "<20"), ("Per gram", ">10")],
        [[i.name, i.emission_per_gram] for i in ingredients],
    )


# --- Merchants ------------------------------------------------------------------


@click.command("register")
@click.option("--username", required=True)
@click.option("--email", required=True)
@click.option("--company", required=True)
def merchant_register(username: str, email: str, company: str) -> None:
    """Register a merchant."""
    handler = RegisterMerchantHandler(merchant_repository(), customer_repository())

    try:
        merchant = handler.handle(username, email, company)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Merchant '{merchant.username}' registered.")


@click.command("show")
@click.option("--username", required=True)
def merchant_show(username: str) -> None:
    """Show a merchant and its carbon rating."""
    try:
        merchant = ShowMerchantHandler(merchant_repository()).handle(username)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    rating = merchant.carbon_rating if merchant.carbon_rating is not None else "n/a"
    click.echo(f"Merchant: {merchant.username} ({merchant.company})")
    click.echo(f"Email:    {merchant.email}")
    click.echo(f"Carbon rating: {rating}")


# --- Customers ------------------------------------------------------------------


@click.command("register")
@click.option("--username", required=True)
@click.option("--email", required=True)
def customer_register(username: str, email: str) -> None:
    """Register a customer."""
    handler = RegisterCustomerHandler(merchant_repository(), customer_repository())

    try:
        customer = handler.handle(username, email)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Customer '{customer.username}' registered.")


@click.command("list")
def customer_list() -> None:
    """List all customers."""
    customers = ShowCustomersHandler(customer_repository()).all()
    if not customers:
        click.echo("No customers found.")
        return
    echo_table(
        [("Username", "<20"), ("Email", "<30"), ("Green pts", ">10")],
        [[c.username, c.email, c.green_pts] for c in customers],
    )


@click.command("show")
@click.option("--username", default=None)
@click.option("--email", default=None)
def customer_show(username: str | None, email: str | None) -> None:
    """Show a customer, looked up by username or email."""
    if (username is None) == (email is None):
        raise click.UsageError("Give exactly one of --username or --email")
    handler = ShowCustomersHandler(customer_repository())

    try:
        customer = handler.by_username(username) if username else handler.by_email(email)  # type: ignore[arg-type]
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Customer: {customer.username}")
    click.echo(f"Email:    {customer.email}")
    click.echo(f"Green pts: {customer.green_pts}")


@click.command("update")
@click.option("--username", required=True, help="Current username.")
@click.option("--new-username", default=None)
@click.option("--new-email", default=None)
def customer_update(username: str, new_username: str | None, new_email: str | None) -> None:
    """Change a customer's username or email."""
    handler = UpdateCustomerHandler(
        merchant_repository(), customer_repository(), order_repository()
    )

    try:
        customer = handler.handle(username, new_username=new_username, new_email=new_email)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Customer '{customer.username}' updated.")


@click.command("delete")
@click.option("--username", required=True)
def customer_delete(username: str) -> None:
    """Delete a customer and their orders."""
    try:
        DeleteCustomerHandler(customer_repository(), order_repository()).handle(username)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Customer '{username}' deleted.")
