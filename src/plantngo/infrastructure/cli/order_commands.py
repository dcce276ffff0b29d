"""CLI commands for the Order aggregate."""

from __future__ import annotations

import click

from plantngo.application.add_to_order import AddToOrderHandler
from plantngo.application.delete_order import DeleteOrderHandler, DeleteOrderItemHandler
from plantngo.application.dto import OrderDTO
from plantngo.application.show_orders import ShowOrdersHandler
from plantngo.application.update_order import UpdateOrderHandler
from plantngo.domain.exceptions import DomainException
from plantngo.domain.model.order import OrderStatus
from plantngo.infrastructure.bootstrap import (
    customer_repository,
    order_repository,
    product_repository,
)


def _display_order(dto: OrderDTO) -> None:
    """Shared formatting for displaying an order."""
    click.echo(f"Order #{dto.id}  (status={dto.status})")
    click.echo(f"Customer: {dto.customer_username}")
    click.echo(f"Created:  {dto.created_at}")
    click.echo()
    click.echo(f"  {'Product':<20} {'Qty':>5} {'Price':>10} {'Total':>10}")
    click.echo(f"  {'-'*47}")
    for item in dto.items:
        click.echo(
            f"  {item.product_name:<20} {item.quantity:>5} {item.unit_price:>10} {item.line_total:>10}"
        )
    click.echo(f"  {'-'*47}")
    click.echo(f"  {'Order Total':<27} {dto.total:>20}")


@click.command("add")
@click.option("--customer", required=True, help="Customer username.")
@click.option("--product", "product_id", required=True, type=int, help="Product ID.")
@click.option("--quantity", default=1, show_default=True, type=int, help="Units to add.")
def order_add(customer: str, product_id: int, quantity: int) -> None:
    """Add a product to the customer's open order (opening one if needed)."""
    handler = AddToOrderHandler(
        order_repo=order_repository(),
        product_repo=product_repository(),
        customer_repo=customer_repository(),
    )

    try:
        dto = handler.handle(customer, product_id, quantity)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    _display_order(dto)


@click.command("list")
@click.option("--customer", default=None, help="Only this customer's orders.")
def order_list(customer: str | None) -> None:
    """List orders."""
    handler = ShowOrdersHandler(order_repository())
    orders = handler.by_customer(customer) if customer else handler.all()

    if not orders:
        click.echo("No orders found.")
        return

    click.echo(f"{'ID':<6} {'Customer':<20} {'Status':<10} {'Total':>10}")
    click.echo("-" * 49)
    for o in orders:
        click.echo(f"{o.id:<6} {o.customer_username:<20} {o.status:<10} {o.total:>10}")


@click.command("show")
@click.option("--id", "order_id", required=True, type=int, help="Order ID to display.")
def order_show(order_id: int) -> None:
    """Show details of an existing order."""
    try:
        dto = ShowOrdersHandler(order_repository()).get(order_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    _display_order(dto)


@click.command("update")
@click.option("--id", "order_id", required=True, type=int, help="Order ID.")
@click.option(
    "--status",
    required=True,
    type=click.Choice([s.value for s in OrderStatus], case_sensitive=False),
)
def order_update(order_id: int, status: str) -> None:
    """Change an order's status."""
    try:
        dto = UpdateOrderHandler(order_repository()).handle(order_id, status)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Order #{dto.id} is now {dto.status}.")


@click.command("delete")
@click.option("--id", "order_id", required=True, type=int, help="Order ID.")
def order_delete(order_id: int) -> None:
    """Delete an order."""
    try:
        DeleteOrderHandler(order_repository()).handle(order_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Order #{order_id} deleted.")


@click.command("delete-item")
@click.option("--id", "order_id", required=True, type=int, help="Order ID.")
@click.option("--product", "product_id", required=True, type=int, help="Product ID.")
def order_delete_item(order_id: int, product_id: int) -> None:
    """Remove one product's line from an open order."""
    try:
        dto = DeleteOrderItemHandler(order_repository()).handle(order_id, product_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Order #{order_id} item removed; total is now {dto.total}.")
