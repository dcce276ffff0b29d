"""CLI commands for products and their ingredient composition."""

from __future__ import annotations

import mimetypes
from pathlib import Path

import click

from plantngo.application.add_product import AddProductHandler, ImageUpload
from plantngo.application.add_product_ingredient import AddProductIngredientHandler
from plantngo.application.delete_product import DeleteProductHandler
from plantngo.application.dto import ProductDTO, UpdateProductSpec
from plantngo.application.remove_product_ingredient import (
    RemoveProductIngredientHandler,
)
from plantngo.application.show_products import ShowProductsHandler
from plantngo.application.update_product import UpdateProductHandler
from plantngo.application.update_product_ingredient import (
    UpdateProductIngredientHandler,
)
from plantngo.domain.exceptions import DomainException
from plantngo.infrastructure.bootstrap import (
    file_storage,
    ingredient_repository,
    merchant_repository,
    product_ingredient_repository,
    product_repository,
)
from plantngo.infrastructure.cli._common import echo_table


def _read_image(path: str | None) -> ImageUpload | None:
    if path is None:
        return None
    file_path = Path(path)
    content_type = mimetypes.guess_type(file_path.name)[0] or "application/octet-stream"
    return ImageUpload(
        data=file_path.read_bytes(),
        filename=file_path.name,
        content_type=content_type,
    )


def _composition_handler_args() -> dict:
    return {
        "product_repo": product_repository(),
        "ingredient_repo": ingredient_repository(),
        "association_repo": product_ingredient_repository(),
        "merchant_repo": merchant_repository(),
    }


def _display_product(dto: ProductDTO) -> None:
    click.echo(f"Product #{dto.id}  {dto.name}  ({dto.category})")
    click.echo(f"Merchant: {dto.merchant_username}")
    click.echo(f"Price:    {dto.price}")
    click.echo(f"Carbon:   {dto.carbon_emission}")
    if dto.flavour_type:
        click.echo(f"Flavour:  {dto.flavour_type}")
    if dto.image_url:
        click.echo(f"Image:    {dto.image_url}")
    if dto.description:
        click.echo(f"\n  {dto.description}")
    if dto.ingredients:
        click.echo()
        click.echo(f"  {'Ingredient':<20} {'Grams':>8} {'Per gram':>10} {'Emission':>10}")
        click.echo(f"  {'-'*51}")
        for pi in dto.ingredients:
            click.echo(
                f"  {pi.ingredient_name:<20} {pi.serving_qty:>8} "
                f"{pi.emission_per_gram:>10} {pi.emission:>10}"
            )


@click.command("add")
@click.option("--merchant", required=True, help="Merchant username.")
@click.option("--name", required=True, help="Product name.")
@click.option("--price", required=True, help="Price (e.g. 4.50).")
@click.option("--category", required=True, help="Category name.")
@click.option("--description", default="", help="Free-text description.")
@click.option("--flavour", "flavour_type", default=None, help="Flavour type.")
@click.option(
    "--image",
    type=click.Path(exists=True, dir_okay=False),
    default=None,
    help="Image file to upload.",
)
def product_add(
    merchant: str,
    name: str,
    price: str,
    category: str,
    description: str,
    flavour_type: str | None,
    image: str | None,
) -> None:
    """Add a new product to a merchant's catalog."""
    handler = AddProductHandler(
        product_repo=product_repository(),
        merchant_repo=merchant_repository(),
        file_storage=file_storage(),
    )

    try:
        dto = handler.handle(
            merchant_username=merchant,
            name=name,
            price=price,
            description=description,
            category=category,
            flavour_type=flavour_type,
            image=_read_image(image),
        )
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product #{dto.id} '{dto.name}' added at {dto.price}")


@click.command("list")
@click.option("--merchant", default=None, help="Only this merchant's products.")
def product_list(merchant: str | None) -> None:
    """List products (a merchant's are sorted by carbon emission)."""
    handler = ShowProductsHandler(product_repository(), product_ingredient_repository())
    if merchant:
        products = handler.get_products_by_merchant(merchant)
    else:
        products = handler.get_all_products()

    if not products:
        click.echo("No products found.")
        return

    echo_table(
        [("ID", "<6"), ("Name", "<20"), ("Merchant", "<15"), ("Price", ">10"), ("Carbon", ">10")],
        [[p.id, p.name, p.merchant_username, p.price, p.carbon_emission] for p in products],
    )


@click.command("show")
@click.option("--id", "product_id", required=True, type=int, help="Product ID.")
def product_show(product_id: int) -> None:
    """Show a product and its ingredients."""
    handler = ShowProductsHandler(product_repository(), product_ingredient_repository())

    try:
        dto = handler.get_product(product_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    _display_product(dto)


@click.command("update")
@click.option("--id", "product_id", required=True, type=int, help="Product ID.")
@click.option("--name", default=None, help="New name.")
@click.option("--price", default=None, help="New price (e.g. 5.20).")
@click.option("--description", default=None, help="New description.")
@click.option("--flavour", "flavour_type", default=None, help="New flavour type.")
@click.option(
    "--image",
    type=click.Path(exists=True, dir_okay=False),
    default=None,
    help="Replacement image file to upload.",
)
def product_update(
    product_id: int,
    name: str | None,
    price: str | None,
    description: str | None,
    flavour_type: str | None,
    image: str | None,
) -> None:
    """Update a product's details."""
    handler = UpdateProductHandler(
        product_repo=product_repository(),
        file_storage=file_storage(),
    )
    spec = UpdateProductSpec(
        name=name,
        price=price,
        description=description,
        flavour_type=flavour_type,
    )

    try:
        handler.handle(product_id, spec, image=_read_image(image))
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product #{product_id} updated.")


@click.command("delete")
@click.option("--id", "product_id", required=True, type=int, help="Product ID.")
def product_delete(product_id: int) -> None:
    """Delete a product and its ingredient list."""
    handler = DeleteProductHandler(
        product_repo=product_repository(),
        merchant_repo=merchant_repository(),
    )

    try:
        handler.handle(product_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product #{product_id} deleted.")


@click.command("add-ingredient")
@click.option("--id", "product_id", required=True, type=int, help="Product ID.")
@click.option("--ingredient", required=True, help="Ingredient name.")
@click.option("--grams", required=True, help="Serving quantity in grams.")
def product_add_ingredient(product_id: int, ingredient: str, grams: str) -> None:
    """Add an ingredient to a product."""
    handler = AddProductIngredientHandler(**_composition_handler_args())

    try:
        association = handler.handle(product_id, ingredient, grams)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(
        f"Added {association.serving_qty}g of {association.ingredient.name} "
        f"to product #{product_id}."
    )


@click.command("update-ingredient")
@click.option("--id", "product_id", required=True, type=int, help="Product ID.")
@click.option("--ingredient", required=True, help="Ingredient name.")
@click.option("--grams", required=True, help="New serving quantity in grams.")
def product_update_ingredient(product_id: int, ingredient: str, grams: str) -> None:
    """Change how much of an ingredient a product contains."""
    handler = UpdateProductIngredientHandler(**_composition_handler_args())

    try:
        association = handler.handle(product_id, ingredient, grams)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(
        f"Product #{product_id} now contains {association.serving_qty}g "
        f"of {association.ingredient.name}."
    )


@click.command("remove-ingredient")
@click.option("--id", "product_id", required=True, type=int, help="Product ID.")
@click.option("--ingredient", required=True, help="Ingredient name.")
def product_remove_ingredient(product_id: int, ingredient: str) -> None:
    """Remove an ingredient from a product."""
    handler = RemoveProductIngredientHandler(**_composition_handler_args())

    try:
        handler.handle(product_id, ingredient)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Removed {ingredient} from product #{product_id}.")
