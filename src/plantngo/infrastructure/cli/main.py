import click

from plantngo.infrastructure.bootstrap import log_level
from plantngo.infrastructure.cli.account_commands import (
    customer_delete,
    customer_list,
    customer_register,
    customer_show,
    customer_update,
    ingredient_add,
    ingredient_list,
    merchant_register,
    merchant_show,
)
from plantngo.infrastructure.cli.campaign_commands import (
    promotion_add,
    promotion_delete,
    promotion_list,
    promotion_update,
    quest_add,
    quest_delete,
    quest_list,
    quest_refresh,
)
from plantngo.infrastructure.cli.order_commands import (
    order_add,
    order_delete,
    order_delete_item,
    order_list,
    order_show,
    order_update,
)
from plantngo.infrastructure.cli.product_commands import (
    product_add,
    product_add_ingredient,
    product_delete,
    product_list,
    product_remove_ingredient,
    product_show,
    product_update,
    product_update_ingredient,
)
from plantngo.infrastructure.log_config import configure_logging


@click.group()
@click.option("-v", "--verbose", is_flag=True, default=False, help="Log debug events to stderr.")
def cli(verbose: bool) -> None:
    """Plant&Go green food ordering."""
    configure_logging("DEBUG" if verbose else log_level())


@cli.group()
def ingredient() -> None:
    """Manage ingredients."""


@cli.group()
def merchant() -> None:
    """Manage merchants."""


@cli.group()
def customer() -> None:
    """Manage customers."""


@cli.group()
def product() -> None:
    """Manage products and their ingredients."""


@cli.group()
def order() -> None:
    """Manage orders."""


@cli.group()
def quest() -> None:
    """Manage quests."""


@cli.group()
def promotion() -> None:
    """Manage promotions."""


# Register subcommands
ingredient.add_command(ingredient_add)
ingredient.add_command(ingredient_list)
merchant.add_command(merchant_register)
merchant.add_command(merchant_show)
customer.add_command(customer_register)
customer.add_command(customer_list)
customer.add_command(customer_show)
customer.add_command(customer_update)
customer.add_command(customer_delete)
product.add_command(product_add)
product.add_command(product_list)
product.add_command(product_show)
product.add_command(product_update)
product.add_command(product_delete)
product.add_command(product_add_ingredient)
product.add_command(product_update_ingredient)
product.add_command(product_remove_ingredient)
order.add_command(order_add)
order.add_command(order_list)
order.add_command(order_show)
order.add_command(order_update)
order.add_command(order_delete)
order.add_command(order_delete_item)
quest.add_command(quest_add)
quest.add_command(quest_list)
quest.add_command(quest_delete)
quest.add_command(quest_refresh)
promotion.add_command(promotion_add)
promotion.add_command(promotion_list)
promotion.add_command(promotion_update)
promotion.add_command(promotion_delete)
