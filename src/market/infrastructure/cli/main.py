import click

from market.infrastructure.cli.category_commands import category_list
from market.infrastructure.cli.order_commands import order_history, order_place
from market.infrastructure.cli.product_commands import (
    product_add,
    product_edit,
    product_list,
    product_remove,
    product_search,
    product_stats,
)
from market.infrastructure.logging_config import setup_logging


@click.group()
@click.option(
    "--log-level",
    envvar="MARKET_LOG_LEVEL",
    default="WARNING",
    show_default=True,
    help="Logging level (DEBUG, INFO, WARNING, ERROR).",
)
def cli(log_level: str) -> None:
    """Market: product catalog, shopping cart and order history."""
    setup_logging(log_level)


@cli.group()
def product() -> None:
    """Manage the product catalog."""


@cli.group()
def category() -> None:
    """Browse the category taxonomy."""


@cli.group()
def order() -> None:
    """Place orders and view history."""


# Register subcommands
product.add_command(product_add)
product.add_command(product_edit)
product.add_command(product_list)
product.add_command(product_remove)
product.add_command(product_search)
product.add_command(product_stats)
category.add_command(category_list)
order.add_command(order_history)
order.add_command(order_place)
