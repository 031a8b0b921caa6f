"""CLI commands for the product catalog."""

from __future__ import annotations

import click

from market.application.add_product import AddProductHandler
from market.application.dto import ProductDTO
from market.application.edit_product import EditProductHandler
from market.application.product_stats import ProductStatsHandler
from market.application.remove_product import RemoveProductHandler
from market.application.search_products import SearchProductsHandler
from market.domain.exceptions import DomainException
from market.domain.model.value_objects import UnitKind
from market.infrastructure.bootstrap import catalog_repository, taxonomy_repository

_UNITS = {"piece": UnitKind.PIECE, "weight": UnitKind.WEIGHT}


def _display_products(products: list[ProductDTO]) -> None:
    """Shared formatting for product tables."""
    if not products:
        click.echo("No products found.")
        return

    click.echo(f"{'Title':<28} {'Category':<20} {'Subcategory':<14} {'Price':>9} {'Available':>16}")
    click.echo("-" * 91)
    for p in products:
        click.echo(
            f"{p.title:<28} {p.category:<20} {p.subcategory:<14} {p.price:>9} {p.available:>16}"
        )


@click.command("list")
def product_list() -> None:
    """List all products in the catalog."""
    handler = SearchProductsHandler(catalog_repo=catalog_repository())
    _display_products(handler.handle())


@click.command("search")
@click.option("--title", default=None, help="Exact title (case-insensitive).")
@click.option("--category", default=None, help="Exact category (case-insensitive).")
@click.option("--subcategory", default=None, help="Exact subcategory (case-insensitive).")
def product_search(title: str | None, category: str | None, subcategory: str | None) -> None:
    """Find products matching every given criterion."""
    handler = SearchProductsHandler(catalog_repo=catalog_repository())

    try:
        found = handler.handle(title=title, category=category, subcategory=subcategory)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    _display_products(found)


@click.command("add")
@click.option("--title", required=True, help="Product title.")
@click.option("--description", required=True, help="Product description.")
@click.option("--category", required=True, help="Category (must exist).")
@click.option("--subcategory", required=True, help="Subcategory of the category.")
@click.option("--price", required=True, help="Price in euros (e.g. 12.00).")
@click.option("--quantity", required=True, help="Stock: pieces or kilograms.")
@click.option(
    "--unit",
    type=click.Choice(sorted(_UNITS)),
    required=True,
    help="Sold by piece or by weight (kg).",
)
def product_add(
    title: str,
    description: str,
    category: str,
    subcategory: str,
    price: str,
    quantity: str,
    unit: str,
) -> None:
    """Add a new product to the catalog."""
    handler = AddProductHandler(
        catalog_repo=catalog_repository(),
        taxonomy_repo=taxonomy_repository(),
    )

    try:
        dto = handler.handle(
            title=title,
            description=description,
            category=category,
            subcategory=subcategory,
            price=price,
            quantity=quantity,
            unit=_UNITS[unit],
        )
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product '{dto.title}' added at {dto.price} ({dto.available} in stock)")


@click.command("edit")
@click.option("--title", required=True, help="Title of the product to edit.")
@click.option("--new-title", default=None, help="New title.")
@click.option("--description", default=None, help="New description.")
@click.option("--price", default=None, help="New price in euros.")
@click.option("--quantity", default=None, help="New stock level.")
def product_edit(
    title: str,
    new_title: str | None,
    description: str | None,
    price: str | None,
    quantity: str | None,
) -> None:
    """Edit a product; omitted options keep their current value."""
    handler = EditProductHandler(catalog_repo=catalog_repository())

    try:
        dto = handler.handle(
            title=title,
            new_title=new_title,
            description=description,
            price=price,
            quantity=quantity,
        )
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product '{dto.title}' updated: {dto.price}, {dto.available} in stock")


@click.command("stats")
def product_stats() -> None:
    """Show catalog size and the products that are out of stock."""
    stats = ProductStatsHandler(catalog_repo=catalog_repository()).handle()

    click.echo(f"Products in catalog:   {stats.total_products}")
    click.echo(f"Unavailable products:  {stats.unavailable_count}")
    for p in stats.unavailable:
        click.echo(f"  - {p.title}")


@click.command("remove")
@click.option("--title", required=True, help="Title of the product to remove.")
def product_remove(title: str) -> None:
    """Remove a product from the catalog."""
    handler = RemoveProductHandler(catalog_repo=catalog_repository())

    try:
        handler.handle(title)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product '{title}' removed.")
