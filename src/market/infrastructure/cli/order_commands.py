"""CLI commands for placing orders and reading order history."""

from __future__ import annotations

import click

from market.application.dto import CartItemSpec, OrderDTO
from market.application.place_order import PlaceOrderHandler
from market.application.show_orders import ShowOrderHistoryHandler
from market.domain.exceptions import DomainException
from market.infrastructure.bootstrap import catalog_repository, order_repository


def _parse_items(raw_items: tuple[str, ...]) -> list[CartItemSpec]:
    """Parse ('Apples:1,5', 'Salmon:2') into CartItemSpec list."""
    specs: list[CartItemSpec] = []
    for raw in raw_items:
        if ":" not in raw:
            raise click.BadParameter(
                f"Invalid item format '{raw}'. Expected 'ProductTitle:Quantity'.",
                param_hint="'--item'",
            )
        title, qty = raw.rsplit(":", 1)
        qty = qty.strip().replace(",", ".")
        if not qty:
            raise click.BadParameter(
                f"Missing quantity for product '{title.strip()}'.",
                param_hint="'--item'",
            )
        specs.append(CartItemSpec(product_title=title.strip(), quantity=qty))
    return specs


def _display_order(dto: OrderDTO) -> None:
    """Shared formatting for displaying an order."""
    click.echo(f"Order {dto.id}")
    click.echo(f"Customer: {dto.customer_name}")
    click.echo(f"Created:  {dto.created_at}")
    click.echo()
    click.echo(f"  {'Product':<28} {'Qty':>14} {'Price':>9} {'Total':>10}")
    click.echo(f"  {'-'*64}")
    for line in dto.lines:
        click.echo(
            f"  {line.product_title:<28} {line.quantity:>14} {line.unit_price:>9} {line.line_total:>10}"
        )
    click.echo(f"  {'-'*64}")
    click.echo(f"  {'Order Total':<28} {dto.total:>35}")


@click.command("place")
@click.option("--customer", required=True, help="Customer name.")
@click.option(
    "--item",
    "items",
    multiple=True,
    required=True,
    help="'Title:Qty' for one product; repeat for more (decimal comma allowed).",
)
def order_place(customer: str, items: tuple[str, ...]) -> None:
    """Fill a cart and check it out in one step."""
    specs = _parse_items(items)

    handler = PlaceOrderHandler(
        catalog_repo=catalog_repository(),
        order_repo=order_repository(),
    )

    try:
        dto = handler.handle(customer_name=customer, item_specs=specs)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo("Order completed!")
    _display_order(dto)


@click.command("history")
@click.option("--customer", required=True, help="Customer name.")
def order_history(customer: str) -> None:
    """Show every completed order of a customer, oldest first."""
    handler = ShowOrderHistoryHandler(order_repo=order_repository())

    try:
        orders = handler.handle(customer)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if not orders:
        click.echo("No orders found.")
        return

    for i, dto in enumerate(orders, start=1):
        if i > 1:
            click.echo()
        click.echo(f"#{i}")
        _display_order(dto)
