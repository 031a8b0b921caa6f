"""CLI commands for the category taxonomy."""

from __future__ import annotations

import click

from market.domain.exceptions import DomainException
from market.infrastructure.bootstrap import taxonomy_repository


@click.command("list")
def category_list() -> None:
    """List categories and their subcategories."""
    try:
        taxonomy = taxonomy_repository().load()
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if not taxonomy.categories:
        click.echo("No categories found.")
        return

    for category, subcategories in taxonomy.categories.items():
        click.echo(category)
        for sub in subcategories:
            click.echo(f"  - {sub}")
