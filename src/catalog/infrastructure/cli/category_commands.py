"""CLI commands for categories."""

from __future__ import annotations

import click

from catalog.application.list_categories import ListCategoriesHandler
from catalog.infrastructure.bootstrap import product_repository
from catalog.infrastructure.cli.errors import domain_errors
from catalog.infrastructure.config import Settings


@click.command("list")
@click.pass_obj
def category_list(settings: Settings) -> None:
    """List every category currently in use."""
    with domain_errors():
        handler = ListCategoriesHandler(product_repo=product_repository(settings))
        categories = handler.handle()

    if not categories:
        click.echo("No categories found.")
        return

    for category in categories:
        click.echo(category)
