"""CLI commands for the Product aggregate."""

from __future__ import annotations

import click

from catalog.application.create_product import CreateProductHandler
from catalog.application.delete_product import DeleteProductHandler
from catalog.application.dto import (
    DEFAULT_PAGE_SIZE,
    CreateProductRequest,
    ListByCategoryRequest,
    UpdateProductRequest,
)
from catalog.application.get_product import GetProductHandler
from catalog.application.list_products import ListProductsByCategoryHandler
from catalog.application.update_product import UpdateProductHandler
from catalog.domain.model.product import Product
from catalog.infrastructure.bootstrap import product_repository
from catalog.infrastructure.cli.errors import domain_errors
from catalog.infrastructure.config import Settings


def _display_product(product: Product) -> None:
    click.echo(f"Product #{product.id}")
    click.echo(f"Category: {product.category}")
    click.echo(f"Name:     {product.name}")


@click.command("get")
@click.option("--id", "product_id", required=True, type=int, help="Product ID.")
@click.pass_obj
def product_get(settings: Settings, product_id: int) -> None:
    """Show a single product."""
    with domain_errors():
        handler = GetProductHandler(product_repo=product_repository(settings))
        product = handler.handle(product_id)

    _display_product(product)


@click.command("create")
@click.option("--category", required=True, help="Product category.")
@click.option("--name", required=True, help="Product name.")
@click.pass_obj
def product_create(settings: Settings, category: str, name: str) -> None:
    """Add a new product to the catalog."""
    with domain_errors():
        handler = CreateProductHandler(product_repo=product_repository(settings))
        product = handler.handle(CreateProductRequest(category=category, name=name))

    click.echo(f"Product #{product.id} '{product.name}' created in '{product.category}'")


@click.command("update")
@click.option("--id", "product_id", required=True, type=int, help="Product ID.")
@click.option("--category", required=True, help="New category (replaces the old one).")
@click.option("--name", required=True, help="New name (replaces the old one).")
@click.pass_obj
def product_update(settings: Settings, product_id: int, category: str, name: str) -> None:
    """Replace a product's category and name.

    Both values are required: this is a full replace, not a patch.
    """
    with domain_errors():
        handler = UpdateProductHandler(product_repo=product_repository(settings))
        product = handler.handle(
            UpdateProductRequest(id=product_id, category=category, name=name)
        )

    click.echo(f"Product #{product.id} updated")
    _display_product(product)


@click.command("delete")
@click.option("--id", "product_id", required=True, type=int, help="Product ID.")
@click.pass_obj
def product_delete(settings: Settings, product_id: int) -> None:
    """Remove a product from the catalog."""
    with domain_errors():
        handler = DeleteProductHandler(product_repo=product_repository(settings))
        handler.handle(product_id)

    click.echo(f"Product #{product_id} deleted.")


@click.command("list")
@click.option("--category", required=True, help="Category to list.")
@click.option("--page", default=0, show_default=True, type=int, help="Zero-based page index.")
@click.option("--size", default=DEFAULT_PAGE_SIZE, show_default=True, type=int, help="Page size.")
@click.pass_obj
def product_list(settings: Settings, category: str, page: int, size: int) -> None:
    """List one page of products in a category."""
    with domain_errors():
        handler = ListProductsByCategoryHandler(product_repo=product_repository(settings))
        response = handler.handle(
            ListByCategoryRequest(category=category, page=page, size=size)
        )

    if not response.items:
        click.echo(f"No products found in '{category}' on page {response.page}.")
    else:
        click.echo(f"{'ID':<6} {'Category':<20} {'Name':<30}")
        click.echo("-" * 58)
        for item in response.items:
            click.echo(f"{item.id:<6} {item.category:<20} {item.name:<30}")

    click.echo(
        f"Page {response.page + 1} of {response.total_pages} "
        f"({response.total_elements} product(s) total)"
    )
    if response.has_next:
        click.echo(f"More results: --page {response.page + 1}")
