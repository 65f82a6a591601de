from __future__ import annotations

from pathlib import Path

import click
from pydantic import ValidationError as PydanticValidationError

from catalog.infrastructure.cli.category_commands import category_list
from catalog.infrastructure.cli.product_commands import (
    product_create,
    product_delete,
    product_get,
    product_list,
    product_update,
)
from catalog.infrastructure.config import LOG_LEVELS, Settings
from catalog.infrastructure.logging_setup import setup_logging


@click.group()
@click.option(
    "--backend",
    type=click.Choice(["json", "sqlite"]),
    default=None,
    help="Storage backend (overrides CATALOG_BACKEND).",
)
@click.option(
    "--data-dir",
    type=click.Path(file_okay=False, path_type=Path),
    default=None,
    help="Directory holding the catalog data (overrides CATALOG_DATA_DIR).",
)
@click.option(
    "--log-level",
    type=click.Choice(LOG_LEVELS, case_sensitive=False),
    default=None,
    help="Log level (overrides CATALOG_LOG_LEVEL).",
)
@click.pass_context
def cli(
    ctx: click.Context,
    backend: str | None,
    data_dir: Path | None,
    log_level: str | None,
) -> None:
    """Catalog: Product Catalog Service"""
    overrides = {"backend": backend, "data_dir": data_dir, "log_level": log_level}
    try:
        settings = Settings(**{k: v for k, v in overrides.items() if v is not None})
    except PydanticValidationError as exc:
        raise click.UsageError(f"Invalid configuration: {exc}") from exc
    setup_logging(settings.log_level, settings.log_file, settings.json_logs)
    ctx.obj = settings


@cli.group()
def product() -> None:
    """Manage products."""


@cli.group()
def category() -> None:
    """Inspect categories."""


# Register subcommands
product.add_command(product_create)
product.add_command(product_delete)
product.add_command(product_get)
product.add_command(product_list)
product.add_command(product_update)
category.add_command(category_list)
