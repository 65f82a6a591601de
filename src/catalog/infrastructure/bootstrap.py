"""Composition root: wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

from loguru import logger

from catalog.domain.repository.product_repository import ProductRepository
from catalog.infrastructure.config import Settings, get_settings
from catalog.infrastructure.persistence.json_product_repository import (
    JsonProductRepository,
)
from catalog.infrastructure.persistence.sqlite_product_repository import (
    SqliteProductRepository,
)


def product_repository(settings: Settings | None = None) -> ProductRepository:
    settings = settings or get_settings()
    if settings.backend == "sqlite":
        logger.debug("Using SQLite catalog at {}", settings.database_file)
        return SqliteProductRepository(settings.database_file)
    logger.debug("Using JSON catalog at {}", settings.products_file)
    return JsonProductRepository(settings.products_file)
