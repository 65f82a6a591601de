"""Application service: Delete Product use case.

Delete is not idempotent: removing an ID that no longer exists raises
EntityNotFoundError, the same as any other lookup.
"""

from __future__ import annotations

from loguru import logger

from catalog.application.get_product import GetProductHandler
from catalog.domain.repository.product_repository import ProductRepository


class DeleteProductHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self, product_id: int) -> None:
        product = GetProductHandler(self._product_repo).handle(product_id)
        self._product_repo.delete(product)
        logger.info("Deleted product #{} '{}'", product_id, product.name)
