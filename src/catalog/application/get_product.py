"""Application service: Get Product use case (query)."""

from __future__ import annotations

from loguru import logger

from catalog.domain.exceptions import EntityNotFoundError
from catalog.domain.model.product import Product
from catalog.domain.repository.product_repository import ProductRepository


class GetProductHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self, product_id: int) -> Product:
        product = self._product_repo.get_by_id(product_id)
        if product is None:
            logger.debug("Product #{} not found", product_id)
            raise EntityNotFoundError(f"Product #{product_id} not found")
        return product
