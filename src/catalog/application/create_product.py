"""Application service: Create Product use case."""

from __future__ import annotations

from loguru import logger

from catalog.application.dto import CreateProductRequest
from catalog.domain.model.product import Product
from catalog.domain.repository.product_repository import ProductRepository


class CreateProductHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self, request: CreateProductRequest) -> Product:
        """Add a new product to the catalog.

        Both category and name are required; the repository assigns the ID.
        """
        product = Product.create(category=request.category, name=request.name)
        product = self._product_repo.insert(product)
        logger.info(
            "Created product #{} '{}' in category '{}'",
            product.id,
            product.name,
            product.category,
        )
        return product
