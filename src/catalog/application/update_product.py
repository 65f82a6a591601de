"""Application service: Update Product use case.

Updates are a destructive full replace: the request carries the complete
desired state and both category and name are overwritten. A caller that
wants to keep one field must send its current value.
"""

from __future__ import annotations

from loguru import logger

from catalog.application.dto import UpdateProductRequest
from catalog.application.get_product import GetProductHandler
from catalog.domain.model.product import Product
from catalog.domain.repository.product_repository import ProductRepository


class UpdateProductHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self, request: UpdateProductRequest) -> Product:
        # Existence is checked before the fields are validated.
        product = GetProductHandler(self._product_repo).handle(request.id)

        previous = (product.category, product.name)
        product.replace_details(category=request.category, name=request.name)
        product = self._product_repo.save(product)

        logger.info(
            "Updated product #{}: {} -> {}",
            product.id,
            previous,
            (product.category, product.name),
        )
        return product
