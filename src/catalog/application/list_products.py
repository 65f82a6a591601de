"""Application service: List Products By Category use case (query).

The ordering is fixed: ascending by category, then by ID. Since every
row in the result shares one category, the effective order is by ID.
"""

from __future__ import annotations

from loguru import logger

from catalog.application.dto import ListByCategoryRequest, ProductListResponse
from catalog.domain.model.value_objects import PageRequest, Sort
from catalog.domain.repository.product_repository import ProductRepository

DEFAULT_SORT = Sort.asc("category")


class ListProductsByCategoryHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self, request: ListByCategoryRequest) -> ProductListResponse:
        page_request = PageRequest(page=request.page, size=request.size)

        page = self._product_repo.find_by_category(
            request.category, page_request, DEFAULT_SORT
        )
        logger.debug(
            "Category '{}' page {}: {} of {} product(s)",
            request.category,
            page.page,
            len(page.items),
            page.total_elements,
        )
        return ProductListResponse.from_page(page)
