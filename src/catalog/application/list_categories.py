"""Application service: List Categories use case (query)."""

from __future__ import annotations

from catalog.domain.repository.product_repository import ProductRepository


class ListCategoriesHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self) -> list[str]:
        """Return each category in use exactly once, sorted ascending."""
        return self._product_repo.list_distinct_categories()
