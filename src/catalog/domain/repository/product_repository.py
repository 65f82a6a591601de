"""Abstract repository for Product aggregate.

Defined in the domain layer so the domain never depends on
infrastructure. Concrete implementations (JSON, SQLite) live in the
infrastructure layer. Any failure of the underlying medium surfaces
as ``StorageError``.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from catalog.domain.model.product import Product
from catalog.domain.model.value_objects import Page, PageRequest, Sort


class ProductRepository(ABC):

    @abstractmethod
    def get_by_id(self, product_id: int) -> Product | None:
        """Return a product by its ID, or None if not found."""

    @abstractmethod
    def insert(self, product: Product) -> Product:
        """Assign a new unique ID to a transient product and persist it."""

    @abstractmethod
    def save(self, product: Product) -> Product:
        """Persist the current state of an already-persisted product."""

    @abstractmethod
    def delete(self, product: Product) -> None:
        """Remove a persisted product. Callers verify existence first."""

    @abstractmethod
    def find_by_category(
        self,
        category: str,
        page_request: PageRequest,
        sort: Sort,
    ) -> Page[Product]:
        """Return one page of products whose category equals ``category``.

        Results are ordered by ``sort`` with ascending ID as tiebreak.
        Totals cover every matching product, not only the returned page.
        """

    @abstractmethod
    def list_distinct_categories(self) -> list[str]:
        """Return every distinct category, sorted ascending."""
