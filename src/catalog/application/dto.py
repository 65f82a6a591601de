"""Data Transfer Objects: plain containers that cross layer boundaries.

DTOs carry data between the CLI and application layers without
exposing domain internals to the outside world.
"""

from __future__ import annotations

from dataclasses import dataclass

from catalog.domain.model.product import Product
from catalog.domain.model.value_objects import Page

DEFAULT_PAGE_SIZE = 10


@dataclass(frozen=True)
class CreateProductRequest:
    """Input: a new product's category and name (both required)."""

    category: str | None
    name: str | None


@dataclass(frozen=True)
class UpdateProductRequest:
    """Input: the complete desired state of an existing product.

    Both fields replace the stored ones; nothing is merged.
    """

    id: int
    category: str | None
    name: str | None


@dataclass(frozen=True)
class ListByCategoryRequest:
    """Input: which category to page through, and which page."""

    category: str
    page: int = 0
    size: int = DEFAULT_PAGE_SIZE


@dataclass(frozen=True)
class ProductDTO:
    """Output: a single product as displayed to the user."""

    id: int
    category: str
    name: str

    @staticmethod
    def from_domain(product: Product) -> ProductDTO:
        return ProductDTO(
            id=product.id,  # type: ignore[arg-type]
            category=product.category,
            name=product.name,
        )


@dataclass(frozen=True)
class ProductListResponse:
    """Output: one page of products plus totals over the whole category."""

    items: list[ProductDTO]
    total_pages: int
    total_elements: int
    page: int
    has_next: bool = False

    @staticmethod
    def from_page(page: Page[Product]) -> ProductListResponse:
        return ProductListResponse(
            items=[ProductDTO.from_domain(p) for p in page.items],
            total_pages=page.total_pages,
            total_elements=page.total_elements,
            page=page.page,
            has_next=page.has_next,
        )
