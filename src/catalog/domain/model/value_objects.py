"""Value Objects for paged, sorted queries.

Value Objects are immutable and compared by value, not identity.
They encapsulate validation so an invalid page request can never exist.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum
from typing import Generic, TypeVar

from catalog.domain.exceptions import ValidationError

T = TypeVar("T")

SORTABLE_FIELDS = ("id", "category", "name")


@dataclass(frozen=True)
class PageRequest:
    """A zero-based page index plus a page size.

    Enforces ``page >= 0`` and ``size >= 1``.
    """

    page: int
    size: int

    def __post_init__(self) -> None:
        for label, value in (("page", self.page), ("size", self.size)):
            if not isinstance(value, int) or isinstance(value, bool):
                raise ValidationError(
                    f"Page {label} must be an integer, got {type(value).__name__}"
                )
        if self.page < 0:
            raise ValidationError(f"Page index cannot be negative, got {self.page}")
        if self.size < 1:
            raise ValidationError(f"Page size must be at least 1, got {self.size}")

    @property
    def offset(self) -> int:
        return self.page * self.size


class SortDirection(Enum):
    ASC = "ASC"
    DESC = "DESC"


@dataclass(frozen=True)
class Sort:
    """Ordering applied to a paged query.

    Stores always break ties by ascending ``id`` after this ordering,
    so pages are stable across calls.
    """

    field: str
    direction: SortDirection = SortDirection.ASC

    def __post_init__(self) -> None:
        if self.field not in SORTABLE_FIELDS:
            raise ValidationError(
                f"Cannot sort by '{self.field}' "
                f"(expected one of {', '.join(SORTABLE_FIELDS)})"
            )

    @property
    def descending(self) -> bool:
        return self.direction is SortDirection.DESC

    # --- Factory --------------------------------------------------------------

    @staticmethod
    def asc(field: str) -> Sort:
        return Sort(field, SortDirection.ASC)


@dataclass(frozen=True)
class Page(Generic[T]):
    """One slice of a larger result set.

    ``total_elements`` counts the *whole* matching set, not just ``items``,
    so callers can tell whether more pages exist without another query.
    """

    items: list[T]
    total_elements: int
    page: int
    size: int

    @property
    def total_pages(self) -> int:
        if self.total_elements == 0:
            return 0
        return math.ceil(self.total_elements / self.size)

    @property
    def has_next(self) -> bool:
        return self.page + 1 < self.total_pages
