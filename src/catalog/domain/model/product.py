"""Product aggregate.

Products are the only aggregate in the catalog. A product is *transient*
until a repository assigns it an id, and *persisted* afterwards. Categories
are plain strings grouped by equality; they are never stored on their own.
"""

from __future__ import annotations

from dataclasses import dataclass

from catalog.domain.exceptions import ValidationError


@dataclass
class Product:
    """A product in the catalog.

    Use the ``Product.create()`` factory for new products and
    ``replace_details()`` to change one. The ``__init__`` is kept simple
    so repositories can reconstitute persisted rows without re-validating.
    """

    id: int | None
    category: str
    name: str

    # --- Factory (used for NEW products only) ---------------------------------

    @staticmethod
    def create(category: str | None, name: str | None) -> Product:
        """Create a new transient product, enforcing field invariants."""
        return Product(
            id=None,
            category=_required("category", category),
            name=_required("name", name),
        )

    # --- State transitions ----------------------------------------------------

    def replace_details(self, category: str | None, name: str | None) -> None:
        """Replace both category and name.

        This is a full replace, not a merge: callers that want to keep a
        field unchanged must pass its current value. Absent or blank values
        are rejected rather than written over the existing ones.
        """
        new_category = _required("category", category)
        new_name = _required("name", name)
        self.category = new_category
        self.name = new_name

    @property
    def is_persisted(self) -> bool:
        return self.id is not None


def _required(field_name: str, value: str | None) -> str:
    # Blank means missing; anything else is stored exactly as given.
    if value is None or not value.strip():
        raise ValidationError(f"Product {field_name} is required")
    return value
