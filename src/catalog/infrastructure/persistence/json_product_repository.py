"""JSON-file-backed implementation of ProductRepository."""

from __future__ import annotations

import json
import os
import tempfile
import threading
from pathlib import Path

from loguru import logger

from catalog.domain.exceptions import StorageError
from catalog.domain.model.product import Product
from catalog.domain.model.value_objects import Page, PageRequest, Sort
from catalog.domain.repository.product_repository import ProductRepository

# One lock per catalog file, shared by every repository instance in the
# process. Processes are not coordinated with each other.
_FILE_LOCKS: dict[Path, threading.RLock] = {}
_FILE_LOCKS_GUARD = threading.Lock()


def _lock_for(file_path: Path) -> threading.RLock:
    key = file_path.resolve()
    with _FILE_LOCKS_GUARD:
        return _FILE_LOCKS.setdefault(key, threading.RLock())


class JsonProductRepository(ProductRepository):
    """Keeps the whole catalog as a list of records in one JSON file.

    Every write is a read-modify-write of the file under a lock shared by
    all instances pointing at the same path, so concurrent inserts get
    distinct ids and concurrent updates resolve as last-writer-wins. The
    file is replaced atomically, so readers never see a partial write.
    """

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path
        self._lock = _lock_for(file_path)
        self._ensure_file()

    # --- ProductRepository interface ------------------------------------------

    def get_by_id(self, product_id: int) -> Product | None:
        return self._load().get(product_id)

    def insert(self, product: Product) -> Product:
        if product.is_persisted:
            raise StorageError(f"Product #{product.id} is already persisted")
        with self._lock:
            products = self._load()
            new_id = max(products, default=0) + 1
            products[new_id] = Product(
                id=new_id, category=product.category, name=product.name
            )
            self._persist(products)
        # Only a product that reached the file gets an id.
        product.id = new_id
        return product

    def save(self, product: Product) -> Product:
        if not product.is_persisted:
            raise StorageError("Cannot save a product that has no ID")
        with self._lock:
            products = self._load()
            products[product.id] = product  # type: ignore[index]
            self._persist(products)
        return product

    def delete(self, product: Product) -> None:
        with self._lock:
            products = self._load()
            if products.pop(product.id, None) is None:  # type: ignore[arg-type]
                logger.warning("Product #{} was already gone from {}", product.id, self._file_path)
                return
            self._persist(products)

    def find_by_category(
        self,
        category: str,
        page_request: PageRequest,
        sort: Sort,
    ) -> Page[Product]:
        matching = [p for p in self._load().values() if p.category == category]
        # Two stable sorts: id first, then the requested field.
        matching.sort(key=lambda p: p.id)
        matching.sort(key=lambda p: getattr(p, sort.field), reverse=sort.descending)

        start = page_request.offset
        return Page(
            items=matching[start:start + page_request.size],
            total_elements=len(matching),
            page=page_request.page,
            size=page_request.size,
        )

    def list_distinct_categories(self) -> list[str]:
        return sorted({p.category for p in self._load().values()})

    # --- Serialization helpers ------------------------------------------------

    def _load(self) -> dict[int, Product]:
        with self._lock:
            try:
                raw = json.loads(self._file_path.read_text(encoding="utf-8"))
                return {
                    item["id"]: Product(
                        id=item["id"],
                        category=item["category"],
                        name=item["name"],
                    )
                    for item in raw
                }
            except (OSError, ValueError, KeyError, TypeError) as exc:
                raise StorageError(
                    f"Cannot read product catalog from {self._file_path}: {exc}"
                ) from exc

    def _persist(self, products: dict[int, Product]) -> None:
        raw = [
            {"id": p.id, "category": p.category, "name": p.name}
            for p in sorted(products.values(), key=lambda p: p.id)
        ]
        self._write_atomic(json.dumps(raw, indent=2) + "\n")

    def _write_atomic(self, text: str) -> None:
        """Write to a temp file beside the catalog, then swap it in."""
        tmp_name = None
        try:
            with tempfile.NamedTemporaryFile(
                "w",
                encoding="utf-8",
                dir=self._file_path.parent,
                prefix=f".{self._file_path.name}.",
                suffix=".tmp",
                delete=False,
            ) as tmp:
                tmp_name = tmp.name
                tmp.write(text)
            os.replace(tmp_name, self._file_path)
        except OSError as exc:
            if tmp_name is not None and os.path.exists(tmp_name):
                os.unlink(tmp_name)
            raise StorageError(
                f"Cannot write product catalog to {self._file_path}: {exc}"
            ) from exc

    def _ensure_file(self) -> None:
        with self._lock:
            try:
                if self._file_path.exists():
                    return
                self._file_path.parent.mkdir(parents=True, exist_ok=True)
            except OSError as exc:
                raise StorageError(
                    f"Cannot create product catalog at {self._file_path}: {exc}"
                ) from exc
            self._write_atomic("[]")
