"""SQLite-backed implementation of ProductRepository.

Opens a fresh connection per operation; SQLite's own locking is the
only concurrency control, which gives last-writer-wins on updates.
"""

from __future__ import annotations

import sqlite3
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator

from catalog.domain.exceptions import StorageError
from catalog.domain.model.product import Product
from catalog.domain.model.value_objects import Page, PageRequest, Sort
from catalog.domain.repository.product_repository import ProductRepository

_SCHEMA = """
CREATE TABLE IF NOT EXISTS product (
    product_id INTEGER PRIMARY KEY AUTOINCREMENT,
    category   TEXT NOT NULL,
    name       TEXT NOT NULL
);
CREATE INDEX IF NOT EXISTS idx_product_category ON product (category);
"""

# Sort fields are whitelisted by the Sort value object; map them to columns.
_COLUMNS = {"id": "product_id", "category": "category", "name": "name"}


class SqliteProductRepository(ProductRepository):

    def __init__(self, db_path: Path) -> None:
        self._db_path = db_path
        try:
            self._db_path.parent.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            raise StorageError(f"Cannot create database directory: {exc}") from exc
        with self._connect() as conn:
            conn.executescript(_SCHEMA)

    # --- ProductRepository interface ------------------------------------------

    def get_by_id(self, product_id: int) -> Product | None:
        with self._connect() as conn:
            row = conn.execute(
                "SELECT product_id, category, name FROM product WHERE product_id = ?",
                (product_id,),
            ).fetchone()
        return self._to_domain(row) if row is not None else None

    def insert(self, product: Product) -> Product:
        if product.is_persisted:
            raise StorageError(f"Product #{product.id} is already persisted")
        with self._connect() as conn:
            cursor = conn.execute(
                "INSERT INTO product (category, name) VALUES (?, ?)",
                (product.category, product.name),
            )
            new_id = cursor.lastrowid
        # Assigned only once the transaction has committed.
        product.id = new_id
        return product

    def save(self, product: Product) -> Product:
        if not product.is_persisted:
            raise StorageError("Cannot save a product that has no ID")
        with self._connect() as conn:
            conn.execute(
                """
                INSERT INTO product (product_id, category, name) VALUES (?, ?, ?)
                ON CONFLICT (product_id) DO UPDATE
                    SET category = excluded.category, name = excluded.name
                """,
                (product.id, product.category, product.name),
            )
        return product

    def delete(self, product: Product) -> None:
        with self._connect() as conn:
            conn.execute("DELETE FROM product WHERE product_id = ?", (product.id,))

    def find_by_category(
        self,
        category: str,
        page_request: PageRequest,
        sort: Sort,
    ) -> Page[Product]:
        column = _COLUMNS[sort.field]
        direction = "DESC" if sort.descending else "ASC"
        query = f"""
        SELECT
            product_id,
            category,
            name
        FROM
            product
        WHERE
            category = ?
        ORDER BY
            {column} {direction}, product_id ASC
        LIMIT ? OFFSET ?;
        """

        with self._connect() as conn:
            (total,) = conn.execute(
                "SELECT COUNT(*) FROM product WHERE category = ?", (category,)
            ).fetchone()
            rows = conn.execute(
                query, (category, page_request.size, page_request.offset)
            ).fetchall()

        return Page(
            items=[self._to_domain(row) for row in rows],
            total_elements=total,
            page=page_request.page,
            size=page_request.size,
        )

    def list_distinct_categories(self) -> list[str]:
        with self._connect() as conn:
            rows = conn.execute(
                "SELECT DISTINCT category FROM product ORDER BY category"
            ).fetchall()
        return [row["category"] for row in rows]

    # --- Helpers --------------------------------------------------------------

    @staticmethod
    def _to_domain(row: sqlite3.Row) -> Product:
        return Product(
            id=row["product_id"],
            category=row["category"],
            name=row["name"],
        )

    @contextmanager
    def _connect(self) -> Iterator[sqlite3.Connection]:
        """Yield a connection inside a transaction, then close it.

        Commits on success, rolls back on error; sqlite3 errors are
        re-raised as StorageError.
        """
        try:
            conn = sqlite3.connect(self._db_path)
        except sqlite3.Error as exc:
            raise StorageError(f"Cannot open database {self._db_path}: {exc}") from exc
        conn.row_factory = sqlite3.Row
        try:
            with conn:
                yield conn
        except sqlite3.Error as exc:
            raise StorageError(f"Database operation failed: {exc}") from exc
        finally:
            conn.close()
