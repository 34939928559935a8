"""SQLite category backend."""

import sqlite3
from typing import List, Optional
from backends.base import CategoryBackend
from exceptions import DuplicateNameError, NotFoundError
from models.category import Category


class SqliteCategoryBackend(CategoryBackend):
    """Stores categories in the `categories` table.

    Identifiers come from the table's AUTOINCREMENT key. Name uniqueness on
    insert is enforced by the `categories_unique_name_on_insert` trigger, and
    the resulting IntegrityError is reported as DuplicateNameError.
    """

    def __init__(self, db_manager):
        """Initialize the backend.

        Args:
            db_manager: Database manager providing `connect()`.
        """
        self.db_manager = db_manager

    def find_all(self) -> List[Category]:
        with self.db_manager.connect() as conn:
            cursor = conn.execute("SELECT id, name FROM categories ORDER BY id")
            return [Category(id=row[0], name=row[1]) for row in cursor.fetchall()]

    def find_by_id(self, category_id: int) -> Optional[Category]:
        with self.db_manager.connect() as conn:
            cursor = conn.execute(
                "SELECT id, name FROM categories WHERE id = ?", (category_id,)
            )
            row = cursor.fetchone()

            if row:
                return Category(id=row[0], name=row[1])
            return None

    def find_by_name(self, name: str) -> Optional[Category]:
        with self.db_manager.connect() as conn:
            cursor = conn.execute(
                "SELECT id, name FROM categories WHERE name = ?", (name,)
            )
            row = cursor.fetchone()

            if row:
                return Category(id=row[0], name=row[1])
            return None

    def save(self, category: Category) -> Category:
        if category.id is None:
            return self._insert(category)
        return self._update(category)

    def delete(self, category: Category) -> None:
        with self.db_manager.connect() as conn:
            conn.execute("DELETE FROM categories WHERE id = ?", (category.id,))
            conn.commit()

    def _insert(self, category: Category) -> Category:
        with self.db_manager.connect() as conn:
            try:
                cursor = conn.execute(
                    "INSERT INTO categories (name) VALUES (?)", (category.name,)
                )
                conn.commit()
            except sqlite3.IntegrityError as e:
                conn.rollback()
                raise DuplicateNameError(category.name) from e

            return Category(id=cursor.lastrowid, name=category.name)

    def _update(self, category: Category) -> Category:
        with self.db_manager.connect() as conn:
            cursor = conn.execute(
                "UPDATE categories SET name = ? WHERE id = ?",
                (category.name, category.id),
            )
            conn.commit()

            if cursor.rowcount == 0:
                raise NotFoundError("Category", "id", category.id)

            return Category(id=category.id, name=category.name)
