"""Persistence backend interface for category records."""

from abc import ABC, abstractmethod
from typing import List, Optional
from models.category import Category


class CategoryBackend(ABC):
    """Abstract base class for category storage.

    Implementations own identifier assignment and are the authority on name
    uniqueness at insert time. Every record they return is a copy, so callers
    may mutate it freely.
    """

    @abstractmethod
    def find_all(self) -> List[Category]:
        """Return all stored categories ordered by identifier."""
        pass

    @abstractmethod
    def find_by_id(self, category_id: int) -> Optional[Category]:
        """Return the category with the given identifier, or None."""
        pass

    @abstractmethod
    def find_by_name(self, name: str) -> Optional[Category]:
        """Return the category with exactly this name (case-sensitive), or None."""
        pass

    @abstractmethod
    def save(self, category: Category) -> Category:
        """Insert or update a category.

        A category without an id is inserted and receives a new identifier.
        A category with an id replaces the stored record with that id.

        Args:
            category: The record to persist.

        Returns:
            The persisted record with its identifier populated.

        Raises:
            DuplicateNameError: If an insert uses a name that is already stored.
            NotFoundError: If an update targets an identifier that is not stored.
        """
        pass

    @abstractmethod
    def delete(self, category: Category) -> None:
        """Remove the stored record with the category's identifier."""
        pass
