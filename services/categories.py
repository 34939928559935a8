"""Category service: the create/list/update/delete rules for categories."""

from typing import List
from backends.base import CategoryBackend
from exceptions import DuplicateNameError, NotFoundError
from models.category import Category


class CategoryService:
    """Service for managing categories.

    Name uniqueness is checked on create only. Renaming a category to a name
    another category already uses is allowed by update; whether that should
    be rejected is an open product question.
    """

    def __init__(self, backend: CategoryBackend):
        """Initialize the category service.

        Args:
            backend: Storage backend that assigns identifiers and persists records.
        """
        self.backend = backend

    def list(self) -> List[Category]:
        """Get all categories.

        Returns:
            List of Category objects in creation order.
        """
        return self.backend.find_all()

    def create(self, category: Category) -> Category:
        """Create a new category.

        Any id already set on `category` is ignored; the backend assigns one.

        Args:
            category: Category carrying the name to create.

        Returns:
            The created Category with id populated.

        Raises:
            DuplicateNameError: If a category with the same name exists.
        """
        if self.backend.find_by_name(category.name) is not None:
            raise DuplicateNameError(category.name)

        # The backend repeats the check atomically and has the final word
        return self.backend.save(Category(name=category.name))

    def update(self, category: Category, category_id: int) -> Category:
        """Replace the name of an existing category.

        Args:
            category: Payload carrying the new name. Its id is overwritten.
            category_id: The category ID to update.

        Returns:
            The updated Category.

        Raises:
            NotFoundError: If no category has that ID.
        """
        if self.backend.find_by_id(category_id) is None:
            raise NotFoundError("Category", "id", category_id)

        category.id = category_id
        return self.backend.save(category)

    def delete(self, category_id: int) -> str:
        """Delete a category by ID.

        Args:
            category_id: The category ID to delete.

        Returns:
            Confirmation message naming the deleted ID.

        Raises:
            NotFoundError: If no category has that ID.
        """
        category = self.backend.find_by_id(category_id)
        if category is None:
            raise NotFoundError("Category", "id", category_id)

        self.backend.delete(category)
        return f"Category with ID {category_id} has been deleted"
