"""Errors raised by the category service and its backends."""


class CategoryError(Exception):
    """Base class for category errors surfaced to request handlers."""


class DuplicateNameError(CategoryError):
    """A live category already uses the requested name."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Category with the name {name} already exists")


class NotFoundError(CategoryError):
    """No live record matches the requested identifier."""

    def __init__(self, resource: str, field: str, value):
        self.resource = resource
        self.field = field
        self.value = value
        super().__init__(f"{resource} not found with {field}: {value}")
