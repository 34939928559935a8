"""Storage backends for category records."""

from backends.base import CategoryBackend
from backends.factory import get_category_backend

__all__ = ["CategoryBackend", "get_category_backend"]
