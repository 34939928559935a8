"""Factory for creating category backend instances."""

from config import Config
from backends.base import CategoryBackend
from backends.memory import InMemoryCategoryBackend
from backends.sqlite import SqliteCategoryBackend
from logger import get_logger

logger = get_logger()

BACKENDS = ("sqlite", "memory")


def get_category_backend(config: Config, db_manager=None) -> CategoryBackend:
    """Create the category backend named in the configuration.

    Args:
        config: Application configuration.
        db_manager: Database manager used by the SQLite backend.

    Returns:
        CategoryBackend instance.

    Raises:
        ValueError: If the backend name is unknown, or SQLite is selected
            without a database manager.
    """
    backend_name = config.backend

    if backend_name == "sqlite":
        if db_manager is None:
            raise ValueError("SQLite backend selected but no database manager given")
        logger.debug(f"Using SQLite category backend ({db_manager.get_db_path()})")
        return SqliteCategoryBackend(db_manager)

    elif backend_name == "memory":
        logger.debug("Using in-memory category backend")
        return InMemoryCategoryBackend()

    else:
        raise ValueError(
            f"Unknown category backend: {backend_name} "
            f"(expected one of: {', '.join(BACKENDS)})"
        )
