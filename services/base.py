"""Base services container for dependency injection."""

from backends import get_category_backend
from config import Config
from db.manager import DatabaseManager
from services.categories import CategoryService


class Services:
    """Container for all application services.

    Tests inject an in-memory database manager or a ready-made backend
    through the optional arguments.

    Args:
        config: Application configuration object.
        db_manager: Optional database manager. If None, one is built from config.
        backend: Optional category backend. If None, the configured one is built.
    """

    def __init__(self, config: Config, db_manager=None, backend=None):
        self.config = config
        self.db_manager = db_manager or DatabaseManager(config)
        self.backend = backend or get_category_backend(config, self.db_manager)
        self.categories = CategoryService(self.backend)
