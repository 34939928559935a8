"""SQLite connections for the category store."""

import sqlite3
from contextlib import contextmanager
from config import Config, get_migrations_dir

# Seconds a connection waits on another writer's lock before raising
BUSY_TIMEOUT = 5.0


class DatabaseManager:
    """Opens short-lived connections to the configured SQLite file.

    Each backend call gets its own connection, so the database file's locking
    is the only coordination between concurrent writers.

    Args:
        config: Application configuration object.
        timeout: Busy-wait limit in seconds for a locked database.
    """

    def __init__(self, config: Config, timeout: float = BUSY_TIMEOUT):
        self.config = config
        self.timeout = timeout

    def uses_database(self) -> bool:
        """Whether the configured backend stores categories in SQLite."""
        return self.config.backend == "sqlite"

    @contextmanager
    def connect(self):
        """Open a connection, creating the data directory on first use.

        Yields:
            sqlite3.Connection: Connection closed when the block exits.

        Raises:
            sqlite3.OperationalError: If the database stays locked past the timeout.
        """
        db_path = self.config.db_path
        db_path.parent.mkdir(parents=True, exist_ok=True)

        conn = sqlite3.connect(db_path, timeout=self.timeout)
        try:
            yield conn
        finally:
            conn.close()

    def get_db_path(self):
        return self.config.db_path

    def get_migrations_dir(self):
        return get_migrations_dir()
