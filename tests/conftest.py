"""Shared pytest fixtures for all tests."""

import sqlite3
import pytest
from pathlib import Path

from backends.memory import InMemoryCategoryBackend
from config import Config, get_migrations_dir
from db.migrator import apply_pending_migrations
from services.base import Services


@pytest.fixture
def test_db():
    """Create an in-memory SQLite database for testing.

    Yields:
        sqlite3.Connection: Connection to in-memory database.
    """
    conn = sqlite3.connect(":memory:")
    yield conn
    conn.close()


@pytest.fixture
def test_config(tmp_path):
    """Create a test configuration pointing to a temporary directory.

    Args:
        tmp_path: pytest tmp_path fixture for temporary directory.

    Returns:
        Config: Test configuration object.
    """
    return Config(
        base_dir=tmp_path / "catalog",
        db_data_dir=tmp_path / "catalog" / "db",
        db_filename="test.db",
        backend="sqlite",
        log_level="DEBUG",
        log_dir=tmp_path / "catalog" / "logs",
    )


@pytest.fixture
def db_manager_with_schema(test_db, test_config):
    """Create a database manager over the in-memory database with migrations applied.

    Args:
        test_db: In-memory database connection fixture.
        test_config: Test configuration fixture.

    Returns:
        A DatabaseManager stand-in sharing one in-memory connection.
    """
    apply_pending_migrations(test_db, get_migrations_dir())

    class TestDatabaseManager:
        """Test database manager that uses in-memory connection."""

        def __init__(self, conn, config):
            self.conn = conn
            self.config = config

        def connect(self):
            """Return a context manager for the test connection."""
            return _TestConnectionContext(self.conn)

        def uses_database(self):
            """The test manager always backs SQLite."""
            return True

        def get_db_path(self):
            """Return a fake path for the test database."""
            return Path(":memory:")

        def get_migrations_dir(self):
            """Get the migrations directory path."""
            return get_migrations_dir()

    class _TestConnectionContext:
        """Context manager for test database connections."""

        def __init__(self, conn):
            self.conn = conn

        def __enter__(self):
            return self.conn

        def __exit__(self, exc_type, exc_val, exc_tb):
            # The test_db fixture owns the connection
            pass

    return TestDatabaseManager(test_db, test_config)


@pytest.fixture
def services(test_config, db_manager_with_schema):
    """Create a Services container backed by the in-memory SQLite database.

    Returns:
        Services: Services container for testing.
    """
    return Services(test_config, db_manager=db_manager_with_schema)


@pytest.fixture
def memory_services(test_config):
    """Create a Services container backed by the in-memory dict backend.

    Returns:
        Services: Services container for testing.
    """
    return Services(test_config, backend=InMemoryCategoryBackend())


@pytest.fixture(params=["sqlite", "memory"])
def any_services(request):
    """Services container for each backend, for behaviour both must share."""
    if request.param == "sqlite":
        return request.getfixturevalue("services")
    return request.getfixturevalue("memory_services")
