"""Connection management for the SQLite work-log database.

One connection per process, opened lazily on the configured ``data_path``
with WAL journaling and foreign keys, migrated to the latest schema before
first use.
"""

from __future__ import annotations

import atexit
import sqlite3
from pathlib import Path

from platformdirs import user_data_dir

from worklog_cli.adapters.sqlite.migrations import ALL_MIGRATIONS, MigrationRunner
from worklog_cli.models.exceptions import StorageError
from worklog_cli.utils.logger import get_logger


def default_db_path() -> Path:
    """Default database location inside the platform data directory."""
    return Path(user_data_dir("worklog_cli")) / "worklog.db"


def _prepare(connection: sqlite3.Connection) -> sqlite3.Connection:
    connection.row_factory = sqlite3.Row
    connection.execute("PRAGMA foreign_keys = ON")
    MigrationRunner(connection).run_migrations(ALL_MIGRATIONS)
    return connection


class DatabaseConnection:
    """Process-wide holder of the open database connection.

    Asking for a different path closes the current connection first.
    """

    _instance: DatabaseConnection | None = None
    _connection: sqlite3.Connection | None = None
    _db_path: Path | None = None
    _cleanup_registered = False

    def __new__(cls) -> DatabaseConnection:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    @classmethod
    def get_connection(cls, db_path: str | Path | None = None) -> sqlite3.Connection:
        """Get or open the connection to *db_path* (default location if None).

        Raises:
            StorageError: If the file cannot be created, opened or migrated
        """
        instance = cls()
        db_path = default_db_path() if db_path is None else Path(db_path)

        if instance._connection is not None:
            if instance._db_path == db_path:
                return instance._connection
            cls.close_connection()

        try:
            db_path.parent.mkdir(parents=True, exist_ok=True)
            connection = sqlite3.connect(str(db_path), timeout=30.0)
            connection.execute("PRAGMA journal_mode = WAL")
            _prepare(connection)
        except (OSError, RuntimeError, sqlite3.Error) as e:
            raise StorageError(f"Failed to open database {db_path}: {e}") from e
        get_logger("storage").debug("opened database %s", db_path)

        instance._connection = connection
        instance._db_path = db_path
        if not cls._cleanup_registered:
            atexit.register(cls.close_connection)
            cls._cleanup_registered = True
        return connection

    @classmethod
    def close_connection(cls) -> None:
        """Commit and close the open connection, if any."""
        instance = cls()
        if instance._connection is None:
            return
        try:
            instance._connection.commit()
            instance._connection.close()
        except sqlite3.Error as e:
            get_logger("storage").warning("error closing database: %s", e)
        finally:
            instance._connection = None
            instance._db_path = None

    @classmethod
    def get_db_path(cls) -> Path | None:
        return cls()._db_path


def get_connection(db_path: str | Path | None = None) -> sqlite3.Connection:
    """Helper function to get database connection."""
    return DatabaseConnection.get_connection(db_path)


def open_memory_database() -> sqlite3.Connection:
    """Fresh in-memory database with all migrations applied."""
    return _prepare(sqlite3.connect(":memory:"))
