"""Forward-only schema migrations for the work-log database.

Every applied migration is recorded in ``schema_version``; opening a
database applies whatever is missing, in version order.
"""

from __future__ import annotations

import sqlite3
from collections.abc import Iterable
from datetime import UTC, datetime

from worklog_cli.utils.logger import get_logger

CREATE_SCHEMA_VERSION_TABLE = """
CREATE TABLE IF NOT EXISTS schema_version (
    version INTEGER PRIMARY KEY,
    description TEXT NOT NULL,
    applied_at DATETIME NOT NULL
)
"""


class Migration:
    """One schema step.

    Subclasses set ``version`` and ``description`` and either list their
    DDL in ``statements`` or override ``up``.
    """

    version: int
    description: str
    statements: tuple[str, ...] = ()

    def up(self, connection: sqlite3.Connection) -> None:
        for sql in self.statements:
            connection.execute(sql)

    def __repr__(self) -> str:
        return f"<Migration {self.version}: {self.description}>"


class MigrationRunner:
    """Applies migrations to one connection."""

    def __init__(self, connection: sqlite3.Connection):
        self.connection = connection
        self.connection.execute(CREATE_SCHEMA_VERSION_TABLE)
        self.connection.commit()

    def get_current_version(self) -> int:
        """Highest applied version, 0 for an empty database."""
        row = self.connection.execute("SELECT MAX(version) FROM schema_version").fetchone()
        return row[0] or 0

    def pending(self, migrations: Iterable[Migration]) -> list[Migration]:
        current = self.get_current_version()
        return sorted(
            (m for m in migrations if m.version > current), key=lambda m: m.version
        )

    def run_migration(self, migration: Migration) -> None:
        """Apply *migration* and record it, all in one transaction.

        Raises:
            ValueError: If the database is already at or past its version
            RuntimeError: If a statement fails; nothing is recorded then
        """
        current = self.get_current_version()
        if migration.version <= current:
            raise ValueError(
                f"Migration version {migration.version} is not greater than "
                f"current version {current}"
            )

        try:
            migration.up(self.connection)
            self.connection.execute(
                "INSERT INTO schema_version (version, description, applied_at) "
                "VALUES (?, ?, ?)",
                (migration.version, migration.description, datetime.now(UTC).isoformat()),
            )
            self.connection.commit()
        except sqlite3.Error as e:
            self.connection.rollback()
            raise RuntimeError(f"Migration {migration.version} failed: {e}") from e

        get_logger("migrations").info(
            "applied migration %d: %s", migration.version, migration.description
        )

    def run_migrations(self, migrations: Iterable[Migration]) -> int:
        """Apply all pending migrations and return how many ran."""
        pending = self.pending(migrations)
        for migration in pending:
            self.run_migration(migration)
        return len(pending)

    def get_migration_history(self) -> list[dict]:
        cursor = self.connection.execute(
            "SELECT version, description, applied_at FROM schema_version ORDER BY version"
        )
        return [dict(zip(("version", "description", "applied_at"), row)) for row in cursor]
