"""SQLite implementation of ProjectRepository."""

from __future__ import annotations

import sqlite3

from worklog_cli.adapters.sqlite.connection import get_connection
from worklog_cli.adapters.sqlite.utils import now_iso, row_to_dict
from worklog_cli.models import Project, ProjectCreate
from worklog_cli.models.exceptions import ConflictError, NotFoundError
from worklog_cli.repositories import ProjectRepository


class SqliteProjectRepository(ProjectRepository):
    """SQLite implementation of project repository."""

    def __init__(
        self,
        db_path: str | None = None,
        connection: sqlite3.Connection | None = None,
    ):
        """Initialize SQLite project repository.

        Args:
            db_path: Optional database file path. If None, uses default location.
            connection: Optional already-open connection (takes precedence).
        """
        self.db_path = db_path
        self._connection = connection

    @property
    def connection(self) -> sqlite3.Connection:
        """Get or create database connection."""
        if self._connection is None:
            self._connection = get_connection(self.db_path)
        return self._connection

    async def list_all(self) -> list[Project]:
        cursor = self.connection.execute("SELECT * FROM projects ORDER BY id")
        return [Project(**row_to_dict(row)) for row in cursor.fetchall()]

    async def get(self, project_id: int) -> Project:
        cursor = self.connection.execute(
            "SELECT * FROM projects WHERE id = ?", (project_id,)
        )
        row = cursor.fetchone()
        if not row:
            raise NotFoundError(f"Project {project_id} doesn't exist")
        return Project(**row_to_dict(row))

    async def create(self, project_data: ProjectCreate) -> Project:
        if project_data.name is not None:
            # Enforce case-insensitive name uniqueness
            cursor = self.connection.execute(
                "SELECT name FROM projects WHERE LOWER(name) = LOWER(?) LIMIT 1",
                (project_data.name,),
            )
            existing = cursor.fetchone()
            if existing:
                raise ConflictError(f"A project named '{existing[0]}' already exists")

        cursor = self.connection.execute(
            "INSERT INTO projects (url, name, created_at) VALUES (?, ?, ?)",
            (project_data.url, project_data.name, now_iso()),
        )
        self.connection.commit()
        return await self.get(cursor.lastrowid)

    async def get_default(self) -> Project | None:
        cursor = self.connection.execute(
            """SELECT p.* FROM default_project d
               JOIN projects p ON p.id = d.project_id
               WHERE d.id = 0"""
        )
        row = cursor.fetchone()
        return Project(**row_to_dict(row)) if row else None

    async def set_default(self, project_id: int) -> None:
        await self.get(project_id)
        self.connection.execute(
            """INSERT INTO default_project (id, project_id) VALUES (0, ?)
               ON CONFLICT(id) DO UPDATE SET project_id = excluded.project_id""",
            (project_id,),
        )
        self.connection.commit()
