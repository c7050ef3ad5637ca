"""SQLite implementation of TaskRepository."""

from __future__ import annotations

import sqlite3

from worklog_cli.adapters.sqlite.connection import get_connection
from worklog_cli.adapters.sqlite.utils import row_to_dict
from worklog_cli.models import Task, TaskCreate, TaskUpdate
from worklog_cli.models.exceptions import NotFoundError
from worklog_cli.repositories import TaskRepository


class SqliteTaskRepository(TaskRepository):
    """SQLite implementation of task repository."""

    def __init__(
        self,
        db_path: str | None = None,
        connection: sqlite3.Connection | None = None,
    ):
        self.db_path = db_path
        self._connection = connection

    @property
    def connection(self) -> sqlite3.Connection:
        """Get or create database connection."""
        if self._connection is None:
            self._connection = get_connection(self.db_path)
        return self._connection

    async def get(self, task_id: int) -> Task:
        cursor = self.connection.execute("SELECT * FROM tasks WHERE id = ?", (task_id,))
        row = cursor.fetchone()
        if not row:
            raise NotFoundError(f"Task {task_id} doesn't exist")
        return Task(**row_to_dict(row))

    async def find(
        self, project_id: int, issue: int | None, name: str | None
    ) -> Task | None:
        """Find an existing task.

        By name alone, tasks without an issue number win. By issue alone,
        the oldest task with that issue wins.
        """
        if issue is None and name is None:
            return None

        query = "SELECT * FROM tasks WHERE project_id = ?"
        params: list = [project_id]
        if issue is not None:
            query += " AND issue = ?"
            params.append(issue)
        if name is not None:
            query += " AND name = ?"
            params.append(name)
        if issue is None:
            query += " ORDER BY issue IS NULL DESC, id"
        else:
            query += " ORDER BY id"
        query += " LIMIT 1"

        row = self.connection.execute(query, params).fetchone()
        return Task(**row_to_dict(row)) if row else None

    async def create(self, task_data: TaskCreate) -> Task:
        cursor = self.connection.execute(
            """INSERT INTO tasks (project_id, name, issue, description)
               VALUES (?, ?, ?, ?)""",
            (
                task_data.project_id,
                task_data.name,
                task_data.issue,
                task_data.description,
            ),
        )
        self.connection.commit()
        return await self.get(cursor.lastrowid)

    async def update(self, task_id: int, updates: TaskUpdate) -> Task:
        await self.get(task_id)

        set_parts = []
        params: list = []
        if updates.name is not None:
            set_parts.append("name = ?")
            params.append(updates.name)
        if updates.clear_issue:
            set_parts.append("issue = NULL")
        elif updates.issue is not None:
            set_parts.append("issue = ?")
            params.append(updates.issue)

        if set_parts:
            params.append(task_id)
            self.connection.execute(
                f"UPDATE tasks SET {', '.join(set_parts)} WHERE id = ?", params
            )
            self.connection.commit()

        return await self.get(task_id)

    async def list_all(self, project_id: int) -> list[Task]:
        cursor = self.connection.execute(
            "SELECT * FROM tasks WHERE project_id = ? ORDER BY id", (project_id,)
        )
        return [Task(**row_to_dict(row)) for row in cursor.fetchall()]

    async def search(self, project_id: int, query: str) -> list[Task]:
        escaped = query.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")
        cursor = self.connection.execute(
            """SELECT * FROM tasks
               WHERE project_id = ? AND name LIKE ? ESCAPE '\\'
               ORDER BY id""",
            (project_id, f"%{escaped}%"),
        )
        return [Task(**row_to_dict(row)) for row in cursor.fetchall()]
