"""SQLite implementation of LogEntryRepository."""

from __future__ import annotations

import sqlite3
from datetime import date
from typing import Any

from worklog_cli.adapters.sqlite.connection import get_connection
from worklog_cli.models import LogEntry, LogEntryExpanded, TaskTotal
from worklog_cli.repositories import LogEntryRepository


def _period_filter(
    from_date: date | None, to_date: date | None
) -> tuple[str, list[Any]]:
    clause = ""
    params: list[Any] = []
    if from_date is not None:
        clause += " AND l.date >= ?"
        params.append(from_date.isoformat())
    if to_date is not None:
        clause += " AND l.date <= ?"
        params.append(to_date.isoformat())
    return clause, params


class SqliteLogEntryRepository(LogEntryRepository):
    """SQLite implementation of log entry repository."""

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

    async def add(self, entry: LogEntry) -> LogEntry:
        self.connection.execute(
            """INSERT INTO log_entries (date, task_id, duration_minutes)
               VALUES (?, ?, ?)
               ON CONFLICT(date, task_id) DO UPDATE SET
                   duration_minutes = duration_minutes + excluded.duration_minutes""",
            (entry.date.isoformat(), entry.task_id, entry.duration_minutes),
        )
        self.connection.commit()

        row = self.connection.execute(
            "SELECT * FROM log_entries WHERE date = ? AND task_id = ?",
            (entry.date.isoformat(), entry.task_id),
        ).fetchone()
        return LogEntry(
            date=date.fromisoformat(row["date"]),
            task_id=row["task_id"],
            duration_minutes=row["duration_minutes"],
        )

    async def list_by_day(
        self, project_id: int, from_date: date | None, to_date: date | None
    ) -> list[LogEntryExpanded]:
        clause, params = _period_filter(from_date, to_date)
        cursor = self.connection.execute(
            f"""SELECT l.date, l.duration_minutes, t.id AS task_id,
                       t.name AS task_name, t.issue
                FROM log_entries l
                JOIN tasks t ON t.id = l.task_id
                WHERE t.project_id = ?{clause}
                ORDER BY l.date, t.id""",
            [project_id, *params],
        )
        return [
            LogEntryExpanded(
                task_id=row["task_id"],
                task_name=row["task_name"],
                issue=row["issue"],
                date=date.fromisoformat(row["date"]),
                duration_minutes=row["duration_minutes"],
            )
            for row in cursor.fetchall()
        ]

    async def totals_by_task(
        self, project_id: int, from_date: date | None, to_date: date | None
    ) -> list[TaskTotal]:
        clause, params = _period_filter(from_date, to_date)
        cursor = self.connection.execute(
            f"""SELECT t.id AS task_id, t.name AS task_name, t.issue,
                       SUM(l.duration_minutes) AS duration_minutes
                FROM log_entries l
                JOIN tasks t ON t.id = l.task_id
                WHERE t.project_id = ?{clause}
                GROUP BY t.id
                ORDER BY MIN(l.date), t.id""",
            [project_id, *params],
        )
        return [TaskTotal(**dict(row)) for row in cursor.fetchall()]

    async def totals_by_date(
        self, project_id: int, from_date: date, to_date: date
    ) -> dict[date, int]:
        clause, params = _period_filter(from_date, to_date)
        cursor = self.connection.execute(
            f"""SELECT l.date, SUM(l.duration_minutes) AS minutes
                FROM log_entries l
                JOIN tasks t ON t.id = l.task_id
                WHERE t.project_id = ?{clause}
                GROUP BY l.date""",
            [project_id, *params],
        )
        return {date.fromisoformat(row["date"]): row["minutes"] for row in cursor.fetchall()}
