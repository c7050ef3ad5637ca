"""SQLite implementation of ScheduleRepository."""

from __future__ import annotations

import sqlite3

from worklog_cli.adapters.sqlite.connection import get_connection
from worklog_cli.models import MonthlyScheduleLog, WeeklySchedule
from worklog_cli.models.schedule import month_key
from worklog_cli.repositories import ScheduleRepository


class SqliteScheduleRepository(ScheduleRepository):
    """SQLite implementation of schedule repository."""

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

    async def get_weekly(self, project_id: int) -> tuple[WeeklySchedule, int] | None:
        row = self.connection.execute(
            "SELECT weekdays, workday_minutes FROM schedule_settings WHERE project_id = ?",
            (project_id,),
        ).fetchone()
        if row is None or row["weekdays"] is None:
            return None
        return WeeklySchedule.from_db(row["weekdays"]), row["workday_minutes"]

    async def set_weekly(
        self, project_id: int, schedule: WeeklySchedule, workday_minutes: int
    ) -> None:
        self.connection.execute(
            """INSERT INTO schedule_settings (project_id, weekdays, workday_minutes)
               VALUES (?, ?, ?)
               ON CONFLICT(project_id) DO UPDATE SET
                   weekdays = excluded.weekdays,
                   workday_minutes = excluded.workday_minutes""",
            (project_id, schedule.to_db(), workday_minutes),
        )
        self.connection.commit()

    async def get_month_log(
        self, project_id: int, year: int, month: int
    ) -> MonthlyScheduleLog | None:
        row = self.connection.execute(
            "SELECT bitmap FROM schedule_logs WHERE project_id = ? AND month = ?",
            (project_id, month_key(year, month)),
        ).fetchone()
        return MonthlyScheduleLog.from_db(row["bitmap"]) if row else None

    async def put_month_log(
        self,
        project_id: int,
        year: int,
        month: int,
        log: MonthlyScheduleLog,
        replace: bool = False,
    ) -> bool:
        if replace:
            sql = """INSERT INTO schedule_logs (project_id, month, bitmap)
                     VALUES (?, ?, ?)
                     ON CONFLICT(project_id, month) DO UPDATE SET
                         bitmap = excluded.bitmap"""
        else:
            sql = """INSERT OR IGNORE INTO schedule_logs (project_id, month, bitmap)
                     VALUES (?, ?, ?)"""
        cursor = self.connection.execute(
            sql, (project_id, month_key(year, month), log.to_db())
        )
        self.connection.commit()
        return cursor.rowcount > 0
