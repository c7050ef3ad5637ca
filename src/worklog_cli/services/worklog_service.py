"""Work-log service - recording and reporting logged time."""

from __future__ import annotations

from collections.abc import Iterable
from datetime import date

from worklog_cli.models import LogEntry, LogEntryExpanded, TaskTotal
from worklog_cli.repositories import LogEntryRepository
from worklog_cli.services.schedule_service import ScheduleService
from worklog_cli.utils.dates import Period
from worklog_cli.utils.logger import get_logger


def _bounds(period: Period | None) -> tuple[date | None, date | None]:
    if period is None:
        return None, None
    return period.from_date, period.to_date


class WorkLogService:
    """Service for log entry business logic."""

    def __init__(
        self,
        log_entry_repository: LogEntryRepository,
        schedule_service: ScheduleService,
    ):
        self.repository = log_entry_repository
        self.schedule_service = schedule_service

    async def add_log(
        self, project_id: int, task_id: int, day: date, minutes: int
    ) -> LogEntry:
        """Record *minutes* against a task on *day*.

        Minutes accumulate with earlier entries for the same task and day.
        The first entry of a month freezes that month's schedule.
        """
        entry = await self.repository.add(
            LogEntry(date=day, task_id=task_id, duration_minutes=minutes)
        )
        get_logger("worklog").info(
            "logged %d min on task %d for %s (total %d)",
            minutes,
            task_id,
            day.isoformat(),
            entry.duration_minutes,
        )
        await self.schedule_service.snapshot_month(project_id, day.year, day.month)
        return entry

    async def entries_by_day(
        self, project_id: int, period: Period | None
    ) -> list[LogEntryExpanded]:
        return await self.repository.list_by_day(project_id, *_bounds(period))

    async def totals_by_task(
        self, project_id: int, period: Period | None
    ) -> list[TaskTotal]:
        return await self.repository.totals_by_task(project_id, *_bounds(period))

    @staticmethod
    def total_minutes(entries: Iterable[LogEntryExpanded | TaskTotal]) -> int:
        return sum(entry.duration_minutes for entry in entries)


def get_worklog_service() -> WorkLogService:
    """Factory function to get a WorkLogService instance."""
    from worklog_cli.adapters.sqlite.log_entry_repository import SqliteLogEntryRepository
    from worklog_cli.services.config_service import get_config_service
    from worklog_cli.services.schedule_service import get_schedule_service

    config = get_config_service().config
    return WorkLogService(
        SqliteLogEntryRepository(db_path=config.data_path),
        get_schedule_service(),
    )
