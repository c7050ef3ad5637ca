"""Schedule service - weekly work patterns and their monthly snapshots."""

from __future__ import annotations

import calendar
from collections.abc import Iterable
from dataclasses import dataclass, field
from datetime import date

from worklog_cli.models import MonthlyScheduleLog, Weekday, WeeklySchedule
from worklog_cli.models.exceptions import InvalidDateError
from worklog_cli.repositories import LogEntryRepository, ScheduleRepository
from worklog_cli.utils.logger import get_logger

DEFAULT_WORKDAY_MINUTES = 8 * 60


def _check_month(year: int, month: int) -> None:
    # month_key(y, 13) collides with month_key(y + 1, 1)
    if not 1 <= month <= 12:
        raise InvalidDateError(f"Invalid month {year:04d}-{month:02d}: must be in 1..12")


@dataclass(frozen=True)
class ScheduleSettings:
    schedule: WeeklySchedule
    workday_minutes: int = DEFAULT_WORKDAY_MINUTES


@dataclass(frozen=True)
class CalendarDay:
    date: date
    is_workday: bool
    logged_minutes: int = 0


@dataclass
class MonthSummary:
    """A month's snapshot joined with the time logged on each day."""

    year: int
    month: int
    flexible: bool
    workday_minutes: int
    days: list[CalendarDay] = field(default_factory=list)

    @property
    def workday_count(self) -> int:
        return sum(1 for day in self.days if day.is_workday)

    @property
    def expected_minutes(self) -> int:
        return self.workday_count * self.workday_minutes

    @property
    def logged_minutes(self) -> int:
        return sum(day.logged_minutes for day in self.days)

    @property
    def balance_minutes(self) -> int:
        return self.logged_minutes - self.expected_minutes

    def shortfall_days(self, until: date) -> list[CalendarDay]:
        """Workdays up to *until* logged below a full workday.

        Flexible schedules are only judged on the monthly aggregate, so they
        never report individual days.
        """
        if self.flexible:
            return []
        return [
            day
            for day in self.days
            if day.is_workday
            and day.date <= until
            and day.logged_minutes < self.workday_minutes
        ]


class ScheduleService:
    """Service for schedule business logic."""

    def __init__(
        self,
        schedule_repository: ScheduleRepository,
        log_entry_repository: LogEntryRepository,
    ):
        self.repository = schedule_repository
        self.log_entries = log_entry_repository

    async def set_schedule(
        self,
        project_id: int,
        weekdays: Iterable[Weekday],
        flexible: bool = False,
        workday_minutes: int = DEFAULT_WORKDAY_MINUTES,
    ) -> ScheduleSettings:
        """Replace the weekly schedule of a project.

        Months already snapshotted keep their old pattern.
        """
        schedule = WeeklySchedule.from_weekdays(weekdays, flexible)
        await self.repository.set_weekly(project_id, schedule, workday_minutes)
        get_logger("schedule").info(
            "project %d schedule set to %s", project_id, schedule.describe()
        )
        return ScheduleSettings(schedule, workday_minutes)

    async def get_schedule(self, project_id: int) -> ScheduleSettings | None:
        stored = await self.repository.get_weekly(project_id)
        if stored is None:
            return None
        schedule, workday_minutes = stored
        return ScheduleSettings(
            schedule,
            DEFAULT_WORKDAY_MINUTES if workday_minutes is None else workday_minutes,
        )

    async def snapshot_month(
        self, project_id: int, year: int, month: int, replace: bool = False
    ) -> MonthlyScheduleLog:
        """Freeze the current weekly schedule into the month's snapshot.

        An existing snapshot is kept unless *replace* is set. Without a
        weekly schedule the snapshot has no workdays.

        Returns:
            The snapshot stored for the month after the call
        """
        _check_month(year, month)
        if not replace:
            existing = await self.repository.get_month_log(project_id, year, month)
            if existing is not None:
                return existing

        settings = await self.get_schedule(project_id)
        if settings is None:
            log = MonthlyScheduleLog(0)
        else:
            log = settings.schedule.expand(year, month)

        await self.repository.put_month_log(project_id, year, month, log, replace=replace)
        get_logger("schedule").debug(
            "project %d month %04d-%02d snapshot %s",
            project_id,
            year,
            month,
            format(log.bitmap, "#034b"),
        )
        return log

    async def month_calendar(self, project_id: int, year: int, month: int) -> MonthSummary:
        """Calendar of one month with workdays and logged minutes per day."""
        _check_month(year, month)
        log = await self.snapshot_month(project_id, year, month)
        settings = await self.get_schedule(project_id)
        workday_minutes = (
            settings.workday_minutes if settings else DEFAULT_WORKDAY_MINUTES
        )

        days_in_month = calendar.monthrange(year, month)[1]
        first, last = date(year, month, 1), date(year, month, days_in_month)
        logged = await self.log_entries.totals_by_date(project_id, first, last)

        days = [
            CalendarDay(
                date=date(year, month, day),
                is_workday=log.is_workday(day),
                logged_minutes=logged.get(date(year, month, day), 0),
            )
            for day in range(1, days_in_month + 1)
        ]
        return MonthSummary(
            year=year,
            month=month,
            flexible=log.flexible,
            workday_minutes=workday_minutes,
            days=days,
        )


def get_schedule_service() -> ScheduleService:
    """Factory function to get a ScheduleService instance."""
    from worklog_cli.adapters.sqlite.log_entry_repository import SqliteLogEntryRepository
    from worklog_cli.adapters.sqlite.schedule_repository import SqliteScheduleRepository
    from worklog_cli.services.config_service import get_config_service

    config = get_config_service().config
    return ScheduleService(
        SqliteScheduleRepository(db_path=config.data_path),
        SqliteLogEntryRepository(db_path=config.data_path),
    )
