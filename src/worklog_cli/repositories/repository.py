"""Repository abstraction layer for Worklog CLI.

Abstract base classes (ports) for persistence, so services stay independent
of the storage adapter behind them.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from datetime import date

from worklog_cli.models import (
    LogEntry,
    LogEntryExpanded,
    MonthlyScheduleLog,
    Project,
    ProjectCreate,
    Task,
    TaskCreate,
    TaskTotal,
    TaskUpdate,
    WeeklySchedule,
)


class ProjectRepository(ABC):
    """Abstract base class for project persistence operations."""

    @abstractmethod
    async def list_all(self) -> list[Project]:
        """List all projects ordered by ID."""

    @abstractmethod
    async def get(self, project_id: int) -> Project:
        """Get a project by ID.

        Raises:
            NotFoundError: If the project does not exist
        """

    @abstractmethod
    async def create(self, project_data: ProjectCreate) -> Project:
        """Create a new project.

        Raises:
            ConflictError: If a project with the same name exists
        """

    @abstractmethod
    async def get_default(self) -> Project | None:
        """Get the default project, if one is set."""

    @abstractmethod
    async def set_default(self, project_id: int) -> None:
        """Mark a project as the default.

        Raises:
            NotFoundError: If the project does not exist
        """


class TaskRepository(ABC):
    """Abstract base class for task persistence operations."""

    @abstractmethod
    async def get(self, task_id: int) -> Task:
        """Get a task by ID.

        Raises:
            NotFoundError: If the task does not exist
        """

    @abstractmethod
    async def find(
        self, project_id: int, issue: int | None, name: str | None
    ) -> Task | None:
        """Find the task matching an issue number and/or name."""

    @abstractmethod
    async def create(self, task_data: TaskCreate) -> Task:
        """Create a new task."""

    @abstractmethod
    async def update(self, task_id: int, updates: TaskUpdate) -> Task:
        """Update a task's name or issue number."""

    @abstractmethod
    async def list_all(self, project_id: int) -> list[Task]:
        """List the tasks of a project."""

    @abstractmethod
    async def search(self, project_id: int, query: str) -> list[Task]:
        """Tasks whose name contains *query* (case-insensitive)."""


class LogEntryRepository(ABC):
    """Abstract base class for log entry persistence operations."""

    @abstractmethod
    async def add(self, entry: LogEntry) -> LogEntry:
        """Add minutes to the (date, task) entry, creating it if needed.

        Returns:
            The entry as stored, with the accumulated duration
        """

    @abstractmethod
    async def list_by_day(
        self, project_id: int, from_date: date | None, to_date: date | None
    ) -> list[LogEntryExpanded]:
        """Entries of a project ordered by date, optionally bounded."""

    @abstractmethod
    async def totals_by_task(
        self, project_id: int, from_date: date | None, to_date: date | None
    ) -> list[TaskTotal]:
        """Minutes per task, in order of first logged date."""

    @abstractmethod
    async def totals_by_date(
        self, project_id: int, from_date: date, to_date: date
    ) -> dict[date, int]:
        """Minutes per date within an inclusive range."""


class ScheduleRepository(ABC):
    """Abstract base class for work-schedule persistence operations."""

    @abstractmethod
    async def get_weekly(self, project_id: int) -> tuple[WeeklySchedule, int] | None:
        """Weekly schedule and workday minutes of a project."""

    @abstractmethod
    async def set_weekly(
        self, project_id: int, schedule: WeeklySchedule, workday_minutes: int
    ) -> None:
        """Create or replace the weekly schedule of a project."""

    @abstractmethod
    async def get_month_log(
        self, project_id: int, year: int, month: int
    ) -> MonthlyScheduleLog | None:
        """Stored snapshot of one month, if any."""

    @abstractmethod
    async def put_month_log(
        self,
        project_id: int,
        year: int,
        month: int,
        log: MonthlyScheduleLog,
        replace: bool = False,
    ) -> bool:
        """Store a month snapshot.

        An existing snapshot is only overwritten when *replace* is set.

        Returns:
            True if the stored snapshot was written
        """
