"""Repository interfaces."""

from .repository import (
    LogEntryRepository,
    ProjectRepository,
    ScheduleRepository,
    TaskRepository,
)

__all__ = [
    "LogEntryRepository",
    "ProjectRepository",
    "ScheduleRepository",
    "TaskRepository",
]
