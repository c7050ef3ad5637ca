"""Worklog CLI domain models.

Pydantic models for stored entities plus the immutable schedule bitmaps.
"""

from .config_models import AppConfig, OutputConfig
from .core import (
    LogEntry,
    LogEntryExpanded,
    Project,
    ProjectCreate,
    Task,
    TaskCreate,
    TaskTotal,
    TaskUpdate,
)
from .schedule import MonthlyScheduleLog, Weekday, WeeklySchedule

__all__ = [
    # Project models
    "Project",
    "ProjectCreate",
    # Task models
    "Task",
    "TaskCreate",
    "TaskUpdate",
    # Log models
    "LogEntry",
    "LogEntryExpanded",
    "TaskTotal",
    # Schedule
    "Weekday",
    "WeeklySchedule",
    "MonthlyScheduleLog",
    # Config models
    "AppConfig",
    "OutputConfig",
]
