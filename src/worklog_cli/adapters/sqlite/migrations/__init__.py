"""Database migration system for the work-log database."""

from .m001_initial_schema import initial_migration
from .m002_schedule import schedule_migration
from .runner import Migration, MigrationRunner

ALL_MIGRATIONS: list[Migration] = [initial_migration, schedule_migration]

__all__ = [
    "ALL_MIGRATIONS",
    "Migration",
    "MigrationRunner",
]
