"""Migration 002: work schedules.

Adds the per-project weekly schedule and the per-month schedule snapshots.
"""

from worklog_cli.adapters.sqlite import schema

from .runner import Migration


class ScheduleMigration(Migration):
    version = 2
    description = "Add schedule_settings and schedule_logs tables"
    statements = (
        schema.CREATE_SCHEDULE_SETTINGS_TABLE,
        schema.CREATE_SCHEDULE_LOGS_TABLE,
    )


schedule_migration = ScheduleMigration()
