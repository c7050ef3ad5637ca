"""Migration 001: projects, the default project pointer, tasks and log entries."""

from worklog_cli.adapters.sqlite import schema

from .runner import Migration


class InitialSchemaMigration(Migration):
    version = 1
    description = "Initial database schema"
    statements = (
        schema.CREATE_PROJECTS_TABLE,
        schema.CREATE_DEFAULT_PROJECT_TABLE,
        schema.CREATE_TASKS_TABLE,
        schema.CREATE_LOG_ENTRIES_TABLE,
        *schema.CREATE_INDEXES,
    )


initial_migration = InitialSchemaMigration()
