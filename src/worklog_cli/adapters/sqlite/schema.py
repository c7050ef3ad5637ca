"""Database schema definitions for the local work-log database."""

from __future__ import annotations

# Schema version tracking
SCHEMA_VERSION = 2

# Projects table
CREATE_PROJECTS_TABLE = """
CREATE TABLE IF NOT EXISTS projects (
    id INTEGER PRIMARY KEY NOT NULL,
    url TEXT NOT NULL,
    name TEXT UNIQUE,
    created_at DATETIME NOT NULL
)
"""

# Single-row table pointing at the project commands operate on
CREATE_DEFAULT_PROJECT_TABLE = """
CREATE TABLE IF NOT EXISTS default_project (
    id INTEGER PRIMARY KEY NOT NULL CHECK (id = 0),
    project_id INTEGER NOT NULL
        REFERENCES projects(id) ON DELETE CASCADE
)
"""

# Tasks table
CREATE_TASKS_TABLE = """
CREATE TABLE IF NOT EXISTS tasks (
    id INTEGER PRIMARY KEY NOT NULL,
    project_id INTEGER NOT NULL
        REFERENCES projects(id) ON DELETE CASCADE,
    name TEXT NOT NULL,
    issue INTEGER,
    description TEXT
)
"""

# Log entries - one row per task and date, minutes accumulate
CREATE_LOG_ENTRIES_TABLE = """
CREATE TABLE IF NOT EXISTS log_entries (
    date DATE NOT NULL,
    task_id INTEGER NOT NULL
        REFERENCES tasks(id) ON DELETE CASCADE,
    duration_minutes INTEGER NOT NULL,
    PRIMARY KEY (date, task_id)
)
"""

# Weekly schedule per project (weekdays holds the 8-bit weekly bitmap)
CREATE_SCHEDULE_SETTINGS_TABLE = """
CREATE TABLE IF NOT EXISTS schedule_settings (
    project_id INTEGER PRIMARY KEY NOT NULL
        REFERENCES projects(id) ON DELETE CASCADE,
    weekdays INTEGER,
    workday_minutes INTEGER
)
"""

# Monthly snapshots; month is year * 12 + month, bitmap a signed 32-bit value
CREATE_SCHEDULE_LOGS_TABLE = """
CREATE TABLE IF NOT EXISTS schedule_logs (
    project_id INTEGER NOT NULL
        REFERENCES projects(id) ON DELETE CASCADE,
    month INTEGER NOT NULL,
    bitmap INTEGER NOT NULL,
    PRIMARY KEY (project_id, month)
)
"""

CREATE_INDEXES = [
    "CREATE INDEX IF NOT EXISTS idx_tasks_project ON tasks(project_id)",
    "CREATE INDEX IF NOT EXISTS idx_tasks_issue ON tasks(project_id, issue)",
    "CREATE INDEX IF NOT EXISTS idx_log_entries_task ON log_entries(task_id)",
]
