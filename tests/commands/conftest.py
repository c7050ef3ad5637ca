"""Fixtures for command tests: mocked services and a fixed clock."""

from __future__ import annotations

import importlib
from contextlib import ExitStack
from datetime import datetime
from types import SimpleNamespace
from unittest.mock import AsyncMock, MagicMock, patch

import pytest

from worklog_cli.models import Project

COMMAND_MODULES = [
    "log_command",
    "show_command",
    "tasks",
    "projects",
    "schedule",
    "interactive",
]

# A Sunday afternoon
NOW = datetime(2025, 1, 26, 13, 0)


@pytest.fixture
def project():
    return Project(id=1, url="https://git.example.com/acme", name="acme")


def _patch_everywhere(stack: ExitStack, factory: str, mock) -> None:
    for name in COMMAND_MODULES:
        module = importlib.import_module(f"worklog_cli.commands.{name}")
        if hasattr(module, factory):
            stack.enter_context(patch.object(module, factory, return_value=mock))


@pytest.fixture
def services(project, mock_config_service):
    """Mock every service factory used by the commands.

    The default project exists unless a test overrides
    ``services.projects.get_default_project``.
    """
    projects = MagicMock()
    projects.get_default_project = AsyncMock(return_value=project)
    projects.list_projects = AsyncMock(return_value=[project])
    projects.create_project = AsyncMock(return_value=project)
    projects.set_default_project = AsyncMock(return_value=project)

    tasks = MagicMock()
    for name in (
        "find_task",
        "create_task",
        "get_or_create",
        "update_task",
        "list_tasks",
        "search_tasks",
    ):
        setattr(tasks, name, AsyncMock())

    worklog = MagicMock()
    for name in ("add_log", "entries_by_day", "totals_by_task"):
        setattr(worklog, name, AsyncMock())

    schedule = MagicMock()
    for name in ("set_schedule", "get_schedule", "snapshot_month", "month_calendar"):
        setattr(schedule, name, AsyncMock())

    mocks = SimpleNamespace(
        projects=projects,
        tasks=tasks,
        worklog=worklog,
        schedule=schedule,
        config=mock_config_service,
    )
    with ExitStack() as stack:
        for factory, mock in (
            ("get_project_service", projects),
            ("get_task_service", tasks),
            ("get_worklog_service", worklog),
            ("get_schedule_service", schedule),
            ("get_config_service", mock_config_service),
        ):
            _patch_everywhere(stack, factory, mock)
        for module in ("log_command", "show_command", "schedule"):
            stack.enter_context(
                patch(f"worklog_cli.commands.{module}.local_now", return_value=NOW)
            )
        yield mocks
