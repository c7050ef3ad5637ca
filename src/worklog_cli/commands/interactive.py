"""Interactive prompts shared by commands that need a project or task."""

import typer

from worklog_cli.models import Project, Task
from worklog_cli.models.exceptions import CancelledError, WorklogError
from worklog_cli.services.project_service import ProjectService
from worklog_cli.services.task_service import TaskService
from worklog_cli.utils.exit_codes import ERROR_INVALID_ARGS
from worklog_cli.utils.ui.formatters import format_success


def _prompt_optional(text: str) -> str | None:
    value = typer.prompt(text, default="", show_default=False)
    return value.strip() or None


def _prompt_issue() -> int | None:
    value = _prompt_optional("Issue number")
    if value is None:
        return None
    try:
        return int(value)
    except ValueError:
        raise WorklogError(
            f'Invalid issue number: "{value}"', exit_code=ERROR_INVALID_ARGS
        ) from None


async def create_project_interactive(
    project_service: ProjectService,
    url: str | None = None,
    name: str | None = None,
) -> Project:
    """Ask for the missing project details and confirm before creating it.

    Raises:
        CancelledError: If the user declines
    """
    if url is None:
        name = name or _prompt_optional("Project name")
        url = typer.prompt("URL").strip()

    if name:
        message = f'Create a new project with name "{name}" and URL {url}?'
    else:
        message = f"Create a new project with URL {url} and no name?"
    if not typer.confirm(message, default=True):
        raise CancelledError("A project wasn't created")

    project = await project_service.create_project(url=url, name=name)
    format_success(f"New project created: {project.id}")
    return project


async def default_project_or_create(project_service: ProjectService) -> Project:
    """The default project, created interactively on first use."""
    project = await project_service.get_default_project()
    if project is not None:
        return project
    return await create_project_interactive(project_service)


async def create_task_interactive(
    task_service: TaskService, project_id: int, issue: int | None = None
) -> Task:
    """Ask for task details and confirm before creating the task.

    Raises:
        CancelledError: If the user declines
    """
    name = typer.prompt("Task name").strip()
    if issue is None:
        issue = _prompt_issue()
    description = _prompt_optional("Description")

    issue_text = f"issue number {issue}" if issue is not None else "no issue number"
    description_text = (
        f'description "{description}"' if description else "no description"
    )
    if not typer.confirm(
        f'Create a new task with name "{name}", {issue_text} and {description_text}?',
        default=True,
    ):
        raise CancelledError("A task wasn't created")

    return await task_service.create_task(project_id, name, issue, description)


async def task_or_create(
    task_service: TaskService,
    project_id: int,
    issue: int | None,
    name: str | None,
) -> Task:
    """Find the task to log against, creating it when nothing matches.

    A name is enough to create a task silently. Without one the details are
    asked for interactively.
    """
    if name is not None:
        return await task_service.get_or_create(project_id, issue, name)
    if issue is not None:
        task = await task_service.find_task(project_id, issue=issue)
        if task is not None:
            return task
    return await create_task_interactive(task_service, project_id, issue)
