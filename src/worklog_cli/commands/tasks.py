"""Task management commands."""

import typer

from worklog_cli.models import Task
from worklog_cli.services.project_service import get_project_service
from worklog_cli.services.task_service import get_task_service
from worklog_cli.utils.typer_helpers import SuggestingGroup
from worklog_cli.utils.ui.formatters import format_issue, format_output, format_success

from .decorators import command_wrapper
from .interactive import default_project_or_create

app = typer.Typer(cls=SuggestingGroup, help="Task management commands")

TASK_COLUMNS = ["id", "name", "issue", "description"]


def _rows(tasks: list[Task]) -> list[dict]:
    return [
        {
            "id": task.id,
            "name": task.name,
            "issue": format_issue(task.issue),
            "description": task.description,
        }
        for task in tasks
    ]


@app.command("list")
@command_wrapper
async def list_tasks(
    output: str = typer.Option("table", "--output", "-o", help="Output format"),
) -> None:
    """List all tasks of the default project."""
    project = await default_project_or_create(get_project_service())
    tasks = await get_task_service().list_tasks(project.id)
    if output == "table":
        format_output(_rows(tasks), output, columns=TASK_COLUMNS, title=project.label)
    else:
        format_output([task.model_dump() for task in tasks], output)


@app.command("search")
@command_wrapper
async def search_tasks(
    query: str = typer.Argument(..., help="Substring of the task name"),
    output: str = typer.Option("table", "--output", "-o", help="Output format"),
) -> None:
    """Search tasks whose name contains QUERY."""
    project = await default_project_or_create(get_project_service())
    tasks = await get_task_service().search_tasks(project.id, query)
    if output == "table":
        format_output(_rows(tasks), output, columns=TASK_COLUMNS)
    else:
        format_output([task.model_dump() for task in tasks], output)


@app.command("update")
@command_wrapper
async def update_task(
    task_id: int = typer.Option(..., "--id", help="Task ID"),
    name: str | None = typer.Option(None, "--set-name", help="New task name"),
    issue: int | None = typer.Option(None, "--set-issue", help="New issue number"),
    remove_issue: bool = typer.Option(
        False, "--remove-issue", help="Unlink the issue number"
    ),
) -> None:
    """Rename a task or change its issue number."""
    project = await default_project_or_create(get_project_service())
    task = await get_task_service().update_task(
        project.id, task_id, name=name, issue=issue, clear_issue=remove_issue
    )
    format_success(f"Task {task.id} updated: {task.name} ({format_issue(task.issue)})")
