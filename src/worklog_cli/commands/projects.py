"""Project management commands."""

import typer

from worklog_cli.services.project_service import get_project_service
from worklog_cli.utils.typer_helpers import SuggestingGroup
from worklog_cli.utils.ui.formatters import format_output, format_success

from .decorators import command_wrapper
from .interactive import create_project_interactive

app = typer.Typer(cls=SuggestingGroup, help="Project management commands")


@app.command("list")
@command_wrapper
async def list_projects(
    output: str = typer.Option("table", "--output", "-o", help="Output format"),
) -> None:
    """List projects. The default one is marked with '*'."""
    project_service = get_project_service()
    projects = await project_service.list_projects()
    default = await project_service.get_default_project()
    default_id = default.id if default else None

    if output == "table":
        rows = [
            {
                "default": "*" if project.id == default_id else "",
                "id": project.id,
                "name": project.name,
                "url": project.url,
            }
            for project in projects
        ]
        format_output(rows, output, columns=["default", "id", "name", "url"])
    else:
        format_output(
            [
                project.model_dump(mode="json") | {"default": project.id == default_id}
                for project in projects
            ],
            output,
        )


@app.command("create")
@command_wrapper
async def create_project(
    url: str | None = typer.Option(None, "--url", help="Project URL"),
    name: str | None = typer.Option(None, "--name", help="Project name"),
    yes: bool = typer.Option(False, "--yes", "-y", help="Skip confirmation"),
) -> None:
    """Create a new project. Missing details are asked for."""
    project_service = get_project_service()
    if url is not None and yes:
        project = await project_service.create_project(url=url, name=name)
        format_success(f"New project created: {project.id}")
    else:
        await create_project_interactive(project_service, url=url, name=name)


@app.command("default")
@command_wrapper
async def set_default_project(
    project_id: int | None = typer.Argument(None, help="Project ID"),
) -> None:
    """Pick the default project."""
    project_service = get_project_service()
    if project_id is None:
        projects = await project_service.list_projects()
        format_output(
            [{"id": p.id, "name": p.name, "url": p.url} for p in projects],
            "table",
            columns=["id", "name", "url"],
        )
        project_id = typer.prompt("New default project ID", type=int)
    project = await project_service.set_default_project(project_id)
    format_success(f"Default project set to {project.id} ({project.label})")
