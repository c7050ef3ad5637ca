"""Command 'log' - record time spent on a task."""

import typer

from worklog_cli.services.config_service import get_config_service
from worklog_cli.services.project_service import get_project_service
from worklog_cli.services.task_service import get_task_service
from worklog_cli.services.worklog_service import get_worklog_service
from worklog_cli.utils.dates import build_date_spec, local_now, resolve_date
from worklog_cli.utils.parsers import parse_date, parse_duration, parse_weekday
from worklog_cli.utils.ui.formatters import format_issue, format_minutes, format_success

from .decorators import command_wrapper
from .interactive import default_project_or_create, task_or_create


@command_wrapper
async def log(
    time_spent: str = typer.Option(
        ...,
        "--time",
        "-t",
        help="Duration in hours and minutes (8h30, 6h21m, 90m). Default unit is hours",
    ),
    today: bool = typer.Option(False, "--today", help="Log for today"),
    yesterday: bool = typer.Option(False, "--yesterday", help="Log for yesterday"),
    weekday: str | None = typer.Option(
        None, "--weekday", help="Log for the nearest past weekday (mon, tuesday, ...)"
    ),
    explicit_date: str | None = typer.Option(
        None, "--date", help="Log for an ISO date (YYYY-MM-DD)"
    ),
    day: int | None = typer.Option(
        None, "--day", help="Log for the nearest past day of month"
    ),
    month: int | None = typer.Option(None, "--month", help="Month of --day"),
    year: int | None = typer.Option(None, "--year", help="Year of --month"),
    issue: int | None = typer.Option(None, "--issue", "-i", help="Link issue number"),
    name: str | None = typer.Option(None, "--name", help="Task name"),
) -> None:
    """Log time spent on a task of the default project."""
    minutes = parse_duration(time_spent)
    spec = build_date_spec(
        today=today,
        yesterday=yesterday,
        weekday=parse_weekday(weekday) if weekday is not None else None,
        explicit=parse_date(explicit_date) if explicit_date is not None else None,
        day=day,
        month=month,
        year=year,
    )
    config = get_config_service().config
    now = local_now()
    work_date = resolve_date(
        spec, now.date(), now.time(), config.effective_day_change_threshold()
    )

    project = await default_project_or_create(get_project_service())
    task = await task_or_create(get_task_service(), project.id, issue, name)
    entry = await get_worklog_service().add_log(project.id, task.id, work_date, minutes)

    format_success(
        f"Logged {format_minutes(minutes)} on {task.name} ({format_issue(task.issue)}) "
        f"for {work_date.isoformat()}, {format_minutes(entry.duration_minutes)} in total"
    )
