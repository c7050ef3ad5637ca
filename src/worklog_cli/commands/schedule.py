"""Work schedule commands."""

from datetime import date

import typer

from worklog_cli.models.exceptions import NotFoundError
from worklog_cli.services.config_service import get_config_service
from worklog_cli.services.project_service import get_project_service
from worklog_cli.services.schedule_service import get_schedule_service
from worklog_cli.utils.dates import local_now, logical_today
from worklog_cli.utils.parsers import parse_duration, parse_weekday
from worklog_cli.utils.typer_helpers import SuggestingGroup
from worklog_cli.utils.ui.formatters import (
    console,
    format_minutes,
    format_month_calendar,
    format_output,
    format_success,
    format_warning,
)

from .decorators import command_wrapper
from .interactive import default_project_or_create

app = typer.Typer(cls=SuggestingGroup, help="Work schedule commands")


def _current_day() -> date:
    now = local_now()
    threshold = get_config_service().config.effective_day_change_threshold()
    return logical_today(now.date(), now.time(), threshold)


def _month_of(month: int | None, year: int | None) -> tuple[int, int]:
    current = _current_day()
    return (
        current.year if year is None else year,
        current.month if month is None else month,
    )


@app.command("set")
@command_wrapper
async def set_schedule(
    weekdays: list[str] = typer.Argument(..., help="Working weekdays (mon tue ...)"),
    flexible: bool = typer.Option(
        False, "--flexible", help="Only the monthly total has to match"
    ),
    workday: str = typer.Option("8h", "--workday", help="Length of a workday"),
) -> None:
    """Set the weekly schedule of the default project.

    Months that already have logged time keep their schedule until
    recomputed.
    """
    days = [parse_weekday(name) for name in weekdays]
    workday_minutes = parse_duration(workday)
    project = await default_project_or_create(get_project_service())
    settings = await get_schedule_service().set_schedule(
        project.id, days, flexible=flexible, workday_minutes=workday_minutes
    )
    format_success(
        f"Schedule set to {settings.schedule.describe()}, "
        f"{format_minutes(settings.workday_minutes)} per workday"
    )


@app.command("show")
@command_wrapper
async def show_schedule(
    output: str = typer.Option("table", "--output", "-o", help="Output format"),
) -> None:
    """Show the weekly schedule of the default project."""
    project = await default_project_or_create(get_project_service())
    settings = await get_schedule_service().get_schedule(project.id)
    if settings is None:
        raise NotFoundError(f"Project {project.id} has no schedule")

    format_output(
        {
            "project": project.label,
            "weekdays": [day.short_name for day in settings.schedule.weekdays],
            "flexible": settings.schedule.flexible,
            "workday": format_minutes(settings.workday_minutes),
        },
        output,
    )


@app.command("calendar")
@command_wrapper
async def show_calendar(
    month: int | None = typer.Option(None, "--month", help="Month (default: current)"),
    year: int | None = typer.Option(None, "--year", help="Year (default: current)"),
) -> None:
    """Show a month's workdays next to the time logged on them."""
    year, month = _month_of(month, year)
    project = await default_project_or_create(get_project_service())
    summary = await get_schedule_service().month_calendar(project.id, year, month)

    format_month_calendar(
        year,
        month,
        [
            {
                "date": day.date,
                "is_workday": day.is_workday,
                "logged_minutes": day.logged_minutes,
            }
            for day in summary.days
        ],
    )
    console.print(
        f"Workdays: {summary.workday_count} "
        f"({'flexible' if summary.flexible else 'rigid'})  "
        f"Expected: {format_minutes(summary.expected_minutes)}  "
        f"Logged: {format_minutes(summary.logged_minutes)}"
    )
    for day in summary.shortfall_days(_current_day()):
        format_warning(
            f"{day.date.isoformat()}: logged {format_minutes(day.logged_minutes)} "
            f"of {format_minutes(summary.workday_minutes)}"
        )


@app.command("recompute")
@command_wrapper
async def recompute_month(
    month: int | None = typer.Option(None, "--month", help="Month (default: current)"),
    year: int | None = typer.Option(None, "--year", help="Year (default: current)"),
) -> None:
    """Re-expand the current weekly schedule into a month's snapshot."""
    year, month = _month_of(month, year)
    project = await default_project_or_create(get_project_service())
    log = await get_schedule_service().snapshot_month(
        project.id, year, month, replace=True
    )
    format_success(
        f"{year:04d}-{month:02d} now has {log.workday_count(year, month)} workdays"
    )
