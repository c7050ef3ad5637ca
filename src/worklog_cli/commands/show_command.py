"""Command 'show' - report logged time over a period."""

import typer

from worklog_cli.models import Weekday
from worklog_cli.models.exceptions import WorklogError
from worklog_cli.services.config_service import get_config_service
from worklog_cli.services.project_service import get_project_service
from worklog_cli.services.worklog_service import WorkLogService, get_worklog_service
from worklog_cli.utils.dates import (
    build_period_spec,
    local_now,
    logical_today,
    resolve_period,
)
from worklog_cli.utils.exit_codes import ERROR_INVALID_ARGS
from worklog_cli.utils.parsers import parse_date
from worklog_cli.utils.ui.formatters import (
    OUTPUT_FORMATS,
    err_console,
    format_issue,
    format_minutes,
    format_output,
)

from .decorators import command_wrapper
from .interactive import default_project_or_create

GROUP_BY = {"day": "day", "date": "day", "task": "task", "issue": "task"}


@command_wrapper
async def show(
    by: str = typer.Option("day", "--by", help="Group entries by day or task"),
    all_time: bool = typer.Option(False, "--all", help="Show every entry"),
    today: bool = typer.Option(False, "--today", help="Show today's entries"),
    week: bool = typer.Option(False, "--week", help="Show the last seven days"),
    from_date: str | None = typer.Option(None, "--from", help="First day (YYYY-MM-DD)"),
    to_date: str | None = typer.Option(None, "--to", help="Last day (YYYY-MM-DD)"),
    output: str | None = typer.Option(
        None, "--output", "-o", help="Output format (table, json, yaml)"
    ),
) -> None:
    """Show logged time of the default project.

    Without a period option the previous calendar month is shown.
    """
    group_by = GROUP_BY.get(by.lower())
    if group_by is None:
        raise WorklogError(f'Unknown grouping "{by}"', exit_code=ERROR_INVALID_ARGS)

    config = get_config_service().config
    output = output or config.output.format
    if output not in OUTPUT_FORMATS:
        raise WorklogError(f'Unknown output format "{output}"', exit_code=ERROR_INVALID_ARGS)

    spec = build_period_spec(
        all_time=all_time,
        today=today,
        week=week,
        from_date=parse_date(from_date) if from_date is not None else None,
        to_date=parse_date(to_date) if to_date is not None else None,
    )
    now = local_now()
    period = resolve_period(
        spec,
        logical_today(now.date(), now.time(), config.effective_day_change_threshold()),
    )

    project = await default_project_or_create(get_project_service())
    service = get_worklog_service()

    if group_by == "day":
        entries = await service.entries_by_day(project.id, period)
        columns = ["date", "weekday", "task", "issue", "time"]
        rows = [
            {
                "date": entry.date.isoformat(),
                "weekday": Weekday.of(entry.date).short_name,
                "task": entry.task_name,
                "issue": format_issue(entry.issue),
                "time": format_minutes(entry.duration_minutes),
            }
            for entry in entries
        ]
    else:
        entries = await service.totals_by_task(project.id, period)
        columns = ["task", "issue", "time"]
        rows = [
            {
                "task": total.task_name,
                "issue": format_issue(total.issue),
                "time": format_minutes(total.duration_minutes),
            }
            for total in entries
        ]

    total_minutes = WorkLogService.total_minutes(entries)
    if output == "table":
        title = project.label
        if period is not None:
            title += f" {period.from_date.isoformat()} - {period.to_date.isoformat()}"
        format_output(rows, "table", columns=columns, title=title)
        err_console.print(f"Total: {total_minutes // 60}h")
    else:
        format_output(
            {
                "project": project.label,
                "from": period.from_date.isoformat() if period else None,
                "to": period.to_date.isoformat() if period else None,
                "entries": [entry.model_dump(mode="json") for entry in entries],
                "total_minutes": total_minutes,
            },
            output,
        )
