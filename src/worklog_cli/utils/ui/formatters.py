"""Output formatters for different formats."""

import json
from datetime import date
from typing import Any

import yaml
from rich.console import Console
from rich.table import Table

console = Console()
err_console = Console(stderr=True)

OUTPUT_FORMATS = ("table", "json", "yaml")

WEEKDAY_HEADERS = ["Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun"]


def format_minutes(minutes: int) -> str:
    """Render a minute count as ``8h30m`` (``45m`` below an hour)."""
    hours, rest = divmod(minutes, 60)
    if hours and rest:
        return f"{hours}h{rest:02d}m"
    if hours:
        return f"{hours}h"
    return f"{rest}m"


def format_issue(issue: int | None) -> str:
    """Render an optional issue number as ``#42`` or ``-``."""
    return f"#{issue}" if issue is not None else "-"


def format_output(
    data: Any,
    output_format: str = "table",
    columns: list[str] | None = None,
    title: str | None = None,
) -> None:
    """Format and display output based on format."""
    if output_format == "json":
        print(json.dumps(data, indent=2, default=str))
    elif output_format == "yaml":
        print(yaml.safe_dump(_plain(data), default_flow_style=False, sort_keys=False))
    else:
        format_table(data, columns=columns, title=title)


def _plain(data: Any) -> Any:
    """Convert dates and other non-YAML scalars into strings."""
    return json.loads(json.dumps(data, default=str))


def _cell(value: Any) -> str:
    if isinstance(value, bool):
        return "✓" if value else "✗"
    if isinstance(value, list):
        return ", ".join(str(v) for v in value)
    if value is None:
        return "-"
    return str(value)


def _header(key: str) -> str:
    return key.replace("_", " ").title()


def format_table(
    data: Any, columns: list[str] | None = None, title: str | None = None
) -> None:
    """Render a list of rows as a table and a single dict as key/value pairs."""
    if not data:
        console.print("[yellow]No data to display[/yellow]")
    elif isinstance(data, dict):
        format_single_item(data)
    elif isinstance(data, list) and isinstance(data[0], dict):
        format_dict_table(data, columns=columns, title=title)
    elif isinstance(data, list):
        for item in data:
            console.print(item)
    else:
        console.print(data)


def format_dict_table(
    items: list[dict], columns: list[str] | None = None, title: str | None = None
) -> None:
    """Rows of *items* restricted to *columns* (all keys of the first row by default)."""
    columns = columns or list(items[0].keys())
    table = Table(show_header=True, header_style="bold magenta", title=title)
    for col in columns:
        table.add_column(_header(col))
    for item in items:
        table.add_row(*(_cell(item.get(col)) for col in columns))
    console.print(table)


def format_single_item(item: dict) -> None:
    table = Table(show_header=False, box=None)
    table.add_column("Key", style="cyan")
    table.add_column("Value")
    for key, value in item.items():
        table.add_row(_header(key), _cell(value))
    console.print(table)


def format_month_calendar(
    year: int,
    month: int,
    days: list[dict],
) -> None:
    """Render a month as a Monday-first grid.

    Each entry of *days* carries ``date``, ``is_workday`` and
    ``logged_minutes``; workdays are bold, logged days show their total.
    """
    table = Table(
        title=date(year, month, 1).strftime("%B %Y"),
        show_header=True,
        header_style="bold magenta",
    )
    for header in WEEKDAY_HEADERS:
        table.add_column(header, justify="center")

    week: list[str] = [""] * days[0]["date"].weekday() if days else []
    for day in days:
        label = str(day["date"].day)
        if day["is_workday"]:
            label = f"[bold]{label}[/bold]"
        else:
            label = f"[dim]{label}[/dim]"
        if day["logged_minutes"]:
            label += f"\n[green]{format_minutes(day['logged_minutes'])}[/green]"
        week.append(label)
        if len(week) == 7:
            table.add_row(*week)
            week = []
    if week:
        table.add_row(*(week + [""] * (7 - len(week))))

    console.print(table)


def format_error(message: str) -> None:
    """Format and display an error message."""
    err_console.print(f"[bold red]Error:[/bold red] {message}")


def format_success(message: str) -> None:
    """Format and display a success message."""
    err_console.print(f"[bold green]Success:[/bold green] {message}")


def format_warning(message: str) -> None:
    """Format and display a warning message."""
    err_console.print(f"[bold yellow]Warning:[/bold yellow] {message}")


def format_info(message: str) -> None:
    """Format and display an info message."""
    err_console.print(f"[bold blue]Info:[/bold blue] {message}")
