"""Configuration management commands."""

from datetime import time

import typer
from pydantic import BaseModel

from worklog_cli.models.exceptions import CancelledError
from worklog_cli.services.config_service import get_config_service
from worklog_cli.utils.parsers import parse_time
from worklog_cli.utils.typer_helpers import SuggestingGroup
from worklog_cli.utils.ui.console import get_console
from worklog_cli.utils.ui.formatters import format_output, format_success

from .decorators import command_wrapper

app = typer.Typer(cls=SuggestingGroup, help="Configuration management commands")
console = get_console(highlight=False)


@app.command("view")
@command_wrapper
def view_config(
    output: str = typer.Option("table", "--output", "-o", help="Output format"),
) -> None:
    """View current configuration."""
    config = get_config_service().config
    format_output(config.model_dump(mode="json"), output)


@app.command("get")
@command_wrapper
def get_config(
    key: str = typer.Argument(..., help="Configuration key (e.g., output.format)"),
) -> None:
    """Get a configuration value."""
    value = get_config_service().get(key)
    if isinstance(value, BaseModel):
        format_output(value.model_dump(mode="json"), "table")
    elif value is None:
        console.print("unset")
    elif isinstance(value, time):
        console.print(value.isoformat())
    else:
        console.print(value, soft_wrap=True)


@app.command("set")
@command_wrapper
def set_config(
    key: str = typer.Argument(..., help="Configuration key (e.g., output.format)"),
    value: str = typer.Argument(..., help="Configuration value"),
) -> None:
    """Set a configuration value."""
    get_config_service().set(key, value)
    format_success(f"Configuration '{key}' set to '{value}'")


@app.command("data-path")
@command_wrapper
def data_path(
    new_path: str | None = typer.Argument(None, help="New database file"),
) -> None:
    """Show or change the database file."""
    config_service = get_config_service()
    if new_path is None:
        console.print(config_service.config.data_path, soft_wrap=True)
        return
    config = config_service.update_data_path(new_path)
    format_success(f"Data path set to {config.data_path}")


@app.command("day-change-threshold")
@command_wrapper
def day_change_threshold(
    new_threshold: str | None = typer.Argument(None, help="Time of day (HH:MM[:SS])"),
) -> None:
    """Show or change the time before which work counts for the previous day."""
    config_service = get_config_service()
    if new_threshold is None:
        threshold = config_service.config.effective_day_change_threshold()
        console.print(threshold.isoformat())
        return
    threshold = parse_time(new_threshold)
    config_service.update_day_change_threshold(threshold)
    format_success(f"Day change threshold set to {threshold.isoformat()}")


@app.command("reset")
@command_wrapper
def reset_config(
    yes: bool = typer.Option(False, "--yes", "-y", help="Skip confirmation"),
) -> None:
    """Reset configuration to defaults."""
    if not yes and not typer.confirm(
        "Do you want to reset to default configuration?"
    ):
        raise CancelledError("Configuration left unchanged")
    get_config_service().reset_config()
    format_success("Configuration reset to defaults")
