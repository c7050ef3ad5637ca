"""Main entry point for Worklog CLI."""

import typer

from worklog_cli import __version__
from worklog_cli.commands import config_command, log_command, projects, schedule, show_command, tasks
from worklog_cli.utils.typer_helpers import SuggestingGroup
from worklog_cli.utils.ui.console import get_console

# Create main app with custom group class
app = typer.Typer(
    name="worklog",
    cls=SuggestingGroup,
    help="Track time spent on project tasks against a work schedule",
    no_args_is_help=True,
)

console = get_console(highlight=False)

# Top-level commands
app.command("log")(log_command.log)
app.command("show")(show_command.show)

# Command groups
app.add_typer(tasks.app, name="task", help="Task management commands")
app.add_typer(projects.app, name="project", help="Project management commands")
app.add_typer(schedule.app, name="schedule", help="Work schedule commands")
app.add_typer(config_command.app, name="config", help="Configuration management")


@app.command()
def version() -> None:
    """Show version information."""
    console.print(f"[bold]Worklog CLI[/bold] version [cyan]{__version__}[/cyan]")


def main():
    """Main entry point."""
    app()


if __name__ == "__main__":
    main()
