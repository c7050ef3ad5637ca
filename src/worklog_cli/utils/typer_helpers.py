"""Typer helper utilities."""

from difflib import get_close_matches

import click
import typer
from typer.core import TyperGroup

from worklog_cli.utils.exit_codes import ERROR_GENERAL
from worklog_cli.utils.ui.console import get_console


def suggest_commands(attempted: str, commands: list[str]) -> list[str]:
    """Up to three command names resembling *attempted*."""
    return get_close_matches(attempted, commands, n=3, cutoff=0.6)


class SuggestingGroup(TyperGroup):
    """Typer group answering an unknown command with "Did you mean" hints."""

    def resolve_command(self, ctx, args):
        try:
            return super().resolve_command(ctx, args)
        except click.UsageError as e:
            if not args:
                raise
            suggestions = suggest_commands(args[0], self.list_commands(ctx))
            if not suggestions:
                raise

            console = get_console()
            console.print(
                f'[red]Error:[/red] unknown command "{args[0]}" for "{ctx.info_name}"'
            )
            console.print()
            if len(suggestions) == 1:
                console.print("[yellow]Did you mean this?[/yellow]")
            else:
                console.print("[yellow]Did you mean one of these?[/yellow]")
            for suggestion in suggestions:
                console.print(f"        {suggestion}")
            raise typer.Exit(ERROR_GENERAL) from e
