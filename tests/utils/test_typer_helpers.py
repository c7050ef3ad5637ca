"""Unit tests for SuggestingGroup and suggest_commands."""

from __future__ import annotations

import click
import typer
from typer.testing import CliRunner

from worklog_cli.utils.typer_helpers import SuggestingGroup, suggest_commands

runner = CliRunner()


def _app() -> typer.Typer:
    app = typer.Typer(cls=SuggestingGroup)

    @app.command("add")
    def add():
        pass

    @app.command("ads")
    def ads():
        pass

    @app.command("list")
    def list_():
        pass

    return app


def test_suggest_commands():
    assert suggest_commands("lst", ["add", "list"]) == ["list"]
    assert suggest_commands("xyzabc", ["add", "list"]) == []


def test_valid_command_passes_through():
    result = runner.invoke(_app(), ["list"])
    assert result.exit_code == 0


def test_single_suggestion():
    result = runner.invoke(_app(), ["lis"])

    assert result.exit_code == 1
    assert "Did you mean this?" in result.output
    assert "list" in result.output


def test_multiple_suggestions():
    result = runner.invoke(_app(), ["adz"])

    assert result.exit_code == 1
    assert "Did you mean one of these?" in result.output


def test_no_suggestion_keeps_usage_error():
    result = runner.invoke(_app(), ["xyzabc"])

    assert result.exit_code == click.UsageError.exit_code
    assert "Did you mean" not in result.output
