"""Tests for the top-level application."""

from __future__ import annotations

from typer.testing import CliRunner

from worklog_cli import __version__
from worklog_cli.main import app

runner = CliRunner()


def test_version():
    result = runner.invoke(app, ["version"])

    assert result.exit_code == 0
    assert __version__ in result.output


def test_help_lists_commands():
    result = runner.invoke(app, ["--help"])

    assert result.exit_code == 0
    for command in ("log", "show", "task", "project", "schedule", "config"):
        assert command in result.output


def test_typo_gets_suggestion():
    result = runner.invoke(app, ["shwo"])

    assert result.exit_code == 1
    assert "Did you mean this?" in result.output
    assert "show" in result.output


def test_typo_in_subgroup():
    result = runner.invoke(app, ["schedule", "calender"])

    assert result.exit_code == 1
    assert "calendar" in result.output
