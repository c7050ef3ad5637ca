"""Tests for output formatters."""

from __future__ import annotations

import json
from datetime import date

import pytest
import yaml

from worklog_cli.utils.ui.formatters import (
    format_issue,
    format_minutes,
    format_month_calendar,
    format_output,
)


@pytest.mark.parametrize(
    ("minutes", "text"),
    [(0, "0m"), (45, "45m"), (60, "1h"), (510, "8h30m"), (605, "10h05m")],
)
def test_format_minutes(minutes, text):
    assert format_minutes(minutes) == text


def test_format_issue():
    assert format_issue(42) == "#42"
    assert format_issue(None) == "-"


def test_json_output(capsys):
    format_output({"day": date(2024, 12, 2), "minutes": 90}, "json")
    assert json.loads(capsys.readouterr().out) == {"day": "2024-12-02", "minutes": 90}


def test_yaml_output(capsys):
    format_output([{"task": "Review", "minutes": 30}], "yaml")
    assert yaml.safe_load(capsys.readouterr().out) == [{"task": "Review", "minutes": 30}]


def test_table_output_uses_columns(capsys):
    format_output(
        [{"task": "Review", "issue": "#7", "hidden": "x"}],
        "table",
        columns=["task", "issue"],
    )
    out = capsys.readouterr().out
    assert "Review" in out
    assert "#7" in out
    assert "Hidden" not in out


def test_empty_table(capsys):
    format_output([], "table")
    assert "No data to display" in capsys.readouterr().out


def test_month_calendar(capsys):
    days = [
        {
            "date": date(2024, 12, day),
            "is_workday": date(2024, 12, day).weekday() < 5,
            "logged_minutes": 480 if day == 2 else 0,
        }
        for day in range(1, 32)
    ]
    format_month_calendar(2024, 12, days)
    out = capsys.readouterr().out
    assert "December 2024" in out
    assert "Mon" in out
    assert "8h" in out
    assert "31" in out
