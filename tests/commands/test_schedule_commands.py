"""Tests for schedule commands."""

from __future__ import annotations

import json
from datetime import date

import pytest
from typer.testing import CliRunner

from worklog_cli.main import app
from worklog_cli.models import MonthlyScheduleLog, Weekday, WeeklySchedule
from worklog_cli.models.exceptions import InvalidDateError
from worklog_cli.services.schedule_service import CalendarDay, MonthSummary, ScheduleSettings
from worklog_cli.utils.exit_codes import ERROR_INVALID_ARGS, ERROR_NOT_FOUND

runner = CliRunner()


def _december(flexible: bool = False) -> MonthSummary:
    days = [
        CalendarDay(
            date=date(2024, 12, day),
            is_workday=date(2024, 12, day).weekday() < 5,
            logged_minutes=480 if day == 2 else 0,
        )
        for day in range(1, 32)
    ]
    return MonthSummary(2024, 12, flexible, 480, days)


def test_set(services):
    services.schedule.set_schedule.return_value = ScheduleSettings(
        WeeklySchedule.from_weekdays([Weekday.MONDAY, Weekday.TUESDAY]), 450
    )

    result = runner.invoke(app, ["schedule", "set", "mon", "Tuesday", "--workday", "7h30"])

    assert result.exit_code == 0, result.output
    services.schedule.set_schedule.assert_awaited_once_with(
        1, [Weekday.MONDAY, Weekday.TUESDAY], flexible=False, workday_minutes=450
    )


def test_set_flexible(services):
    services.schedule.set_schedule.return_value = ScheduleSettings(
        WeeklySchedule.from_weekdays([Weekday.FRIDAY], flexible=True)
    )

    result = runner.invoke(app, ["schedule", "set", "fri", "--flexible"])

    assert result.exit_code == 0, result.output
    assert services.schedule.set_schedule.call_args.kwargs["flexible"] is True


def test_set_unknown_weekday(services):
    result = runner.invoke(app, ["schedule", "set", "mon", "funday"])

    assert result.exit_code == ERROR_INVALID_ARGS
    services.schedule.set_schedule.assert_not_called()


def test_show(services):
    services.schedule.get_schedule.return_value = ScheduleSettings(
        WeeklySchedule.from_weekdays([Weekday.MONDAY, Weekday.FRIDAY], flexible=True)
    )

    result = runner.invoke(app, ["schedule", "show", "-o", "json"])

    assert result.exit_code == 0, result.output
    data = json.loads(result.stdout)
    assert data["weekdays"] == ["Mon", "Fri"]
    assert data["flexible"] is True
    assert data["workday"] == "8h"


def test_show_without_schedule(services):
    services.schedule.get_schedule.return_value = None

    result = runner.invoke(app, ["schedule", "show"])

    assert result.exit_code == ERROR_NOT_FOUND


def test_calendar_defaults_to_current_month(services):
    services.schedule.month_calendar.return_value = _december()

    result = runner.invoke(app, ["schedule", "calendar"])

    assert result.exit_code == 0, result.output
    services.schedule.month_calendar.assert_awaited_once_with(1, 2025, 1)


def test_calendar_rigid_reports_shortfalls(services):
    services.schedule.month_calendar.return_value = _december()

    result = runner.invoke(app, ["schedule", "calendar", "--month", "12", "--year", "2024"])

    assert result.exit_code == 0, result.output
    services.schedule.month_calendar.assert_awaited_once_with(1, 2024, 12)
    assert "December 2024" in result.output
    assert "Workdays: 22" in result.output
    assert "2024-12-03: logged 0m of 8h" in result.output
    assert "2024-12-02: logged" not in result.output


def test_calendar_flexible_has_no_shortfalls(services):
    services.schedule.month_calendar.return_value = _december(flexible=True)

    result = runner.invoke(app, ["schedule", "calendar", "--month", "12", "--year", "2024"])

    assert result.exit_code == 0, result.output
    assert "flexible" in result.output
    assert "logged 0m" not in result.output


def test_recompute(services):
    services.schedule.snapshot_month.return_value = WeeklySchedule.from_weekdays(
        [Weekday.MONDAY]
    ).expand(2024, 12)

    result = runner.invoke(app, ["schedule", "recompute", "--month", "12", "--year", "2024"])

    assert result.exit_code == 0, result.output
    services.schedule.snapshot_month.assert_awaited_once_with(1, 2024, 12, replace=True)
    assert "5 workdays" in result.output


def test_recompute_empty_snapshot(services):
    services.schedule.snapshot_month.return_value = MonthlyScheduleLog(0)

    result = runner.invoke(app, ["schedule", "recompute"])

    assert result.exit_code == 0, result.output
    assert "0 workdays" in result.output


@pytest.mark.parametrize("month", ["0", "13"])
def test_recompute_passes_month_through(services, month):
    services.schedule.snapshot_month.side_effect = InvalidDateError(
        f"Invalid month 2025-{int(month):02d}: must be in 1..12"
    )

    result = runner.invoke(
        app, ["schedule", "recompute", "--month", month, "--year", "2025"]
    )

    assert result.exit_code == ERROR_INVALID_ARGS
    services.schedule.snapshot_month.assert_awaited_once_with(
        1, 2025, int(month), replace=True
    )


def test_calendar_month_zero_is_not_current_month(services):
    services.schedule.month_calendar.side_effect = InvalidDateError("Invalid month")

    result = runner.invoke(app, ["schedule", "calendar", "--month", "0"])

    assert result.exit_code == ERROR_INVALID_ARGS
    services.schedule.month_calendar.assert_awaited_once_with(1, 2025, 0)
