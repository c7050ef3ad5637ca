"""Tests for the weekly and monthly schedule bitmaps."""

from __future__ import annotations

import calendar
from datetime import date
from itertools import combinations

import pytest

from worklog_cli.models.schedule import (
    MonthlyScheduleLog,
    Weekday,
    WeeklySchedule,
    decode_weekly,
    encode_weekly,
    expand_to_month,
    is_workday,
    month_key,
)

WORKWEEK = [
    Weekday.MONDAY,
    Weekday.TUESDAY,
    Weekday.WEDNESDAY,
    Weekday.THURSDAY,
    Weekday.FRIDAY,
]
DECEMBER_2024_WORKWEEK = 0b01100111110011111001111100111110
ALL_WEEKDAY_SETS = [
    list(days) for size in range(1, 8) for days in combinations(Weekday, size)
]


class TestWeeklySchedule:
    def test_encode(self):
        schedule = encode_weekly([Weekday.MONDAY, Weekday.WEDNESDAY, Weekday.FRIDAY], True)
        assert schedule.bitmap == 0b10010101

    def test_decode_is_ordered_monday_first(self):
        schedule = WeeklySchedule.from_weekdays([Weekday.FRIDAY, Weekday.MONDAY])
        assert decode_weekly(schedule) == ([Weekday.MONDAY, Weekday.FRIDAY], False)

    def test_every_weekday_set_is_covered(self):
        assert len(ALL_WEEKDAY_SETS) == 127

    @pytest.mark.parametrize("flexible", [False, True])
    @pytest.mark.parametrize("days", ALL_WEEKDAY_SETS)
    def test_decode_restores_encoded_set(self, days, flexible):
        schedule = encode_weekly(reversed(days), flexible)
        assert decode_weekly(schedule) == (sorted(days), flexible)

    def test_duplicates_collapse(self):
        schedule = WeeklySchedule.from_weekdays([Weekday.TUESDAY, Weekday.TUESDAY])
        assert schedule.weekdays == [Weekday.TUESDAY]

    def test_flexible_bit_is_not_a_weekday(self):
        schedule = WeeklySchedule.from_weekdays([], flexible=True)
        assert schedule.weekdays == []
        assert schedule.flexible

    def test_membership(self):
        schedule = WeeklySchedule.from_weekdays(WORKWEEK)
        assert Weekday.FRIDAY in schedule
        assert Weekday.SUNDAY not in schedule

    def test_from_db_keeps_low_byte(self):
        assert WeeklySchedule.from_db(0x1FF).bitmap == 0xFF

    def test_describe(self):
        schedule = WeeklySchedule.from_weekdays([Weekday.MONDAY, Weekday.SUNDAY], True)
        assert schedule.describe() == "Mon, Sun (flexible)"
        assert WeeklySchedule(0).describe() == "none (rigid)"


class TestMonthlyScheduleLog:
    def test_december_2024_workweek(self):
        log = expand_to_month(WeeklySchedule.from_weekdays(WORKWEEK), 12, 2024)
        assert log.bitmap == DECEMBER_2024_WORKWEEK
        assert not log.flexible

    def test_flexible_flag_is_bit_31(self):
        log = WeeklySchedule.from_weekdays(WORKWEEK, flexible=True).expand(2024, 12)
        assert log.bitmap == DECEMBER_2024_WORKWEEK | (1 << 31)
        assert log.flexible

    def test_signed_storage_value(self):
        log = WeeklySchedule.from_weekdays(WORKWEEK, flexible=True).expand(2024, 12)
        stored = log.to_db()
        assert stored < 0
        assert -(2**31) <= stored < 2**31
        assert MonthlyScheduleLog.from_db(stored) == log

    def test_positive_storage_value_is_unchanged(self):
        log = MonthlyScheduleLog(DECEMBER_2024_WORKWEEK)
        assert log.to_db() == DECEMBER_2024_WORKWEEK

    def test_leap_february_every_day(self):
        log = WeeklySchedule.from_weekdays(list(Weekday)).expand(2024, 2)
        assert log.bitmap == (1 << 29) - 1
        assert log.workday_count(2024, 2) == 29
        assert not log.is_workday(30)

    def test_workday_count(self):
        log = WeeklySchedule.from_weekdays(WORKWEEK).expand(2024, 12)
        assert log.workday_count(2024, 12) == 22

    @pytest.mark.parametrize(("year", "month"), [(2024, 12), (2025, 2), (2023, 7)])
    def test_bits_match_calendar(self, year, month):
        schedule = WeeklySchedule.from_weekdays(
            [Weekday.TUESDAY, Weekday.THURSDAY, Weekday.SATURDAY]
        )
        log = schedule.expand(year, month)
        for day in range(1, calendar.monthrange(year, month)[1] + 1):
            expected = Weekday.of(date(year, month, day)) in schedule
            assert is_workday(log, day) == expected

    def test_empty_schedule_has_no_workdays(self):
        log = WeeklySchedule(0).expand(2024, 12)
        assert log.bitmap == 0
        assert log.workdays(2024, 12) == [False] * 31


def test_month_key():
    assert month_key(2024, 12) == 2024 * 12 + 12
    assert month_key(2025, 1) == month_key(2024, 12) + 1
