"""Work-schedule bitmaps.

A project's recurring schedule is a ``WeeklySchedule``: bits 0-6 mark the
working weekdays (Monday = bit 0) and bit 7 marks the schedule as flexible,
meaning only the aggregate over a period has to match, not each day.

When time is first logged for a month, the weekly pattern is expanded into a
``MonthlyScheduleLog``: bit ``i`` is set when day ``i + 1`` of that month is a
workday and bit 31 carries the flexible flag. The monthly value is a frozen
snapshot, so editing the weekly schedule later does not rewrite months that
were already logged.

Both are immutable values; all changes are whole-value replacements.
"""

from __future__ import annotations

import calendar
from collections.abc import Iterable
from dataclasses import dataclass
from datetime import date
from enum import IntEnum

WEEKDAY_MASK = 0x7F
WEEKLY_FLEXIBLE_BIT = 7
MONTHLY_FLEXIBLE_BIT = 31


class Weekday(IntEnum):
    """Day of week, numbered from Monday like ``date.weekday()``."""

    MONDAY = 0
    TUESDAY = 1
    WEDNESDAY = 2
    THURSDAY = 3
    FRIDAY = 4
    SATURDAY = 5
    SUNDAY = 6

    @property
    def short_name(self) -> str:
        return self.name[:3].title()

    @classmethod
    def of(cls, day: date) -> Weekday:
        return cls(day.weekday())


def _to_signed32(value: int) -> int:
    return value - (1 << 32) if value & (1 << 31) else value


@dataclass(frozen=True)
class WeeklySchedule:
    """Recurring weekly work pattern packed into 8 bits."""

    bitmap: int

    @classmethod
    def from_weekdays(
        cls, weekdays: Iterable[Weekday | int], flexible: bool = False
    ) -> WeeklySchedule:
        bitmap = 0
        for weekday in weekdays:
            bitmap |= 1 << int(weekday)
        if flexible:
            bitmap |= 1 << WEEKLY_FLEXIBLE_BIT
        return cls(bitmap)

    @property
    def flexible(self) -> bool:
        return bool(self.bitmap & (1 << WEEKLY_FLEXIBLE_BIT))

    @property
    def weekdays(self) -> list[Weekday]:
        """Scheduled weekdays in Monday-to-Sunday order."""
        return [day for day in Weekday if self.bitmap & (1 << day)]

    def __contains__(self, weekday: Weekday | int) -> bool:
        return bool(self.bitmap & WEEKDAY_MASK & (1 << int(weekday)))

    def expand(self, year: int, month: int) -> MonthlyScheduleLog:
        """Freeze this pattern into the workday bitmap of one month."""
        first_weekday, days_in_month = calendar.monthrange(year, month)
        bitmap = 0
        for i in range(days_in_month):
            weekday = (i + first_weekday) % 7
            if self.bitmap & (1 << weekday):
                bitmap |= 1 << i
        if self.flexible:
            bitmap |= 1 << MONTHLY_FLEXIBLE_BIT
        return MonthlyScheduleLog(bitmap)

    def to_db(self) -> int:
        return self.bitmap

    @classmethod
    def from_db(cls, value: int) -> WeeklySchedule:
        # Only the low byte is meaningful.
        return cls(value & 0xFF)

    def describe(self) -> str:
        names = ", ".join(day.short_name for day in self.weekdays) or "none"
        return f"{names} ({'flexible' if self.flexible else 'rigid'})"


@dataclass(frozen=True)
class MonthlyScheduleLog:
    """Per-day workday bitmap of one concrete month."""

    bitmap: int

    @property
    def flexible(self) -> bool:
        return bool(self.bitmap & (1 << MONTHLY_FLEXIBLE_BIT))

    def is_workday(self, day_of_month: int) -> bool:
        """Test the bit of *day_of_month* (1-based).

        No bounds check is made: days past the end of the month read as
        non-workdays because expansion never sets those bits.
        """
        return bool(self.bitmap & (1 << (day_of_month - 1)))

    def workdays(self, year: int, month: int) -> list[bool]:
        """One flag per day of the given month."""
        days_in_month = calendar.monthrange(year, month)[1]
        return [self.is_workday(day) for day in range(1, days_in_month + 1)]

    def workday_count(self, year: int, month: int) -> int:
        return sum(self.workdays(year, month))

    def to_db(self) -> int:
        """Reinterpret as a signed 32-bit integer for the INTEGER column."""
        return _to_signed32(self.bitmap & 0xFFFFFFFF)

    @classmethod
    def from_db(cls, value: int) -> MonthlyScheduleLog:
        return cls(value & 0xFFFFFFFF)


def month_key(year: int, month: int) -> int:
    """Month number used as storage key: ``year * 12 + month``."""
    return year * 12 + month


def encode_weekly(
    weekdays: Iterable[Weekday | int], flexible: bool
) -> WeeklySchedule:
    return WeeklySchedule.from_weekdays(weekdays, flexible)


def decode_weekly(schedule: WeeklySchedule) -> tuple[list[Weekday], bool]:
    return schedule.weekdays, schedule.flexible


def expand_to_month(
    schedule: WeeklySchedule, month: int, year: int
) -> MonthlyScheduleLog:
    return schedule.expand(year, month)


def is_workday(log: MonthlyScheduleLog, day_of_month: int) -> bool:
    return log.is_workday(day_of_month)
