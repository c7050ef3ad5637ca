"""Resolution of user date and period options into calendar dates.

Users log time after the fact and usually say "yesterday", "day 15" or
"last Monday" rather than a full date. ``DateSpec`` captures exactly one such
choice and ``resolve_date`` turns it into a ``date`` given the current clock
reading and the configured day-change threshold.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime, time, timedelta

from worklog_cli.models.exceptions import (
    AmbiguousSpecificationError,
    InvalidDateError,
)
from worklog_cli.models.schedule import Weekday

DEFAULT_DAY_CHANGE_THRESHOLD = time(12, 0, 0)


# ---------------------------------------------------------------------------
# Date specifications
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Today:
    pass


@dataclass(frozen=True)
class Yesterday:
    pass


@dataclass(frozen=True)
class NearestPastWeekday:
    weekday: Weekday


@dataclass(frozen=True)
class ExplicitDate:
    date: date


@dataclass(frozen=True)
class DayOfMonth:
    """A day, optionally narrowed by month and then by year."""

    day: int
    month: int | None = None
    year: int | None = None

    def __post_init__(self):
        if self.year is not None and self.month is None:
            raise AmbiguousSpecificationError("A year requires a month")


@dataclass(frozen=True)
class Unspecified:
    pass


DateSpec = Today | Yesterday | NearestPastWeekday | ExplicitDate | DayOfMonth | Unspecified


# ---------------------------------------------------------------------------
# Period specifications
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class AllTime:
    pass


@dataclass(frozen=True)
class TodayOnly:
    pass


@dataclass(frozen=True)
class LastWeek:
    pass


@dataclass(frozen=True)
class DateRange:
    from_date: date | None = None
    to_date: date | None = None


PeriodSpec = AllTime | TodayOnly | LastWeek | DateRange


@dataclass(frozen=True)
class Period:
    """Inclusive date range."""

    from_date: date
    to_date: date

    def __contains__(self, day: date) -> bool:
        return self.from_date <= day <= self.to_date


# ---------------------------------------------------------------------------
# Resolution
# ---------------------------------------------------------------------------


def local_now() -> datetime:
    """Current local wall-clock time."""
    return datetime.now()


def _make_date(year: int, month: int, day: int) -> date:
    try:
        return date(year, month, day)
    except ValueError as e:
        raise InvalidDateError(f"Invalid date {year:04d}-{month:02d}-{day:02d}: {e}") from e


def _replace_day(value: date, day: int) -> date:
    return _make_date(value.year, value.month, day)


def nearest_past_weekday(today: date, weekday: Weekday | int) -> date:
    """Most recent date on or before *today* falling on *weekday*."""
    return today - timedelta(days=(today.weekday() - int(weekday)) % 7)


def logical_today(
    today: date,
    now_time: time,
    day_change_threshold: time = DEFAULT_DAY_CHANGE_THRESHOLD,
) -> date:
    """The work day *now* belongs to.

    Before the threshold the previous calendar day is still the current
    work day.
    """
    if now_time < day_change_threshold:
        return today - timedelta(days=1)
    return today


def resolve_date(
    spec: DateSpec,
    today: date,
    now_time: time,
    day_change_threshold: time = DEFAULT_DAY_CHANGE_THRESHOLD,
) -> date:
    """Resolve a date specification against the current clock reading.

    Raises:
        InvalidDateError: If the requested day does not exist
    """
    match spec:
        case Today():
            return today
        case Yesterday():
            return today - timedelta(days=1)
        case NearestPastWeekday(weekday=weekday):
            return nearest_past_weekday(today, weekday)
        case ExplicitDate(date=explicit):
            return explicit
        case DayOfMonth(day=day, month=None, year=None):
            if day > today.day:
                # Stepping back by `day` days always crosses into the
                # previous month.
                try:
                    last_month = today - timedelta(days=day)
                except OverflowError as e:
                    raise InvalidDateError(f"Invalid day of month: {day}") from e
                return _replace_day(last_month, day)
            return _replace_day(today, day)
        case DayOfMonth(day=day, month=month, year=None):
            year = today.year
            if month > today.month or (month == today.month and day > today.day):
                year -= 1
            return _make_date(year, month, day)
        case DayOfMonth(day=day, month=month, year=year):
            return _make_date(year, month, day)
        case Unspecified():
            return logical_today(today, now_time, day_change_threshold)
    raise TypeError(f"Unsupported date specification: {spec!r}")


def resolve_period(spec: PeriodSpec, today: date) -> Period | None:
    """Resolve a period specification.

    *today* is the logical work day (see ``logical_today``). Returns
    ``None`` for an unbounded period.

    Without explicit bounds the period ends ``today.day`` days before
    *today* and starts on the first of that month.

    Raises:
        InvalidDateError: If the resolved range starts after it ends
    """
    match spec:
        case AllTime():
            return None
        case TodayOnly():
            return Period(today, today)
        case LastWeek():
            return Period(today - timedelta(days=7), today)
        case DateRange(from_date=from_date, to_date=to_date):
            # TODO: confirm whether the default end should be today rather than
            # the last day of the previous month.
            default_to = today - timedelta(days=today.day)
            if from_date is None:
                from_date = default_to.replace(day=1)
            if to_date is None:
                to_date = default_to
            if from_date > to_date:
                raise InvalidDateError(
                    f"Period starts after it ends: {from_date.isoformat()} > "
                    f"{to_date.isoformat()} (give both --from and --to)"
                )
            return Period(from_date, to_date)
    raise TypeError(f"Unsupported period specification: {spec!r}")


def build_date_spec(
    *,
    today: bool = False,
    yesterday: bool = False,
    weekday: Weekday | None = None,
    explicit: date | None = None,
    day: int | None = None,
    month: int | None = None,
    year: int | None = None,
) -> DateSpec:
    """Build a ``DateSpec`` from independent command-line options.

    Raises:
        AmbiguousSpecificationError: If more than one date option is given,
            or month/year are given without day/month
    """
    chosen = [
        name
        for name, value in (
            ("--today", today),
            ("--yesterday", yesterday),
            ("--weekday", weekday is not None),
            ("--date", explicit is not None),
            ("--day", day is not None),
        )
        if value
    ]
    if len(chosen) > 1:
        raise AmbiguousSpecificationError(
            f"Options {', '.join(chosen)} cannot be used together"
        )
    if month is not None and day is None:
        raise AmbiguousSpecificationError("--month requires --day")
    if year is not None and month is None:
        raise AmbiguousSpecificationError("--year requires --month")

    if today:
        return Today()
    if yesterday:
        return Yesterday()
    if weekday is not None:
        return NearestPastWeekday(weekday)
    if explicit is not None:
        return ExplicitDate(explicit)
    if day is not None:
        return DayOfMonth(day, month, year)
    return Unspecified()


def build_period_spec(
    *,
    all_time: bool = False,
    today: bool = False,
    week: bool = False,
    from_date: date | None = None,
    to_date: date | None = None,
) -> PeriodSpec:
    """Build a ``PeriodSpec`` from command-line options.

    Raises:
        AmbiguousSpecificationError: If shortcuts are combined with each
            other or with explicit bounds
    """
    chosen = [
        name
        for name, value in (
            ("--all", all_time),
            ("--today", today),
            ("--week", week),
            ("--from/--to", from_date is not None or to_date is not None),
        )
        if value
    ]
    if len(chosen) > 1:
        raise AmbiguousSpecificationError(
            f"Options {', '.join(chosen)} cannot be used together"
        )
    if all_time:
        return AllTime()
    if today:
        return TodayOnly()
    if week:
        return LastWeek()
    return DateRange(from_date, to_date)
