"""Parsers for command-line values: durations, weekdays, dates and times."""

from __future__ import annotations

from datetime import date, time

from worklog_cli.models.exceptions import (
    InvalidDateError,
    InvalidDurationError,
    InvalidTimeError,
    InvalidWeekdayError,
)
from worklog_cli.models.schedule import Weekday

WEEKDAY_NAMES: dict[str, Weekday] = {
    "mon": Weekday.MONDAY,
    "monday": Weekday.MONDAY,
    "tue": Weekday.TUESDAY,
    "tuesday": Weekday.TUESDAY,
    "wed": Weekday.WEDNESDAY,
    "wednesday": Weekday.WEDNESDAY,
    "thu": Weekday.THURSDAY,
    "thursday": Weekday.THURSDAY,
    "fri": Weekday.FRIDAY,
    "friday": Weekday.FRIDAY,
    "sat": Weekday.SATURDAY,
    "saturday": Weekday.SATURDAY,
    "sun": Weekday.SUNDAY,
    "sunday": Weekday.SUNDAY,
}


def parse_duration(text: str) -> int:
    """Parse a duration such as ``8h30``, ``6h21m`` or ``90m`` into minutes.

    A bare number is hours. After ``h`` a bare trailing number is minutes;
    after ``m`` no bare number may follow.

    Args:
        text: Duration text

    Returns:
        Duration in whole minutes

    Raises:
        InvalidDurationError: If the text is empty or malformed
    """
    unit = 60
    result: int | None = None
    number: int | None = None

    for char in text:
        if "0" <= char <= "9":
            number = (number or 0) * 10 + int(char)
        elif char == "h":
            if number is None:
                raise InvalidDurationError("Number expected before unit")
            result = (result or 0) + number * 60
            number = None
            unit = 1
        elif char == "m":
            if number is None:
                raise InvalidDurationError("Number expected before unit")
            result = (result or 0) + number
            number = None
            unit = 0
        else:
            raise InvalidDurationError(f"Unexpected character in duration: '{char}'")

    if unit == 0 and number is not None:
        raise InvalidDurationError(
            f"Unable to parse duration, unknown unit for value {number}"
        )
    if result is None and number is None:
        raise InvalidDurationError("Number expected")
    return (result or 0) + (number or 0) * unit


def parse_weekday(text: str) -> Weekday:
    """Parse a full or three-letter English weekday name."""
    try:
        return WEEKDAY_NAMES[text.strip().lower()]
    except KeyError:
        raise InvalidWeekdayError(f'Invalid weekday: "{text}"') from None


def parse_date(text: str) -> date:
    """Parse an ISO-8601 calendar date (``YYYY-MM-DD``)."""
    try:
        return date.fromisoformat(text.strip())
    except ValueError as e:
        raise InvalidDateError(f'Invalid date "{text}": {e}') from e


def parse_time(text: str) -> time:
    """Parse an ISO-8601 time of day (``HH:MM`` or ``HH:MM:SS``).

    Times carrying a UTC offset are rejected; all times are local wall-clock.
    """
    try:
        value = time.fromisoformat(text.strip())
    except ValueError as e:
        raise InvalidTimeError(f'Invalid time "{text}": {e}') from e
    if value.tzinfo is not None:
        raise InvalidTimeError(f'Invalid time "{text}": UTC offsets are not supported')
    return value
