"""Pure calendar arithmetic on :class:`CalendarDate` values."""

from __future__ import annotations

import datetime as dt
import re
from typing import Tuple

from ..errors import InvalidDateError
from ..models import CalendarDate

# Yearless dates are checked against a leap year so that 2/29 stays valid.
LEAP_REFERENCE_YEAR: int = 2000

_MONTH_DAY_RE = re.compile(r"\s*(\d{1,2})-(\d{1,2})\s*")


def _to_stdlib(date: CalendarDate) -> dt.date:
    year = LEAP_REFERENCE_YEAR if date.year is None else date.year
    try:
        return dt.date(year, date.month, date.day)
    except (TypeError, ValueError) as exc:
        raise InvalidDateError(
            f"Invalid calendar date: month={date.month!r} day={date.day!r} year={date.year!r}"
        ) from exc


def validate_date(date: CalendarDate) -> CalendarDate:
    """Return *date* unchanged, or raise :class:`InvalidDateError`."""
    _to_stdlib(date)
    return date


def month_day(date: CalendarDate) -> Tuple[int, int]:
    """Return the ``(month, day)`` lookup key for *date*."""
    validate_date(date)
    return date.month, date.day


def next_day(date: CalendarDate) -> CalendarDate:
    """Return the day after *date*, rolling over month and year boundaries.

    A yearless date stays yearless: 12/31 becomes 1/1 and 2/28 becomes 2/29.
    """
    current = _to_stdlib(date)
    try:
        following = current + dt.timedelta(days=1)
    except OverflowError as exc:
        raise InvalidDateError(f"No day after {current.isoformat()}") from exc
    return CalendarDate(
        month=following.month,
        day=following.day,
        year=None if date.year is None else following.year,
    )


def format_date(date: CalendarDate) -> str:
    """Render *date* as ``M/D`` or, when the year is known, ``M/D/YYYY``."""
    validate_date(date)
    if date.year is None:
        return f"{date.month}/{date.day}"
    return f"{date.month}/{date.day}/{date.year}"


def parse_month_day(value: str) -> CalendarDate:
    """Parse ``MM-DD`` (e.g. ``12-18``) into a yearless date."""
    match = _MONTH_DAY_RE.fullmatch(value or "")
    if not match:
        raise InvalidDateError("Date must be in MM-DD format, e.g. 12-18")
    return validate_date(CalendarDate(month=int(match.group(1)), day=int(match.group(2))))

__all__ = [
    "LEAP_REFERENCE_YEAR",
    "validate_date",
    "month_day",
    "next_day",
    "format_date",
    "parse_month_day",
]
