"""Utility functions for working with dates and times."""

from datetime import date

from ..models import CalendarDate

__all__ = [
    "get_current_date",
]

def get_current_date() -> CalendarDate:
    """Return today's local date, year included.

    Used as the starting point for "next birthday" navigation before the
    user has picked anything.
    """
    return CalendarDate.from_date(date.today())
