"""Service layer modules grouping engine logic by concern.

This module provides convenience re-exports so that callers can simply do for
example `from birthday_explorer.services import fetch_births` without having
to know which underlying module provides the symbol.
"""

from .historical_data import build_feed_url, fetch_births  # noqa: F401
from .calendar_math import format_date, month_day, next_day, parse_month_day, validate_date  # noqa: F401
from .favorites import FavoritesStore  # noqa: F401
from .search import filter_records  # noqa: F401

__all__ = [
    "build_feed_url",
    "fetch_births",
    "format_date",
    "month_day",
    "next_day",
    "parse_month_day",
    "validate_date",
    "FavoritesStore",
    "filter_records",
]
