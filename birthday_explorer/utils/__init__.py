"""Utility functions for the birthday explorer.

Re-exports the text and datetime helpers so that imports like
`from ..utils import normalize_for_search` work as expected.
"""

from .text_cleaning import normalize_for_search  # noqa: F401
from .datetime_utils import get_current_date  # noqa: F401

__all__ = [
    "normalize_for_search",
    "get_current_date",
]
