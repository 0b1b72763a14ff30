"""Substring search over a result set."""

from __future__ import annotations

from typing import List, Optional, Sequence

from ..models import BirthRecord
from ..utils.text_cleaning import normalize_for_search


def filter_records(results: Optional[Sequence[BirthRecord]], term: str) -> List[BirthRecord]:
    """Return the records of *results* whose text contains *term*, ignoring case.

    An empty *term* keeps everything in the original order. Neither input is
    mutated; a new list is always returned.
    """
    if not results:
        return []
    needle = normalize_for_search(term)
    if not needle:
        return list(results)
    return [record for record in results if needle in normalize_for_search(record.text)]

__all__ = ["filter_records"]
