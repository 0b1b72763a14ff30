"""In-memory favorites keyed by record text."""

from __future__ import annotations

import logging
from typing import Iterator, List, Tuple, Union

from ..models import BirthRecord, CalendarDate, FavoriteEntry
from .calendar_math import month_day

logger = logging.getLogger(__name__)

# Anything with a ``text`` attribute can be looked up.
Favoritable = Union[BirthRecord, FavoriteEntry]


class FavoritesStore:
    """Ordered collection of :class:`FavoriteEntry`.

    Identity is the record ``text`` alone: two people with the same
    description but different years count as the same favorite.

    :meth:`add` appends unconditionally. Callers that must keep the
    collection free of duplicate texts check :meth:`is_favorite` first, as
    :class:`~birthday_explorer.workflows.explorer.BirthdayExplorerController`
    does.
    """

    def __init__(self) -> None:
        self._entries: List[FavoriteEntry] = []

    def add(self, record: Favoritable, date: CalendarDate) -> FavoriteEntry:
        """Append *record* tagged with the month/day of *date*."""
        month, day = month_day(date)
        entry = FavoriteEntry(
            text=record.text,
            year=record.year,
            month=month,
            day=day,
            extra=dict(record.extra),
        )
        self._entries.append(entry)
        logger.info("Added favorite: %s (%d/%d)", record.text, month, day)
        return entry

    def remove(self, record: Favoritable) -> int:
        """Drop every entry sharing *record*'s text; return how many went."""
        before = len(self._entries)
        self._entries = [entry for entry in self._entries if entry.text != record.text]
        removed = before - len(self._entries)
        if removed:
            logger.info("Removed favorite: %s", record.text)
        return removed

    def is_favorite(self, record: Favoritable) -> bool:
        return any(entry.text == record.text for entry in self._entries)

    @property
    def entries(self) -> Tuple[FavoriteEntry, ...]:
        return tuple(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[FavoriteEntry]:
        return iter(tuple(self._entries))

__all__ = ["FavoritesStore", "Favoritable"]
