"""Domain models used across the project."""

from __future__ import annotations

import datetime as dt
from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, Any, Dict, List, Optional

if TYPE_CHECKING:  # pragma: no cover
    from .errors import BirthdayExplorerError
    from .services.favorites import FavoritesStore


@dataclass(frozen=True, slots=True)
class CalendarDate:
    """A day-of-year selection; ``year`` is only carried for display."""

    month: int
    day: int
    year: Optional[int] = None

    @classmethod
    def from_date(cls, value: dt.date) -> "CalendarDate":
        return cls(month=value.month, day=value.day, year=value.year)


@dataclass(frozen=True, slots=True)
class BirthRecord:
    """A single person from the feed's ``births`` list."""

    text: str
    year: int
    # Remaining feed fields (``pages`` etc.), kept but never compared.
    extra: Dict[str, Any] = field(default_factory=dict, compare=False, repr=False)

    @property
    def name(self) -> str:
        """Return the leading name portion of ``text`` ("Ada Lovelace, mathematician")."""
        return self.text.split(",", 1)[0].strip()

    def display_text(self) -> str:
        return f"{self.text} - {self.year}"


@dataclass(frozen=True, slots=True)
class FavoriteEntry:
    """A pinned record tagged with the month/day selected when it was pinned."""

    text: str
    year: int
    month: int
    day: int
    extra: Dict[str, Any] = field(default_factory=dict, compare=False, repr=False)

    def display_text(self) -> str:
        return f"{self.text} - {self.year}"


# An ordered list of records for one day. ``None`` stands for "not loaded yet".
ResultSet = List[BirthRecord]


class EngineStatus(str, Enum):
    IDLE = "idle"
    LOADING = "loading"


@dataclass(slots=True)
class EngineState:
    """All mutable explorer state; owned by exactly one controller."""

    favorites: "FavoritesStore"
    selected_date: Optional[CalendarDate] = None
    results: Optional[ResultSet] = None
    search_term: str = ""
    last_error: Optional["BirthdayExplorerError"] = None


@dataclass(frozen=True, slots=True)
class FetchOutcome:
    """What a navigation call did.

    ``applied`` is True when the engine state was changed by this call.
    ``stale`` marks a response discarded because a newer request was issued
    while it was in flight.
    """

    date: CalendarDate
    records: Optional[ResultSet] = None
    error: Optional["BirthdayExplorerError"] = None
    applied: bool = False
    stale: bool = False

    @property
    def ok(self) -> bool:
        return self.error is None


__all__ = [
    "CalendarDate",
    "BirthRecord",
    "FavoriteEntry",
    "ResultSet",
    "EngineStatus",
    "EngineState",
    "FetchOutcome",
]
