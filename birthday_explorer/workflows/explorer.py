"""Birthday explorer engine: date selection, navigation, favorites and search."""

from __future__ import annotations

import asyncio
import logging
from typing import Callable, List, Optional, Tuple

from ..logging_config import logging as _  # noqa: F401  # ensure config applied early
from ..config import SEEK_MAX_DAYS
from ..errors import BirthdayExplorerError, FetchError, NoDateSelectedError
from ..models import (
    BirthRecord,
    CalendarDate,
    EngineState,
    EngineStatus,
    FavoriteEntry,
    FetchOutcome,
    ResultSet,
)
from ..services.calendar_math import format_date, month_day, next_day, validate_date
from ..services.favorites import Favoritable, FavoritesStore
from ..services.historical_data import fetch_births
from ..services.search import filter_records
from ..utils.datetime_utils import get_current_date

logger = logging.getLogger(__name__)

Fetcher = Callable[[int, int], List[BirthRecord]]
ErrorCallback = Callable[[BirthdayExplorerError], None]


class BirthdayExplorerController:
    """Owns one :class:`EngineState` and exposes the engine operations.

    Every call takes a new request number. A request commits when it
    changes the selection: :meth:`select_date` as soon as it is issued,
    navigation only when it finds a day with births. A response is dropped
    once a later request has committed, so overlapping calls resolve as
    "last request wins" whatever order they complete in, and a navigation
    that finds nothing never hides a selection still loading.

    Fetch failures never raise out of the navigation calls. They are logged,
    stored in :attr:`last_error`, passed to *on_error* and returned in the
    :class:`FetchOutcome`.
    """

    def __init__(
        self,
        fetcher: Fetcher = fetch_births,
        *,
        today: Callable[[], CalendarDate] = get_current_date,
        on_error: Optional[ErrorCallback] = None,
    ) -> None:
        self._fetcher = fetcher
        self._today = today
        self._on_error = on_error
        self._state = EngineState(favorites=FavoritesStore())
        self._sequence = 0
        self._committed = 0
        self._in_flight = 0

    # ------------------------------------------------------------------
    # Read-only views
    # ------------------------------------------------------------------
    @property
    def selected_date(self) -> Optional[CalendarDate]:
        return self._state.selected_date

    @property
    def results(self) -> Optional[ResultSet]:
        """Current records, or ``None`` before the first completed fetch."""
        if self._state.results is None:
            return None
        return list(self._state.results)

    @property
    def search_term(self) -> str:
        return self._state.search_term

    @property
    def filtered_results(self) -> List[BirthRecord]:
        return filter_records(self._state.results, self._state.search_term)

    @property
    def favorites(self) -> Tuple[FavoriteEntry, ...]:
        return self._state.favorites.entries

    @property
    def last_error(self) -> Optional[BirthdayExplorerError]:
        return self._state.last_error

    @property
    def status(self) -> EngineStatus:
        return EngineStatus.LOADING if self._in_flight else EngineStatus.IDLE

    @property
    def is_loading(self) -> bool:
        return self.status is EngineStatus.LOADING

    @property
    def heading(self) -> str:
        if self._state.selected_date is None:
            return "Birthdays"
        return f"Birthdays on {format_date(self._state.selected_date)}"

    def is_favorite(self, record: Favoritable) -> bool:
        return self._state.favorites.is_favorite(record)

    # ------------------------------------------------------------------
    # Operations
    # ------------------------------------------------------------------
    async def select_date(self, date: CalendarDate) -> FetchOutcome:
        """Select *date* and load its births.

        A failed fetch leaves an empty result set; the selection is kept
        either way.
        """
        validate_date(date)
        seq = self._next_request()
        self._committed = seq
        self._state.selected_date = date

        records, error = await self._load(date)
        if self._is_superseded(seq):
            return self._discard(date, records, error)

        if error is not None:
            self._state.results = []
            self._report(error)
            return FetchOutcome(date=date, records=[], error=error, applied=True)

        self._state.results = records
        self._state.last_error = None
        return FetchOutcome(date=date, records=records, applied=True)

    async def next_birthday(self) -> FetchOutcome:
        """Try the day after the selection (or after today).

        Moves at most one day. If that day fails to load or has nobody,
        the selection and results stay exactly as they were; call again to
        keep going, or use :meth:`seek_next_birthday`.
        """
        base = self._state.selected_date or self._today()
        candidate = next_day(base)
        seq = self._next_request()

        records, error = await self._load(candidate)
        if self._is_superseded(seq):
            return self._discard(candidate, records, error)

        if error is not None:
            self._report(error)
            return FetchOutcome(date=candidate, error=error)

        if not records:
            logger.info("No births found for %s; keeping current date", format_date(candidate))
            return FetchOutcome(date=candidate, records=[])

        self._commit(seq, candidate, records)
        return FetchOutcome(date=candidate, records=records, applied=True)

    async def seek_next_birthday(self, max_days: int = SEEK_MAX_DAYS) -> FetchOutcome:
        """Walk forward day by day until a day with births is found.

        Gives up after *max_days* candidates. A fetch failure stops the walk.
        In both cases the state is left untouched.
        """
        if max_days < 1:
            raise ValueError("max_days must be positive")

        base = self._state.selected_date or self._today()
        candidate = base
        seq = self._next_request()
        for _attempt in range(max_days):
            candidate = next_day(candidate)
            records, error = await self._load(candidate)
            if self._is_superseded(seq):
                return self._discard(candidate, records, error)

            if error is not None:
                self._report(error)
                return FetchOutcome(date=candidate, error=error)

            if records:
                self._commit(seq, candidate, records)
                return FetchOutcome(date=candidate, records=records, applied=True)

        logger.info("No births found within %d days of %s", max_days, format_date(base))
        return FetchOutcome(date=candidate, records=[])

    def toggle_favorite(self, record: Favoritable) -> bool:
        """Flip *record*'s favorite flag; return True if it is now a favorite."""
        if self._state.selected_date is None:
            raise NoDateSelectedError("Select a date before toggling favorites")

        favorites = self._state.favorites
        if favorites.is_favorite(record):
            favorites.remove(record)
            return False
        favorites.add(record, self._state.selected_date)
        return True

    def set_search_term(self, term: str) -> None:
        self._state.search_term = term or ""

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------
    async def _fetch(self, date: CalendarDate) -> List[BirthRecord]:
        month, day = month_day(date)
        return await asyncio.to_thread(self._fetcher, month, day)

    async def _load(
        self, date: CalendarDate
    ) -> Tuple[Optional[List[BirthRecord]], Optional[FetchError]]:
        self._in_flight += 1
        try:
            records = await self._fetch(date)
        except FetchError as exc:
            return None, exc
        finally:
            self._in_flight -= 1
        return records, None

    def _next_request(self) -> int:
        self._sequence += 1
        return self._sequence

    def _is_superseded(self, seq: int) -> bool:
        # A request issued later has already changed the selection.
        return self._committed > seq

    def _discard(
        self,
        date: CalendarDate,
        records: Optional[List[BirthRecord]],
        error: Optional[FetchError],
    ) -> FetchOutcome:
        logger.debug("Discarding stale response for %s", format_date(date))
        return FetchOutcome(date=date, records=records, error=error, stale=True)

    def _commit(self, seq: int, date: CalendarDate, records: List[BirthRecord]) -> None:
        self._committed = seq
        self._state.selected_date = date
        self._state.results = records
        self._state.last_error = None

    def _report(self, error: BirthdayExplorerError) -> None:
        logger.error("Error fetching historical data: %s", error)
        self._state.last_error = error
        if self._on_error is not None:
            self._on_error(error)

__all__ = ["BirthdayExplorerController", "Fetcher", "ErrorCallback"]
