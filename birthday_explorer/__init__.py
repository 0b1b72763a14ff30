"""Top-level package for the birthday-explorer project.

This package exposes the engine controller so callers can do
`from birthday_explorer import BirthdayExplorerController`.
"""

from importlib import metadata as _metadata

try:
    __version__: str = _metadata.version("birthday-explorer")
except _metadata.PackageNotFoundError:  # pragma: no cover – running from source
    __version__ = "0.0.0"

from .errors import BirthdayExplorerError, FetchError, InvalidDateError, NoDateSelectedError
from .models import BirthRecord, CalendarDate, FavoriteEntry, FetchOutcome
from .workflows.explorer import BirthdayExplorerController  # convenience re-export

__all__ = [
    "BirthdayExplorerController",
    "BirthRecord",
    "CalendarDate",
    "FavoriteEntry",
    "FetchOutcome",
    "BirthdayExplorerError",
    "FetchError",
    "InvalidDateError",
    "NoDateSelectedError",
    "__version__",
]
