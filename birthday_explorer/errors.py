"""Exception hierarchy raised by the explorer engine."""

from __future__ import annotations


class BirthdayExplorerError(Exception):
    """Base class for every error the engine raises or reports."""


class FetchError(BirthdayExplorerError):
    """The feed could not be read: transport failure, bad status or bad payload."""

    def __init__(self, message: str, *, status_code: int | None = None, url: str | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.url = url


class InvalidDateError(BirthdayExplorerError, ValueError):
    """Month or day is out of range."""


class NoDateSelectedError(BirthdayExplorerError):
    """A favorite was toggled before any date was selected."""


__all__ = [
    "BirthdayExplorerError",
    "FetchError",
    "InvalidDateError",
    "NoDateSelectedError",
]
