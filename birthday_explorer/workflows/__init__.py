"""Engine entry points."""

from .explorer import BirthdayExplorerController  # noqa: F401

__all__ = ["BirthdayExplorerController"]
