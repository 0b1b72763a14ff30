"""Convenience re-exports for shared client accessors."""

from .feed_client import get_feed_session  # noqa: F401

__all__ = [
    "get_feed_session",
]
