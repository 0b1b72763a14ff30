"""Per-thread HTTP sessions for Wikimedia feed calls."""

from __future__ import annotations

import threading

import requests

from ..config import USER_AGENT

# Fetches run on asyncio.to_thread workers; requests sessions are not
# guaranteed thread-safe, so each worker thread keeps its own.
_local = threading.local()


def get_feed_session() -> requests.Session:
    """Return the calling thread's :class:`requests.Session` for the feed.

    The session is created on first use in each thread and reused after
    that, so connections are pooled per worker thread.
    """
    session: requests.Session | None = getattr(_local, "session", None)
    if session is None:
        session = requests.Session()
        session.headers.update(
            {
                "User-Agent": USER_AGENT,
                "Accept": "application/json",
            }
        )
        _local.session = session
    return session

__all__ = ["get_feed_session"]
