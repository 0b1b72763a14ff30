"""Centralised configuration for birthday_explorer.

Environment variables are loaded once and all related constants are
grouped by concern for easier maintenance.
"""

from __future__ import annotations

import os
from dotenv import load_dotenv

# ---------------------------------------------------------------------------
# Load environment variables from `.env` (if present)
# ---------------------------------------------------------------------------
load_dotenv()

# ---------------------------------------------------------------------------
# Wikimedia "on this day" feed
# ---------------------------------------------------------------------------
FEED_BASE_URL: str = os.getenv(
    "BIRTHDAY_EXPLORER_FEED_BASE_URL",
    "https://api.wikimedia.org/feed/v1/wikipedia/en/onthisday",
).rstrip("/")
# Only births are browsed; the feed also serves events, deaths, holidays...
FEED_TYPE: str = "births"
# Wikimedia rejects anonymous clients, so always send a descriptive agent.
USER_AGENT: str = os.getenv("BIRTHDAY_EXPLORER_USER_AGENT", "BirthdayExplorer/0.1")

# ---------------------------------------------------------------------------
# Logging
# ---------------------------------------------------------------------------
LOG_LEVEL: str = os.getenv("BIRTHDAY_EXPLORER_LOG_LEVEL", "INFO").upper()

# ---------------------------------------------------------------------------
# Navigation
# ---------------------------------------------------------------------------
# Upper bound for seek_next_birthday: one full (leap) year of candidates.
SEEK_MAX_DAYS: int = 366

# ---------------------------------------------------------------------------
# Re-exported names
# ---------------------------------------------------------------------------
__all__ = [
    # feed
    "FEED_BASE_URL",
    "FEED_TYPE",
    "USER_AGENT",
    # logging
    "LOG_LEVEL",
    # navigation
    "SEEK_MAX_DAYS",
]
