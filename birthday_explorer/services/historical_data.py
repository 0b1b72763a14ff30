"""Birth records for a calendar day via the Wikimedia "on this day" feed."""

from __future__ import annotations

import logging
from typing import Any, Dict, List

import requests

from ..clients.feed_client import get_feed_session
from ..config import FEED_BASE_URL, FEED_TYPE
from ..errors import FetchError
from ..models import BirthRecord

logger = logging.getLogger(__name__)


def build_feed_url(month: int, day: int) -> str:
    """Return the feed URL for *month*/*day* (no zero padding)."""
    return f"{FEED_BASE_URL}/{FEED_TYPE}/{int(month)}/{int(day)}"


def _parse_record(item: Any) -> BirthRecord | None:
    if not isinstance(item, dict):
        return None
    text = item.get("text")
    if not isinstance(text, str) or not text.strip():
        return None
    try:
        year = int(item.get("year"))
    except (TypeError, ValueError):
        return None
    extra = {k: v for k, v in item.items() if k not in ("text", "year")}
    return BirthRecord(text=text, year=year, extra=extra)


def parse_births(payload: Any) -> List[BirthRecord]:
    """Turn a decoded feed payload into records.

    Raises
    ------
    FetchError
        If *payload* is not an object carrying a ``births`` list.
    """
    if not isinstance(payload, dict) or not isinstance(payload.get(FEED_TYPE), list):
        raise FetchError(f"Feed payload has no '{FEED_TYPE}' list")

    records: List[BirthRecord] = []
    skipped = 0
    for item in payload[FEED_TYPE]:
        record = _parse_record(item)
        if record is None:
            skipped += 1
            continue
        records.append(record)

    if skipped:
        logger.warning("Skipped %d malformed birth entries", skipped)
    return records


def fetch_births(month: int, day: int) -> List[BirthRecord]:
    """Fetch everyone born on *month*/*day*, in feed order.

    One request per call; no retry. Any transport, status or decoding
    problem is raised as :class:`FetchError`.
    """
    url = build_feed_url(month, day)
    logger.info("Fetching births for %d/%d", month, day)

    try:
        response = get_feed_session().get(url)
    except requests.RequestException as exc:
        logger.error("Feed request failed for %s: %s", url, exc)
        raise FetchError(f"Feed request failed: {exc}", url=url) from exc

    if not response.ok:
        logger.error("Error from feed: %s - %s", response.status_code, response.text)
        raise FetchError(
            f"Feed returned HTTP {response.status_code}",
            status_code=response.status_code,
            url=url,
        )

    try:
        payload: Dict[str, Any] = response.json()
    except ValueError as exc:
        logger.error("Feed returned invalid JSON for %s", url)
        raise FetchError("Feed returned invalid JSON", status_code=response.status_code, url=url) from exc

    records = parse_births(payload)
    logger.info("Found %d births for %d/%d", len(records), month, day)
    return records

__all__ = ["build_feed_url", "parse_births", "fetch_births"]
