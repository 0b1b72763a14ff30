"""Shared text helpers used across services."""

from __future__ import annotations


def normalize_for_search(text: str) -> str:
    """Fold *text* for case-insensitive comparison.

    Whitespace is kept as typed, so ``" lincoln"`` only matches after a space.
    """
    if not text:
        return ""
    return text.casefold()

__all__ = ["normalize_for_search"]
