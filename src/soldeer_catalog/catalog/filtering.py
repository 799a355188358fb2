"""Substring search over catalog entries."""

from __future__ import annotations
from collections.abc import Sequence
from .entries import DependencyEntry


def filter_entries(
    entries: Sequence[DependencyEntry], query: str
) -> list[DependencyEntry]:
    """Return entries whose key contains ``query``, ignoring case.

    An empty query matches everything. The query is used verbatim, so
    surrounding whitespace takes part in the match.
    """
    if query == "":
        return list(entries)
    needle = query.lower()
    return [entry for entry in entries if needle in entry.key.lower()]


__all__ = ["filter_entries"]
