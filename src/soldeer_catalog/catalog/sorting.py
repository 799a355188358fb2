"""Ordering rules for catalog entries."""

from __future__ import annotations
from collections.abc import Iterable
from .entries import DependencyEntry


def _ordering_key(entry: DependencyEntry) -> tuple[str, str]:
    return entry.name, entry.version


def sort_entries(entries: Iterable[DependencyEntry]) -> list[DependencyEntry]:
    """Return ``entries`` ordered by name, then version, both descending.

    Names and versions are compared as plain strings, so ``"9.0.0"`` ranks
    above ``"10.0.0"``. An empty version is the smallest possible value and
    lands last within its name group. Entries with identical name and version
    keep their input order.
    """
    return sorted(entries, key=_ordering_key, reverse=True)


__all__ = ["sort_entries"]
