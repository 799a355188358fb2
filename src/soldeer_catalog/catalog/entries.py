"""Dependency entries decomposed from the raw ``sdependencies`` table."""

from __future__ import annotations
import logging
from collections.abc import Mapping
from dataclasses import dataclass


logger = logging.getLogger(__name__)

KEY_SEPARATOR = "~"


def split_key(key: str) -> tuple[str, str]:
    """Return ``(name, version)`` split on the first separator in ``key``."""
    name, _, version = key.partition(KEY_SEPARATOR)
    return name, version


@dataclass(frozen=True, slots=True)
class DependencyEntry:
    """One downloadable dependency revision."""

    key: str
    name: str
    version: str
    location: str

    @classmethod
    def from_raw(cls, key: str, location: str) -> DependencyEntry:
        """Build an entry from a raw table key and its download location."""
        name, version = split_key(key)
        return cls(key=key, name=name, version=version, location=location)


def build_entries(table: Mapping[str, object]) -> list[DependencyEntry]:
    """Decompose every item of ``table`` into entries, in mapping order."""
    entries: list[DependencyEntry] = []
    for raw_key, raw_location in table.items():
        key = str(raw_key)
        if isinstance(raw_location, str):
            location = raw_location
        else:
            logger.debug("Ignoring non-string location for %s", key)
            location = ""
        entries.append(DependencyEntry.from_raw(key, location))
    return entries


__all__ = ["KEY_SEPARATOR", "DependencyEntry", "build_entries", "split_key"]
