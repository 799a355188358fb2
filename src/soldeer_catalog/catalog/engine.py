"""Catalog engine composing entry decomposition, sorting and filtering."""

from __future__ import annotations
import logging
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any
from .entries import DependencyEntry, build_entries
from .errors import CatalogError, MissingTableError
from .filtering import filter_entries
from .parser import parse_document
from .sorting import sort_entries


logger = logging.getLogger(__name__)

DEPENDENCY_TABLE = "sdependencies"

Catalog = tuple[DependencyEntry, ...]
"""Immutable, sorted snapshot of every loaded entry."""


@dataclass(frozen=True, slots=True)
class LoadResult:
    """Outcome of a load attempt: either a catalog or an error."""

    catalog: Catalog = ()
    error: CatalogError | None = None

    @property
    def ok(self) -> bool:
        """Return True when the catalog loaded."""
        return self.error is None

    def unwrap(self) -> Catalog:
        """Return the loaded catalog or raise the recorded error."""
        if self.error is not None:
            raise self.error
        return self.catalog


class CatalogEngine:
    """Owns the current catalog snapshot and answers search requests."""

    def __init__(self, *, table: str = DEPENDENCY_TABLE) -> None:
        """Create an engine with an empty catalog."""
        self._table = table
        self._catalog: Catalog = ()

    @property
    def catalog(self) -> Catalog:
        """Return the current catalog snapshot."""
        return self._catalog

    def load(self, document: Mapping[str, Any]) -> LoadResult:
        """Replace the catalog with the sorted entries of ``document``."""
        table = document.get(self._table)
        if not isinstance(table, Mapping):
            self._catalog = ()
            return LoadResult(error=MissingTableError(self._table))

        catalog = tuple(sort_entries(build_entries(table)))
        self._catalog = catalog
        logger.debug("Loaded %d dependency entries", len(catalog))
        return LoadResult(catalog=catalog)

    def load_text(self, text: str) -> LoadResult:
        """Parse ``text`` and load it, clearing the catalog on failure."""
        parsed = parse_document(text)
        if parsed.error is not None:
            self._catalog = ()
            return LoadResult(error=parsed.error)
        return self.load(parsed.unwrap())

    def clear(self) -> None:
        """Drop the current catalog."""
        self._catalog = ()

    def search(self, query: str) -> list[DependencyEntry]:
        """Return catalog entries matching ``query`` in catalog order."""
        return filter_entries(self._catalog, query)

    def find(self, key: str) -> DependencyEntry | None:
        """Return the entry stored under ``key`` if present."""
        for entry in self._catalog:
            if entry.key == key:
                return entry
        return None


__all__ = ["DEPENDENCY_TABLE", "Catalog", "CatalogEngine", "LoadResult"]
