"""Dependency catalog: entry model, ordering, search and the engine."""

from .engine import DEPENDENCY_TABLE, Catalog, CatalogEngine, LoadResult
from .entries import DependencyEntry, build_entries, split_key
from .errors import (
    CatalogError,
    ClipboardUnavailableError,
    DocumentUnavailableError,
    LoadError,
    MissingTableError,
    OfflineCacheMissError,
    ParseError,
)
from .filtering import filter_entries
from .parser import ParseResult, parse_document
from .sorting import sort_entries


__all__ = [
    "DEPENDENCY_TABLE",
    "Catalog",
    "CatalogEngine",
    "CatalogError",
    "ClipboardUnavailableError",
    "DependencyEntry",
    "DocumentUnavailableError",
    "LoadError",
    "LoadResult",
    "MissingTableError",
    "OfflineCacheMissError",
    "ParseError",
    "ParseResult",
    "build_entries",
    "filter_entries",
    "parse_document",
    "sort_entries",
    "split_key",
]
