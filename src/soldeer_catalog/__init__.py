"""Browse, search and copy install commands for Soldeer dependencies."""

from .browser import BrowserView, CatalogBrowser, format_install_command
from .catalog import (
    CatalogEngine,
    CatalogError,
    DependencyEntry,
    LoadResult,
    MissingTableError,
    ParseError,
    filter_entries,
    parse_document,
    sort_entries,
)


__all__ = [
    "BrowserView",
    "CatalogBrowser",
    "CatalogEngine",
    "CatalogError",
    "DependencyEntry",
    "LoadResult",
    "MissingTableError",
    "ParseError",
    "filter_entries",
    "format_install_command",
    "parse_document",
    "sort_entries",
]
