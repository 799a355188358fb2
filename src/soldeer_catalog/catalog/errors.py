"""Exceptions raised while loading and browsing the dependency catalog."""

from __future__ import annotations


class CatalogError(RuntimeError):
    """Base class for catalog failures."""

    kind = "catalog_error"


class ParseError(CatalogError):
    """Raised when the configuration document is not valid TOML."""

    kind = "malformed_document"


class LoadError(CatalogError):
    """Raised when a parsed document cannot be turned into a catalog."""

    kind = "load_error"


class MissingTableError(LoadError):
    """Raised when the parsed document has no dependency table."""

    kind = "missing_table"

    def __init__(self, table: str) -> None:
        """Initialise the error with the name of the absent ``table``."""
        super().__init__(f"Document does not define an '{table}' table")
        self.table = table


class DocumentUnavailableError(CatalogError):
    """Raised when the configuration document cannot be read or fetched."""

    kind = "document_unavailable"


class OfflineCacheMissError(DocumentUnavailableError):
    """Raised when offline mode is requested but no cached document exists."""


class ClipboardUnavailableError(CatalogError):
    """Raised when no clipboard tool can receive the copied text."""

    kind = "clipboard_unavailable"


__all__ = [
    "CatalogError",
    "ClipboardUnavailableError",
    "DocumentUnavailableError",
    "LoadError",
    "MissingTableError",
    "OfflineCacheMissError",
    "ParseError",
]
