"""Session object backing the dependency browser user interface.

The interface owns only the current query and the last view it received.
Every interaction goes through :class:`CatalogBrowser`, which returns a fresh
immutable :class:`BrowserView` instead of mutating shared state.
"""

from __future__ import annotations
import logging
from dataclasses import dataclass
from datetime import datetime
from .catalog.engine import CatalogEngine
from .catalog.entries import DependencyEntry
from .catalog.errors import CatalogError, ClipboardUnavailableError
from .clipboard import ClipboardWriter
from .sources import DocumentSource


logger = logging.getLogger(__name__)

INSTALL_COMMAND = "soldeer install"


def format_install_command(entry: DependencyEntry) -> str:
    """Return the shell command installing ``entry``."""
    return f"{INSTALL_COMMAND} {entry.key}"


@dataclass(frozen=True, slots=True)
class BrowserView:
    """Entries visible for a query, plus any load failure."""

    query: str
    entries: tuple[DependencyEntry, ...]
    error: CatalogError | None = None
    from_cache: bool = False
    timestamp: datetime | None = None

    @property
    def is_empty(self) -> bool:
        """Return True when no entry is visible."""
        return not self.entries


class CatalogBrowser:
    """Load a catalog from a document source and serve filtered views."""

    def __init__(
        self,
        source: DocumentSource,
        *,
        clipboard: ClipboardWriter | None = None,
        engine: CatalogEngine | None = None,
    ) -> None:
        """Wire the browser to its document ``source`` and ``clipboard``."""
        self._source = source
        self._clipboard = clipboard
        self._engine = engine or CatalogEngine()
        self._error: CatalogError | None = None
        self._from_cache = False
        self._timestamp: datetime | None = None

    @property
    def engine(self) -> CatalogEngine:
        """Return the engine holding the current catalog."""
        return self._engine

    def initialize(self) -> BrowserView:
        """Fetch, parse and load the document, returning the full view."""
        try:
            document = self._source.read()
        except CatalogError as exc:
            logger.error("Error fetching dependency document: %s", exc)
            self._engine.clear()
            self._error = exc
            self._from_cache = False
            self._timestamp = None
            return self.on_query_change("")

        self._from_cache = document.from_cache
        self._timestamp = document.timestamp
        result = self._engine.load_text(document.text)
        self._error = result.error
        if result.error is not None:
            logger.error(
                "Error loading dependency document from %s: %s",
                document.origin,
                result.error,
            )
        else:
            logger.info(
                "Loaded %d dependencies from %s", len(result.catalog), document.origin
            )
        return self.on_query_change("")

    def on_query_change(self, query: str) -> BrowserView:
        """Return the view for ``query`` over the loaded catalog."""
        return BrowserView(
            query=query,
            entries=tuple(self._engine.search(query)),
            error=self._error,
            from_cache=self._from_cache,
            timestamp=self._timestamp,
        )

    def format_install_command(self, entry: DependencyEntry) -> str:
        """Return the install command for ``entry``."""
        return format_install_command(entry)

    def copy_install_command(self, entry: DependencyEntry) -> str:
        """Write the install command for ``entry`` to the clipboard."""
        if self._clipboard is None:
            msg = "No clipboard writer configured"
            raise ClipboardUnavailableError(msg)
        command = format_install_command(entry)
        self._clipboard.write(command)
        return command


__all__ = [
    "INSTALL_COMMAND",
    "BrowserView",
    "CatalogBrowser",
    "format_install_command",
]
