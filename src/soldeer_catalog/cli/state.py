"""Runtime state shared across CLI commands."""

from __future__ import annotations
from dataclasses import dataclass
from rich.console import Console
from ..browser import CatalogBrowser


@dataclass(slots=True)
class CLIContext:
    """Object stored on :class:`typer.Context` for command access."""

    browser: CatalogBrowser
    console: Console


__all__ = ["CLIContext"]
