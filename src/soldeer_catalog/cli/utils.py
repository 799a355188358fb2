"""Shared helpers used across CLI command modules."""

from __future__ import annotations
from datetime import datetime
import typer
from rich.markup import escape
from ..browser import BrowserView
from ..catalog.errors import CatalogError
from .state import CLIContext


def get_context(ctx: typer.Context) -> CLIContext:
    """Return the CLI context stored on the Typer context object."""
    obj = ctx.ensure_object(CLIContext)
    if not isinstance(obj, CLIContext):  # pragma: no cover - defensive branch
        msg = "CLI context has not been initialised"
        raise RuntimeError(msg)
    return obj


def abort_with_error(context: CLIContext, exc: CatalogError) -> None:
    """Print a catalog error and exit the CLI with a non-zero status code."""
    context.console.print(f"[red]{escape(str(exc))}[/red]")
    raise typer.Exit(code=1)


def show_cache_notice(context: CLIContext, result_timestamp: datetime | None) -> None:
    """Display a note when cached data is rendered."""
    if result_timestamp is None:
        return
    context.console.print(
        f"[dim]Served from cache last updated at {result_timestamp.isoformat()}[/dim]"
    )


def load_catalog(context: CLIContext) -> BrowserView:
    """Initialise the browser, aborting when the catalog cannot be loaded."""
    view = context.browser.initialize()
    if view.error is not None:
        abort_with_error(context, view.error)
    if view.from_cache:
        show_cache_notice(context, view.timestamp)
    return view


__all__ = ["abort_with_error", "get_context", "load_catalog", "show_cache_notice"]
