"""Typer application wiring for the dependency catalog CLI."""

from __future__ import annotations
import logging
from pathlib import Path
from typing import Annotated
import typer
from rich.console import Console
from ..browser import CatalogBrowser
from ..cache import CacheStore
from ..clipboard import SystemClipboard
from ..config import get_settings
from ..sources import resolve_source
from .dependencies import about, browse, install_command, list_dependencies
from .state import CLIContext


app = typer.Typer(help="Browse the Soldeer dependency catalog.")
app.command("list")(list_dependencies)
app.command("install")(install_command)
app.command("browse")(browse)
app.command("about")(about)


@app.callback()
def _configure(
    ctx: typer.Context,
    source: Annotated[
        str | None,
        typer.Option(help="URL or path of the dependency document."),
    ] = None,
    offline: Annotated[
        bool | None,
        typer.Option(
            "--offline/--online",
            help="Serve the document from cache without network calls.",
            show_default=False,
        ),
    ] = None,
    cache_dir: Annotated[
        Path | None,
        typer.Option(help="Directory for cached documents."),
    ] = None,
    timeout: Annotated[
        float | None,
        typer.Option(help="HTTP timeout in seconds.", min=0.1),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Enable debug logging."),
    ] = False,
) -> None:
    """Initialise shared CLI state before executing a command."""
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(asctime)s %(levelname)s %(name)s - %(message)s",
        )
    try:
        settings = get_settings(refresh=True)
    except ValueError as exc:
        raise typer.BadParameter(str(exc)) from exc

    resolved_offline = settings.offline if offline is None else offline
    cache = CacheStore(cache_dir or Path(settings.cache_dir))
    document_source = resolve_source(
        source or settings.source,
        cache=cache,
        timeout=timeout or settings.timeout,
        offline=resolved_offline,
    )
    browser = CatalogBrowser(document_source, clipboard=SystemClipboard())
    ctx.obj = CLIContext(browser=browser, console=Console())


def main() -> None:
    """Entry point for console script execution."""
    app()


__all__ = ["app", "main"]
