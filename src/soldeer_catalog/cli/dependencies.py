"""Dependency catalog commands."""

from __future__ import annotations
from typing import Annotated
import click
import typer
from rich.markup import escape
from ..browser import INSTALL_COMMAND, BrowserView
from ..catalog.entries import DependencyEntry
from ..catalog.errors import CatalogError
from .render import render_kv_section, render_table
from .state import CLIContext
from .utils import abort_with_error, get_context, load_catalog


TITLE = "Soldeer - minimal solidity dependency manager"
_QUIT_COMMAND = ":q"
_COPY_COMMAND = ":copy"
_CARGO_DOCS = "https://doc.rust-lang.org/cargo/getting-started/installation.html"
_SOLDEER_DOCS = "https://github.com/mario-eth/soldeer#how-to-install-it"


def _render_view(context: CLIContext, view: BrowserView, *, numbered: bool) -> None:
    if view.is_empty:
        context.console.print("[yellow]No dependencies found.[/yellow]")
        return
    rows: list[tuple[str, ...]] = [
        (escape(entry.key), escape(entry.location)) for entry in view.entries
    ]
    columns: tuple[str, ...] = ("Dependency", "Zip Link")
    if numbered:
        rows = [(str(index), *row) for index, row in enumerate(rows, start=1)]
        columns = ("#", *columns)
    render_table(
        context.console,
        title="Dependencies",
        columns=columns,
        rows=rows,
        no_wrap=("#", "Dependency"),
    )


def _copy_entry(context: CLIContext, entry: DependencyEntry) -> None:
    context.browser.copy_install_command(entry)
    context.console.print("[green]Copied to clipboard![/green]")


def list_dependencies(
    ctx: typer.Context,
    search: Annotated[
        str,
        typer.Option("--search", "-s", help="Only show keys containing this text."),
    ] = "",
) -> None:
    """Display the dependency catalog."""
    context = get_context(ctx)
    load_catalog(context)
    view = context.browser.on_query_change(search)
    _render_view(context, view, numbered=False)


def install_command(
    ctx: typer.Context,
    key: Annotated[str, typer.Argument(help="Dependency key, e.g. name~version.")],
    copy: Annotated[
        bool,
        typer.Option("--copy", help="Copy the command to the clipboard."),
    ] = False,
) -> None:
    """Print the install command for a dependency."""
    context = get_context(ctx)
    load_catalog(context)
    entry = context.browser.engine.find(key)
    if entry is None:
        context.console.print(f"[red]Unknown dependency '{escape(key)}'.[/red]")
        raise typer.Exit(code=1)
    context.console.print(
        context.browser.format_install_command(entry), soft_wrap=True, markup=False
    )
    if copy:
        try:
            _copy_entry(context, entry)
        except CatalogError as exc:
            abort_with_error(context, exc)


def browse(ctx: typer.Context) -> None:
    """Search the catalog interactively."""
    context = get_context(ctx)
    view = load_catalog(context)
    _render_view(context, view, numbered=True)
    context.console.print(
        f"[dim]Type to search, '{_COPY_COMMAND} N' copies row N, "
        f"'{_QUIT_COMMAND}' quits.[/dim]"
    )
    while True:
        try:
            line = typer.prompt(
                "Search dependency...", default="", show_default=False
            )
        except click.exceptions.Abort:
            break
        if line == _QUIT_COMMAND:
            break
        if line.startswith(f"{_COPY_COMMAND} "):
            _copy_row(context, view, line[len(_COPY_COMMAND) + 1 :])
            continue
        view = context.browser.on_query_change(line)
        _render_view(context, view, numbered=True)


def _copy_row(context: CLIContext, view: BrowserView, raw_index: str) -> None:
    try:
        index = int(raw_index.strip())
    except ValueError:
        message = f"Invalid row number '{escape(raw_index)}'."
        context.console.print(f"[red]{message}[/red]")
        return
    if not 1 <= index <= len(view.entries):
        context.console.print(f"[red]Row {index} is not in the current view.[/red]")
        return
    try:
        _copy_entry(context, view.entries[index - 1])
    except CatalogError as exc:
        context.console.print(f"[red]{escape(str(exc))}[/red]")


def about(ctx: typer.Context) -> None:
    """Show how to install Soldeer and use the catalog."""
    context = get_context(ctx)
    render_kv_section(
        context.console,
        title=TITLE,
        pairs=[
            ("Prerequisite", f"cargo ({_CARGO_DOCS})"),
            ("Install Soldeer", "cargo install soldeer"),
            ("Install a dependency", f"{INSTALL_COMMAND} <dependency_name>~<version>"),
            ("Example", f"{INSTALL_COMMAND} @openzeppelin-contracts~5.0.0"),
            ("More details", _SOLDEER_DOCS),
            ("Crate", "https://crates.io/crates/soldeer"),
        ],
    )


__all__ = ["TITLE", "about", "browse", "install_command", "list_dependencies"]
