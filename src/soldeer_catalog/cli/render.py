"""Rendering helpers for CLI output."""

from __future__ import annotations
from collections.abc import Iterable, Sequence
from rich.console import Console
from rich.panel import Panel
from rich.table import Table


def render_table(
    console: Console,
    *,
    title: str,
    columns: Sequence[str],
    rows: Iterable[Sequence[str]],
    no_wrap: Sequence[str] = (),
) -> None:
    """Render a simple table using :mod:`rich`."""
    table = Table(title=title, show_lines=False)
    for column in columns:
        table.add_column(column, no_wrap=column in no_wrap)
    for row in rows:
        table.add_row(*row)
    console.print(table)


def render_kv_section(
    console: Console,
    *,
    title: str,
    pairs: Sequence[tuple[str, str]],
) -> None:
    """Render key/value pairs in a bordered panel."""
    lines = [f"[bold]{key}[/]: {value}" for key, value in pairs]
    panel = Panel("\n".join(lines), title=title, expand=False)
    console.print(panel)


__all__ = ["render_kv_section", "render_table"]
