"""Clipboard writers used by the copy action."""

from __future__ import annotations
import shutil
import subprocess
from collections.abc import Callable, Sequence
from typing import Protocol
from .catalog.errors import ClipboardUnavailableError


class ClipboardWriter(Protocol):
    """Single-method capability that places text on a clipboard."""

    def write(self, text: str) -> None:
        """Copy ``text`` to the clipboard."""


_CLIPBOARD_COMMANDS: tuple[tuple[str, ...], ...] = (
    ("pbcopy",),
    ("wl-copy",),
    ("xclip", "-selection", "clipboard"),
    ("xsel", "--clipboard", "--input"),
    ("clip",),
)


class SystemClipboard:
    """Pipe text into the first clipboard tool found on ``PATH``."""

    def __init__(
        self,
        commands: Sequence[Sequence[str]] = _CLIPBOARD_COMMANDS,
        *,
        which: Callable[[str], str | None] = shutil.which,
    ) -> None:
        """Configure the candidate ``commands`` tried in order."""
        self._commands = [tuple(command) for command in commands]
        self._which = which

    def _resolve_command(self) -> tuple[str, ...]:
        for command in self._commands:
            if self._which(command[0]) is not None:
                return command
        tried = ", ".join(command[0] for command in self._commands)
        msg = f"No clipboard tool found (tried {tried})"
        raise ClipboardUnavailableError(msg)

    def write(self, text: str) -> None:
        """Copy ``text`` using the resolved clipboard tool."""
        command = self._resolve_command()
        try:
            result = subprocess.run(
                list(command), input=text, text=True, check=False, capture_output=True
            )
        except OSError as exc:
            msg = f"Unable to run {command[0]}"
            raise ClipboardUnavailableError(msg) from exc
        if result.returncode != 0:
            msg = f"{command[0]} exited with status {result.returncode}"
            raise ClipboardUnavailableError(msg)


__all__ = ["ClipboardWriter", "SystemClipboard"]
