"""TOML parsing boundary for the dependency configuration document."""

from __future__ import annotations
import tomllib
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any
from .errors import ParseError


RawDocument = Mapping[str, Any]


@dataclass(frozen=True, slots=True)
class ParseResult:
    """Outcome of parsing a document: either a table or an error."""

    document: RawDocument | None = None
    error: ParseError | None = None

    @property
    def ok(self) -> bool:
        """Return True when the document parsed successfully."""
        return self.error is None

    def unwrap(self) -> RawDocument:
        """Return the parsed document or raise the recorded error."""
        if self.error is not None:
            raise self.error
        return self.document or {}


def parse_document(text: str) -> ParseResult:
    """Parse ``text`` as TOML without raising."""
    try:
        document = tomllib.loads(text)
    except tomllib.TOMLDecodeError as exc:
        error = ParseError(f"Malformed dependency document: {exc}")
        error.__cause__ = exc
        return ParseResult(error=error)
    return ParseResult(document=document)


__all__ = ["ParseResult", "RawDocument", "parse_document"]
