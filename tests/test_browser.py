"""Tests for the browser session surface."""

from __future__ import annotations
import logging
from pathlib import Path
import pytest
from soldeer_catalog.browser import CatalogBrowser, format_install_command
from soldeer_catalog.catalog.errors import (
    ClipboardUnavailableError,
    DocumentUnavailableError,
    MissingTableError,
    ParseError,
)
from soldeer_catalog.cache import CacheStore
from soldeer_catalog.sources import (
    BundledDocumentSource,
    Document,
    FileDocumentSource,
    HttpDocumentSource,
)
from tests._catalog_test_helpers import RecordingClipboard, make_entry


class StaticSource:
    def __init__(self, text: str) -> None:
        self.text = text

    def read(self) -> Document:
        return Document(text=self.text, origin="static")


class BrokenSource:
    def read(self) -> Document:
        raise DocumentUnavailableError("offline")


class FailingClipboard:
    def write(self, text: str) -> None:
        raise ClipboardUnavailableError("no clipboard")


def test_initialize_loads_sorted_view(sample_document_path: Path) -> None:
    browser = CatalogBrowser(FileDocumentSource(sample_document_path))

    view = browser.initialize()

    assert view.error is None
    assert view.query == ""
    assert [entry.key for entry in view.entries] == [
        "@openzeppelin-contracts~5.0.0",
        "@openzeppelin-contracts~4.9.0",
        "@foo~1.0.0",
    ]


def test_query_changes_return_new_views(sample_document_path: Path) -> None:
    browser = CatalogBrowser(FileDocumentSource(sample_document_path))
    full = browser.initialize()

    narrowed = browser.on_query_change("ZEPPELIN")

    assert narrowed.query == "ZEPPELIN"
    assert len(narrowed.entries) == 2
    assert len(full.entries) == 3
    assert browser.on_query_change("zzz").is_empty


def test_parse_failure_yields_empty_view(caplog: pytest.LogCaptureFixture) -> None:
    browser = CatalogBrowser(StaticSource("not = = toml"))

    with caplog.at_level(logging.ERROR):
        view = browser.initialize()

    assert view.is_empty
    assert isinstance(view.error, ParseError)
    assert "Error loading dependency document" in caplog.text


def test_missing_table_yields_empty_view() -> None:
    browser = CatalogBrowser(StaticSource('[other]\n"a~1" = "http://x"\n'))

    view = browser.initialize()

    assert view.is_empty
    assert isinstance(view.error, MissingTableError)
    assert browser.on_query_change("a").is_empty


def test_unavailable_source_yields_empty_view(
    caplog: pytest.LogCaptureFixture,
) -> None:
    browser = CatalogBrowser(BrokenSource())

    with caplog.at_level(logging.ERROR):
        view = browser.initialize()

    assert view.is_empty
    assert isinstance(view.error, DocumentUnavailableError)
    assert "Error fetching dependency document" in caplog.text


def test_format_install_command_is_literal() -> None:
    entry = make_entry("@openzeppelin-contracts~5.0.0")

    assert format_install_command(entry) == (
        "soldeer install @openzeppelin-contracts~5.0.0"
    )


def test_copy_install_command_uses_clipboard(
    sample_document_path: Path, clipboard: RecordingClipboard
) -> None:
    source = FileDocumentSource(sample_document_path)
    browser = CatalogBrowser(source, clipboard=clipboard)
    view = browser.initialize()

    copied = browser.copy_install_command(view.entries[-1])

    assert copied == "soldeer install @foo~1.0.0"
    assert clipboard.writes == [copied]


def test_copy_propagates_clipboard_errors(sample_document_path: Path) -> None:
    browser = CatalogBrowser(
        FileDocumentSource(sample_document_path), clipboard=FailingClipboard()
    )
    view = browser.initialize()

    with pytest.raises(ClipboardUnavailableError):
        browser.copy_install_command(view.entries[0])


def test_copy_without_clipboard_is_an_error() -> None:
    browser = CatalogBrowser(StaticSource(""))

    with pytest.raises(ClipboardUnavailableError):
        browser.copy_install_command(make_entry("a~1"))


def test_bundled_document_loads() -> None:
    browser = CatalogBrowser(BundledDocumentSource())

    view = browser.initialize()

    assert view.error is None
    assert browser.engine.find("@openzeppelin-contracts~5.0.0") is not None
    assert view.entries[0].name >= view.entries[-1].name


def test_undecodable_file_yields_empty_view(tmp_path: Path) -> None:
    path = tmp_path / "binary.toml"
    path.write_bytes(b'[sdependencies]\n"a~1" = "\xff\xfe"\n')
    browser = CatalogBrowser(FileDocumentSource(path))

    view = browser.initialize()

    assert view.is_empty
    assert isinstance(view.error, DocumentUnavailableError)


def test_corrupt_offline_cache_yields_empty_view(tmp_path: Path) -> None:
    url = "http://registry.test/all_dependencies.toml"
    cache = CacheStore(tmp_path / "cache")
    cache.ensure()
    (cache.root / "documents" / f"{cache.build_key(url)}.json").write_text("{oops")
    browser = CatalogBrowser(HttpDocumentSource(url, cache=cache, offline=True))

    view = browser.initialize()

    assert view.is_empty
    assert isinstance(view.error, DocumentUnavailableError)
