"""Shared fixtures for the catalog test suite."""

from __future__ import annotations
from pathlib import Path
import pytest
from tests._catalog_test_helpers import SAMPLE_DOCUMENT, RecordingClipboard


@pytest.fixture()
def sample_table() -> dict[str, str]:
    return {
        "@openzeppelin-contracts~5.0.0": "http://x/a.zip",
        "@openzeppelin-contracts~4.9.0": "http://x/b.zip",
        "@foo~1.0.0": "http://x/c.zip",
    }


@pytest.fixture()
def sample_document_path(tmp_path: Path) -> Path:
    path = tmp_path / "all_dependencies.toml"
    path.write_text(SAMPLE_DOCUMENT, encoding="utf-8")
    return path


@pytest.fixture()
def clipboard() -> RecordingClipboard:
    return RecordingClipboard()
