"""Shared fixtures for CLI tests."""

from __future__ import annotations
import importlib
from pathlib import Path
import pytest
from typer.testing import CliRunner
from tests._catalog_test_helpers import RecordingClipboard


@pytest.fixture()
def runner() -> CliRunner:
    return CliRunner()


@pytest.fixture()
def env(tmp_path: Path, sample_document_path: Path) -> dict[str, str]:
    cache_dir = tmp_path / "cache"
    cache_dir.mkdir()
    return {
        "SOLDEER_CATALOG_SOURCE": str(sample_document_path),
        "SOLDEER_CATALOG_CACHE_DIR": str(cache_dir),
        "SOLDEER_CATALOG_OFFLINE": "false",
        "SOLDEER_CATALOG_TIMEOUT": "30",
        "NO_COLOR": "1",
        "COLUMNS": "200",
    }


@pytest.fixture()
def cli_clipboard(
    monkeypatch: pytest.MonkeyPatch, clipboard: RecordingClipboard
) -> RecordingClipboard:
    app_module = importlib.import_module("soldeer_catalog.cli.app")
    monkeypatch.setattr(app_module, "SystemClipboard", lambda: clipboard)
    return clipboard
