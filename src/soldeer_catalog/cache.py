"""On-disk cache of fetched configuration documents."""

from __future__ import annotations
import hashlib
import json
import logging
from dataclasses import dataclass
from datetime import UTC, datetime
from pathlib import Path


logger = logging.getLogger(__name__)


@dataclass(slots=True)
class CacheEntry:
    """Cached document body stored on disk."""

    text: str
    timestamp: datetime


class CacheStore:
    """Store fetched documents for offline reuse."""

    def __init__(self, root: Path) -> None:
        """Create a cache store rooted at the provided directory."""
        self.root = root
        self._documents_dir = self.root / "documents"

    def ensure(self) -> None:
        """Ensure the cache directory exists."""
        self._documents_dir.mkdir(parents=True, exist_ok=True)

    def build_key(self, url: str) -> str:
        """Return a deterministic key for the document at ``url``."""
        return hashlib.sha256(url.encode("utf-8")).hexdigest()

    def _entry_path(self, key: str) -> Path:
        return self._documents_dir / f"{key}.json"

    def write(self, key: str, text: str) -> None:
        """Persist a document body to the cache."""
        self.ensure()
        path = self._entry_path(key)
        payload = {
            "timestamp": datetime.now(tz=UTC).isoformat(),
            "text": text,
        }
        with path.open("w", encoding="utf-8") as handle:
            json.dump(payload, handle, ensure_ascii=False, indent=2)

    def read(self, key: str) -> CacheEntry | None:
        """Return a cached document if present."""
        path = self._entry_path(key)
        if not path.exists():
            return None
        try:
            with path.open("r", encoding="utf-8") as handle:
                payload = json.load(handle)
        except (OSError, ValueError):
            logger.warning("Ignoring unreadable cache entry %s", path)
            return None
        if not isinstance(payload, dict):
            logger.warning("Ignoring malformed cache entry %s", path)
            return None
        text = payload.get("text")
        if not isinstance(text, str):
            return None
        timestamp_raw = payload.get("timestamp")
        timestamp: datetime | None = None
        if isinstance(timestamp_raw, str):
            try:
                timestamp = datetime.fromisoformat(timestamp_raw)
            except ValueError:
                timestamp = None
        if timestamp is None:
            timestamp = datetime.now(tz=UTC)
        return CacheEntry(text=text, timestamp=timestamp)


__all__ = ["CacheEntry", "CacheStore"]
