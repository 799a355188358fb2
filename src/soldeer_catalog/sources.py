"""Document sources that supply the raw catalog text."""

from __future__ import annotations
import logging
from dataclasses import dataclass
from datetime import UTC, datetime
from importlib import resources
from pathlib import Path
from typing import Protocol
import httpx
from .cache import CacheStore
from .catalog.errors import DocumentUnavailableError, OfflineCacheMissError


logger = logging.getLogger(__name__)

BUNDLED_DOCUMENT = "all_dependencies.toml"


@dataclass(slots=True)
class Document:
    """Raw document text together with where it came from."""

    text: str
    origin: str
    from_cache: bool = False
    timestamp: datetime | None = None


class DocumentSource(Protocol):
    """Anything that can produce the raw configuration document."""

    def read(self) -> Document:
        """Return the current document text."""


class FileDocumentSource:
    """Read the document from a local file."""

    def __init__(self, path: Path) -> None:
        """Bind the source to ``path``."""
        self.path = path

    def read(self) -> Document:
        """Return the file contents decoded as UTF-8."""
        try:
            text = self.path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            msg = f"Unable to read dependency document {self.path}"
            raise DocumentUnavailableError(msg) from exc
        return Document(text=text, origin=str(self.path))


class BundledDocumentSource:
    """Read the dependency document shipped with the package."""

    def read(self) -> Document:
        """Return the bundled document."""
        resource = resources.files("soldeer_catalog.data").joinpath(BUNDLED_DOCUMENT)
        text = resource.read_text(encoding="utf-8")
        return Document(text=text, origin=f"bundled:{BUNDLED_DOCUMENT}")


class HttpDocumentSource:
    """Fetch the document over HTTP with an offline cache fallback."""

    def __init__(
        self,
        url: str,
        *,
        cache: CacheStore,
        timeout: float = 30.0,
        offline: bool = False,
        client: httpx.Client | None = None,
    ) -> None:
        """Create a source for ``url`` backed by ``cache``."""
        self.url = url
        self.offline = offline
        self._cache = cache
        self._timeout = timeout
        self._client = client

    def read(self) -> Document:
        """Return the fetched document, falling back to the cache on failure."""
        cache_key = self._cache.build_key(self.url)
        if self.offline:
            cached = self._cache.read(cache_key)
            if cached:
                return self._from_cache(cached.text, cached.timestamp)
            msg = f"No cached dependency document available for {self.url}"
            raise OfflineCacheMissError(msg)

        try:
            response = self._get()
            response.raise_for_status()
        except httpx.HTTPStatusError as exc:
            cached = self._cache.read(cache_key)
            if cached:
                logger.warning(
                    "Fetching %s returned %s, using cached copy",
                    self.url,
                    exc.response.status_code,
                )
                return self._from_cache(cached.text, cached.timestamp)
            status = exc.response.status_code
            msg = f"Request for {self.url} failed with status {status}"
            raise DocumentUnavailableError(msg) from exc
        except httpx.HTTPError as exc:
            cached = self._cache.read(cache_key)
            if cached:
                logger.warning("Unable to reach %s, using cached copy", self.url)
                return self._from_cache(cached.text, cached.timestamp)
            msg = f"Unable to reach {self.url}"
            raise DocumentUnavailableError(msg) from exc

        text = response.text
        try:
            self._cache.write(cache_key, text)
        except OSError as exc:
            logger.warning("Unable to cache document from %s: %s", self.url, exc)
        logger.debug("Fetched %d bytes from %s", len(text), self.url)
        return Document(text=text, origin=self.url, timestamp=datetime.now(tz=UTC))

    def _get(self) -> httpx.Response:
        if self._client is not None:
            return self._client.get(self.url)
        with httpx.Client(timeout=self._timeout, follow_redirects=True) as client:
            return client.get(self.url)

    def _from_cache(self, text: str, timestamp: datetime) -> Document:
        return Document(
            text=text, origin=self.url, from_cache=True, timestamp=timestamp
        )


def resolve_source(
    location: str | None,
    *,
    cache: CacheStore,
    timeout: float = 30.0,
    offline: bool = False,
) -> DocumentSource:
    """Pick a document source for ``location``."""
    if not location:
        return BundledDocumentSource()
    if location.startswith(("http://", "https://")):
        return HttpDocumentSource(
            location, cache=cache, timeout=timeout, offline=offline
        )
    return FileDocumentSource(Path(location).expanduser())


__all__ = [
    "BUNDLED_DOCUMENT",
    "BundledDocumentSource",
    "Document",
    "DocumentSource",
    "FileDocumentSource",
    "HttpDocumentSource",
    "resolve_source",
]
