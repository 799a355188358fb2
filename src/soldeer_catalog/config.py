"""Runtime configuration helpers for the dependency catalog."""

from __future__ import annotations
import os
from functools import lru_cache
from pathlib import Path
from dynaconf import Dynaconf


ENVVAR_PREFIX = "SOLDEER_CATALOG"

_DEFAULTS: dict[str, object] = {
    "SOURCE": None,
    "TIMEOUT": 30.0,
    "OFFLINE": False,
}

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off", ""}


def default_cache_dir() -> Path:
    """Return the XDG cache directory used for fetched documents."""
    cache_home = Path(os.environ.get("XDG_CACHE_HOME", Path.home() / ".cache"))
    return cache_home / "soldeer-catalog"


def _build_loader() -> Dynaconf:
    """Create a Dynaconf loader wired to environment variables only."""
    return Dynaconf(
        envvar_prefix=ENVVAR_PREFIX,
        settings_files=[],
        load_dotenv=True,
        environments=False,
    )


def _coerce_bool(value: object, *, name: str) -> bool:
    if isinstance(value, bool):
        return value
    text = str(value).strip().lower()
    if text in _TRUE_VALUES:
        return True
    if text in _FALSE_VALUES:
        return False
    msg = f"{ENVVAR_PREFIX}_{name} must be a boolean."
    raise ValueError(msg)


def _normalize_settings(source: Dynaconf) -> Dynaconf:
    """Validate and fill defaults on the raw Dynaconf settings."""
    normalized = Dynaconf(
        envvar_prefix=ENVVAR_PREFIX,
        settings_files=[],
        load_dotenv=False,
        environments=False,
    )

    location = source.get("SOURCE", _DEFAULTS["SOURCE"])
    normalized.set("SOURCE", str(location) if location else None)

    timeout_raw = source.get("TIMEOUT", _DEFAULTS["TIMEOUT"])
    try:
        timeout = float(timeout_raw)
    except (TypeError, ValueError) as exc:
        msg = f"{ENVVAR_PREFIX}_TIMEOUT must be a number."
        raise ValueError(msg) from exc
    if timeout <= 0:
        msg = f"{ENVVAR_PREFIX}_TIMEOUT must be greater than zero."
        raise ValueError(msg)
    normalized.set("TIMEOUT", timeout)

    cache_dir = source.get("CACHE_DIR") or default_cache_dir()
    normalized.set("CACHE_DIR", str(cache_dir))

    offline_raw = source.get("OFFLINE", _DEFAULTS["OFFLINE"])
    normalized.set("OFFLINE", _coerce_bool(offline_raw, name="OFFLINE"))

    return normalized


@lru_cache(maxsize=1)
def _load_settings() -> Dynaconf:
    """Load settings once and cache the normalized Dynaconf instance."""
    return _normalize_settings(_build_loader())


def get_settings(*, refresh: bool = False) -> Dynaconf:
    """Return the cached Dynaconf settings, reloading them if requested."""
    if refresh:
        _load_settings.cache_clear()
    return _load_settings()


__all__ = ["ENVVAR_PREFIX", "default_cache_dir", "get_settings"]
