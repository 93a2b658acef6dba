"""On-disk cache of favicons keyed by domain."""

from __future__ import annotations

import json
import os
from pathlib import Path

from .config import AppConfig
from .errors import FileOperationError

CACHE_FILE_NAME = "favicon_cache.json"

FaviconCache = dict[str, "str | None"]


def get_cache_path() -> str:
    """Return the location of the favicon cache file."""
    return os.path.join(AppConfig.get_app_dir(), CACHE_FILE_NAME)


def load_cache(path: str | os.PathLike[str] | None = None) -> dict[str, str | None]:
    """Read the cache; a missing or malformed file yields an empty cache.

    Values are data URIs, or ``None`` for domains whose last fetch failed.
    """
    target = path if path is not None else get_cache_path()
    try:
        data = json.loads(Path(target).read_text(encoding="utf-8"))
    except (OSError, ValueError):
        return {}
    if not isinstance(data, dict):
        return {}
    if not all(value is None or isinstance(value, str) for value in data.values()):
        return {}
    return dict(data)


def save_cache(
    cache: dict[str, str | None], path: str | os.PathLike[str] | None = None
) -> None:
    """Write the cache as pretty-printed JSON."""
    target = path if path is not None else get_cache_path()
    try:
        Path(target).write_text(json.dumps(cache, indent=2, ensure_ascii=False), encoding="utf-8")
    except OSError as exc:
        raise FileOperationError(exc) from exc