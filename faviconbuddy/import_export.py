"""Exporting and importing the configuration and the favicon cache."""

from __future__ import annotations

import json
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from . import i18n
from .cache import get_cache_path, load_cache, save_cache
from .config import AppConfig
from .errors import FileOperationError, JsonError, MissingFileError


@dataclass
class ExportResult:
    """Outcome of an import or export, with a user-facing message."""

    success: bool
    message: str


@dataclass
class CacheData:
    """The portable form of the cache: only domains with a favicon."""

    favicon_urls: dict[str, str] = field(default_factory=dict)


def _read_json(path: str | os.PathLike[str]) -> Any:
    try:
        text = Path(path).read_text(encoding="utf-8")
    except OSError as exc:
        raise FileOperationError(exc) from exc
    try:
        return json.loads(text)
    except ValueError as exc:
        raise JsonError(exc) from exc


def _write_json(path: str | os.PathLike[str], data: Any) -> None:
    try:
        Path(path).write_text(json.dumps(data, indent=2, ensure_ascii=False), encoding="utf-8")
    except OSError as exc:
        raise FileOperationError(exc) from exc


def _cache_data_from_json(data: Any) -> CacheData:
    if not isinstance(data, dict):
        raise JsonError("invalid type: expected a map for CacheData")
    if "favicon_urls" not in data:
        raise JsonError("missing field `favicon_urls`")
    urls = data["favicon_urls"]
    if not isinstance(urls, dict) or not all(isinstance(v, str) for v in urls.values()):
        raise JsonError("invalid type for `favicon_urls`: expected a map of strings")
    return CacheData(dict(urls))


def export_config(config: AppConfig, file_path: str | os.PathLike[str]) -> ExportResult:
    """Write ``config`` to ``file_path`` as JSON."""
    _write_json(file_path, config.to_dict())
    return ExportResult(True, i18n.get_message("export_success"))


def import_config(file_path: str | os.PathLike[str]) -> tuple[AppConfig, ExportResult]:
    """Read a configuration previously written by :func:`export_config`."""
    if not os.path.exists(file_path):
        raise MissingFileError(str(file_path))
    config = AppConfig.from_dict(_read_json(file_path))
    return config, ExportResult(True, i18n.get_message("import_success"))


def export_cache(file_path: str | os.PathLike[str]) -> ExportResult:
    """Write the cached favicons to ``file_path``; a missing cache writes nothing."""
    message = i18n.get_message("cache_export_success")
    cache_path = get_cache_path()
    if not os.path.exists(cache_path):
        return ExportResult(True, message)

    cache = load_cache(cache_path)
    data = CacheData({domain: icon for domain, icon in cache.items() if icon is not None})

    parent = Path(file_path).parent
    try:
        parent.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        raise FileOperationError(exc) from exc
    _write_json(file_path, {"favicon_urls": data.favicon_urls})
    return ExportResult(True, message)


def import_cache(file_path: str | os.PathLike[str]) -> ExportResult:
    """Merge the favicons in ``file_path`` into the local cache."""
    if not os.path.exists(file_path):
        raise MissingFileError(str(file_path))
    data = _cache_data_from_json(_read_json(file_path))

    cache_path = get_cache_path()
    current = load_cache(cache_path)
    current.update(data.favicon_urls)
    save_cache(current, cache_path)
    return ExportResult(True, i18n.get_message("cache_import_success"))