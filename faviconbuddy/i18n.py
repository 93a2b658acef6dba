"""Message catalogues loaded from YAML locale files, with locale fallback."""

from __future__ import annotations

import locale as _pylocale
import os
import re
import sys
import threading
from pathlib import Path
from typing import Any, Mapping

import yaml

from .errors import CustomError

SUPPORTED_LOCALES: tuple[str, ...] = ("en", "zh-CN")
DEFAULT_LOCALE = "zh-CN"
DEFAULT_DIRECTORY = "locales"

_ENV_VARS = ("LANGUAGE", "LC_ALL", "LC_MESSAGES", "LANG")
_LANG_ID = re.compile(r"^[A-Za-z]{2,8}(-[A-Za-z0-9]{1,8})*$")
_PLACEHOLDER = re.compile(r"%\{\s*([A-Za-z][A-Za-z0-9_-]*)\s*\}")
_INVALID_KEY_CHAR = re.compile(r"[^A-Za-z0-9_-]")

_lock = threading.RLock()
_bundles: dict[str, dict[str, str]] = {}
_current_locale = "en"


def init(directory: str | os.PathLike[str] | None = None) -> None:
    """Load every supported locale and select the system locale."""
    for name in SUPPORTED_LOCALES:
        try:
            load_locale(name, directory)
        except CustomError as exc:
            print(f"警告: 加载语言 {name} 失败: {exc}", file=sys.stderr)

    try:
        set_locale(detect_system_locale())
    except CustomError as exc:
        print(f"警告: 设置系统语言失败: {exc}", file=sys.stderr)
        set_locale(DEFAULT_LOCALE)


def load_locale(locale: str, directory: str | os.PathLike[str] | None = None) -> None:
    """Read ``<directory>/<locale>.yml`` and register its messages."""
    path = Path(directory if directory is not None else DEFAULT_DIRECTORY) / f"{locale}.yml"
    try:
        content = path.read_text(encoding="utf-8")
    except OSError:
        raise CustomError(f"语言文件不存在: {path}") from None

    if not content.strip():
        raise CustomError(f"语言文件为空: {path}")

    try:
        data = yaml.safe_load(content)
    except yaml.YAMLError as exc:
        raise CustomError(f"解析语言文件失败: {exc}") from exc

    if not _LANG_ID.match(locale):
        raise CustomError(f"无效的语言ID: {locale}")

    messages = flatten_messages(data)
    with _lock:
        _bundles[locale] = messages


def flatten_messages(data: Any) -> dict[str, str]:
    """Flatten nested YAML mappings into dotted keys mapped to string templates."""
    return dict(_walk(data, ""))


def _walk(data: Any, prefix: str):
    if isinstance(data, Mapping):
        for key, value in data.items():
            key = str(key)
            if key == "_version":
                continue
            clean = _INVALID_KEY_CHAR.sub("_", key)
            yield from _walk(value, f"{prefix}.{clean}" if prefix else clean)
    elif isinstance(data, str):
        yield prefix, data


def set_locale(locale: str) -> None:
    """Make ``locale`` current; it must already be loaded."""
    global _current_locale
    with _lock:
        if locale not in _bundles:
            raise CustomError(f"不支持的语言: {locale}")
        if not _LANG_ID.match(locale):
            raise CustomError(f"无效的语言ID: {locale}")
        _current_locale = locale


def get_locale() -> str:
    """Return the current locale."""
    with _lock:
        return _current_locale


def get_supported_locales() -> list[str]:
    """Return the locales the application ships with."""
    return list(SUPPORTED_LOCALES)


def _fallback_chain(locale: str) -> list[str]:
    chain = [locale]
    base = locale.split("-")[0]
    if base != locale:
        chain.append(base)
    if locale != DEFAULT_LOCALE:
        chain.append(DEFAULT_LOCALE)
    return chain


def _render(template: str, args: Mapping[str, str] | None) -> str:
    values = args or {}

    def substitute(match: re.Match[str]) -> str:
        name = match.group(1)
        if name in values:
            return str(values[name])
        return f"{{${name}}}"

    return _PLACEHOLDER.sub(substitute, template)


def get_message(key: str, args: Mapping[str, str] | None = None) -> str:
    """Translate ``key`` in the current locale, falling back along the chain.

    Returns the key itself when no catalogue has it.
    """
    with _lock:
        chain = _fallback_chain(_current_locale)
        for name in chain:
            bundle = _bundles.get(name)
            if bundle is not None and key in bundle:
                return _render(bundle[key], args)
    return key


def t(key: str, **kwargs: Any) -> str:
    """Shorthand for :func:`get_message` with keyword arguments."""
    args = {name: str(value) for name, value in kwargs.items()} if kwargs else None
    return get_message(key, args)


def _match_supported(raw: str) -> str | None:
    candidate = raw.replace("_", "-")
    if candidate in SUPPORTED_LOCALES:
        return candidate
    base = candidate.split("-")[0]
    if base in SUPPORTED_LOCALES:
        return base
    return None


def detect_system_locale() -> str:
    """Guess a supported locale from the environment, else the default."""
    for var in _ENV_VARS:
        value = os.environ.get(var)
        if value is None:
            continue
        for entry in value.split(":"):
            found = _match_supported(entry.split(".")[0])
            if found:
                return found

    if sys.platform == "win32":
        system = _pylocale.getlocale()[0]
        if system:
            found = _match_supported(system)
            if found:
                return found

    return DEFAULT_LOCALE