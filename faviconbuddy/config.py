"""Application configuration: favicon services and language, persisted as JSON."""

from __future__ import annotations

import json
import os
import sys
from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from .errors import AppError, FileOperationError, JsonError

APP_DIR_NAME = "favicon-buddy"
CONFIG_FILE_NAME = "config.json"
DOMAIN_PLACEHOLDER = "{domain}"


def _field(data: Any, key: str, kind: type, what: str) -> Any:
    if not isinstance(data, Mapping):
        raise JsonError(f"invalid type: expected a map for {what}")
    if key not in data:
        raise JsonError(f"missing field `{key}`")
    value = data[key]
    if kind is int:
        if isinstance(value, bool) or not isinstance(value, int) or value < 0:
            raise JsonError(f"invalid value for `{key}`: expected a non-negative integer")
    elif not isinstance(value, kind):
        raise JsonError(f"invalid type for `{key}`: expected {kind.__name__}")
    return value


def _dumps(data: Any) -> str:
    return json.dumps(data, indent=2, ensure_ascii=False)


def _read_json(path: str | os.PathLike[str]) -> Any:
    try:
        text = Path(path).read_text(encoding="utf-8")
    except OSError as exc:
        raise FileOperationError(exc) from exc
    try:
        return json.loads(text)
    except ValueError as exc:
        raise JsonError(exc) from exc


def _write_text(path: str | os.PathLike[str], text: str) -> None:
    try:
        Path(path).write_text(text, encoding="utf-8")
    except OSError as exc:
        raise FileOperationError(exc) from exc


@dataclass
class FaviconService:
    """A favicon provider whose URL template holds a ``{domain}`` placeholder."""

    name: str
    url_template: str
    is_default: bool = False


def _service_to_dict(service: FaviconService) -> dict[str, Any]:
    return {
        "name": service.name,
        "url_template": service.url_template,
        "is_default": service.is_default,
    }


def _service_from_dict(data: Any) -> FaviconService:
    return FaviconService(
        name=_field(data, "name", str, "FaviconService"),
        url_template=_field(data, "url_template", str, "FaviconService"),
        is_default=_field(data, "is_default", bool, "FaviconService"),
    )


def _default_services() -> list[FaviconService]:
    return [
        FaviconService(
            name="Google",
            url_template="https://www.google.com/s2/favicons?sz=64&domain={domain}",
            is_default=True,
        ),
        FaviconService(
            name="DuckDuckGo",
            url_template="https://icons.duckduckgo.com/ip3/{domain}.ico",
            is_default=False,
        ),
    ]


@dataclass
class FaviconServiceConfig:
    """The known favicon services and which one is in use."""

    services: list[FaviconService] = field(default_factory=_default_services)
    current_service_index: int = 0

    def to_dict(self) -> dict[str, Any]:
        return {
            "services": [_service_to_dict(s) for s in self.services],
            "current_service_index": self.current_service_index,
        }

    @classmethod
    def from_dict(cls, data: Any) -> FaviconServiceConfig:
        services = _field(data, "services", list, "FaviconServiceConfig")
        index = _field(data, "current_service_index", int, "FaviconServiceConfig")
        return cls(services=[_service_from_dict(s) for s in services], current_service_index=index)


@dataclass
class LanguageConfig:
    """The interface language chosen by the user."""

    language: str = "zh-CN"


@dataclass
class AppConfig:
    """Everything the application stores in its configuration file."""

    favicon_service: FaviconServiceConfig = field(default_factory=FaviconServiceConfig)
    language: LanguageConfig = field(default_factory=LanguageConfig)

    @staticmethod
    def get_app_dir() -> str:
        """Return the per-user configuration directory, creating it if possible."""
        variable = "USERPROFILE" if sys.platform == "win32" else "HOME"
        base = os.environ.get(variable, ".")
        directory = os.path.join(base, ".config", APP_DIR_NAME)
        try:
            os.makedirs(directory, exist_ok=True)
        except OSError:
            pass
        return directory

    @staticmethod
    def get_config_path() -> str:
        return os.path.join(AppConfig.get_app_dir(), CONFIG_FILE_NAME)

    @classmethod
    def load(cls) -> AppConfig:
        """Read the configuration file, falling back to (and saving) the defaults."""
        try:
            return cls.from_dict(_read_json(cls.get_config_path()))
        except AppError:
            pass
        config = cls()
        try:
            config.save()
        except AppError:
            pass
        return config

    def save(self) -> None:
        _write_text(self.get_config_path(), _dumps(self.to_dict()))

    def to_dict(self) -> dict[str, Any]:
        data = self.favicon_service.to_dict()
        data["language"] = self.language.language
        return data

    @classmethod
    def from_dict(cls, data: Any) -> AppConfig:
        return cls(
            favicon_service=FaviconServiceConfig.from_dict(data),
            language=LanguageConfig(_field(data, "language", str, "AppConfig")),
        )

    def get_favicon_url(self, domain: str) -> str:
        """Fill the current service's template with ``domain``."""
        service = self.favicon_service.services[self.favicon_service.current_service_index]
        return service.url_template.replace(DOMAIN_PLACEHOLDER, domain)

    def export_services(self, path: str | os.PathLike[str]) -> None:
        _write_text(path, _dumps(self.favicon_service.to_dict()))

    def import_services(self, path: str | os.PathLike[str]) -> None:
        """Replace the service configuration with the one in ``path`` and save."""
        self.favicon_service = FaviconServiceConfig.from_dict(_read_json(path))
        self.save()