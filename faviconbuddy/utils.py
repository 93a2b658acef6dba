"""Helpers for output file names, log lines and shared progress state."""

from __future__ import annotations

import os
import threading
from datetime import datetime


def generate_output_filename(input_path: str, now: datetime | None = None) -> str:
    """Build ``<stem>-with-favicons--YYYY-MM-DD-HHMMSS.<ext>`` beside the input."""
    now = now or datetime.now()
    directory = os.path.dirname(input_path)
    stem, ext = os.path.splitext(os.path.basename(input_path))
    stem = stem or "output"
    ext = ext[1:] if ext else "html"
    timestamp = now.strftime("%Y-%m-%d-%H%M%S")
    name = f"{stem}-with-favicons--{timestamp}.{ext}"
    if not directory:
        return name
    separator = "//" if os.name == "nt" else "/"
    return f"{directory}{separator}{name}"


def format_log_message(message: str, now: datetime | None = None) -> str:
    """Prefix ``message`` with a ``[YYYY-MM-DD HH:MM:SS]`` timestamp."""
    now = now or datetime.now()
    return f"[{now:%Y-%m-%d %H:%M:%S}] {message}"


class LogBuffer:
    """A text log that several threads may append to."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._text = ""

    def append(self, text: str) -> None:
        with self._lock:
            self._text += text

    def clear(self) -> None:
        with self._lock:
            self._text = ""

    def text(self) -> str:
        with self._lock:
            return self._text

    def lines(self) -> list[str]:
        """Split the log on newlines, dropping a trailing ``\\r`` and empty tail."""
        parts = self.text().split("\n")
        if parts and parts[-1] == "":
            parts.pop()
        return [part[:-1] if part.endswith("\r") else part for part in parts]


class Progress:
    """A thread-safe ``(current, total)`` pair."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._value = (0, 0)

    def set(self, current: int, total: int) -> None:
        with self._lock:
            self._value = (current, total)

    def get(self) -> tuple[int, int]:
        with self._lock:
            return self._value