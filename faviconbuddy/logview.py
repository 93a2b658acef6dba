"""Splitting processing-log lines into coloured segments for display."""

from __future__ import annotations

import enum
from dataclasses import dataclass

from . import i18n

DEFAULT_LIMIT = 1000


class Color(enum.Enum):
    """Colour of a log segment."""

    DEFAULT = "default"
    GREEN = "green"
    RED = "red"


@dataclass(frozen=True)
class Segment:
    """A run of text drawn in one colour."""

    text: str
    color: Color = Color.DEFAULT


def visible_lines(text: str, limit: int = DEFAULT_LIMIT) -> list[str]:
    """Return the last ``limit`` lines of ``text``."""
    parts = text.split("\n")
    if parts and parts[-1] == "":
        parts.pop()
    lines = [part[:-1] if part.endswith("\r") else part for part in parts]
    return lines[-limit:] if len(lines) > limit else lines


def _summary(line: str) -> list[Segment] | None:
    if not ("Completed:" in line and "Failed:" in line and "Total:" in line):
        return None
    completed = line.find("Completed:")
    failed = line.find(", Failed:")
    total = line.find(", Total:")
    if min(completed, failed, total) < 0:
        return None
    return [
        Segment(line[completed:failed], Color.GREEN),
        Segment(", "),
        Segment(line[failed + 2 : total], Color.RED),
        Segment(", "),
        Segment(line[total + 2 :]),
    ]


def _localised_summary(
    line: str, success_word: str, failed_word: str, total_word: str, prefix: str
) -> list[Segment] | None:
    if not (
        prefix in line and success_word in line and failed_word in line and total_word in line
    ):
        return None
    success = line.find(success_word)
    failed = line.find(f", {failed_word}")
    total = line.find(f", {total_word}")
    if min(success, failed, total) < 0:
        return None
    return [
        Segment(line[:success]),
        Segment(line[success:failed], Color.GREEN),
        Segment(", "),
        Segment(line[failed + 2 : total], Color.RED),
        Segment(", "),
        Segment(line[total + 2 :]),
    ]


def segment_line(line: str) -> list[Segment]:
    """Colour the success and failure parts of one log line."""
    success_word = i18n.get_message("success")
    failed_word = i18n.get_message("failed")
    total_word = i18n.get_message("total")
    completed_prefix = f"{i18n.get_message('processing_completed')}:"
    failed_colon = f"{failed_word}:"

    segments = _summary(line)
    if segments is not None:
        return segments
    segments = _localised_summary(line, success_word, failed_word, total_word, completed_prefix)
    if segments is not None:
        return segments

    if success_word in line:
        index = line.find(success_word)
        return [Segment(line[:index]), Segment(success_word, Color.GREEN)]
    if failed_colon in line:
        index = line.find(failed_colon)
        return [Segment(line[:index]), Segment(line[index:], Color.RED)]
    return [Segment(line)]