"""Locations of system fonts that can render CJK text and emoji."""

from __future__ import annotations

import os
import sys

_SYSTEM_FONTS: dict[str, tuple[tuple[str, str], ...]] = {
    "windows": (
        ("microsoft_yahei", "C:/Windows/Fonts/msyh.ttc"),
        ("simhei", "C:/Windows/Fonts/simhei.ttf"),
        ("simsun", "C:/Windows/Fonts/simsun.ttc"),
    ),
    "macos": (
        ("pingfang_sc", "/System/Library/Fonts/PingFang.ttc"),
        ("stkaiti", "/System/Library/Fonts/STKaiti.ttc"),
    ),
    "linux": (
        ("noto_sans_cjk", "/usr/share/fonts/opentype/noto/NotoSansCJK-Regular.ttc"),
        ("dejavu_sans", "/usr/share/fonts/truetype/dejavu/DejaVuSans.ttf"),
        ("wqy_microhei", "/usr/share/fonts/truetype/wqy/wqy-microhei.ttc"),
        ("liberation_sans", "/usr/share/fonts/liberation/LiberationSans-Regular.ttf"),
    ),
}

_EMOJI_FONTS: dict[str, tuple[tuple[str, str], ...]] = {
    "windows": (
        ("segoe_ui_emoji", "C:/Windows/Fonts/seguiemj.ttf"),
        ("segoe_ui_symbol", "C:/Windows/Fonts/seguisym.ttf"),
    ),
    "macos": (
        ("apple_color_emoji", "/System/Library/Fonts/Apple Color Emoji.ttc"),
    ),
    "linux": (
        ("noto_color_emoji", "/usr/share/fonts/truetype/noto/NotoColorEmoji.ttf"),
        ("noto_emoji", "/usr/share/fonts/truetype/noto/NotoEmoji-Regular.ttf"),
    ),
}


def _family(platform: str | None) -> str:
    name = platform if platform is not None else sys.platform
    if name.startswith("win"):
        return "windows"
    if name == "darwin":
        return "macos"
    if name.startswith("linux"):
        return "linux"
    return name


def get_system_font_paths(platform: str | None = None) -> list[tuple[str, str]]:
    """Return ``(name, path)`` pairs of the text fonts tried on ``platform``."""
    return list(_SYSTEM_FONTS.get(_family(platform), ()))


def get_emoji_font_paths(platform: str | None = None) -> list[tuple[str, str]]:
    """Return ``(name, path)`` pairs of the emoji fonts tried on ``platform``."""
    return list(_EMOJI_FONTS.get(_family(platform), ()))


def available_fonts(platform: str | None = None) -> list[tuple[str, str]]:
    """Return the text and then emoji fonts that exist, in loading order."""
    candidates = get_system_font_paths(platform) + get_emoji_font_paths(platform)
    return [(name, path) for name, path in candidates if os.path.isfile(path)]