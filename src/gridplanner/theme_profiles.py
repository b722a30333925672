"""Theme profiles: built-in palettes, JSON overrides and color parsing."""

from __future__ import annotations

import json
import re
from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Any

from reportlab.lib import colors

_HEX_PATTERN = re.compile(r"#?([0-9A-Fa-f]{6}|[0-9A-Fa-f]{8})")
_FONT_PREFIX = "font_"
# Theme file key naming the built-in profile the overrides apply to.
_EXTENDS_KEY = "extends"


@dataclass(frozen=True)
class ThemeProfile:
    """Serializable theme values; ``font_*`` fields name fonts, the rest are colors."""

    background: str = "#FFFFFF"
    dot_grid: str = "#CCCCCC"
    borders: str = "#E5E5E5"
    section_headers: str = "#AAAAAA"
    weekend_bg: str = "#CCCCCC"
    text_primary: str = "#000000"
    text_secondary: str = "#888888"
    font_header: str = "Helvetica-Bold"
    font_regular: str = "Helvetica"
    font_bold: str = "Helvetica-Bold"

    def to_theme_class(self) -> type:
        """Return a Theme-like class whose upper-case attributes hold parsed values."""
        attributes: dict[str, Any] = {}
        for item in fields(self):
            raw_value = getattr(self, item.name)
            if item.name.startswith(_FONT_PREFIX):
                attributes[item.name.upper()] = _require_font(raw_value, key=item.name)
            else:
                attributes[item.name.upper()] = _theme_color(raw_value, key=item.name)
        return type("Theme", (), attributes)


_BUILTIN_THEME_PROFILES: dict[str, ThemeProfile] = {
    "light": ThemeProfile(),
    "dark": ThemeProfile(
        background="#1E1E1E",
        dot_grid="#505050",
        borders="#555555",
        section_headers="#888888",
        weekend_bg="#505050",
        text_primary="#B0B0B0",
        text_secondary="#A0A0A0",
    ),
    "earth": ThemeProfile(
        background="#F5F1E8",
        dot_grid="#758C74",
        borders="#D4CDB8",
        section_headers="#8B9A8B",
        weekend_bg="#758C74",
        text_primary="#696953",
        text_secondary="#6B7565",
    ),
}

DEFAULT_THEME_PROFILE = "light"


def available_theme_profiles() -> tuple[str, ...]:
    return tuple(sorted(_BUILTIN_THEME_PROFILES))


def theme_profile(name: str) -> ThemeProfile:
    if name not in _BUILTIN_THEME_PROFILES:
        valid = ", ".join(available_theme_profiles())
        msg = f"unknown theme profile '{name}'. Valid profiles: {valid}."
        raise ValueError(msg)
    return _BUILTIN_THEME_PROFILES[name]


def resolve_theme(
    *,
    profile: str = DEFAULT_THEME_PROFILE,
    theme_file: str | Path | None = None,
) -> type:
    """Resolve a built-in profile, optionally overridden by a JSON theme file.

    A theme file may name its own base profile with ``"extends"``; that takes
    precedence over ``profile``.
    """
    overrides: dict[str, Any] = {}
    if theme_file is not None:
        overrides = read_theme_file(Path(theme_file))
        profile = overrides.pop(_EXTENDS_KEY, profile)
    return replace(theme_profile(profile), **overrides).to_theme_class()


def read_theme_file(path: Path) -> dict[str, Any]:
    """Read theme overrides, rejecting keys that no profile field matches."""
    try:
        payload = json.loads(path.read_text(encoding="utf-8"))
    except FileNotFoundError as exc:
        msg = f"theme file '{path}' does not exist."
        raise ValueError(msg) from exc
    except json.JSONDecodeError as exc:
        msg = f"theme file '{path}' is not valid JSON: {exc}."
        raise ValueError(msg) from exc

    if not isinstance(payload, dict):
        msg = f"theme file '{path}' must hold a JSON object."
        raise ValueError(msg)

    known = {item.name for item in fields(ThemeProfile)} | {_EXTENDS_KEY}
    unknown = sorted(set(payload) - known)
    if unknown:
        msg = f"unknown theme key(s): {', '.join(unknown)}."
        raise ValueError(msg)
    return payload


def parse_color(value: Any) -> colors.Color:
    """Coerce a hex string (with or without '#'), color name or Color object."""
    if isinstance(value, colors.Color):
        return value
    if not isinstance(value, str) or not value.strip():
        msg = f"color must be a non-empty string or Color, got {value!r}."
        raise ValueError(msg)
    raw_value = value.strip()
    match = _HEX_PATTERN.fullmatch(raw_value)
    try:
        if match:
            digits = match.group(1)
            return colors.HexColor(f"#{digits}", hasAlpha=len(digits) == 8)
        return colors.toColor(raw_value)
    except Exception as exc:  # noqa: BLE001
        msg = f"invalid color value '{raw_value}'."
        raise ValueError(msg) from exc


def _theme_color(raw_value: Any, *, key: str) -> colors.Color:
    try:
        return parse_color(raw_value)
    except ValueError as exc:
        msg = f"invalid color value '{raw_value}' for theme key '{key}'."
        raise ValueError(msg) from exc


def _require_font(raw_value: Any, *, key: str) -> str:
    if not isinstance(raw_value, str) or not raw_value.strip():
        msg = f"theme key '{key}' must be a non-empty font name."
        raise ValueError(msg)
    return raw_value
