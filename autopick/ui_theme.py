"""Selector theme definitions and selection helpers.

Theme fields are ``pygments.console`` colour keys; an empty key leaves the
text unstyled.
"""

from __future__ import annotations

from dataclasses import dataclass

from pygments.console import codes, colorize


@dataclass(frozen=True)
class SelectorTheme:
    """Semantic palette for the one-line selector display."""

    name: str
    matched: str
    unmatched: str
    error: str
    hint: str


DEFAULT_THEME = SelectorTheme(
    name="default",
    matched="",
    unmatched="brightblack",
    error="red",
    hint="brightblack",
)

OCEAN_THEME = SelectorTheme(
    name="ocean",
    matched="brightcyan",
    unmatched="blue",
    error="brightred",
    hint="faint",
)

PLAIN_THEME = SelectorTheme(
    name="plain",
    matched="",
    unmatched="",
    error="",
    hint="",
)

_THEMES: dict[str, SelectorTheme] = {
    DEFAULT_THEME.name: DEFAULT_THEME,
    OCEAN_THEME.name: OCEAN_THEME,
}


def paint(color_key: str, text: str) -> str:
    """Wrap ``text`` in the ANSI codes for ``color_key``."""
    if not color_key or not text:
        return text
    if color_key not in codes:
        return text
    return colorize(color_key, text)


def available_theme_names() -> tuple[str, ...]:
    """Return selectable non-plain theme names."""
    return tuple(sorted(_THEMES.keys()))


def normalize_theme_name(name: str | None) -> str:
    """Return a valid theme name, falling back to default."""
    if not name:
        return DEFAULT_THEME.name
    candidate = str(name).strip().lower()
    if candidate in _THEMES:
        return candidate
    return DEFAULT_THEME.name


def resolve_theme(name: str | None, *, no_color: bool = False) -> SelectorTheme:
    """Return concrete theme for requested name and color mode."""
    if no_color:
        return PLAIN_THEME
    return _THEMES[normalize_theme_name(name)]


__all__ = [
    "SelectorTheme",
    "DEFAULT_THEME",
    "OCEAN_THEME",
    "PLAIN_THEME",
    "available_theme_names",
    "normalize_theme_name",
    "paint",
    "resolve_theme",
]
