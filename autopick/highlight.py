"""Styled rendering of the current suggestion.

Highlights the first left-to-right subsequence occurrence of the query in a
candidate. This is a display approximation and not necessarily the alignment
behind the edit-distance ranking.
"""

from __future__ import annotations

from .ui_theme import DEFAULT_THEME, SelectorTheme, paint

NO_MATCH_SUFFIX = " (no match)"


def highlight_match(candidate: str, query: str, theme: SelectorTheme = DEFAULT_THEME) -> str:
    out: list[str] = []
    q = 0
    for ch in candidate:
        if q < len(query) and ch.lower() == query[q].lower():
            out.append(paint(theme.matched, ch))
            q += 1
        else:
            out.append(paint(theme.unmatched, ch))
    return "".join(out)


def no_match_line(query: str, theme: SelectorTheme = DEFAULT_THEME) -> str:
    """Render ``query`` as an unmatched entry with a trailing hint."""
    return paint(theme.error, query) + paint(theme.hint, NO_MATCH_SUFFIX)


__all__ = ["NO_MATCH_SUFFIX", "highlight_match", "no_match_line"]
