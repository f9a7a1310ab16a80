"""Tests for suggestion highlighting and selector themes.

Expected ANSI payloads are built through ``pygments.console`` so the tests
follow whatever escape codes the installed Pygments emits.
"""

from __future__ import annotations

import unittest

from pygments.console import colorize

from autopick.highlight import NO_MATCH_SUFFIX, highlight_match, no_match_line
from autopick.ui_theme import (
    DEFAULT_THEME,
    OCEAN_THEME,
    PLAIN_THEME,
    available_theme_names,
    normalize_theme_name,
    paint,
    resolve_theme,
)


def _gray(text: str) -> str:
    return "".join(colorize("brightblack", ch) for ch in text)


class HighlightMatchTests(unittest.TestCase):
    def test_matched_characters_stay_plain_and_others_are_muted(self) -> None:
        self.assertEqual(
            highlight_match("Leclerc", "lc", DEFAULT_THEME),
            "L" + _gray("e") + "c" + _gray("lerc"),
        )

    def test_highlight_is_greedy_left_to_right(self) -> None:
        self.assertEqual(
            highlight_match("abcabc", "bc", DEFAULT_THEME),
            _gray("a") + "bc" + _gray("abc"),
        )

    def test_query_exhausted_mutes_the_rest(self) -> None:
        self.assertEqual(highlight_match("aaa", "a", DEFAULT_THEME), "a" + _gray("aa"))

    def test_unmatched_query_mutes_everything(self) -> None:
        self.assertEqual(highlight_match("Norris", "xyz", DEFAULT_THEME), _gray("Norris"))

    def test_matched_style_applies_per_character(self) -> None:
        self.assertEqual(
            highlight_match("Albon", "AB", OCEAN_THEME),
            colorize("brightcyan", "A")
            + colorize("blue", "l")
            + colorize("brightcyan", "b")
            + colorize("blue", "o")
            + colorize("blue", "n"),
        )

    def test_plain_theme_returns_candidate_unchanged(self) -> None:
        self.assertEqual(highlight_match("Hamilton", "hm", PLAIN_THEME), "Hamilton")

    def test_empty_inputs(self) -> None:
        self.assertEqual(highlight_match("", "abc", DEFAULT_THEME), "")
        self.assertEqual(highlight_match("ab", "", PLAIN_THEME), "ab")


class NoMatchLineTests(unittest.TestCase):
    def test_no_match_line_styles_query_and_hint(self) -> None:
        self.assertEqual(
            no_match_line("xy", DEFAULT_THEME),
            colorize("red", "xy") + colorize("brightblack", NO_MATCH_SUFFIX),
        )

    def test_no_match_line_without_color(self) -> None:
        self.assertEqual(no_match_line("xy", PLAIN_THEME), "xy (no match)")


class ThemeTests(unittest.TestCase):
    def test_paint_ignores_empty_and_unknown_keys(self) -> None:
        self.assertEqual(paint("", "abc"), "abc")
        self.assertEqual(paint("no-such-color", "abc"), "abc")
        self.assertEqual(paint("red", ""), "")
        self.assertEqual(paint("red", "abc"), colorize("red", "abc"))

    def test_theme_name_normalization(self) -> None:
        self.assertEqual(available_theme_names(), ("default", "ocean"))
        self.assertEqual(normalize_theme_name(None), "default")
        self.assertEqual(normalize_theme_name("  OCEAN "), "ocean")
        self.assertEqual(normalize_theme_name("plain"), "default")
        self.assertEqual(normalize_theme_name("missing"), "default")

    def test_resolve_theme_honors_no_color(self) -> None:
        self.assertIs(resolve_theme("ocean"), OCEAN_THEME)
        self.assertIs(resolve_theme("ocean", no_color=True), PLAIN_THEME)
        self.assertIs(resolve_theme(None), DEFAULT_THEME)


if __name__ == "__main__":
    unittest.main()
