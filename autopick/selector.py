"""Interactive read-render loop for the autocomplete selector.

``select_from_list`` is the entry point: it owns the terminal for the length
of one selection and hands back the chosen candidate, or ``None``.
"""

from __future__ import annotations

import logging
import sys
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from enum import Enum
from typing import TextIO, TypeVar

from .config import load_prompt, load_theme_name
from .fuzzy import is_skipped_character, match_candidates
from .highlight import highlight_match, no_match_line
from .keys import Escape, Keypress
from .terminal import TerminalSession
from .ui_theme import SelectorTheme, resolve_theme

logger = logging.getLogger(__name__)

EnumT = TypeVar("EnumT", bound=Enum)

_ACCEPT_KEYS = (Escape.TAB, Escape.CARRIAGE_RETURN)
_ERASE_KEYS = (Escape.BACKSPACE, Escape.DELETE)


@dataclass
class SelectionState:
    """Query, highlighted index and last computed matches of one selection."""

    query: str = ""
    selection: int = 0
    matches: tuple[str, ...] = ()

    def refresh_matches(self, candidates: Sequence[str]) -> None:
        self.matches = tuple(match_candidates(candidates, self.query))

    def clamp_selection(self) -> None:
        if self.matches:
            self.selection = max(0, min(self.selection, len(self.matches) - 1))

    def current_match(self) -> str | None:
        if not self.query or not self.matches:
            return None
        self.clamp_selection()
        return self.matches[self.selection]

    def apply_keypress(self, key: Keypress | None) -> bool:
        """Update state for ``key``; return ``False`` once the selection ends.

        Down moves are not bounded here; the next render clamps them.
        """
        if key is None:
            self.query = ""
            return False
        if key.is_character:
            ch = key.as_character()
            if not is_skipped_character(ch):
                self.query += ch
                self.selection = 0
            return True
        if key.escape in _ERASE_KEYS:
            self.query = self.query[:-1]
            return True
        if key.is_key(Escape.ARROW_UP):
            if self.selection > 0:
                self.selection -= 1
            return True
        if key.is_key(Escape.ARROW_DOWN):
            self.selection += 1
            return True
        if key.escape not in _ACCEPT_KEYS:
            self.query = ""
        return False


class AutocompleteSelector:
    """Single-line fuzzy selector over a fixed candidate list."""

    def __init__(
        self,
        candidates: Sequence[str],
        *,
        theme: SelectorTheme | None = None,
        prompt: str | None = None,
        session_factory: Callable[[], TerminalSession] = TerminalSession,
        output: TextIO | None = None,
    ) -> None:
        self._candidates = candidates
        self._theme = theme if theme is not None else resolve_theme(load_theme_name())
        self._prompt = prompt if prompt is not None else load_prompt()
        self._session_factory = session_factory
        self._output = output

    def render(self, session: TerminalSession, state: SelectionState) -> None:
        """Redraw the prompt line for the current state."""
        session.clear_current_line()
        session.write(self._prompt)
        if not state.query:
            return

        state.refresh_matches(self._candidates)
        if not state.matches:
            session.write(no_match_line(state.query, self._theme))
            return

        state.clamp_selection()
        session.write(highlight_match(state.matches[state.selection], state.query, self._theme))

    def select(self) -> str | None:
        state = SelectionState()
        with self._session_factory() as session:
            while True:
                self.render(session, state)
                if not state.apply_keypress(session.read_one()):
                    break

        output = self._output if self._output is not None else sys.stdout
        match = state.current_match()
        if match is None:
            logger.debug("selection cancelled")
            output.write("\n")
        else:
            logger.debug("selected %r for query %r", match, state.query)
            output.write(f"\r{self._prompt}{match}\n")
        output.flush()
        return match


def select_from_list(candidates: Sequence[str], **options) -> str | None:
    """Let the user pick one of ``candidates`` interactively.

    Returns ``None`` when the user cancels. ``options`` are passed to
    ``AutocompleteSelector``.
    """
    return AutocompleteSelector(candidates, **options).select()


def select_enum_member(enum_cls: type[EnumT], **options) -> EnumT | None:
    """Pick a member of ``enum_cls`` by name.

    Members valued ``0`` stand for "unspecified" and are not offered.
    """
    names = [member.name for member in enum_cls if member.value != 0]
    name = select_from_list(names, **options)
    if name is None:
        return None
    return enum_cls[name]


__all__ = [
    "AutocompleteSelector",
    "SelectionState",
    "select_enum_member",
    "select_from_list",
]
