"""Keypress values and raw terminal input decoding.

A keypress is either an escape code (control byte or a recognized ANSI
cursor sequence) or a single printable character. Decoding is deliberately
narrow: anything it does not recognize comes back as ``None``.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum

# Widest composite escape code, in bytes.
MAX_SEQUENCE_BYTES = 4


class Escape(IntEnum):
    """Control characters plus composite arrow-key codes."""

    NUL = 0x00
    START_OF_HEADING = 0x01
    START_OF_TEXT = 0x02
    END_OF_TEXT = 0x03
    END_OF_TRANSMISSION = 0x04
    ENQUIRY = 0x05
    ACKNOWLEDGE = 0x06
    BELL = 0x07
    BACKSPACE = 0x08
    TAB = 0x09
    LINE_FEED = 0x0A
    VERTICAL_TAB = 0x0B
    NEW_PAGE = 0x0C
    CARRIAGE_RETURN = 0x0D
    SHIFT_OUT = 0x0E
    SHIFT_IN = 0x0F
    DATA_LINK_ESCAPE = 0x10
    DEVICE_CONTROL_1 = 0x11
    DEVICE_CONTROL_2 = 0x12
    DEVICE_CONTROL_3 = 0x13
    DEVICE_CONTROL_4 = 0x14
    NEGATIVE_ACKNOWLEDGE = 0x15
    SYNCHRONOUS_IDLE = 0x16
    END_OF_TRANSMISSION_BLOCK = 0x17
    CANCEL = 0x18
    END_OF_MEDIUM = 0x19
    SUBSTITUTE = 0x1A
    ESCAPE = 0x1B
    FILE_SEPARATOR = 0x1C
    GROUP_SEPARATOR = 0x1D
    RECORD_SEPARATOR = 0x1E
    UNIT_SEPARATOR = 0x1F
    DELETE = 0x7F

    # ESC [ A..D packed big-endian into one integer.
    ARROW_UP = 0x1B5B41
    ARROW_DOWN = 0x1B5B42
    ARROW_RIGHT = 0x1B5B43
    ARROW_LEFT = 0x1B5B44


_ESCAPE_VALUES = frozenset(member.value for member in Escape)


@dataclass(frozen=True)
class Keypress:
    """One decoded input event: exactly one of ``escape`` or ``character``."""

    escape: Escape | None = None
    character: str | None = None

    def __post_init__(self) -> None:
        if (self.escape is None) == (self.character is None):
            raise ValueError("keypress must hold exactly one of escape or character")
        if self.character is not None and len(self.character) != 1:
            raise ValueError(f"keypress character must be a single code point: {self.character!r}")

    @classmethod
    def of_escape(cls, escape: Escape) -> Keypress:
        return cls(escape=Escape(escape))

    @classmethod
    def of_character(cls, character: str) -> Keypress:
        return cls(character=character)

    @property
    def is_escape(self) -> bool:
        return self.escape is not None

    @property
    def is_character(self) -> bool:
        return self.character is not None

    def as_escape(self) -> Escape:
        if self.escape is None:
            raise ValueError(f"keypress is a character, not an escape: {self.character!r}")
        return self.escape

    def as_character(self) -> str:
        if self.character is None:
            raise ValueError(f"keypress is an escape, not a character: {self.escape!r}")
        return self.character

    def is_key(self, escape: Escape) -> bool:
        """Return whether this keypress is the escape code ``escape``."""
        return self.escape is not None and self.escape == escape


def is_printable_ascii(byte: int) -> bool:
    return 0x20 <= byte <= 0x7E


def decode_keypress(data: bytes) -> Keypress | None:
    """Decode one raw read into a keypress.

    Returns ``None`` for an empty buffer and for anything not understood:
    bytes outside ASCII, multi-byte UTF-8 characters, and escape sequences
    other than the four arrow keys.
    """
    if not data:
        return None

    if len(data) == 1:
        byte = data[0]
        if is_printable_ascii(byte):
            return Keypress.of_character(chr(byte))
        if byte in _ESCAPE_VALUES:
            return Keypress.of_escape(Escape(byte))
        return None

    if data[0] != Escape.ESCAPE or len(data) > MAX_SEQUENCE_BYTES:
        # TODO: decode multi-byte UTF-8 characters into a single keypress.
        return None

    code = int.from_bytes(data, "big")
    if code not in _ESCAPE_VALUES:
        return None
    return Keypress.of_escape(Escape(code))


__all__ = [
    "Escape",
    "Keypress",
    "MAX_SEQUENCE_BYTES",
    "decode_keypress",
    "is_printable_ascii",
]
