"""Terminal session owning raw-mode lifecycle and byte-level I/O.

The session saves the terminal attributes on acquire and puts them back on
release, exactly once. Failing to read or set the attributes ends the
process: there is no usable terminal left to recover into.
"""

from __future__ import annotations

import logging
import os
import termios
import tty

from .keys import Keypress, decode_keypress

logger = logging.getLogger(__name__)

READ_BUFFER_SIZE = 16
CLEAR_LINE_SEQUENCE = "\x1b[2K\r"


class TerminalSession:
    """Exclusive raw-mode ownership of the controlling terminal."""

    def __init__(self, stdin_fd: int = 0, stdout_fd: int = 1) -> None:
        self.stdin_fd = stdin_fd
        self.stdout_fd = stdout_fd
        self._saved_tty_state: list | None = None

    @property
    def acquired(self) -> bool:
        return self._saved_tty_state is not None

    def acquire(self) -> TerminalSession:
        """Save the current attributes and switch the terminal to raw mode."""
        if self._saved_tty_state is not None:
            return self
        try:
            saved = termios.tcgetattr(self.stdin_fd)
        except termios.error as exc:
            raise SystemExit(f"tcgetattr failed: {exc}") from exc
        try:
            tty.setraw(self.stdin_fd, termios.TCSAFLUSH)
        except termios.error as exc:
            raise SystemExit(f"tcsetattr failed to set raw mode: {exc}") from exc
        self._saved_tty_state = saved
        return self

    def release(self) -> None:
        """Restore the attributes saved by ``acquire``; later calls do nothing."""
        saved = self._saved_tty_state
        if saved is None:
            return
        self._saved_tty_state = None
        try:
            termios.tcsetattr(self.stdin_fd, termios.TCSAFLUSH, saved)
        except termios.error as exc:
            raise SystemExit(f"tcsetattr failed during reset: {exc}") from exc

    def clear_current_line(self) -> None:
        self.write(CLEAR_LINE_SEQUENCE)

    def write(self, text: str) -> None:
        os.write(self.stdout_fd, text.encode("utf-8"))

    def read_one(self) -> Keypress | None:
        """Block for the next decodable keypress; ``None`` means end of input."""
        while True:
            data = os.read(self.stdin_fd, READ_BUFFER_SIZE)
            if not data:
                return None
            key = decode_keypress(data)
            if key is not None:
                return key
            logger.debug("ignoring undecodable input %r", data)

    def __enter__(self) -> TerminalSession:
        return self.acquire()

    def __exit__(self, exc_type, exc, tb) -> None:
        self.release()

    def __copy__(self):
        raise TypeError("TerminalSession cannot be copied")

    def __deepcopy__(self, memo):
        raise TypeError("TerminalSession cannot be copied")

    def __del__(self) -> None:
        if getattr(self, "_saved_tty_state", None) is None:
            return
        logger.error("TerminalSession discarded without release; restoring terminal state")
        self.release()


__all__ = ["CLEAR_LINE_SEQUENCE", "READ_BUFFER_SIZE", "TerminalSession"]
