"""Terminal session owning the screen while the game runs."""

from __future__ import annotations

import os
import sys
from dataclasses import dataclass
from typing import Optional, TextIO

# Control sequences
ALT_SCREEN_ON = '\x1b[?1049h'
ALT_SCREEN_OFF = '\x1b[?1049l'
HIDE_CURSOR = '\x1b[?25l'
SHOW_CURSOR = '\x1b[?25h'
CLEAR = '\x1b[2J'
HOME = '\x1b[H'
ERASE_BELOW = '\x1b[J'
RESET_ATTRS = '\x1b[0m'


@dataclass(frozen=True)
class TerminalSize:
    """Terminal dimensions."""
    rows: int
    cols: int


FALLBACK_SIZE = TerminalSize(24, 80)


class TerminalSession:
    """
    Full-screen game mode as a context manager.

    Entering switches to the alternate screen, hides the cursor and puts
    the input fd in raw mode; leaving restores all three, also when the
    game loop raises. ``draw`` only writes a frame that differs from the
    one already on screen, so the loop can redraw every iteration.
    """

    def __init__(self, out: Optional[TextIO] = None, fd: Optional[int] = None) -> None:
        self._out = out if out is not None else sys.stdout
        self._fd = fd
        self._saved_mode: Optional[list] = None
        self._last_frame: Optional[str] = None

    def __enter__(self) -> "TerminalSession":
        self._saved_mode = self._enter_raw()
        self._write(ALT_SCREEN_ON + HIDE_CURSOR + CLEAR + HOME)
        return self

    def __exit__(self, *exc_info) -> None:
        try:
            self._write(RESET_ATTRS + SHOW_CURSOR + ALT_SCREEN_OFF)
        finally:
            self._restore_mode()

    def size(self) -> TerminalSize:
        """Current terminal dimensions, re-read on every call."""
        try:
            size = os.get_terminal_size()
        except OSError:
            return FALLBACK_SIZE
        return TerminalSize(size.lines, size.columns)

    def draw(self, frame: str) -> bool:
        """Write ``frame`` from the home position. Returns False if unchanged."""
        if frame == self._last_frame:
            return False
        self._write(HOME + frame + ERASE_BELOW)
        self._last_frame = frame
        return True

    def _write(self, text: str) -> None:
        self._out.write(text)
        self._out.flush()

    def _input_fd(self) -> int:
        return sys.stdin.fileno() if self._fd is None else self._fd

    def _enter_raw(self) -> Optional[list]:
        """Switch the input fd to raw mode, returning the previous settings."""
        if sys.platform == 'win32':
            return None
        import termios
        import tty

        fd = self._input_fd()
        saved = termios.tcgetattr(fd)
        tty.setraw(fd)
        return saved

    def _restore_mode(self) -> None:
        if self._saved_mode is None:
            return
        import termios

        termios.tcsetattr(self._input_fd(), termios.TCSADRAIN, self._saved_mode)
        self._saved_mode = None
