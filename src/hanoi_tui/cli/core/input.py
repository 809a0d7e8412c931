"""Keyboard input: raw terminal bytes to key events."""

from __future__ import annotations

import os
import select
import sys
import time
from dataclasses import dataclass
from enum import Enum, auto
from typing import Optional

ESC = '\x1b'


class Key(Enum):
    """Named key constants."""
    UP = auto()
    DOWN = auto()
    LEFT = auto()
    RIGHT = auto()


@dataclass(frozen=True)
class KeyEvent:
    """Represents a keyboard input event."""
    key: Optional[Key] = None  # Named key if recognized
    char: Optional[str] = None  # Character if printable
    raw: str = ""  # Bytes the event was decoded from


_ARROW_FINALS = {'A': Key.UP, 'B': Key.DOWN, 'C': Key.RIGHT, 'D': Key.LEFT}

# Arrow keys arrive as CSI (ESC [ x) in normal cursor mode and as
# SS3 (ESC O x) in application cursor mode.
SEQUENCES: dict[str, Key] = {
    ESC + intro + final: key
    for intro in '[O'
    for final, key in _ARROW_FINALS.items()
}


def _sequence_length(buffer: str) -> Optional[int]:
    """
    Length of the escape sequence at the start of ``buffer``.

    Returns None when the buffer ends partway through a sequence.
    """
    if len(buffer) < 2:
        return None

    intro = buffer[1]
    if intro == 'O':
        # SS3 carries exactly one final character, which may itself be a letter
        return 3 if len(buffer) >= 3 else None
    if intro == '[':
        # CSI parameters run until a letter or ~
        for i in range(2, len(buffer)):
            ch = buffer[i]
            if ch == ESC:
                return i
            if ch.isalpha() or ch == '~':
                return i + 1
        return None
    # ESC followed by anything else is a lone escape
    return 1


def split_key(buffer: str, final: bool = False) -> tuple[Optional[KeyEvent], str]:
    """
    Split the first key event off a non-empty ``buffer``.

    Returns ``(event, remaining)``. If the buffer stops inside an escape
    sequence the event is None and the buffer is returned untouched, unless
    ``final`` is set, in which case the partial sequence becomes one
    unrecognised event.
    """
    head = buffer[0]
    if head != ESC:
        if head.isprintable():
            return KeyEvent(char=head, raw=head), buffer[1:]
        return KeyEvent(raw=head), buffer[1:]

    length = _sequence_length(buffer)
    if length is None:
        if not final:
            return None, buffer
        return KeyEvent(raw=buffer), ""

    seq = buffer[:length]
    return KeyEvent(key=SEQUENCES.get(seq), raw=seq), buffer[length:]


class InputReader:
    """
    Keyboard reader for a raw-mode terminal.

    Uses os.read() to bypass Python's I/O buffering. An escape sequence
    split across reads is completed by waiting up to ESCAPE_TIMEOUT for
    the rest of it.
    """

    ESCAPE_TIMEOUT = 0.1

    def __init__(self, fd: Optional[int] = None) -> None:
        self._buffer = ""
        self._fd = sys.stdin.fileno() if fd is None else fd

    def read(self, timeout: float = 0.1) -> Optional[KeyEvent]:
        """
        Read a single key event.

        Returns None if no input available within timeout.
        """
        if not self._buffer:
            if not self._wait(timeout) or not self._fill():
                return None

        event, rest = split_key(self._buffer)
        deadline = time.monotonic() + self.ESCAPE_TIMEOUT
        while event is None:
            remaining = deadline - time.monotonic()
            more = remaining > 0 and self._wait(remaining) and self._fill()
            event, rest = split_key(self._buffer, final=not more)

        self._buffer = rest
        return event

    def _fill(self) -> bool:
        """Append whatever input is available. Returns False on EOF or error."""
        try:
            data = os.read(self._fd, 1024)
        except OSError:
            return False
        self._buffer += data.decode('utf-8', errors='replace')
        return bool(data)

    def _wait(self, timeout: float) -> bool:
        """Check if input is available within timeout."""
        try:
            ready, _, _ = select.select([self._fd], [], [], timeout)
        except (ValueError, OSError):
            return False
        return bool(ready)
