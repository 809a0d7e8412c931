"""Core TUI infrastructure - terminal session, input handling, key bindings."""

from hanoi_tui.cli.core.terminal import TerminalSession, TerminalSize
from hanoi_tui.cli.core.input import InputReader, KeyEvent, Key, split_key
from hanoi_tui.cli.core.shortcuts import ShortcutDef, SHORTCUTS, lookup, controls_lines

__all__ = [
    "TerminalSession",
    "TerminalSize",
    "InputReader",
    "KeyEvent",
    "Key",
    "split_key",
    "ShortcutDef",
    "SHORTCUTS",
    "lookup",
    "controls_lines",
]
