"""Keyboard shortcut registry.

Single source of truth for the game's key bindings: the main loop uses it
to turn key events into game actions, and the CLI uses it to print the
controls section of the help text.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from hanoi_tui.cli.core.input import Key, KeyEvent
from hanoi_tui.core.game import Action


@dataclass(frozen=True)
class ShortcutDef:
    """Definition of a keyboard shortcut.

    Attributes:
        keys: Keys/chars that trigger this shortcut
        description: Line shown in the controls help
        action: Game action to dispatch, or None for quit
    """
    keys: tuple[str | Key, ...]
    description: str
    action: Optional[Action] = None

    @property
    def quits(self) -> bool:
        return self.action is None

    def matches(self, event: KeyEvent) -> bool:
        """Check if a key event matches this shortcut."""
        for key in self.keys:
            if isinstance(key, Key):
                if event.key == key:
                    return True
            elif event.char == key:
                return True
        return False


SHORTCUTS: tuple[ShortcutDef, ...] = (
    ShortcutDef((Key.LEFT,), "Left arrow to move the cursor left.", Action.LEFT),
    ShortcutDef((Key.RIGHT,), "Right arrow to move the cursor right.", Action.RIGHT),
    ShortcutDef((Key.UP,), "Up arrow to raise a disk.", Action.RAISE),
    ShortcutDef((Key.DOWN,), "Down arrow to lower a disk.", Action.LOWER),
    ShortcutDef(("r",), "R to reset.", Action.RESET),
    ShortcutDef(("q",), "Q to exit."),
)


def lookup(event: KeyEvent) -> Optional[ShortcutDef]:
    """Find the shortcut bound to ``event``; None for unbound keys."""
    for shortcut in SHORTCUTS:
        if shortcut.matches(event):
            return shortcut
    return None


def controls_lines() -> list[str]:
    """Controls section for the usage text, one line per entry."""
    return ["CONTROLS:"] + [f"    {shortcut.description}" for shortcut in SHORTCUTS]
