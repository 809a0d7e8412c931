"""Interactive game loop."""

from __future__ import annotations

import logging
from typing import Optional

from hanoi_tui.cli.core.input import InputReader, KeyEvent
from hanoi_tui.cli.core.shortcuts import lookup
from hanoi_tui.cli.core.terminal import TerminalSession, TerminalSize
from hanoi_tui.config import GameConfig
from hanoi_tui.core.game import GameState
from hanoi_tui.render.layout import plan_render
from hanoi_tui.render.screen import Screen
from hanoi_tui.render.terminal import TerminalRenderer

logger = logging.getLogger(__name__)


class HanoiApp:
    """
    Full-screen Tower of Hanoi.

    One key per iteration: quit keys stop the loop, bound keys dispatch
    one action, anything else is ignored. The loop also stops as soon as
    the puzzle is solved.
    """

    def __init__(self, config: GameConfig, reader: Optional[InputReader] = None) -> None:
        self.config = config
        self.state = GameState(disks=config.disks)
        self.renderer = TerminalRenderer(use_color=config.use_color)
        self.running = False
        self._reader = reader

    def run(self) -> GameState:
        """Main application loop. Returns the final game state."""
        self.running = True
        logger.debug("Starting game: %s", self.config)

        with TerminalSession() as terminal:
            reader = self._reader if self._reader is not None else InputReader()
            while self.running:
                terminal.draw(self.render_frame(terminal.size()))
                event = reader.read(timeout=0.1)
                if event is not None:
                    self.handle_key(event)

        logger.debug("Game over after %d moves (solved=%s)", self.state.moves, self.state.solved)
        return self.state

    def handle_key(self, event: KeyEvent) -> None:
        """Apply one key event; unbound keys are ignored."""
        shortcut = lookup(event)
        if shortcut is None:
            return

        if shortcut.quits:
            self.running = False
            return

        self.state.dispatch(shortcut.action)
        if self.state.solved:
            self.running = False

    def render_frame(self, size: TerminalSize) -> str:
        """Lay out and draw the current state for a terminal of ``size``."""
        plan = plan_render(self.state, size.cols, size.rows, use_color=self.config.use_color)
        return self.renderer.render(Screen.from_plan(plan))


def run_game(config: GameConfig) -> GameState:
    """Launch the game and return its final state."""
    app = HanoiApp(config)
    return app.run()
