"""
hanoi-tui: Tower of Hanoi for the terminal

Move a stack of disks from the left pole to the right pole, one disk at a
time, never placing a larger disk on a smaller one.

Quick Start:
    $ hanoi --disks 4

Library use:
    >>> from hanoi_tui import GameState, Action, plan_render
    >>> game = GameState(disks=3)
    >>> game.dispatch(Action.RAISE)
    >>> plan = plan_render(game, 80, 24)
"""

__version__ = "0.1.0"

from hanoi_tui.core.board import Board
from hanoi_tui.core.cursor import Cursor
from hanoi_tui.core.game import Action, GameState, minimum_moves
from hanoi_tui.config import GameConfig
from hanoi_tui.render.layout import RenderPlan, plan_render, required_size

__all__ = [
    "__version__",
    "Board",
    "Cursor",
    "Action",
    "GameState",
    "minimum_moves",
    "GameConfig",
    "RenderPlan",
    "plan_render",
    "required_size",
]
