"""Game rules - raise/lower gating, input dispatch and the solved check."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Optional

from hanoi_tui.core.board import Board
from hanoi_tui.core.constants import DEFAULT_DISKS
from hanoi_tui.core.cursor import Cursor, cursor_power

logger = logging.getLogger(__name__)


class Action(Enum):
    """State transitions a key can trigger."""
    LEFT = auto()
    RIGHT = auto()
    RAISE = auto()
    LOWER = auto()
    RESET = auto()


def minimum_moves(disks: int) -> int:
    """Optimal move count for ``disks`` disks."""
    return 2 ** disks - 1


@dataclass
class GameState:
    """
    Everything one game mutates: the board, the cursor and the move count.

    Owned by the main loop. Illegal actions (raising from an empty pole,
    lowering onto a smaller disk, moving past the outer poles) leave the
    state unchanged.
    """
    disks: int = DEFAULT_DISKS
    board: Board = field(init=False)
    cursor: Cursor = field(default_factory=Cursor)
    moves: int = 0

    def __post_init__(self) -> None:
        self.board = Board(self.disks)

    @property
    def power(self) -> int:
        return cursor_power(self.disks)

    @property
    def cursor_value(self) -> int:
        """Cursor packed as ``pole * power + lifted``."""
        return self.cursor.encode(self.power)

    @property
    def min_moves(self) -> int:
        return minimum_moves(self.disks)

    @property
    def solved(self) -> bool:
        return self.board.is_solved()

    @property
    def perfect(self) -> bool:
        """Solved in the optimal number of moves."""
        return self.solved and self.moves == self.min_moves

    def reset(self) -> None:
        """Start over with every disk on the first pole."""
        self.board.reset()
        self.cursor.reset()
        self.moves = 0
        logger.debug("Game reset with %d disks", self.disks)

    def move_left(self) -> None:
        self.cursor.move_left()

    def move_right(self) -> None:
        self.cursor.move_right()

    def raise_disk(self) -> None:
        """Lift the top disk of the selected pole if nothing is held."""
        if self.cursor.holding:
            return
        size = self.board.take(self.cursor.pole)
        if size is None:
            return
        self.cursor.lifted = size
        logger.debug("Raised disk %d from pole %d", size, self.cursor.pole)

    def lower_disk(self) -> None:
        """Place the held disk on the selected pole if the stacking rule allows."""
        if not self.cursor.holding:
            return
        size = self.cursor.lifted
        if not self.board.place(self.cursor.pole, size):
            logger.debug("Rejected disk %d on pole %d", size, self.cursor.pole)
            return
        self.cursor.lifted = 0
        self.moves += 1
        logger.debug("Lowered disk %d onto pole %d (move %d)", size, self.cursor.pole, self.moves)
        if self.solved:
            logger.debug("Solved in %d moves (minimum %d)", self.moves, self.min_moves)

    def dispatch(self, action: Action) -> None:
        """Apply exactly one action."""
        handlers = {
            Action.LEFT: self.move_left,
            Action.RIGHT: self.move_right,
            Action.RAISE: self.raise_disk,
            Action.LOWER: self.lower_disk,
            Action.RESET: self.reset,
        }
        handlers[action]()

    def result_message(self) -> Optional[str]:
        """Completion message, or None if the puzzle is not solved."""
        if not self.solved:
            return None
        verdict = "Perfect" if self.perfect else "Well done"
        return f"{verdict}! Completed in {self.moves} moves!"
