"""Puzzle state model: board, cursor and game rules."""

from hanoi_tui.core.board import Board
from hanoi_tui.core.cursor import Cursor, cursor_power
from hanoi_tui.core.game import Action, GameState, minimum_moves

__all__ = ["Board", "Cursor", "cursor_power", "Action", "GameState", "minimum_moves"]
