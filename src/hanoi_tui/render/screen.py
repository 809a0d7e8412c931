"""Screen - 2D grid of cells a render plan is painted onto."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator

from hanoi_tui.core.constants import TOO_SMALL_MESSAGE
from hanoi_tui.render.layout import ColorClass, RenderPlan


@dataclass(slots=True)
class Cell:
    """A single character cell with its colour class."""
    char: str = ' '
    color: ColorClass = ColorClass.NEUTRAL

    def is_blank(self) -> bool:
        return self.char == ' '


@dataclass
class Screen:
    """
    Fixed-size grid matching the terminal.

    Writes outside the grid are clipped rather than raising, since the
    terminal may shrink between computing a plan and drawing it.
    """
    width: int
    height: int
    _buffer: list[list[Cell]] = field(default_factory=list)

    def __post_init__(self) -> None:
        if not self._buffer:
            self._buffer = [
                [Cell() for _ in range(max(self.width, 0))]
                for _ in range(max(self.height, 0))
            ]

    def put_text(
        self,
        col: int,
        row: int,
        text: str,
        color: ColorClass = ColorClass.NEUTRAL,
    ) -> None:
        """Write text starting at (col, row), clipped to the grid."""
        if not 0 <= row < self.height:
            return
        for i, char in enumerate(text):
            x = col + i
            if x < 0:
                continue
            if x >= self.width:
                break
            cell = self._buffer[row][x]
            cell.char = char
            cell.color = color

    def paint(self, plan: RenderPlan) -> "Screen":
        """Draw every placement of ``plan`` plus its message and status line."""
        if plan.too_small:
            self.put_text(0, 0, TOO_SMALL_MESSAGE)
        for placement in plan.placements:
            self.put_text(placement.col, placement.row, placement.glyph, placement.color)
        self.put_text(0, plan.status_row, plan.status)
        return self

    @classmethod
    def from_plan(cls, plan: RenderPlan) -> "Screen":
        return cls(plan.term_width, plan.term_height).paint(plan)

    def rows(self) -> Iterator[list[Cell]]:
        """Iterate over rows."""
        yield from self._buffer

    def text_lines(self) -> list[str]:
        """Plain characters of each row, trailing blanks removed."""
        return [''.join(cell.char for cell in row).rstrip() for row in self._buffer]
