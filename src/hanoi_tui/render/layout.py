"""Layout engine - maps game state and terminal size to positioned glyphs.

Geometry for ``d`` disks:
- Every pole column is as wide as the widest disk (``2*d + 1``)
- PADDING blank columns sit around and between the three poles
- Slot rows count down from the base; the cursor row sits one blank row
  above the top slot
- The status line always occupies the last terminal row

Nothing is cached: margins are recomputed on every call because the
terminal can be resized between frames.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from hanoi_tui.core.constants import (
    CURSOR_CHAR,
    DISK_CHAR,
    DISK_M,
    EVEN_CHAR,
    ODD_CHAR,
    PADDING,
    POLE_CHAR,
    POLES,
)
from hanoi_tui.core.game import GameState


class ColorClass(Enum):
    """Presentation class of a glyph."""
    NEUTRAL = "neutral"    # Poles, empty slots, cursor marker, text
    EVEN = "even"          # Disks of even size
    ODD = "odd"            # Disks of odd size


@dataclass(frozen=True)
class Placement:
    """A horizontal run of glyphs starting at (row, col), 0-indexed."""
    row: int
    col: int
    glyph: str
    color: ColorClass


@dataclass(frozen=True)
class RenderPlan:
    """Everything the presentation layer needs to draw one frame."""
    term_width: int
    term_height: int
    too_small: bool
    placements: tuple[Placement, ...]
    status: str

    @property
    def status_row(self) -> int:
        return self.term_height - 1


def disk_width(size: int) -> int:
    """Rendered width of a disk."""
    return size * DISK_M + 1


def required_size(disks: int) -> tuple[int, int]:
    """Minimum ``(width, height)`` of the terminal for ``disks`` disks."""
    width = POLES * (disks * DISK_M) + (POLES + 1) * PADDING
    height = disks + PADDING * 2 + 1
    return width, height


def fits(disks: int, term_width: int, term_height: int) -> bool:
    req_width, req_height = required_size(disks)
    return term_width >= req_width and term_height >= req_height


def calculate_margins(disks: int, term_width: int, term_height: int) -> tuple[int, int]:
    """Horizontal and vertical offsets that centre the board."""
    req_width, req_height = required_size(disks)
    return (term_width - req_width) // 2 - 1, (term_height - req_height) // 2 - 2


def slot_origin(
    disks: int,
    pole: int,
    height: int,
    term_width: int,
    term_height: int,
) -> tuple[int, int]:
    """
    Top-left ``(row, col)`` of the cell block for ``height`` on ``pole``.

    Height 0 is the base slot; ``disks + 1`` is the cursor row.
    """
    xm, ym = calculate_margins(disks, term_width, term_height)
    max_width = disk_width(disks)
    col = xm + pole * max_width + (pole + 1) * PADDING
    row = ym + PADDING + (disks - height) + 2
    return row, col


def disk_glyph(size: int, use_color: bool) -> str:
    if use_color:
        return DISK_CHAR
    return ODD_CHAR if size % 2 else EVEN_CHAR


def disk_color(size: int) -> ColorClass:
    return ColorClass.ODD if size % 2 else ColorClass.EVEN


def place_slot(
    disks: int,
    pole: int,
    height: int,
    disk: Optional[int],
    empty_char: str,
    term_width: int,
    term_height: int,
    use_color: bool = True,
) -> Placement:
    """Placement for one slot: a centred disk run, or a single marker glyph."""
    row, col = slot_origin(disks, pole, height, term_width, term_height)
    max_width = disk_width(disks)

    if not disk:
        return Placement(row, col + max_width // 2, empty_char, ColorClass.NEUTRAL)

    width = disk_width(disk)
    col += (max_width - width) // 2
    return Placement(row, col, disk_glyph(disk, use_color) * width, disk_color(disk))


def status_line(state: GameState, term_width: int, term_height: int) -> str:
    return (
        f"MOVES: {state.moves}/{state.min_moves}, CURSOR: {state.cursor_value}. "
        f"WIDTH: {term_width}, HEIGHT: {term_height}."
    )


def plan_render(
    state: GameState,
    term_width: int,
    term_height: int,
    use_color: bool = True,
) -> RenderPlan:
    """
    Compute the render plan for the current state and terminal size.

    A terminal below ``required_size`` in either dimension yields a plan
    with ``too_small`` set and no placements.

    Args:
        state: Game to draw
        term_width: Terminal width in columns
        term_height: Terminal height in rows
        use_color: Whether colour classes carry disk parity; when False the
            disk glyph itself changes with parity

    Returns:
        RenderPlan with one placement per slot plus the cursor indicator
    """
    status = status_line(state, term_width, term_height)
    disks = state.disks

    if not fits(disks, term_width, term_height):
        return RenderPlan(
            term_width=term_width,
            term_height=term_height,
            too_small=True,
            placements=(),
            status=status,
        )

    placements: list[Placement] = []
    for pole in range(POLES):
        for height, disk in enumerate(state.board.slots(pole)):
            placements.append(place_slot(
                disks, pole, height, disk, POLE_CHAR,
                term_width, term_height, use_color,
            ))

    placements.append(place_slot(
        disks, state.cursor.pole, disks + 1, state.cursor.lifted, CURSOR_CHAR,
        term_width, term_height, use_color,
    ))

    return RenderPlan(
        term_width=term_width,
        term_height=term_height,
        too_small=False,
        placements=tuple(placements),
        status=status,
    )
