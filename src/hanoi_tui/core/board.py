"""Board - the three pole stacks and the stacking rule."""

from __future__ import annotations

from typing import Iterator, Optional

from hanoi_tui.core.constants import POLES


class Board:
    """
    Per-pole disk stacks for a game with ``disks`` disks.

    Each pole is a stack whose index 0 is the base. ``place`` is the only
    mutation that adds a disk, and it refuses anything that would break
    the strictly-decreasing stacking rule, so every reachable board keeps
    each size in exactly one slot.
    """

    def __init__(self, disks: int) -> None:
        if disks < 1:
            raise ValueError(f"disks must be at least 1, got {disks}")
        self.disks = disks
        self._poles: list[list[int]] = [[] for _ in range(POLES)]
        self.reset()

    def reset(self) -> None:
        """Stack every disk on pole 0, largest at the base."""
        self._poles = [[] for _ in range(POLES)]
        self._poles[0] = list(range(self.disks, 0, -1))

    def _pole(self, pole: int) -> list[int]:
        if pole < 0 or pole >= POLES:
            raise IndexError(f"pole={pole} out of bounds (poles={POLES})")
        return self._poles[pole]

    def topmost(self, pole: int) -> Optional[tuple[int, int]]:
        """Return ``(slot_index, size)`` of the top disk, or None if empty."""
        stack = self._pole(pole)
        if not stack:
            return None
        return len(stack) - 1, stack[-1]

    def can_place(self, pole: int, size: int) -> bool:
        """Check whether a disk of ``size`` may go on top of ``pole``."""
        stack = self._pole(pole)
        if len(stack) >= self.disks:
            return False
        return not stack or stack[-1] > size

    def place(self, pole: int, size: int) -> bool:
        """
        Put a disk on top of ``pole``.

        Returns True if the disk was placed. An illegal placement leaves
        the board untouched and returns False.
        """
        if not self.can_place(pole, size):
            return False
        self._poles[pole].append(size)
        return True

    def take(self, pole: int) -> Optional[int]:
        """Remove and return the top disk of ``pole`` (None if empty)."""
        stack = self._pole(pole)
        if not stack:
            return None
        return stack.pop()

    def is_solved(self) -> bool:
        """True when the goal pole holds every disk, largest at the base."""
        return self._poles[POLES - 1] == list(range(self.disks, 0, -1))

    def stack(self, pole: int) -> tuple[int, ...]:
        """Disk sizes on ``pole`` from base to top."""
        return tuple(self._pole(pole))

    def slots(self, pole: int) -> list[Optional[int]]:
        """All ``disks`` slots of ``pole`` from base to top, None where empty."""
        stack = self._pole(pole)
        return list(stack) + [None] * (self.disks - len(stack))

    def __iter__(self) -> Iterator[tuple[int, ...]]:
        """Iterate over pole stacks."""
        for pole in range(POLES):
            yield self.stack(pole)

    def __repr__(self) -> str:
        poles = ", ".join(str(list(s)) for s in self)
        return f"Board(disks={self.disks}, poles=[{poles}])"
