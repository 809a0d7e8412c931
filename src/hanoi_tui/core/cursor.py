"""Cursor - which pole is selected and which disk, if any, is lifted."""

from __future__ import annotations

from dataclasses import dataclass

from hanoi_tui.core.constants import POLES

NO_DISK = 0


def cursor_power(disks: int) -> int:
    """
    Smallest power of ten strictly greater than ``disks``.

    Used as the base of the packed cursor value shown in the status line,
    so the pole reads as the leading digit and the lifted disk as the rest.
    """
    if disks < 1:
        raise ValueError(f"disks must be at least 1, got {disks}")
    power = 10
    while power <= disks:
        power *= 10
    return power


@dataclass
class Cursor:
    """
    Player selection: the targeted pole and the lifted disk size.

    ``lifted == 0`` means nothing is held. Pole movement is clamped to the
    available poles and never changes the lifted disk.
    """
    pole: int = 0
    lifted: int = NO_DISK

    @property
    def holding(self) -> bool:
        """Whether a disk is currently lifted."""
        return self.lifted != NO_DISK

    def move_left(self) -> None:
        if self.pole > 0:
            self.pole -= 1

    def move_right(self) -> None:
        if self.pole < POLES - 1:
            self.pole += 1

    def reset(self) -> None:
        self.pole = 0
        self.lifted = NO_DISK

    def encode(self, power: int) -> int:
        """Pack into a single integer ``pole * power + lifted``."""
        if self.lifted >= power:
            raise ValueError(f"lifted={self.lifted} does not fit below power={power}")
        return self.pole * power + self.lifted

    @classmethod
    def decode(cls, value: int, power: int) -> "Cursor":
        """Unpack a value produced by ``encode`` with the same power."""
        if power < 1:
            raise ValueError(f"power must be positive, got {power}")
        if not 0 <= value < power * POLES:
            raise ValueError(f"cursor value must be 0-{power * POLES - 1}, got {value}")
        return cls(pole=value // power, lifted=value % power)
