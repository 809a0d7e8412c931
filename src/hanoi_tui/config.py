"""Startup configuration."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from hanoi_tui.core.constants import DEFAULT_DISKS


@dataclass(frozen=True)
class GameConfig:
    """Options fixed for the lifetime of one run."""
    disks: int = DEFAULT_DISKS
    use_color: bool = True
    log_file: Optional[Path] = None

    def __post_init__(self) -> None:
        if self.disks < 1:
            raise ValueError(f"disk number cannot be below 1, got {self.disks}")
