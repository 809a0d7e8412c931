"""Shared fixtures."""

from __future__ import annotations

import os
from typing import Iterator

import pytest

from hanoi_tui.core.game import GameState


@pytest.fixture
def game() -> GameState:
    """A fresh three-disk game."""
    return GameState(disks=3)


@pytest.fixture
def pipe() -> Iterator[tuple[int, int]]:
    """A (read_fd, write_fd) pair standing in for a terminal."""
    read_fd, write_fd = os.pipe()
    try:
        yield read_fd, write_fd
    finally:
        os.close(read_fd)
        os.close(write_fd)
