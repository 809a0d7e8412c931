"""Helpers for driving games through their actions."""

from __future__ import annotations

from hanoi_tui.core.game import Action, GameState


def optimal_moves(disks: int, src: int = 0, dst: int = 2, via: int = 1) -> list[tuple[int, int]]:
    """The classic recursive solution as a list of (from_pole, to_pole)."""
    if disks == 0:
        return []
    return (
        optimal_moves(disks - 1, src, via, dst)
        + [(src, dst)]
        + optimal_moves(disks - 1, via, dst, src)
    )


def goto(game: GameState, pole: int) -> None:
    """Walk the cursor to ``pole`` using left/right actions."""
    while game.cursor.pole > pole:
        game.dispatch(Action.LEFT)
    while game.cursor.pole < pole:
        game.dispatch(Action.RIGHT)


def move_disk(game: GameState, src: int, dst: int) -> None:
    """Raise the top disk of ``src`` and lower it onto ``dst``."""
    goto(game, src)
    game.dispatch(Action.RAISE)
    goto(game, dst)
    game.dispatch(Action.LOWER)


def solve(game: GameState) -> GameState:
    for src, dst in optimal_moves(game.disks):
        move_disk(game, src, dst)
    return game


def assert_board_invariants(game: GameState) -> None:
    """Every disk in exactly one place and every stack strictly decreasing."""
    seen = [size for stack in game.board for size in stack]
    if game.cursor.holding:
        seen.append(game.cursor.lifted)
    assert sorted(seen) == list(range(1, game.disks + 1))
    for stack in game.board:
        assert all(lower > upper for lower, upper in zip(stack, stack[1:]))
