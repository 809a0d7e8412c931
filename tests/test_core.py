"""Tests for the board, cursor and game rules (no terminal needed)."""

import itertools

import pytest

from helpers import assert_board_invariants, goto, move_disk, optimal_moves, solve
from hanoi_tui.core.board import Board
from hanoi_tui.core.cursor import Cursor, cursor_power
from hanoi_tui.core.game import Action, GameState, minimum_moves


class TestBoard:
    """Tests for Board."""

    def test_initial_stack(self) -> None:
        board = Board(3)
        assert board.stack(0) == (3, 2, 1)
        assert board.stack(1) == ()
        assert board.stack(2) == ()

    def test_rejects_non_positive_disks(self) -> None:
        with pytest.raises(ValueError):
            Board(0)

    def test_topmost(self) -> None:
        board = Board(3)
        assert board.topmost(0) == (2, 1)
        assert board.topmost(1) is None

    def test_take_and_place(self) -> None:
        board = Board(3)
        assert board.take(0) == 1
        assert board.place(2, 1) is True
        assert board.stack(2) == (1,)
        assert board.topmost(0) == (1, 2)

    def test_take_from_empty_pole(self) -> None:
        board = Board(3)
        assert board.take(1) is None
        assert board.stack(0) == (3, 2, 1)

    def test_place_on_smaller_disk_is_noop(self) -> None:
        board = Board(3)
        board.take(0)
        board.place(1, 1)
        size = board.take(0)
        assert size == 2
        assert board.place(1, size) is False
        assert board.stack(1) == (1,)

    def test_slots_pad_with_none(self) -> None:
        board = Board(3)
        board.take(0)
        assert board.slots(0) == [3, 2, None]
        assert board.slots(1) == [None, None, None]

    def test_pole_out_of_range(self) -> None:
        board = Board(3)
        with pytest.raises(IndexError):
            board.take(3)
        with pytest.raises(IndexError):
            board.stack(-1)

    def test_is_solved(self) -> None:
        board = Board(2)
        assert board.is_solved() is False
        board.place(1, board.take(0))
        board.place(2, board.take(0))
        assert board.is_solved() is False
        board.take(1)
        board.place(2, 1)
        assert board.stack(2) == (2, 1)
        assert board.is_solved() is True

    def test_reset(self) -> None:
        board = Board(3)
        board.take(0)
        board.place(2, 1)
        board.reset()
        assert list(board) == [(3, 2, 1), (), ()]


class TestCursor:
    """Tests for cursor movement and the packed encoding."""

    def test_move_left_clamped(self) -> None:
        cursor = Cursor()
        cursor.move_left()
        assert cursor.pole == 0

    def test_move_right_clamped(self) -> None:
        cursor = Cursor(pole=2, lifted=3)
        cursor.move_right()
        assert cursor == Cursor(pole=2, lifted=3)

    def test_moves_preserve_lifted_disk(self) -> None:
        cursor = Cursor(lifted=2)
        cursor.move_right()
        cursor.move_right()
        cursor.move_left()
        assert cursor == Cursor(pole=1, lifted=2)

    def test_power_is_smallest_power_of_ten_above_disks(self) -> None:
        assert cursor_power(1) == 10
        assert cursor_power(9) == 10
        assert cursor_power(10) == 100
        assert cursor_power(99) == 100
        assert cursor_power(100) == 1000

    @pytest.mark.parametrize("disks", [1, 3, 9, 10, 12])
    def test_encode_decode_round_trip(self, disks: int) -> None:
        power = cursor_power(disks)
        for pole, lifted in itertools.product(range(3), range(disks + 1)):
            cursor = Cursor(pole=pole, lifted=lifted)
            assert Cursor.decode(cursor.encode(power), power) == cursor

    def test_round_trip_with_minimal_power(self) -> None:
        disks = 7
        power = disks + 1
        for pole, lifted in itertools.product(range(3), range(disks + 1)):
            assert Cursor.decode(Cursor(pole, lifted).encode(power), power) == Cursor(pole, lifted)

    def test_encode_matches_packed_layout(self) -> None:
        assert Cursor(pole=2, lifted=3).encode(10) == 23
        assert Cursor(pole=1, lifted=0).encode(100) == 100

    def test_decode_out_of_range(self) -> None:
        with pytest.raises(ValueError):
            Cursor.decode(30, 10)
        with pytest.raises(ValueError):
            Cursor.decode(-1, 10)

    def test_encode_rejects_lifted_not_below_power(self) -> None:
        with pytest.raises(ValueError):
            Cursor(pole=0, lifted=10).encode(10)


class TestGameState:
    """Tests for raise/lower gating, dispatch and solving."""

    def test_minimum_moves(self) -> None:
        assert minimum_moves(1) == 1
        assert minimum_moves(3) == 7
        assert minimum_moves(10) == 1023

    def test_raise_lifts_top_disk(self, game: GameState) -> None:
        game.dispatch(Action.RAISE)
        assert game.cursor.lifted == 1
        assert game.board.stack(0) == (3, 2)
        assert game.cursor_value == 1

    def test_second_raise_is_noop(self, game: GameState) -> None:
        game.dispatch(Action.RAISE)
        game.dispatch(Action.RAISE)
        assert game.cursor.lifted == 1
        assert game.board.stack(0) == (3, 2)

    def test_raise_from_empty_pole_is_noop(self, game: GameState) -> None:
        game.dispatch(Action.RIGHT)
        game.dispatch(Action.RAISE)
        assert game.cursor == Cursor(pole=1, lifted=0)
        assert game.moves == 0

    def test_lower_without_disk_is_noop(self, game: GameState) -> None:
        game.dispatch(Action.LOWER)
        assert game.moves == 0
        assert list(game.board) == [(3, 2, 1), (), ()]

    def test_lower_counts_one_move(self, game: GameState) -> None:
        move_disk(game, 0, 2)
        assert game.moves == 1
        assert game.cursor.lifted == 0
        assert game.board.stack(2) == (1,)

    def test_lower_onto_smaller_disk_is_noop(self, game: GameState) -> None:
        # Reach pole0=[1], pole1=[3], pole2=[2]
        move_disk(game, 0, 1)
        move_disk(game, 0, 2)
        move_disk(game, 1, 2)
        move_disk(game, 0, 1)
        move_disk(game, 2, 0)
        assert list(game.board) == [(1,), (3,), (2,)]
        assert game.moves == 5

        goto(game, 1)
        game.dispatch(Action.RAISE)
        goto(game, 0)
        game.dispatch(Action.LOWER)

        assert game.cursor == Cursor(pole=0, lifted=3)
        assert game.moves == 5
        assert game.board.stack(0) == (1,)
        assert_board_invariants(game)

    def test_lower_on_same_pole_counts_as_move(self, game: GameState) -> None:
        game.dispatch(Action.RAISE)
        game.dispatch(Action.LOWER)
        assert game.moves == 1
        assert game.board.stack(0) == (3, 2, 1)

    def test_left_at_first_pole_keeps_cursor(self, game: GameState) -> None:
        game.dispatch(Action.LEFT)
        assert game.cursor.pole == 0
        assert game.cursor_value == 0

    def test_right_stops_at_last_pole(self, game: GameState) -> None:
        for _ in range(5):
            game.dispatch(Action.RIGHT)
        assert game.cursor.pole == 2
        assert game.cursor_value == 20

    def test_optimal_solution_is_perfect(self, game: GameState) -> None:
        solve(game)
        assert game.board.stack(2) == (3, 2, 1)
        assert game.solved is True
        assert game.moves == 7
        assert game.perfect is True
        assert game.result_message() == "Perfect! Completed in 7 moves!"

    def test_suboptimal_solution_is_well_done(self, game: GameState) -> None:
        move_disk(game, 0, 1)
        move_disk(game, 1, 0)
        solve(game)
        assert game.solved is True
        assert game.moves == 9
        assert game.result_message() == "Well done! Completed in 9 moves!"

    def test_unsolved_has_no_message(self, game: GameState) -> None:
        assert game.result_message() is None

    def test_reset(self, game: GameState) -> None:
        move_disk(game, 0, 2)
        game.dispatch(Action.RAISE)
        game.dispatch(Action.RESET)
        assert list(game.board) == [(3, 2, 1), (), ()]
        assert game.cursor_value == 0
        assert game.moves == 0

    def test_invariants_hold_under_any_action_sequence(self) -> None:
        game = GameState(disks=4)
        actions = [Action.LEFT, Action.RIGHT, Action.RAISE, Action.LOWER]
        for sequence in itertools.product(actions, repeat=6):
            game.reset()
            for action in sequence:
                game.dispatch(action)
                assert_board_invariants(game)
                assert 0 <= game.cursor.pole <= 2

    @pytest.mark.parametrize("disks", [1, 2, 5])
    def test_optimal_solution_for_other_sizes(self, disks: int) -> None:
        game = solve(GameState(disks=disks))
        assert game.solved is True
        assert game.moves == minimum_moves(disks) == len(optimal_moves(disks))
