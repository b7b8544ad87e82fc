"""
Tests for GameState: creation, move application and turn handling.
"""

import pytest
from hypothesis import given, strategies as st

from noughts import (
    CellOccupiedError,
    GameState,
    IllegalMoveError,
    MoveErrorKind,
    MoveResult,
    OutOfBoundsError,
    Symbol,
    WrongTurnError,
)


@given(st.integers(min_value=1, max_value=8))
def test_create_gives_empty_board_with_cross_to_move(size: int):
    game = GameState.create(size)
    cells = [cell for row in game.board for cell in row]
    assert len(cells) == size * size
    assert all(cell == Symbol.EMPTY for cell in cells)
    assert game.current_player == Symbol.CROSS
    assert game.empty_count == size * size


@pytest.mark.parametrize("size", [0, -1, -10])
def test_create_rejects_small_sizes(size: int):
    with pytest.raises(ValueError):
        GameState.create(size)


def test_create_rejects_non_integer_size():
    with pytest.raises(ValueError):
        GameState.create(2.5)


def test_snapshot_is_a_copy():
    game = GameState.create(3)
    snap = game.snapshot()
    snap[0][0] = Symbol.NOUGHT
    assert game.board[0][0] == Symbol.EMPTY

    game.apply_move(1, 1, Symbol.CROSS)
    assert snap[1][1] == Symbol.EMPTY


def test_legal_move_marks_cell_and_flips_turn():
    game = GameState.create(3)

    result = game.apply_move(1, 2, Symbol.CROSS)

    assert result == MoveResult(False, Symbol.EMPTY)
    assert game.board[1][2] == Symbol.CROSS
    assert game.current_player == Symbol.NOUGHT

    game.apply_move(0, 0, Symbol.NOUGHT)
    assert game.current_player == Symbol.CROSS


def test_wrong_turn_is_rejected_and_board_unchanged():
    game = GameState.create(3)
    before = game.copy()

    with pytest.raises(WrongTurnError) as excinfo:
        game.apply_move(0, 0, Symbol.NOUGHT)

    assert excinfo.value.kind == MoveErrorKind.WRONG_TURN
    assert game == before


@pytest.mark.parametrize("row, col", [(-1, 0), (0, -1), (3, 0), (0, 3), (5, 5)])
def test_out_of_bounds_is_rejected_and_board_unchanged(row: int, col: int):
    game = GameState.create(3)
    before = game.copy()

    with pytest.raises(OutOfBoundsError) as excinfo:
        game.apply_move(row, col, Symbol.CROSS)

    assert excinfo.value.kind == MoveErrorKind.OUT_OF_BOUNDS
    assert (excinfo.value.row, excinfo.value.col) == (row, col)
    assert game == before


def test_occupied_cell_is_rejected_and_board_unchanged():
    game = GameState.create(3)
    game.apply_move(1, 1, Symbol.CROSS)
    before = game.copy()

    with pytest.raises(CellOccupiedError) as excinfo:
        game.apply_move(1, 1, Symbol.NOUGHT)

    assert excinfo.value.kind == MoveErrorKind.CELL_OCCUPIED
    assert game == before


def test_turn_is_checked_before_bounds_and_occupancy():
    game = GameState.create(3)
    game.apply_move(0, 0, Symbol.CROSS)

    # Wrong player on an occupied cell: the turn error wins
    with pytest.raises(WrongTurnError):
        game.apply_move(0, 0, Symbol.CROSS)

    # Right player, out of bounds
    with pytest.raises(OutOfBoundsError):
        game.apply_move(9, 9, Symbol.NOUGHT)


def test_all_move_errors_share_a_base_class():
    for error in (WrongTurnError, OutOfBoundsError, CellOccupiedError):
        assert issubclass(error, IllegalMoveError)


def test_human_game_scenario_cross_completes_top_row():
    game = GameState.create(3)

    assert game.apply_move(0, 0, Symbol.CROSS) == (False, Symbol.EMPTY)
    assert game.apply_move(1, 1, Symbol.NOUGHT) == (False, Symbol.EMPTY)
    assert game.apply_move(0, 1, Symbol.CROSS) == (False, Symbol.EMPTY)
    assert game.apply_move(2, 2, Symbol.NOUGHT) == (False, Symbol.EMPTY)

    is_done, winner = game.apply_move(0, 2, Symbol.CROSS)

    assert is_done is True
    assert winner == Symbol.CROSS
    assert game.current_player == Symbol.NOUGHT


def test_last_move_of_a_drawn_game_reports_draw():
    game = GameState.from_rows(["XOX", "XOO", "OX "])
    assert game.current_player == Symbol.CROSS

    assert game.apply_move(2, 2, Symbol.CROSS) == (True, Symbol.EMPTY)


def test_moves_after_game_over_are_not_blocked():
    # Stopping after is_done is the caller's job
    game = GameState.from_rows(["XX ", "OO ", "   "])
    assert game.apply_move(0, 2, Symbol.CROSS) == (True, Symbol.CROSS)

    result = game.apply_move(1, 2, Symbol.NOUGHT)

    assert game.board[1][2] == Symbol.NOUGHT
    assert result.is_done is True
    assert game.current_player == Symbol.CROSS


def test_one_by_one_board_ends_after_first_move():
    game = GameState.create(1)
    assert game.apply_move(0, 0, Symbol.CROSS) == (True, Symbol.CROSS)


def test_copy_is_independent():
    game = GameState.create(3)
    clone = game.copy()
    clone.apply_move(0, 0, Symbol.CROSS)

    assert game.board[0][0] == Symbol.EMPTY
    assert game.current_player == Symbol.CROSS
    assert clone.current_player == Symbol.NOUGHT


def test_get_empty_cells_is_row_major():
    game = GameState.from_rows(["X O", " X ", "O  "])
    assert game.get_empty_cells() == [(0, 1), (1, 0), (1, 2), (2, 1), (2, 2)]


def test_from_rows_infers_player_to_move():
    assert GameState.from_rows(["X  ", "   ", "   "]).current_player == Symbol.NOUGHT
    assert GameState.from_rows(["XO ", "   ", "   "]).current_player == Symbol.CROSS
    forced = GameState.from_rows(["   ", "   ", "   "], current_player=Symbol.NOUGHT)
    assert forced.current_player == Symbol.NOUGHT


@pytest.mark.parametrize("rows", [["XX", "O"], ["X?", "  "], []])
def test_from_rows_rejects_bad_grids(rows):
    with pytest.raises(ValueError):
        GameState.from_rows(rows)


def test_from_rows_rejects_empty_as_player_to_move():
    with pytest.raises(ValueError):
        GameState.from_rows(["   ", "   ", "   "], current_player=Symbol.EMPTY)


@pytest.mark.parametrize("board", [
    [[Symbol.EMPTY] * 2 for _ in range(2)],
    [[Symbol.EMPTY] * 3, [Symbol.EMPTY] * 3, [Symbol.EMPTY] * 2],
    [[Symbol.EMPTY] * 3 for _ in range(4)],
])
def test_constructor_rejects_board_of_wrong_shape(board):
    with pytest.raises(ValueError):
        GameState(size=3, board=board)


def test_constructor_rejects_empty_as_player_to_move():
    with pytest.raises(ValueError):
        GameState(size=3, current_player=Symbol.EMPTY)


def test_format_board_shows_symbols_and_highlight():
    game = GameState.from_rows(["XXX", "OO ", "   "])
    text = game.format_board(highlight=[(0, 0), (0, 1), (0, 2)])

    lines = text.splitlines()
    assert len(lines) == 1 + 3 + 2
    assert lines[1].count("*X") == 3
    assert "O" in lines[3]
