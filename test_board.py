"""
Tests for the board and its winning lines.

Usage:
    pytest test_board.py
"""

import pytest

from tictac.board import Board, Mark, make_lines
from tictac.move_validator import MoveError


@pytest.mark.parametrize("size", [1, 2, 3, 4, 5])
def test_line_count_and_length(size):
    board = Board(size)
    assert len(board.lines) == 2 * size + 2
    assert all(len(line) == size for line in board.lines)
    assert all(len(set(line)) == size for line in board.lines)


def test_line_order_for_3x3():
    lines = make_lines(3)
    assert lines[0] == ((0, 0), (0, 1), (0, 2))
    assert lines[1] == ((0, 0), (1, 0), (2, 0))
    assert lines[4] == ((2, 0), (2, 1), (2, 2))
    assert lines[6] == ((0, 0), (1, 1), (2, 2))
    assert lines[7] == ((0, 2), (1, 1), (2, 0))


def test_rows_and_columns_are_distinct():
    lines = make_lines(4)
    as_sets = [frozenset(line) for line in lines]
    assert len(set(as_sets)) == len(lines)


def test_diagonals_share_center_only_on_odd_sizes():
    main, anti = make_lines(3)[-2:]
    assert set(main) & set(anti) == {(1, 1)}

    main, anti = make_lines(4)[-2:]
    assert set(main) & set(anti) == set()


def test_size_below_one_is_rejected():
    with pytest.raises(ValueError):
        Board(0)


def test_new_board_is_empty():
    board = Board()
    assert board.size == 3
    assert board.turns == 0
    assert len(board.empty_cells()) == 9
    assert not board.is_full()


def test_place_sets_cell_and_counts_turn():
    board = Board()
    result = board.place(1, 2, Mark.X)
    assert result.is_valid
    assert result.error is None
    assert board.get(1, 2) == Mark.X
    assert board.turns == 1


def test_place_twice_reports_occupied_and_keeps_cell():
    board = Board()
    board.place(0, 0, Mark.X)

    result = board.place(0, 0, Mark.O)
    assert not result.is_valid
    assert result.error == MoveError.CELL_OCCUPIED
    assert board.get(0, 0) == Mark.X
    assert board.turns == 1


@pytest.mark.parametrize("row, col", [(-1, 0), (0, -1), (3, 0), (0, 3), (5, 5)])
def test_place_out_of_bounds(row, col):
    board = Board()
    result = board.place(row, col, Mark.X)
    assert not result
    assert result.error == MoveError.OUT_OF_BOUNDS
    assert board.turns == 0
    assert len(board.empty_cells()) == 9


def test_from_rows():
    board = Board.from_rows([
        ["X", "", ""],
        ["", "O", None],
        ["", "", "X"],
    ])
    assert board.get(0, 0) == Mark.X
    assert board.get(1, 1) == Mark.O
    assert board.get(1, 2) is None
    assert board.turns == 3


def test_from_rows_rejects_bad_input():
    with pytest.raises(ValueError):
        Board.from_rows([["X", ""], ["", "", ""]])
    with pytest.raises(ValueError):
        Board.from_rows([["Z", ""], ["", ""]])


def test_is_line_complete():
    assert not Board().is_line_complete(Mark.X)

    mixed = Board.from_rows([
        ["X", "O", "X"],
        ["O", "X", "O"],
        ["O", "X", "O"],
    ])
    assert not mixed.is_line_complete(Mark.X)
    assert not mixed.is_line_complete(Mark.O)

    row_win = Board.from_rows([
        ["O", "O", "O"],
        ["X", "X", ""],
        ["", "", ""],
    ])
    assert row_win.is_line_complete(Mark.O)
    assert not row_win.is_line_complete(Mark.X)

    anti_win = Board.from_rows([
        ["", "", "X"],
        ["", "X", "O"],
        ["X", "O", ""],
    ])
    assert anti_win.is_line_complete(Mark.X)
    assert anti_win.winning_line(Mark.X) == ((0, 2), (1, 1), (2, 0))


def test_counts_by_missing_empty_board():
    for size in (2, 3, 4):
        counts = Board(size).counts_by_missing(Mark.O)
        assert sorted(counts) == list(range(size + 1))
        assert len(counts[size]) == 2 * size + 2
        assert all(not counts[k] for k in range(size))


def test_counts_by_missing_one_corner():
    board = Board.from_rows([
        ["X", "", ""],
        ["", "", ""],
        ["", "", ""],
    ])
    counts = board.counts_by_missing(Mark.X)
    assert len(counts[2]) == 3
    assert len(counts[3]) == 5
    # row 0, column 0, main diagonal
    assert counts[2] == [[(0, 1), (0, 2)], [(1, 0), (2, 0)], [(1, 1), (2, 2)]]


def test_counts_by_missing_blocked_lines():
    board = Board.from_rows([
        ["X", "", ""],
        ["", "O", ""],
        ["", "", ""],
    ])
    counts = board.counts_by_missing(Mark.X)
    assert len(counts[2]) == 2
    assert len(counts[3]) == 2

    counts = board.counts_by_missing(Mark.O)
    assert len(counts[2]) == 3
    assert [(0, 1), (2, 1)] in counts[2]
    assert [(1, 0), (1, 2)] in counts[2]


def test_counts_by_missing_complete_line_in_bucket_zero():
    board = Board.from_rows([
        ["X", "X", "X"],
        ["O", "O", ""],
        ["", "", ""],
    ])
    counts = board.counts_by_missing(Mark.X)
    assert counts[0] == [[]]

    counts = board.counts_by_missing(Mark.O)
    assert counts[1] == [[(1, 2)]]


def test_empty_cells_row_major():
    board = Board.from_rows([
        ["X", "", "O"],
        ["", "X", ""],
        ["O", "", "X"],
    ])
    assert board.empty_cells() == [(0, 1), (1, 0), (1, 2), (2, 1)]


def test_corners_and_center():
    board = Board(3)
    assert board.corners() == [(0, 0), (0, 2), (2, 2), (2, 0)]
    assert board.center() == (1, 1)
    assert Board(4).center() is None


def test_reset_and_copy():
    board = Board()
    board.place(1, 1, Mark.X)

    clone = board.copy()
    clone.place(0, 0, Mark.O)
    assert board.get(0, 0) is None
    assert clone.turns == 2
    assert clone.lines is board.lines

    lines = board.lines
    board.reset()
    assert board.turns == 0
    assert len(board.empty_cells()) == 9
    assert board.lines is lines
