import pytest

from conftest import parse
from tictactoe.board import (
    board_size, check_winner, empty_board, empty_indices, is_full,
    winning_combinations, winning_line,
)
from tictactoe.models import Mark


def test_empty_board_has_n_squared_cells():
    assert empty_board(3) == [None] * 9
    assert len(empty_board(5)) == 25


def test_winning_combinations_for_three():
    assert winning_combinations(3) == (
        (0, 1, 2), (3, 4, 5), (6, 7, 8),
        (0, 3, 6), (1, 4, 7), (2, 5, 8),
        (0, 4, 8), (2, 4, 6),
    )


@pytest.mark.parametrize("n", [1, 2, 3, 4, 5, 7])
def test_winning_combinations_shape(n):
    combos = winning_combinations(n)
    assert len(combos) == 2 * n + 2
    for combo in combos:
        assert len(combo) == n
        assert len(set(combo)) == n
        assert all(0 <= i < n * n for i in combo)


def test_winning_combinations_are_cached():
    assert winning_combinations(4) is winning_combinations(4)


def test_anti_diagonal_on_larger_board():
    assert winning_combinations(4)[-1] == (3, 6, 9, 12)


def test_no_winner_on_empty_board():
    assert check_winner(empty_board(3)) is None


def test_no_winner_without_uniform_line():
    board = parse("XO. "
                  "OX. "
                  "..O")
    assert check_winner(board) is None


@pytest.mark.parametrize("rows, mark", [
    ("XXX OO. ...", Mark.X),
    ("O.X OX. O.X", Mark.O),
    ("X.O .XO ..X", Mark.X),
    ("X.O XO. O..", Mark.O),
])
def test_winner_found_on_rows_cols_and_diagonals(rows, mark):
    assert check_winner(parse(rows)) is mark


def test_winner_on_full_board():
    # last move fills the board and completes the diagonal
    board = parse("XOX OXO OXX")
    assert is_full(board)
    assert check_winner(board) is Mark.X


def test_winning_line():
    assert winning_line(parse("O.X OX. O.X")) == (0, 3, 6)
    assert winning_line(parse("XO. ... ...")) is None


def test_is_full_and_empty_indices():
    board = parse("XO. .X. ..O")
    assert not is_full(board)
    assert empty_indices(board) == [2, 3, 5, 6, 7]
    assert empty_indices(parse("XOX OXO OXX")) == []


def test_board_size_rejects_non_square():
    assert board_size(empty_board(4)) == 4
    with pytest.raises(ValueError):
        board_size([None] * 8)
