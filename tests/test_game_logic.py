import random

import pytest

from conftest import parse
from tictactoe.board import empty_board
from tictactoe.cpu_player import CpuPlayer
from tictactoe.errors import GameError, IllegalMove, NoEmptyCells
from tictactoe.game_logic import apply_move, next_mark
from tictactoe.models import Mark


def test_apply_move_sets_cell():
    board = empty_board(3)
    apply_move(board, 4, Mark.X)
    assert board[4] is Mark.X
    assert board.count(None) == 8


def test_apply_move_on_occupied_cell_leaves_board_alone():
    board = parse("X.. ... ...")
    before = list(board)
    with pytest.raises(IllegalMove) as exc:
        apply_move(board, 0, Mark.O)
    assert exc.value.index == 0
    assert board == before


@pytest.mark.parametrize("index", [-1, 9, 100, "4", None, True])
def test_apply_move_rejects_bad_index(index):
    board = empty_board(3)
    with pytest.raises(IllegalMove):
        apply_move(board, index, Mark.X)
    assert board == empty_board(3)


def test_illegal_move_is_a_game_error():
    assert issubclass(IllegalMove, GameError)
    assert issubclass(NoEmptyCells, GameError)


def test_next_mark_toggles():
    assert next_mark(Mark.X) is Mark.O
    assert next_mark(Mark.O) is Mark.X


def test_cpu_takes_the_only_empty_cell():
    board = parse("XOX OXO O.X")
    cpu = CpuPlayer()
    for _ in range(20):
        assert cpu.choose_move(board) == 7


def test_cpu_only_picks_empty_cells():
    board = parse("XO. .X. ..O")
    cpu = CpuPlayer(random.Random(7))
    picks = {cpu.choose_move(board) for _ in range(200)}
    assert picks == {2, 3, 5, 6, 7}


def test_cpu_does_not_mutate_board():
    board = parse("XO. .X. ..O")
    before = list(board)
    CpuPlayer().choose_move(board)
    assert board == before


def test_cpu_on_full_board_raises():
    with pytest.raises(NoEmptyCells):
        CpuPlayer().choose_move(parse("XOX OXO OXX"))
