import pytest

from tictactoe.board import empty_board, is_full, check_winner
from tictactoe.game_logic import apply_move
from tictactoe.models import Configuration, Mark, Mode, PlayerSlot, RoundResult
from tictactoe.round_lifecycle import (
    advance_after_move, prepare_next_round, quit_game, reset_round, start_round,
)

P1, P2 = PlayerSlot.PLAYER1, PlayerSlot.PLAYER2


def play(state, moves):
    # alternate marks from the state's current turn
    result = None
    for index in moves:
        assert result is None, "round already over"
        apply_move(state.board, index, state.current_mark)
        result = advance_after_move(state)
    return result


@pytest.fixture
def state():
    return start_round(Configuration(human_mark=Mark.X, mode=Mode.MULTIPLAYER))


def test_start_round_defaults(state):
    assert state.board == empty_board(3)
    assert state.current_mark is Mark.X
    assert state.active and state.result is None
    assert state.seat_marks == {P1: Mark.X, P2: Mark.O}
    assert state.last_winner_seat is P1


def test_start_round_with_player1_on_o():
    state = start_round(Configuration(human_mark=Mark.O, mode=Mode.CPU))
    assert state.seat_marks == {P1: Mark.O, P2: Mark.X}
    # the seat holding X counts as last round's winner
    assert state.last_winner_seat is P2
    assert state.seat_for(Mark.X) is P2


def test_start_round_on_bigger_board():
    state = start_round(Configuration(board_size=4))
    assert len(state.board) == 16


def test_turn_alternates_until_the_end(state):
    assert play(state, [0]) is None
    assert state.current_mark is Mark.O
    assert play(state, [4]) is None
    assert state.current_mark is Mark.X


def test_nine_moves_without_a_line_is_a_tie(state):
    result = play(state, [0, 1, 2, 4, 3, 5, 7, 6, 8])
    assert check_winner(state.board) is None
    assert is_full(state.board)
    assert result == RoundResult()
    assert result.is_tie
    assert not state.active and state.result is result


def test_win_beats_tie_on_full_board(state):
    result = play(state, [0, 1, 2, 3, 4, 5, 7, 6, 8])
    assert is_full(state.board)
    assert result == RoundResult(winner=Mark.X)
    assert not result.is_tie


def test_mark_stays_on_winner_after_round_end(state):
    result = play(state, [0, 3, 1, 4, 2])
    assert result.winner is Mark.X
    # turn does not toggle once the round ended
    assert state.current_mark is Mark.X


def test_winner_holding_x_keeps_marks(state):
    result = play(state, [0, 3, 1, 4, 2])
    prepare_next_round(state, result)
    assert state.seat_marks == {P1: Mark.X, P2: Mark.O}
    assert state.last_winner_seat is P1


def test_second_mover_winning_takes_x(state):
    # P2 plays O and wins the middle row
    result = play(state, [0, 3, 1, 4, 8, 5])
    assert result.winner is Mark.O
    prepare_next_round(state, result)
    assert state.seat_marks == {P1: Mark.O, P2: Mark.X}
    assert state.last_winner_seat is P2
    assert state.config.human_mark is Mark.O


def test_tie_keeps_seats(state):
    result = play(state, [0, 1, 2, 4, 3, 5, 7, 6, 8])
    prepare_next_round(state, result)
    assert state.seat_marks == {P1: Mark.X, P2: Mark.O}
    assert state.last_winner_seat is P1


def test_leader_winning_after_a_tie_keeps_x(state):
    prepare_next_round(state, play(state, [0, 1, 2, 4, 3, 5, 7, 6, 8]))
    reset_round(state)
    result = play(state, [0, 3, 1, 4, 2])
    prepare_next_round(state, result)
    assert state.seat_marks[P1] is Mark.X


def test_reset_round_keeps_seats(state):
    prepare_next_round(state, play(state, [0, 3, 1, 4, 8, 5]))
    round_id = state.round_id
    reset_round(state)
    assert state.board == empty_board(3)
    assert state.active and state.result is None
    assert state.current_mark is Mark.X
    assert state.seat_marks[P2] is Mark.X
    assert state.round_id == round_id + 1


def test_quit_game_clears_leader(state):
    play(state, [0, 3, 1])
    quit_game(state)
    assert state.board == empty_board(3)
    assert state.last_winner_seat is None
    assert state.active
