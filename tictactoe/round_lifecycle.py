"""
Round state machine.

A round is in progress while ``state.active`` is set and ended once
``state.result`` holds a RoundResult. The functions here mutate the
GameState they are given and return it (or the result) so the session can
chain them.
"""
import logging

from .board import check_winner, empty_board, is_full
from .config import FIRST_MARK
from .game_logic import next_mark
from .models import GameState, PlayerSlot, RoundResult

logger = logging.getLogger(__name__)


def seat_marks_for(human_mark):
    """
    PLAYER1 holds the configured mark, PLAYER2 the other one
    """
    return {PlayerSlot.PLAYER1: human_mark,
            PlayerSlot.PLAYER2: human_mark.opposite()}


def start_round(config):
    """
    Build the state for the first round of a session.

    ``last_winner_seat`` starts as the seat holding the first mark, as if
    that seat had won a previous round, so the first-mover rule is defined
    from round one.
    """
    state = GameState(config=config,
                      board=empty_board(config.board_size),
                      current_mark=FIRST_MARK,
                      seat_marks=seat_marks_for(config.human_mark))
    state.last_winner_seat = state.seat_for(FIRST_MARK)
    return state


def advance_after_move(state):
    """
    Settle the round after a move was applied.

    Returns the RoundResult when the round ended, else None after handing
    the turn to the other mark. A win is checked before a tie, so a board
    filled by a winning move is never reported as a tie.
    """
    winner = check_winner(state.board)
    if winner is not None:
        return _end(state, RoundResult(winner=winner))
    if is_full(state.board):
        return _end(state, RoundResult())
    state.current_mark = next_mark(state.current_mark)
    return None


def _end(state, result):
    state.active = False; state.result = result
    return result


def prepare_next_round(state, result):
    """
    Apply the winner-leads rule before the next round.

    The winning seat always holds the first mark next round: if it is not
    the seat that led this round, the two seats swap marks. A tie swaps
    nothing and keeps the previous leader.
    """
    if result is None or result.is_tie:
        return state
    winner_seat = state.seat_for(result.winner)
    if winner_seat != state.last_winner_seat:
        state.seat_marks = {seat: mark.opposite()
                            for seat, mark in state.seat_marks.items()}
        logger.info("marks swapped, %s now plays %s",
                    winner_seat.name, state.seat_marks[winner_seat].value)
    state.last_winner_seat = winner_seat
    state.config.human_mark = state.seat_marks[PlayerSlot.PLAYER1]
    return state


def reset_round(state):
    """
    clear board + result, keep seats and scores
    """
    state.board = empty_board(state.config.board_size)
    state.result = None
    state.active = True
    state.current_mark = FIRST_MARK
    state.round_id += 1
    return state


def quit_game(state):
    reset_round(state)
    state.last_winner_seat = None
    return state
