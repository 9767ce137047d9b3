"""
move mechanics only; knows nothing about rounds or turns
"""
from .errors import IllegalMove


def apply_move(board, index, mark):
    """
    place mark at index
    raises IllegalMove for a bad index or an occupied cell
    """
    # bool is an int subclass, reject it too
    if not isinstance(index, int) or isinstance(index, bool):
        raise IllegalMove(index, "index must be an int")
    if not 0 <= index < len(board):
        raise IllegalMove(index, "out of range")
    if board[index] is not None:
        raise IllegalMove(index, f"cell taken by {board[index].value}")
    board[index] = mark


def next_mark(current):
    """
    X <-> O
    """
    return current.opposite()
