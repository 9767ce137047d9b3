"""
flat board helpers: cell i sits at row i // n, col i % n
"""
from functools import lru_cache
from math import isqrt


def empty_board(n):
    """
    n*n empty cells
    """
    return [None] * (n * n)


def board_size(board):
    """
    side length of a square board
    """
    n = isqrt(len(board))
    if n * n != len(board) or n == 0:
        raise ValueError(f"board of {len(board)} cells is not square")
    return n


@lru_cache(maxsize=None)
def winning_combinations(n):
    """
    rows, cols, then both diagonals as tuples of flat indices
    """
    rows = [tuple(r * n + i for i in range(n)) for r in range(n)]
    cols = [tuple(i * n + c for i in range(n)) for c in range(n)]
    diag = tuple(d * (n + 1) for d in range(n))          # top-left -> bottom-right
    anti = tuple((d + 1) * (n - 1) for d in range(n))    # top-right -> bottom-left
    return tuple(rows + cols + [diag, anti])


def winning_line(board):
    """
    first combination holding one mark, or None
    """
    for combo in winning_combinations(board_size(board)):
        first = board[combo[0]]
        if first is not None and all(board[i] is first for i in combo):
            return combo
    return None


def check_winner(board):
    """
    mark owning a full line, or None
    """
    line = winning_line(board)
    return board[line[0]] if line else None


def is_full(board):
    return all(cell is not None for cell in board)


def empty_indices(board):
    # ascending, used by the cpu
    return [i for i, cell in enumerate(board) if cell is None]
