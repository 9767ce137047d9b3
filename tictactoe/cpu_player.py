import random

from .board import empty_indices
from .errors import NoEmptyCells


class CpuPlayer:
    """
    picks uniformly among empty cells, no lookahead
    """
    name = "CPU"

    def __init__(self, rng=None):
        self.rng = rng or random.Random()   # own source so tests can seed it

    def choose_move(self, board):
        """
        returns one legal index for this board snapshot
        """
        moves = empty_indices(board)
        if not moves:
            raise NoEmptyCells()
        return self.rng.choice(moves)
