class GameError(Exception):
    """
    base for rule violations raised by the core
    """


class IllegalMove(GameError):
    """
    occupied cell, bad index, or move out of turn / after the round ended
    """
    def __init__(self, index, reason):
        super().__init__(f"illegal move at {index!r}: {reason}")
        self.index = index
        self.reason = reason


class NoEmptyCells(GameError):
    """
    cpu asked to move on a full board
    """
    def __init__(self):
        super().__init__("no empty cells left")
