from .models import PlayerSlot, Score


class ScoreTracker:
    """
    win/tie counters per seat, kept across rounds
    """
    def __init__(self):
        self.reset()

    def record_win(self, seat):
        self._wins[seat] += 1

    def record_tie(self):
        self._ties += 1

    def snapshot(self):
        # read-only copy for the renderer
        return Score(player1=self._wins[PlayerSlot.PLAYER1],
                     player2=self._wins[PlayerSlot.PLAYER2],
                     ties=self._ties)

    def reset(self):
        self._wins = {PlayerSlot.PLAYER1: 0, PlayerSlot.PLAYER2: 0}
        self._ties = 0
