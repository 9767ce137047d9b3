"""
game + window settings
"""
from .models import Mark, Mode, PlayerSlot

# -----------------------------------------------------------------------------
# GAME
# -----------------------------------------------------------------------------

BOARD_SIZE = 3                # square N x N grid
FIRST_MARK = Mark.X           # X always opens a round
CPU_MOVE_DELAY_MS = 500       # cosmetic pause before the cpu plays

# seat labels shown in the score bar, per mode
SEAT_LABELS = {
    Mode.CPU: {PlayerSlot.PLAYER1: "YOU", PlayerSlot.PLAYER2: "CPU"},
    Mode.MULTIPLAYER: {PlayerSlot.PLAYER1: "P1", PlayerSlot.PLAYER2: "P2"},
}

# -----------------------------------------------------------------------------
# WINDOW
# -----------------------------------------------------------------------------

WINDOW_TITLE = "Tic-Tac-Toe"
MARK_COLORS = {Mark.X: "#31C3BD", Mark.O: "#F2B137"}
TIES_COLOR = "#A8BFC9"

LOG_LEVEL_ENV = "TICTACTOE_LOG_LEVEL"
