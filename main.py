import logging
import os
import sys

from PySide6.QtWidgets import QApplication
from PySide6.QtGui import QPalette, QColor
from tictactoe.config import LOG_LEVEL_ENV
from tictactoe.ui.main_window import TicTacToeWindow

# -----------------------------------------------------------------------------
# COLOR CONSTANTS
# -----------------------------------------------------------------------------

WINDOW_COLOR = QColor("#1A2A33")
PANEL_COLOR = QColor("#1F3641")
TEXT_COLOR = QColor("#A8BFC9")
BUTTON_TEXT_COLOR = QColor("#1A2A33")
HIGHLIGHT_COLOR = QColor("#31C3BD")
DISABLED_TEXT_COLOR = QColor(127, 127, 127)

# -----------------------------------------------------------------------------
# PALETTE SETUP
# -----------------------------------------------------------------------------

def apply_default_palette(app: QApplication):
    """
    dark navy palette matching the board colours
    """
    palette = QPalette()
    palette.setColor(QPalette.Window, WINDOW_COLOR)
    palette.setColor(QPalette.WindowText, TEXT_COLOR)
    palette.setColor(QPalette.Base, PANEL_COLOR)
    palette.setColor(QPalette.AlternateBase, WINDOW_COLOR)
    palette.setColor(QPalette.Text, TEXT_COLOR)
    palette.setColor(QPalette.Button, TEXT_COLOR)
    palette.setColor(QPalette.ButtonText, BUTTON_TEXT_COLOR)
    palette.setColor(QPalette.Highlight, HIGHLIGHT_COLOR)
    palette.setColor(QPalette.HighlightedText, BUTTON_TEXT_COLOR)
    palette.setColor(QPalette.Disabled, QPalette.Text, DISABLED_TEXT_COLOR)
    palette.setColor(QPalette.Disabled, QPalette.ButtonText, DISABLED_TEXT_COLOR)
    app.setPalette(palette)


def setup_logging():
    # level name from the environment, warnings by default
    level = os.environ.get(LOG_LEVEL_ENV, "WARNING").upper()
    logging.basicConfig(
        level=getattr(logging, level, logging.WARNING),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

# -----------------------------------------------------------------------------
# ENTRY POINT
# -----------------------------------------------------------------------------

def main():
    setup_logging()
    app = QApplication(sys.argv)
    app.setStyle('Fusion')
    apply_default_palette(app)

    window = TicTacToeWindow()
    window.resize(460, 620)
    window.show()
    return app.exec()


if __name__ == '__main__':
    sys.exit(main())
