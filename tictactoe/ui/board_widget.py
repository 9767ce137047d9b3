from PySide6.QtWidgets import QWidget, QSizePolicy
from PySide6.QtCore import Qt, QSize, Signal, QPointF, QRectF
from PySide6.QtGui import QPainter, QColor, QPen

from ..board import board_size, winning_line
from ..config import MARK_COLORS
from ..models import Mark


class BoardWidget(QWidget):
    """
    paints the session board and turns clicks into flat cell indices
    """
    cell_clicked = Signal(int)  # emits flat index on click

    def __init__(self, session, parent=None):
        super().__init__(parent)
        self.session = session  # read-only view of the game state
        self.setSizePolicy(QSizePolicy.Ignored, QSizePolicy.Ignored)
        self.setMinimumSize(QSize(150, 150))
        self.setMouseTracking(True)     # hover outline
        self._accept_clicks = True
        self._hover = None

    def set_accept_clicks(self, accept):
        # enable/disable user input
        self._accept_clicks = accept
        self.update()

    def heightForWidth(self, width):
        # keep square shape
        return width

    def hasHeightForWidth(self):
        return True

    def _board(self):
        state = self.session.state
        return state.board if state is not None else []

    def _geometry(self):
        # square area centred in the widget + cell size
        w, h = self.width(), self.height()
        side = min(w, h)
        n = board_size(self._board()) if self._board() else 1
        return (w - side) / 2, (h - side) / 2, side, side / n, n

    def _cell_at(self, pos):
        ox, oy, side, cell, n = self._geometry()
        x, y = pos.x() - ox, pos.y() - oy
        if not (0 <= x < side and 0 <= y < side) or cell <= 0:
            return None
        col = min(int(x // cell), n - 1); row = min(int(y // cell), n - 1)
        return row * n + col

    def _draw_mark(self, painter, mark, cx, cy, rad, pen):
        painter.setPen(pen)
        painter.setBrush(Qt.NoBrush)
        if mark is Mark.X:
            painter.drawLine(QPointF(cx - rad, cy - rad), QPointF(cx + rad, cy + rad))
            painter.drawLine(QPointF(cx + rad, cy - rad), QPointF(cx - rad, cy + rad))
        else:
            painter.drawEllipse(QPointF(cx, cy), rad, rad)

    def paintEvent(self, event):
        """
        draw cells, marks, hover outline and the winning line
        """
        board = self._board()
        painter = QPainter(self)
        try:
            painter.setRenderHint(QPainter.Antialiasing, True)
            painter.fillRect(self.rect(), QColor("#1A2A33"))
            if not board:
                return
            ox, oy, side, cell, n = self._geometry()
            line = set(winning_line(board) or ())
            gap = cell * 0.06
            for i, mark in enumerate(board):
                r, c = divmod(i, n)
                rect = QRectF(ox + c * cell + gap, oy + r * cell + gap,
                              cell - 2 * gap, cell - 2 * gap)
                # winning cells get filled with the winner's colour
                fill = QColor(MARK_COLORS[mark]) if i in line else QColor("#1F3641")
                painter.setPen(Qt.NoPen); painter.setBrush(fill)
                painter.drawRoundedRect(rect, 10, 10)
                cx, cy = rect.center().x(), rect.center().y()
                rad = cell / 2 * 0.45
                if mark is not None:
                    color = QColor("#1F3641") if i in line else QColor(MARK_COLORS[mark])
                    self._draw_mark(painter, mark, cx, cy, rad, QPen(color, 6))
                elif i == self._hover and self._accept_clicks and self.session.state.active:
                    color = QColor(MARK_COLORS[self.session.state.current_mark])
                    color.setAlpha(90)   # outline only
                    self._draw_mark(painter, self.session.state.current_mark,
                                    cx, cy, rad, QPen(color, 3))
        finally:
            painter.end()

    def mouseMoveEvent(self, event):
        idx = self._cell_at(event.position()) if self._board() else None
        if idx != self._hover:
            self._hover = idx
            self.update()

    def leaveEvent(self, event):
        self._hover = None
        self.update()

    def mouseReleaseEvent(self, event):
        """
        handle clicks: map coords to a cell index and emit
        """
        if not self._accept_clicks or not self._board():
            return
        idx = self._cell_at(event.position())
        if idx is not None:
            self.cell_clicked.emit(idx)  # notify main window
