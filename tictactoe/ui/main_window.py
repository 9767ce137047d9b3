import logging

from ..config import MARK_COLORS, TIES_COLOR, WINDOW_TITLE
from ..models import Mark, Mode, PlayerSlot
from ..session import GameSession, HUMAN_SEAT
from ..ui.board_widget import BoardWidget

from PySide6.QtWidgets import (
    QMainWindow, QWidget, QVBoxLayout, QHBoxLayout, QStackedWidget,
    QPushButton, QLabel, QMenuBar, QMenu, QRadioButton, QGroupBox,
    QMessageBox, QSizePolicy
)
from PySide6.QtGui import QAction, QFont
from PySide6.QtCore import Qt, QTimer, Slot

logger = logging.getLogger(__name__)


class TicTacToeWindow(QMainWindow):
    """
    main window: renders session signals, forwards clicks to the session
    """
    def __init__(self, session=None):
        """
        init session, ui widgets, signals
        """
        super().__init__()
        self.session = session or GameSession(parent=self)
        self.board_widget = BoardWidget(self.session, parent=self)
        self._setup_ui()
        self._connect_session()
        self._show_menu()

    def _setup_ui(self):
        '''window look + layout'''
        self.setWindowTitle(WINDOW_TITLE)
        self.setStyleSheet("""
            QMainWindow { background-color: #1A2A33; }
            QLabel { color: #A8BFC9; }
            QPushButton { background-color: #A8BFC9; color: #1A2A33;
                          border-radius: 8px; padding: 8px 14px; font-weight: bold; }
            QPushButton:hover { background-color: #DBE8ED; }
            QGroupBox { color: #A8BFC9; border: 1px solid #1F3641; border-radius: 8px;
                        margin-top: 12px; padding: 10px; }
            QRadioButton { color: #A8BFC9; font-weight: bold; }
        """)
        self.stack = QStackedWidget()
        self.setCentralWidget(self.stack)
        self._create_menu_bar()            # top menu
        self._create_menu_page()           # mark pick + mode buttons
        self._create_game_page()           # turn, board, score bar
        self.stack.addWidget(self.menu_page)
        self.stack.addWidget(self.game_page)

    def _create_menu_bar(self):
        '''game menu actions'''
        menu_bar = QMenuBar()
        game_menu = QMenu("Game", self)
        restart_action = QAction("Restart Round", self)
        restart_action.triggered.connect(self.session.request_reset)
        menu_action = QAction("Quit to Menu", self)
        menu_action.triggered.connect(self.session.quit)
        quit_action = QAction("Exit", self)
        quit_action.triggered.connect(self.close)
        for act in (restart_action, menu_action): game_menu.addAction(act)
        game_menu.addSeparator(); game_menu.addAction(quit_action)
        menu_bar.addMenu(game_menu)
        self.setMenuBar(menu_bar)

    def _create_menu_page(self):
        '''pick player 1's mark, then a mode'''
        self.menu_page = QWidget()
        layout = QVBoxLayout(self.menu_page)
        layout.addStretch(1)
        group = QGroupBox("PICK PLAYER 1'S MARK")
        marks = QHBoxLayout()
        self.x_radio = QRadioButton("X"); self.o_radio = QRadioButton("O")
        self.x_radio.setChecked(True)
        marks.addWidget(self.x_radio); marks.addWidget(self.o_radio)
        group.setLayout(marks)
        hint = QLabel("REMEMBER : X GOES FIRST"); hint.setAlignment(Qt.AlignCenter)
        self.vs_cpu_button = QPushButton("NEW GAME (VS CPU)")
        self.vs_cpu_button.setStyleSheet(f"background-color: {MARK_COLORS[Mark.O]};")
        self.vs_cpu_button.clicked.connect(lambda: self._start_game(Mode.CPU))
        self.vs_player_button = QPushButton("NEW GAME (VS PLAYER)")
        self.vs_player_button.setStyleSheet(f"background-color: {MARK_COLORS[Mark.X]};")
        self.vs_player_button.clicked.connect(lambda: self._start_game(Mode.MULTIPLAYER))
        for w in (group, hint, self.vs_cpu_button, self.vs_player_button):
            layout.addWidget(w)
        layout.addStretch(1)

    def _create_game_page(self):
        '''turn indicator + board + score bar'''
        self.game_page = QWidget()
        layout = QVBoxLayout(self.game_page)
        top = QHBoxLayout()
        self.turn_label = QLabel("")
        f = QFont(); f.setPointSize(12); f.setBold(True); self.turn_label.setFont(f)
        self.reset_button = QPushButton("↻")
        self.reset_button.setToolTip("Restart round")
        self.reset_button.clicked.connect(self.session.request_reset)
        top.addWidget(self.turn_label); top.addStretch(1); top.addWidget(self.reset_button)
        layout.addLayout(top)
        layout.addWidget(self.board_widget, 1)
        self.board_widget.cell_clicked.connect(self._on_cell_clicked)
        # score bar: player1 | ties | player2
        bar = QHBoxLayout()
        self.score_cards = {}
        for key in (PlayerSlot.PLAYER1, "ties", PlayerSlot.PLAYER2):
            card = QLabel("")
            card.setAlignment(Qt.AlignCenter)
            card.setSizePolicy(QSizePolicy.Expanding, QSizePolicy.Preferred)
            card.setMinimumHeight(56)
            self.score_cards[key] = card
            bar.addWidget(card)
        self._labels = {}
        self._score = None
        layout.addLayout(bar)

    def _connect_session(self):
        s = self.session
        s.cell_filled.connect(self._on_cell_filled)
        s.turn_changed.connect(self._on_turn_changed)
        s.round_ended.connect(self._on_round_ended)
        s.score_changed.connect(self._on_score_changed)
        s.mode_configured.connect(self._on_mode_configured)
        s.reset_requested.connect(self._confirm_reset)
        s.menu_requested.connect(self._show_menu)
        s.move_rejected.connect(self._on_move_rejected)

    # ------------------------------------------------------------------
    # user intents
    # ------------------------------------------------------------------

    def _start_game(self, mode):
        mark = Mark.X if self.x_radio.isChecked() else Mark.O
        self.session.configure(mark, mode)
        self.stack.setCurrentWidget(self.game_page)
        self.session.start()

    @Slot(int)
    def _on_cell_clicked(self, index):
        # human clicks always come from player 1's seat in cpu mode
        self.session.submit_move(index, HUMAN_SEAT if self.session.mode is Mode.CPU else None)

    @Slot()
    def _confirm_reset(self):
        box = QMessageBox(self)
        box.setWindowTitle("Restart"); box.setText("RESTART GAME?")
        cancel = box.addButton("No, Cancel", QMessageBox.RejectRole)
        restart = box.addButton("Yes, Restart", QMessageBox.AcceptRole)
        box.setDefaultButton(cancel)
        box.exec()
        if box.clickedButton() is restart:
            self.session.confirm_reset()

    # ------------------------------------------------------------------
    # session -> window
    # ------------------------------------------------------------------

    @Slot()
    def _show_menu(self):
        self.stack.setCurrentWidget(self.menu_page)

    @Slot(object)
    def _on_mode_configured(self, labels):
        # labels: {seat: (name, mark)}, marks may have swapped
        self._labels = labels
        self._refresh_score_bar()
        self.board_widget.update()

    @Slot(int, object)
    def _on_cell_filled(self, index, mark):
        self.board_widget.update()

    @Slot(object)
    def _on_turn_changed(self, mark):
        self.turn_label.setText(f"{mark.value} TURN")
        self.turn_label.setStyleSheet(f"color: {MARK_COLORS[mark]};")
        # no clicks while the cpu is thinking
        self.board_widget.set_accept_clicks(not self.session.is_cpu_turn())

    @Slot(object)
    def _on_score_changed(self, score):
        self._score = score
        self._refresh_score_bar()

    @Slot(int, str)
    def _on_move_rejected(self, index, reason):
        logger.debug("cell %d rejected: %s", index, reason)

    @Slot(object)
    def _on_round_ended(self, result):
        self.board_widget.set_accept_clicks(False)
        # let the session finish the move before the dialog blocks
        QTimer.singleShot(0, lambda: self._show_round_dialog(result))

    def _show_round_dialog(self, result):
        # end round UI: title, winner mark, quit / next round
        box = QMessageBox(self)
        box.setWindowTitle("Round over")
        if result.is_tie:
            box.setText("ROUND TIED")
        else:
            box.setText(self._win_title(result.winner))
            box.setInformativeText(f"{result.winner.value} TAKES THE ROUND")
        quit_btn = box.addButton("Quit", QMessageBox.RejectRole)
        next_btn = box.addButton("Next Round", QMessageBox.AcceptRole)
        box.setDefaultButton(next_btn)
        box.exec()
        if box.clickedButton() is quit_btn:
            self.session.quit()
        else:
            self.session.confirm_next_round()

    def _win_title(self, mark):
        won = self.session.seat_for_mark(mark) is PlayerSlot.PLAYER1
        if self.session.mode is Mode.CPU:
            return "YOU WON!" if won else "OH, NO YOU LOST..."
        return "PLAYER 1 WINS!" if won else "PLAYER 2 WINS!"

    def _refresh_score_bar(self):
        score = self._score
        if score is None or not self._labels: return
        counts = {PlayerSlot.PLAYER1: score.player1, PlayerSlot.PLAYER2: score.player2}
        for seat in PlayerSlot:
            name, mark = self._labels[seat]
            card = self.score_cards[seat]
            card.setText(f"{mark.value} ({name})\n{counts[seat]}")
            card.setStyleSheet(f"background-color: {MARK_COLORS[mark]}; color: #1A2A33;"
                               " border-radius: 8px; font-weight: bold;")
        ties = self.score_cards["ties"]
        ties.setText(f"TIES\n{score.ties}")
        ties.setStyleSheet(f"background-color: {TIES_COLOR}; color: #1A2A33;"
                           " border-radius: 8px; font-weight: bold;")

    def closeEvent(self, event):
        # drop any pending cpu move on close
        self.session.quit()
        event.accept()
