import logging

from PySide6.QtCore import QObject, QTimer, Signal, Slot

from .board import is_full
from .config import BOARD_SIZE, CPU_MOVE_DELAY_MS, SEAT_LABELS
from .cpu_player import CpuPlayer
from .errors import IllegalMove, NoEmptyCells
from .game_logic import apply_move
from .models import Configuration, Mark, Mode, PlayerSlot
from .round_lifecycle import (
    advance_after_move, prepare_next_round, quit_game, reset_round, start_round,
)
from .score import ScoreTracker

logger = logging.getLogger(__name__)

CPU_SEAT = PlayerSlot.PLAYER2
HUMAN_SEAT = PlayerSlot.PLAYER1


class GameSession(QObject):
    """
    owns the game state, takes renderer intents, pushes outcomes as signals
    """
    cell_filled = Signal(int, object)      # index, Mark
    turn_changed = Signal(object)          # Mark to play
    round_ended = Signal(object)           # RoundResult
    score_changed = Signal(object)         # Score
    mode_configured = Signal(object)       # {PlayerSlot: (label, Mark)}
    reset_requested = Signal()
    menu_requested = Signal()
    move_rejected = Signal(int, str)       # index, reason

    def __init__(self, cpu_player=None, cpu_delay_ms=CPU_MOVE_DELAY_MS,
                 board_size=BOARD_SIZE, parent=None):
        """
        init pending config, score and the cpu timer
        """
        super().__init__(parent)
        self.cpu_player = cpu_player or CpuPlayer()
        self.config = Configuration(board_size=board_size)
        self.scores = ScoreTracker()
        self.state = None                  # built by start()
        self._started = False
        # single-shot timer for the delayed cpu move
        self._cpu_timer = QTimer(self)
        self._cpu_timer.setSingleShot(True)
        self._cpu_timer.setInterval(cpu_delay_ms)
        self._cpu_timer.timeout.connect(self._on_cpu_timer)
        self._pending_round_id = None

    # ------------------------------------------------------------------
    # queries
    # ------------------------------------------------------------------

    @property
    def started(self):
        return self._started

    @property
    def mode(self):
        return self.config.mode

    @property
    def score(self):
        return self.scores.snapshot()

    def seat_for_mark(self, mark):
        if self.state is None:
            return None
        return self.state.seat_for(mark)

    def is_cpu_turn(self):
        return (self._started and self.mode is Mode.CPU
                and self.state.active
                and self.seat_for_mark(self.state.current_mark) is CPU_SEAT)

    def player_labels(self):
        """
        {seat: (label, mark)} for the score bar
        """
        # seats come from the pending config until start()
        marks = (self.state.seat_marks if self._started else
                 {HUMAN_SEAT: self.config.human_mark,
                  CPU_SEAT: self.config.human_mark.opposite()})
        labels = SEAT_LABELS[self.mode]
        return {seat: (labels[seat], marks[seat]) for seat in PlayerSlot}

    # ------------------------------------------------------------------
    # renderer -> core
    # ------------------------------------------------------------------

    def configure(self, mark, mode):
        """
        set mark + mode before start; ignored once a game is running
        """
        if self.started:
            logger.warning("configure(%s, %s) ignored, game already started",
                           mark, mode)
            return False
        try:
            mark, mode = Mark(mark), Mode(mode)
        except ValueError as e:
            logger.warning("configure(%r, %r) rejected: %s", mark, mode, e)
            return False
        self.config.human_mark = mark; self.config.mode = mode
        return True

    @Slot()
    def start(self):
        """
        build the first round and let the cpu open if it holds X
        """
        if self.started:
            logger.warning("start() ignored, game already started")
            return
        self.state = start_round(self.config)
        self._started = True
        logger.info("game started: %s mode, player1 is %s",
                    self.mode.value, self.config.human_mark.value)
        self._announce_round()
        self.score_changed.emit(self.scores.snapshot())
        self._arm_cpu_if_due()

    @Slot(int)
    def submit_move(self, index, seat=None):
        """
        play the current mark at index
        returns False (and emits move_rejected) without touching the board
        when the move is not allowed
        """
        try:
            self._check_turn(index, seat)
            apply_move(self.state.board, index, self.state.current_mark)
        except IllegalMove as e:
            logger.debug("rejected: %s", e)
            self.move_rejected.emit(index if isinstance(index, int) else -1, e.reason)
            return False

        mark = self.state.current_mark
        self.cell_filled.emit(index, mark)
        result = advance_after_move(self.state)
        if result is None:
            self.turn_changed.emit(self.state.current_mark)
            self._arm_cpu_if_due()
            return True

        if result.is_tie:
            self.scores.record_tie()
        else:
            self.scores.record_win(self.state.seat_for(result.winner))
        logger.info("round %d over: %s", self.state.round_id,
                    "tie" if result.is_tie else f"{result.winner.value} wins")
        self.score_changed.emit(self.scores.snapshot())
        self.round_ended.emit(result)
        return True

    def _check_turn(self, index, seat):
        if not self._started or not self.state.active:
            raise IllegalMove(index, "round is not active")
        if self.mode is Mode.CPU:
            acting = HUMAN_SEAT if seat is None else seat
            if self.state.seat_for(self.state.current_mark) is not acting:
                raise IllegalMove(index, f"not {acting.name}'s turn")

    def request_cpu_move(self):
        """
        let the cpu seat play now
        """
        if (not self._started or not self.state.active
                or self.mode is not Mode.CPU):
            return False
        try:
            index = self.cpu_player.choose_move(list(self.state.board))
        except NoEmptyCells:
            logger.debug("cpu asked to move on a full board")
            return False
        return self.submit_move(index, CPU_SEAT)

    @Slot()
    def request_reset(self):
        # renderer shows the confirm dialog
        if self.started:
            self.reset_requested.emit()

    @Slot()
    def confirm_reset(self):
        """
        fresh board, same seats and scores
        """
        if not self.started:
            return
        self._cancel_cpu_move()
        reset_round(self.state)
        logger.info("round restarted")
        self._announce_round()
        self._arm_cpu_if_due()

    @Slot()
    def confirm_next_round(self):
        """
        winner leads the next round; only valid once a round ended
        """
        if not self._started or self.state.result is None:
            logger.debug("next round requested while a round is in progress")
            return False
        self._cancel_cpu_move()
        prepare_next_round(self.state, self.state.result)
        reset_round(self.state)
        self._announce_round()
        self._arm_cpu_if_due()
        return True

    @Slot()
    def quit(self):
        """
        drop scores + seats, back to the menu
        """
        self._cancel_cpu_move()
        if self.state is not None:
            quit_game(self.state)
        self._started = False
        self.scores.reset()
        logger.info("game quit")
        self.score_changed.emit(self.scores.snapshot())
        self.menu_requested.emit()

    # ------------------------------------------------------------------
    # cpu scheduling
    # ------------------------------------------------------------------

    def _announce_round(self):
        self.mode_configured.emit(self.player_labels())
        self.turn_changed.emit(self.state.current_mark)

    def _arm_cpu_if_due(self):
        if not self.is_cpu_turn() or is_full(self.state.board):
            return
        self._pending_round_id = self.state.round_id
        self._cpu_timer.start()

    def _cancel_cpu_move(self):
        self._cpu_timer.stop()
        self._pending_round_id = None

    @Slot()
    def _on_cpu_timer(self):
        # board may have been reset or quit since the timer was armed
        pending, self._pending_round_id = self._pending_round_id, None
        if (not self._started or not self.state.active
                or pending != self.state.round_id):
            logger.debug("stale cpu move discarded (round %s)", pending)
            return
        self.request_cpu_move()


