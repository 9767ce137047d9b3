import pytest
from PySide6.QtCore import QCoreApplication

from tictactoe.board import empty_indices
from tictactoe.models import Mark
from tictactoe.session import GameSession


class ScriptedCpu:
    """
    plays the first still-empty index of its script
    """
    name = "Scripted CPU"

    def __init__(self, script):
        self.script = list(script)

    def choose_move(self, board):
        free = set(empty_indices(board))
        for index in self.script:
            if index in free:
                return index
        return min(free)


class Recorder:
    """
    collects every session signal as (name, args)
    """
    NAMES = ("cell_filled", "turn_changed", "round_ended", "score_changed",
             "mode_configured", "reset_requested", "menu_requested", "move_rejected")

    def __init__(self, session):
        self.events = []
        for name in self.NAMES:
            getattr(session, name).connect(self._recorder(name))

    def _recorder(self, name):
        def record(*args):
            self.events.append((name, args))
        return record

    def names(self):
        return [name for name, _ in self.events]

    def last(self, name):
        for event, args in reversed(self.events):
            if event == name:
                return args
        return None

    def clear(self):
        self.events.clear()


def parse(rows):
    # "XO. ..." -> flat board, '.' is empty
    cells = "".join(rows.split())
    return [None if c == "." else Mark(c) for c in cells]


def fire_cpu(session):
    # stand-in for the timer timeout, no event loop in tests
    session._cpu_timer.stop()
    session._on_cpu_timer()


@pytest.fixture(scope="session")
def qapp():
    app = QCoreApplication.instance() or QCoreApplication([])
    yield app


@pytest.fixture
def make_session(qapp):
    def _make(script=(), **kwargs):
        return GameSession(cpu_player=ScriptedCpu(script), **kwargs)
    return _make
