"""
value types shared by the rule engine, the session and the renderer
"""
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Optional


class Mark(str, Enum):
    """symbol a seat plays with; X always moves first"""
    X = "X"
    O = "O"

    def opposite(self) -> "Mark":
        return Mark.O if self is Mark.X else Mark.X


class PlayerSlot(Enum):
    """fixed seat, keeps its score while marks swap between rounds"""
    PLAYER1 = 1
    PLAYER2 = 2

    def opposite(self) -> "PlayerSlot":
        return PlayerSlot.PLAYER2 if self is PlayerSlot.PLAYER1 else PlayerSlot.PLAYER1


class Mode(str, Enum):
    CPU = "cpu"
    MULTIPLAYER = "multiplayer"


Cell = Optional[Mark]


@dataclass
class Configuration:
    """
    human_mark is the mark PLAYER1 holds (the human in cpu mode)
    """
    human_mark: Mark = Mark.X
    mode: Mode = Mode.CPU
    board_size: int = 3


@dataclass(frozen=True)
class RoundResult:
    """terminal value of a round; winner None means tie"""
    winner: Optional[Mark] = None

    @property
    def is_tie(self) -> bool:
        return self.winner is None


@dataclass(frozen=True)
class Score:
    player1: int = 0
    player2: int = 0
    ties: int = 0


@dataclass
class GameState:
    """
    complete round state, owned by the session
    """
    config: Configuration
    board: List[Cell] = field(default_factory=list)
    current_mark: Mark = Mark.X
    active: bool = True
    result: Optional[RoundResult] = None
    seat_marks: Dict[PlayerSlot, Mark] = field(default_factory=dict)
    last_winner_seat: Optional[PlayerSlot] = None
    round_id: int = 1              # bumped on every board clear

    def seat_for(self, mark):
        # seat currently holding this mark
        for seat, held in self.seat_marks.items():
            if held is mark:
                return seat
        return None
