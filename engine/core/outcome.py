# engine/core/outcome.py
from dataclasses import dataclass
from enum import StrEnum
from typing import Optional

from .board import Board
from .constants import EMPTY
from .errors import OutcomeConflict
from .windows import WINDOWS


class OutcomeStatus(StrEnum):
    ONGOING = "ONGOING"
    WIN = "WIN"
    DRAW = "DRAW"


@dataclass(frozen=True)
class Outcome:
    status: OutcomeStatus
    winner: Optional[int] = None

    @classmethod
    def ongoing(cls) -> "Outcome":
        return cls(OutcomeStatus.ONGOING)

    @classmethod
    def draw(cls) -> "Outcome":
        return cls(OutcomeStatus.DRAW)

    @classmethod
    def win(cls, player: int) -> "Outcome":
        return cls(OutcomeStatus.WIN, player)

    @property
    def is_terminal(self) -> bool:
        return self.status != OutcomeStatus.ONGOING


def find_winners(board: Board) -> set:
    """Every player owning at least one complete window."""
    cells = board.cells
    winners = set()
    for a, b, c, d in WINDOWS:
        s = cells[a]
        if s and s == cells[b] == cells[c] == cells[d]:
            winners.add(s)
    return winners


def detect_outcome(board: Board) -> Outcome:
    """
    Classifies the board as a win for one player, a draw, or still ongoing.
    Raises OutcomeConflict if both players have four in a row.
    """
    winners = find_winners(board)
    if len(winners) > 1:
        raise OutcomeConflict(f"Both players have four in a row:\n{board.to_matrix()}")
    if winners:
        return Outcome.win(winners.pop())
    if EMPTY not in board.cells:
        return Outcome.draw()
    return Outcome.ongoing()
