# engine/core/heuristic.py
from typing import Sequence

from .board import Board
from .constants import (
    EMPTY, COLS, CENTER_COL,
    FOUR_SCORE, THREE_SCORE, TWO_SCORE,
    OPP_FOUR_SCORE, OPP_THREE_SCORE, OPP_TWO_SCORE,
    CENTER_SCORE, opponent,
)
from .windows import WINDOWS


def evaluate_window(window: Sequence[int], player: int) -> int:
    """Scores one 4-cell window. Positive is good for `player`."""
    count_for = window.count(player)
    count_opp = window.count(opponent(player))
    count_empty = window.count(EMPTY)

    score = 0
    if count_for == 4:
        score += FOUR_SCORE
    elif count_for == 3 and count_empty == 1:
        score += THREE_SCORE
    elif count_for == 2 and count_empty == 2:
        score += TWO_SCORE

    if count_opp == 4:
        score += OPP_FOUR_SCORE
    elif count_opp == 3 and count_empty == 1:
        score += OPP_THREE_SCORE
    elif count_opp == 2 and count_empty == 2:
        score += OPP_TWO_SCORE
    return score


def score_position(board: Board, player: int) -> int:
    """
    Linear eval over every window plus center control.
    Only meaningful on non-terminal boards at the search horizon.
    """
    cells = board.cells

    # Center control
    center_count = cells[CENTER_COL::COLS].count(player)
    score = center_count * CENTER_SCORE

    for a, b, c, d in WINDOWS:
        score += evaluate_window((cells[a], cells[b], cells[c], cells[d]), player)
    return score
