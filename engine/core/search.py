# engine/core/search.py
import logging
from dataclasses import dataclass, field
from typing import Dict

from .board import Board, apply_move, legal_columns
from .constants import AI_PLAYER, PLAYER_1, PLAYER_2, SEARCH_DEPTH, WIN_SCORE, DRAW_SCORE
from .errors import NoAvailableMove
from .heuristic import score_position
from .outcome import OutcomeStatus, detect_outcome

logger = logging.getLogger(__name__)

# Below any score the search can produce
NEG_INF = float("-inf")
POS_INF = float("inf")


@dataclass
class SearchResult:
    best_move: int
    best_score: int
    scores: Dict[int, int] = field(default_factory=dict)  # {column: score} for legal columns only
    nodes_explored: int = 0


class MinimaxSolver:
    """
    Plain depth-limited minimax (no pruning, no caching).
    Scores are always from PLAYER_2's (the computer's) point of view.
    """

    def __init__(self, depth: int = SEARCH_DEPTH):
        self.depth = depth
        self.nodes = 0

    def solve(self, board: Board) -> SearchResult:
        """
        Root Entry Point. Called on the computer's turn.
        Evaluates every legal column and keeps the first strictly best one.
        """
        self.nodes = 0
        columns = legal_columns(board)
        if not columns:
            raise NoAvailableMove()

        move_scores = {}
        best_score = NEG_INF
        best_move = -1

        for col in columns:
            child, _ = apply_move(board, col, AI_PLAYER)
            # Next ply belongs to the human, hence minimizing
            score = self.minimax(child, self.depth, False)
            move_scores[col] = score
            logger.debug("Column %d evaluated score: %d", col, score)

            if score > best_score:
                best_score = score
                best_move = col

        logger.info("AI chooses column %d with score %d (%d nodes)", best_move, best_score, self.nodes)
        return SearchResult(
            best_move=best_move,
            best_score=best_score,
            scores=move_scores,
            nodes_explored=self.nodes,
        )

    def minimax(self, board: Board, depth: int, maximizing: bool) -> int:
        self.nodes += 1

        outcome = detect_outcome(board)
        columns = legal_columns(board)

        if depth == 0 or outcome.is_terminal or not columns:
            if outcome.status == OutcomeStatus.WIN:
                # Prioritize faster wins, penalize faster losses
                if outcome.winner == PLAYER_2:
                    return WIN_SCORE + depth
                return -WIN_SCORE - depth
            if outcome.status == OutcomeStatus.DRAW:
                return DRAW_SCORE
            return score_position(board, PLAYER_2)

        if maximizing:
            value = NEG_INF
            for col in columns:
                child, _ = apply_move(board, col, PLAYER_2)
                value = max(value, self.minimax(child, depth - 1, False))
        else:
            value = POS_INF
            for col in columns:
                child, _ = apply_move(board, col, PLAYER_1)
                value = min(value, self.minimax(child, depth - 1, True))
        return value


def minimax(board: Board, depth: int, maximizing: bool) -> int:
    """Value of `board` for PLAYER_2 with `depth` plies left to search."""
    return MinimaxSolver(depth).minimax(board, depth, maximizing)


def select_move(board: Board) -> int:
    """Picks the computer's (PLAYER_2's) column. Raises NoAvailableMove on a full board."""
    return MinimaxSolver().solve(board).best_move
