"""
Game Service - Turn Handling Around the Engine

This service is the only place that moves a game forward. It handles:
- Game creation (PvP or PvC)
- Human moves (turn and game-over checks)
- Computer moves (pacing delay, search off the event loop)
- Outcome bookkeeping after every move

Nothing is stored: every call takes a GameState and returns a new one.
Used by both the HTTP API and the console front-end.
"""

import asyncio
import logging
import time
from typing import Optional

from engine.core.board import Board, apply_move
from engine.core.constants import AI_PLAYER, PLAYER_1, opponent
from engine.core.outcome import OutcomeStatus, detect_outcome
from engine.core.search import select_move
from backend.app.core.settings import settings
from backend.app.models.enums import GameMode, GameStatus
from backend.app.schemas.game_schema import GameState, MoveRecord

logger = logging.getLogger(__name__)


class GameStateError(ValueError):
    """The move is well-formed but not allowed in the current game state."""


class GameService:
    """Centralized service for all game operations"""

    def __init__(self, move_delay: Optional[float] = None):
        self.move_delay = settings.ai_move_delay if move_delay is None else move_delay

    def new_game(self, mode: GameMode = GameMode.PVC) -> GameState:
        logger.info("Game initialized. Mode: %s", mode)
        return GameState(mode=mode, current_turn=PLAYER_1)

    def process_human_move(self, state: GameState, column: int) -> GameState:
        """Drops the current player's piece. ColumnFull / InvalidColumn propagate to the caller."""
        self._ensure_in_progress(state)
        if state.mode == GameMode.PVC and state.current_turn == AI_PLAYER:
            raise GameStateError("It's the computer's turn")

        start_time = time.time()
        new_board, row = apply_move(state.to_board(), column, state.current_turn)
        duration = round(time.time() - start_time, 3)

        return self._advance(state, new_board, column, row, duration)

    def apply_ai_move(self, state: GameState) -> GameState:
        """Runs the minimax search for the computer and plays its column (blocking)."""
        self._ensure_in_progress(state)
        if state.mode != GameMode.PVC:
            raise GameStateError("No computer player in a PvP game")
        if state.current_turn != AI_PLAYER:
            raise GameStateError("It's not the computer's turn")

        start_time = time.time()
        board = state.to_board()
        column = select_move(board)
        new_board, row = apply_move(board, column, AI_PLAYER)
        duration = round(time.time() - start_time, 3)

        logger.info("Computer played column %d in %.3fs", column, duration)
        return self._advance(state, new_board, column, row, duration)

    async def step_ai_turn(self, state: GameState) -> GameState:
        """Waits the pacing delay, then searches in a worker thread so the loop stays free."""
        self._ensure_in_progress(state)
        if self.move_delay:
            await asyncio.sleep(self.move_delay)
        return await asyncio.to_thread(self.apply_ai_move, state)

    def _ensure_in_progress(self, state: GameState):
        if state.status != GameStatus.IN_PROGRESS:
            raise GameStateError(f"Game is over ({state.status})")
        # The client owns the state, so the board itself has the last word
        outcome = detect_outcome(state.to_board())
        if outcome.is_terminal:
            raise GameStateError(f"Game is over ({outcome.status}) but was sent as {state.status}")

    def _advance(self, state: GameState, board: Board, column: int, row: int, duration: float) -> GameState:
        """Builds the next state: records the move, then checks for a win or draw."""
        player = state.current_turn
        update = {
            "board": board.to_matrix(),
            "last_move": MoveRecord(player=player, column=column, row=row, duration=duration),
        }

        outcome = detect_outcome(board)
        if outcome.status == OutcomeStatus.WIN:
            update["status"] = GameStatus.COMPLETED
            update["winner"] = outcome.winner
            logger.info("Player %d wins!", outcome.winner)
        elif outcome.status == OutcomeStatus.DRAW:
            update["status"] = GameStatus.DRAW
            logger.info("Draw game!")
        else:
            update["current_turn"] = opponent(player)

        return state.model_copy(update=update)


# Singleton instance
game_service = GameService()
