import logging

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware

from engine.core.board import Board, legal_columns
from engine.core.errors import (
    ColumnFull, InvalidBoard, InvalidColumn, NoAvailableMove, OutcomeConflict,
)
from engine.core.outcome import detect_outcome
from engine.core.search import MinimaxSolver
from backend.app.core.settings import settings
from backend.app.schemas.game_schema import (
    AIMoveRequest, BoardRequest, EngineMoveResponse, GameCreate, GameState,
    MoveRequest, OutcomeResponse,
)
from backend.app.services.game_service import GameStateError, game_service

logging.basicConfig(level=settings.log_level)
logger = logging.getLogger(__name__)

app = FastAPI(title="Connect Four Minimax")

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.post("/games", response_model=GameState)
async def create_game(game_data: GameCreate):
    return game_service.new_game(game_data.mode)


@app.post("/games/move", response_model=GameState)
async def play_move(request: MoveRequest):
    """Plays the current player's column. The client sends its state and keeps the one returned."""
    try:
        return game_service.process_human_move(request.state, request.column)
    except ColumnFull:
        raise HTTPException(status_code=409, detail="Column full! Try another.")
    except InvalidColumn as e:
        raise HTTPException(status_code=422, detail=str(e))
    except GameStateError as e:
        raise HTTPException(status_code=409, detail=str(e))
    except OutcomeConflict as e:
        raise HTTPException(status_code=422, detail=str(e))


@app.post("/games/ai-move", response_model=GameState)
async def play_ai_move(request: AIMoveRequest):
    """Lets the computer (Player 2) answer in a PvC game."""
    try:
        return await game_service.step_ai_turn(request.state)
    except (GameStateError, NoAvailableMove) as e:
        raise HTTPException(status_code=409, detail=str(e))
    except OutcomeConflict as e:
        raise HTTPException(status_code=422, detail=str(e))


@app.post("/engine/outcome", response_model=OutcomeResponse)
async def get_outcome(request: BoardRequest):
    board = Board.from_matrix(request.board)
    try:
        outcome = detect_outcome(board)
    except OutcomeConflict as e:
        raise HTTPException(status_code=422, detail=str(e))
    return OutcomeResponse(
        status=outcome.status,
        winner=outcome.winner,
        legal_columns=legal_columns(board),
    )


@app.post("/engine/move", response_model=EngineMoveResponse)
def get_engine_move(request: BoardRequest):
    """Full root analysis for Player 2: chosen column plus the score of every legal column."""
    try:
        board = Board.from_matrix(request.board)
        if detect_outcome(board).is_terminal:
            raise HTTPException(status_code=409, detail="Game is already over")
        result = MinimaxSolver().solve(board)
    except (InvalidBoard, OutcomeConflict) as e:
        raise HTTPException(status_code=422, detail=str(e))
    return EngineMoveResponse(
        column=result.best_move,
        score=result.best_score,
        scores=result.scores,
        nodes_explored=result.nodes_explored,
    )
