from pydantic import AfterValidator, BaseModel, ConfigDict, Field
from typing import Annotated, Dict, List, Literal, Optional

from engine.core.board import Board
from engine.core.errors import InvalidBoard
from backend.app.models.enums import GameMode, GameStatus


def _validate_matrix(matrix: List[List[int]]) -> List[List[int]]:
    try:
        Board.from_matrix(matrix)
    except InvalidBoard as e:
        raise ValueError(str(e)) from e
    return matrix


# 6x7 list of rows (Row 0=Top), checked for shape, values and gravity
BoardMatrix = Annotated[List[List[int]], AfterValidator(_validate_matrix)]


class MoveRecord(BaseModel):
    # Clients echo last_move back inside GameState; fields a front-end adds to it are dropped
    model_config = ConfigDict(extra='ignore')

    player: int
    column: int
    row: int
    duration: Optional[float] = 0.0


class GameState(BaseModel):
    """
    Everything a front-end needs to hold between calls.
    The server keeps nothing: each request carries the state, each response returns the next one.
    """
    mode: GameMode = GameMode.PVC
    board: BoardMatrix = Field(default_factory=lambda: Board.empty().to_matrix())
    current_turn: Literal[1, 2] = 1
    status: GameStatus = GameStatus.IN_PROGRESS
    winner: Optional[int] = None
    last_move: Optional[MoveRecord] = None

    def to_board(self) -> Board:
        return Board.from_matrix(self.board)


class GameCreate(BaseModel):
    mode: GameMode = GameMode.PVC


class MoveRequest(BaseModel):
    state: GameState
    column: int


class AIMoveRequest(BaseModel):
    state: GameState


class BoardRequest(BaseModel):
    board: BoardMatrix


class OutcomeResponse(BaseModel):
    status: str
    winner: Optional[int] = None
    legal_columns: List[int]


class EngineMoveResponse(BaseModel):
    column: int
    score: int
    scores: Dict[int, int]
    nodes_explored: int
