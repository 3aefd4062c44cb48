# engine/core/board.py
from typing import Iterable, List, Optional, Sequence, Tuple

from .constants import ROWS, COLS, EMPTY, PLAYER_1, PLAYER_2, PLAYERS
from .errors import ColumnFull, InvalidBoard, InvalidColumn


class Board:
    """
    Immutable 6x7 snapshot.
    Uses (row, col) indexing with row 0 at the TOP, stored row-major in a flat tuple.
    Values: 0=Empty, 1=Player1, 2=Player2

    The raw constructor only checks the cell count; it is meant for engine code
    that already holds valid cells. Only empty(), from_matrix() and apply_move()
    guarantee legal values and gravity.
    """

    __slots__ = ("cells",)

    def __init__(self, cells: Optional[Iterable[int]] = None):
        cells = (EMPTY,) * (ROWS * COLS) if cells is None else tuple(cells)
        if len(cells) != ROWS * COLS:
            raise InvalidBoard(f"Expected {ROWS * COLS} cells, got {len(cells)}")
        self.cells = cells

    @classmethod
    def empty(cls) -> "Board":
        return cls()

    @classmethod
    def from_matrix(cls, matrix: Sequence[Sequence[int]]) -> "Board":
        """
        Builds a snapshot from a list of rows (Row 0=Top).
        Rejects wrong shapes, unknown cell values and floating pieces.
        """
        if len(matrix) != ROWS or any(len(row) != COLS for row in matrix):
            raise InvalidBoard(f"Board must be {ROWS} rows x {COLS} columns")

        cells = []
        for row in matrix:
            for val in row:
                if val not in (EMPTY, PLAYER_1, PLAYER_2):
                    raise InvalidBoard(f"Unknown cell value: {val!r}")
                cells.append(int(val))

        # Gravity: once a column has a piece, nothing below it may be empty
        for c in range(COLS):
            seen_piece = False
            for r in range(ROWS):
                if cells[r * COLS + c] != EMPTY:
                    seen_piece = True
                elif seen_piece:
                    raise InvalidBoard(f"Floating piece in column {c} above row {r}")

        return cls(cells)

    def get(self, row: int, col: int) -> int:
        return self.cells[row * COLS + col]

    def column(self, col: int) -> Tuple[int, ...]:
        """Cells of one column, top to bottom."""
        return self.cells[col::COLS]

    def to_matrix(self) -> List[List[int]]:
        return [list(self.cells[r * COLS:(r + 1) * COLS]) for r in range(ROWS)]

    def is_full(self) -> bool:
        return EMPTY not in self.cells

    def __eq__(self, other) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self.cells == other.cells

    def __hash__(self) -> int:
        return hash(self.cells)

    def __repr__(self) -> str:
        return f"Board({self.to_matrix()!r})"


def _check_column(column: int) -> None:
    if not 0 <= column < COLS:
        raise InvalidColumn(column)


def legal_columns(board: Board) -> List[int]:
    """Returns the column indices (ascending) whose top cell is empty."""
    return [c for c in range(COLS) if board.cells[c] == EMPTY]


def landing_row(board: Board, column: int) -> Optional[int]:
    """Lowest empty row in the column, or None if the column is full."""
    _check_column(column)
    for r in range(ROWS - 1, -1, -1):
        if board.cells[r * COLS + column] == EMPTY:
            return r
    return None


def apply_move(board: Board, column: int, player: int) -> Tuple[Board, int]:
    """
    Returns a NEW Board with `player`'s piece dropped into `column`, and the row it landed on.
    The input board is left untouched.
    """
    if player not in PLAYERS:
        raise ValueError(f"Unknown player: {player!r}")

    row = landing_row(board, column)
    if row is None:
        raise ColumnFull(column)

    cells = list(board.cells)
    cells[row * COLS + column] = player
    return Board(cells), row


def render_board(board: Board) -> str:
    """Generates an ASCII grid representation."""
    symbols = {EMPTY: ".", PLAYER_1: "X", PLAYER_2: "O"}
    header = " " + " ".join(str(i) for i in range(COLS))
    rows_str = []
    for r in range(ROWS):
        row_cells = [symbols[board.get(r, c)] for c in range(COLS)]
        rows_str.append("|" + "|".join(row_cells) + "|")
    return header + "\n" + "\n".join(rows_str)
