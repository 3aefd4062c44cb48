# engine/core/errors.py
from typing import Optional


class EngineError(Exception):
    """Base class for everything the engine raises."""


class InvalidColumn(EngineError):
    def __init__(self, column: int):
        self.column = column
        super().__init__(f"Column {column} is out of range")


class ColumnFull(EngineError):
    def __init__(self, column: int):
        self.column = column
        super().__init__(f"Column {column} is full")


class NoAvailableMove(EngineError):
    """Raised when the engine is asked to move on a board with no legal column."""

    def __init__(self, message: Optional[str] = None):
        super().__init__(message or "No legal column left to play")


class InvalidBoard(EngineError):
    """The matrix handed in is not a reachable board (shape, values or gravity)."""


class OutcomeConflict(EngineError):
    """Both players have four in a row on the same board."""
