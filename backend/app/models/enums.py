from enum import StrEnum

class GameStatus(StrEnum):
    IN_PROGRESS = "IN_PROGRESS"
    COMPLETED = "COMPLETED"
    DRAW = "DRAW"

class GameMode(StrEnum):
    PVP = "pvp"  # Two humans on one screen
    PVC = "pvc"  # Human (Player 1) vs Computer (Player 2)
