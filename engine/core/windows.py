# engine/core/windows.py
"""
Every run of WINDOW_LENGTH consecutive cells on the board, as flat cell indices.

Shared by the outcome detector and the heuristic so both look at exactly the
same 69 windows.
"""
from typing import List, Tuple

from .constants import ROWS, COLS, WINDOW_LENGTH

# (row step, col step): Horizontal, Vertical, Diagonal \, Diagonal /
DIRECTIONS = [(0, 1), (1, 0), (1, 1), (1, -1)]


def cell_index(row: int, col: int) -> int:
    return row * COLS + col


def _build_windows() -> List[Tuple[int, ...]]:
    windows = []
    span = WINDOW_LENGTH - 1
    for dr, dc in DIRECTIONS:
        for r in range(ROWS):
            for c in range(COLS):
                end_r, end_c = r + dr * span, c + dc * span
                if not (0 <= end_r < ROWS and 0 <= end_c < COLS):
                    continue
                windows.append(tuple(cell_index(r + dr * i, c + dc * i) for i in range(WINDOW_LENGTH)))
    return windows


WINDOWS = _build_windows()
