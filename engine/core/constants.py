# engine/core/constants.py

# --- Board Dimensions ---
ROWS = 6
COLS = 7
CENTER_COL = COLS // 2
WINDOW_LENGTH = 4

# --- Cell Values ---
# Row 0 is the TOP of the board, row 5 the BOTTOM.
EMPTY = 0
PLAYER_1 = 1  # Human (moves first)
PLAYER_2 = 2  # Computer
PLAYERS = (PLAYER_1, PLAYER_2)
AI_PLAYER = PLAYER_2

# --- Search ---
# Plies searched below each root move.
SEARCH_DEPTH = 4

# --- Scoring System ---
# Terminal scores are always from AI_PLAYER's perspective.
# Win  = WIN_SCORE + remaining depth (faster wins score higher)
# Loss = -WIN_SCORE - remaining depth
# Draw = 0
WIN_SCORE = 100_000
DRAW_SCORE = 0

# Window weights for the positional heuristic
FOUR_SCORE = 1000
THREE_SCORE = 10
TWO_SCORE = 2
OPP_FOUR_SCORE = -800
OPP_THREE_SCORE = -8
OPP_TWO_SCORE = -1
CENTER_SCORE = 3


def opponent(player: int) -> int:
    return PLAYER_1 if player == PLAYER_2 else PLAYER_2
