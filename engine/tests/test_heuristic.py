import unittest
from engine.core.board import Board
from engine.core.constants import ROWS, COLS, PLAYER_1, PLAYER_2
from engine.core.heuristic import evaluate_window, score_position


class TestEvaluateWindow(unittest.TestCase):

    def test_scoring_table(self):
        cases = [
            ([2, 2, 2, 2], 1000),
            ([2, 2, 0, 2], 10),
            ([0, 2, 2, 0], 2),
            ([1, 1, 1, 1], -800),
            ([1, 0, 1, 1], -8),
            ([1, 1, 0, 0], -1),
            ([2, 0, 0, 0], 0),
            ([1, 1, 2, 2], 0),
            ([2, 2, 2, 1], 0),
            ([0, 0, 0, 0], 0),
        ]
        for window, expected in cases:
            with self.subTest(window=window):
                self.assertEqual(evaluate_window(window, PLAYER_2), expected)

    def test_perspective_flips_with_player(self):
        self.assertEqual(evaluate_window([1, 1, 1, 0], PLAYER_1), 10)
        self.assertEqual(evaluate_window([1, 1, 1, 0], PLAYER_2), -8)
        # Own four outweighs the opponent's four
        self.assertEqual(evaluate_window((2, 2, 2, 2), PLAYER_2), 1000)
        self.assertEqual(evaluate_window((2, 2, 2, 2), PLAYER_1), -800)


class TestScorePosition(unittest.TestCase):

    def test_empty_board_scores_zero(self):
        self.assertEqual(score_position(Board.empty(), PLAYER_1), 0)
        self.assertEqual(score_position(Board.empty(), PLAYER_2), 0)

    def test_center_bonus(self):
        matrix = [[0] * COLS for _ in range(ROWS)]
        matrix[5][3] = 2
        board = Board.from_matrix(matrix)

        # Lone pieces score nothing in windows, only the center bonus counts
        self.assertEqual(score_position(board, PLAYER_2), 3)
        self.assertEqual(score_position(board, PLAYER_1), 0)

    def test_open_three_on_bottom_row(self):
        """
        P1 at (5,0), (5,1), (5,2).
        Window cols 0-3 holds three + one empty, window cols 1-4 holds two + two empty.
        """
        matrix = [[0] * COLS for _ in range(ROWS)]
        matrix[5][0] = matrix[5][1] = matrix[5][2] = 1
        board = Board.from_matrix(matrix)

        self.assertEqual(score_position(board, PLAYER_1), 10 + 2)
        self.assertEqual(score_position(board, PLAYER_2), -8 - 1)


if __name__ == '__main__':
    unittest.main()
