import unittest
from unittest.mock import patch

from fastapi.testclient import TestClient

from engine.core.constants import ROWS, COLS
from backend.app.main import app
from backend.app.services.game_service import game_service


def empty_matrix():
    return [[0] * COLS for _ in range(ROWS)]


def draw_matrix():
    return [[1 if ((c // 2) + r) % 2 == 0 else 2 for c in range(COLS)] for r in range(ROWS)]


class TestGameAPI(unittest.TestCase):
    def setUp(self):
        self.client = TestClient(app)
        patcher = patch.object(game_service, "move_delay", 0)
        patcher.start()
        self.addCleanup(patcher.stop)

    def test_create_and_play(self):
        state = self.client.post("/games", json={"mode": "pvp"}).json()
        self.assertEqual(state["mode"], "pvp")
        self.assertEqual(state["current_turn"], 1)

        response = self.client.post("/games/move", json={"state": state, "column": 4})
        self.assertEqual(response.status_code, 200)
        state = response.json()
        self.assertEqual(state["board"][5][4], 1)
        self.assertEqual(state["current_turn"], 2)
        self.assertEqual(state["last_move"]["column"], 4)

    def test_full_column_is_conflict(self):
        matrix = empty_matrix()
        for r in range(ROWS):
            matrix[r][1] = 1 if r % 2 == 0 else 2
        state = {"mode": "pvp", "board": matrix, "current_turn": 1}

        response = self.client.post("/games/move", json={"state": state, "column": 1})
        self.assertEqual(response.status_code, 409)
        self.assertEqual(response.json()["detail"], "Column full! Try another.")

    def test_out_of_range_column(self):
        state = self.client.post("/games", json={"mode": "pvp"}).json()
        response = self.client.post("/games/move", json={"state": state, "column": 7})
        self.assertEqual(response.status_code, 422)

    def test_floating_piece_is_rejected(self):
        matrix = empty_matrix()
        matrix[0][0] = 1
        response = self.client.post("/engine/outcome", json={"board": matrix})
        self.assertEqual(response.status_code, 422)

    def test_ai_move_blocks(self):
        matrix = empty_matrix()
        matrix[5][0] = matrix[5][1] = matrix[5][2] = 1
        state = {"mode": "pvc", "board": matrix, "current_turn": 2}

        response = self.client.post("/games/ai-move", json={"state": state})
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json()["last_move"]["column"], 3)

    def test_ai_move_on_won_board(self):
        matrix = empty_matrix()
        for r in range(2, 6):
            matrix[r][0] = 1
        state = {"mode": "pvc", "board": matrix, "current_turn": 2, "status": "IN_PROGRESS"}

        response = self.client.post("/games/ai-move", json={"state": state})
        self.assertEqual(response.status_code, 409)

    def test_ai_move_on_human_turn(self):
        state = self.client.post("/games", json={"mode": "pvc"}).json()
        response = self.client.post("/games/ai-move", json={"state": state})
        self.assertEqual(response.status_code, 409)


class TestEngineAPI(unittest.TestCase):
    def setUp(self):
        self.client = TestClient(app)

    def test_outcome(self):
        body = self.client.post("/engine/outcome", json={"board": empty_matrix()}).json()
        self.assertEqual(body, {"status": "ONGOING", "winner": None, "legal_columns": [0, 1, 2, 3, 4, 5, 6]})

        body = self.client.post("/engine/outcome", json={"board": draw_matrix()}).json()
        self.assertEqual(body["status"], "DRAW")
        self.assertEqual(body["legal_columns"], [])

    def test_outcome_conflict(self):
        matrix = empty_matrix()
        for c in range(4):
            matrix[5][c] = 1
        for r in range(2, 6):
            matrix[r][6] = 2
        response = self.client.post("/engine/outcome", json={"board": matrix})
        self.assertEqual(response.status_code, 422)

    def test_engine_move(self):
        matrix = draw_matrix()
        matrix[0][5] = matrix[0][6] = 0
        body = self.client.post("/engine/move", json={"board": matrix}).json()

        self.assertIn(body["column"], (5, 6))
        self.assertEqual(set(body["scores"]), {"5", "6"})
        self.assertGreater(body["nodes_explored"], 0)

    def test_engine_move_on_finished_game(self):
        response = self.client.post("/engine/move", json={"board": draw_matrix()})
        self.assertEqual(response.status_code, 409)


if __name__ == '__main__':
    unittest.main()
