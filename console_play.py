import asyncio

from engine.core.board import render_board
from engine.core.constants import PLAYER_1
from engine.core.errors import ColumnFull, InvalidColumn
from backend.app.models.enums import GameMode, GameStatus
from backend.app.services.game_service import game_service


def choose_mode() -> GameMode:
    while True:
        choice = input("Select a game mode [pvp/pvc]: ").strip().lower()
        try:
            return GameMode(choice)
        except ValueError:
            print("Please type 'pvp' or 'pvc'.")


def player_name(state, player: int) -> str:
    if state.mode == GameMode.PVC:
        return "Human" if player == PLAYER_1 else "Computer"
    return f"Player {player}"


def main():
    print("=======================================")
    print("   CONNECT FOUR: Minimax Engine")
    print("=======================================")

    state = game_service.new_game(choose_mode())
    print(render_board(state.to_board()))

    while state.status == GameStatus.IN_PROGRESS:

        # --- Computer Turn (Player 2) ---
        if state.mode == GameMode.PVC and state.current_turn != PLAYER_1:
            print("\nComputer is thinking...")
            state = asyncio.run(game_service.step_ai_turn(state))
            print(f"Computer plays Column: {state.last_move.column}")

        # --- Human Turn ---
        else:
            try:
                user_input = input(f"\n{player_name(state, state.current_turn)}'s move (Column 0-6): ")
                state = game_service.process_human_move(state, int(user_input))
            except ValueError:
                print("Please enter a valid number.")
                continue
            except ColumnFull:
                print("Column full! Try another.")
                continue
            except InvalidColumn:
                print("Invalid column. Try again.")
                continue

        # Show Board
        print("\n" + render_board(state.to_board()))

    # --- End Game ---
    if state.status == GameStatus.COMPLETED:
        print(f"\nGame Over! Winner: {player_name(state, state.winner)}")
    else:
        print("\nGame Over! It's a Draw.")


if __name__ == "__main__":
    main()
