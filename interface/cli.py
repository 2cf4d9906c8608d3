import chess

from amarchess.config import CONFIG
from amarchess.core.utils import configure_logging
from amarchess.main import Engine


def main(depth: int = None, human_color: chess.Color = chess.WHITE):
    """Human vs engine on the terminal. Type 'quit' to leave."""
    engine = Engine(depth=depth)
    board = engine.board

    while not board.is_game_over():
        engine.print_board()
        print("----------------------------")

        if board.board.turn == human_color:
            user_move = input("Enter your move (uci format, e2e4): ").strip()
            if user_move == "quit":
                return
            if not engine.make_move(user_move):
                print("Illegal move, try again.")
        else:
            move, score = engine.get_best_move()
            print(f"Engine plays: {move} | Eval: {score}")
            engine.make_move(move)

    print("Game Over")
    print(f"Result: {board.board.result()}")


if __name__ == "__main__":
    configure_logging(CONFIG.log_level)
    main()
