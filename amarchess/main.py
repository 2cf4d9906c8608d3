from typing import Optional, Tuple

from amarchess.core.board import ChessBoard
from amarchess.core.search import SearchEngine
from amarchess.core.evaluator import Evaluator


class Engine:
    def __init__(self, depth: Optional[int] = None, fen: Optional[str] = None):
        self.board = ChessBoard(fen)
        self.search = SearchEngine(Evaluator(), depth=depth)

    def get_best_move(self) -> Tuple[str, int]:
        result = self.search.search_best_move(self.board.position)
        return result.best_move.uci(), result.score

    def make_move(self, move_uci: str) -> bool:
        return self.board.make_move(move_uci)

    def print_board(self):
        self.board.print_board()
