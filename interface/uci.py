import sys
from typing import List

import chess

from amarchess.config import CONFIG
from amarchess.core.board import Position
from amarchess.core.search import MATE_SCORE, NoLegalMovesError, SearchEngine
from amarchess.core.utils import configure_logging, format_score


class UCI:
    """Minimal UCI loop: position + ``go depth N``, answered synchronously."""

    def __init__(self, depth: int = None):
        self.engine = SearchEngine(depth=depth)
        self.board = chess.Board()

    def run(self, stream=None):
        for line in stream or sys.stdin:
            if not self.handle(line.strip()):
                break

    def handle(self, command: str) -> bool:
        """Process one command; returns False on ``quit``."""
        tokens = command.split()
        if not tokens:
            return True
        cmd, args = tokens[0], tokens[1:]
        if cmd == "uci":
            print(f"id name {CONFIG.ui.engine_name}")
            print(f"id author {CONFIG.ui.engine_author}")
            print("uciok", flush=True)
        elif cmd == "isready":
            print("readyok", flush=True)
        elif cmd == "ucinewgame":
            self.board = chess.Board()
        elif cmd == "position":
            self._parse_position(args)
        elif cmd == "go":
            self._go(self._parse_go(args))
        elif cmd == "quit":
            return False
        return True

    def _parse_position(self, args: List[str]):
        if not args:
            return
        if args[0] == "startpos":
            board = chess.Board()
            rest = args[1:]
        elif args[0] == "fen":
            fen_parts = []
            rest = []
            for i, tok in enumerate(args[1:], start=1):
                if tok == "moves":
                    rest = args[i:]
                    break
                fen_parts.append(tok)
            try:
                board = chess.Board(" ".join(fen_parts))
            except ValueError:
                print(f"info string invalid fen {' '.join(fen_parts)}", file=sys.stderr)
                return
        else:
            return
        if rest and rest[0] == "moves":
            for uci in rest[1:]:
                try:
                    move = chess.Move.from_uci(uci)
                except ValueError:
                    break
                if move not in board.legal_moves:
                    break
                board.push(move)
        self.board = board

    def _parse_go(self, args: List[str]) -> int:
        depth = self.engine.max_depth
        if "depth" in args:
            idx = args.index("depth")
            if idx + 1 < len(args) and args[idx + 1].isdigit():
                depth = int(args[idx + 1])
        # search runs in whole moves
        depth = max(2, depth + depth % 2)
        return depth

    def _go(self, depth: int):
        try:
            result = self.engine.search_best_move(Position(self.board), depth)
        except NoLegalMovesError:
            print("bestmove 0000", flush=True)
            return
        score = format_score(result.score, MATE_SCORE)
        print(f"info depth {result.depth} score {score} nodes {result.nodes}")
        print(f"bestmove {result.best_move.uci()}", flush=True)


if __name__ == "__main__":
    # basicConfig writes to stderr, keeping stdout for the protocol
    configure_logging(CONFIG.log_level)
    UCI().run()
