"""Board wrappers over python-chess.

``Position`` is the immutable snapshot the search works on: every move
produces a new Position, so recursive calls never share a mutable board.
``ChessBoard`` is the game-level board with move history used by the
interfaces.
"""

from typing import List, Optional

import chess
from chess import polyglot


class Position:
    """Immutable view of a board state for the search."""

    __slots__ = ("_board", "_zobrist")

    def __init__(self, board: Optional[chess.Board] = None):
        self._board = board.copy(stack=False) if board is not None else chess.Board()
        self._zobrist: Optional[int] = None

    @classmethod
    def from_fen(cls, fen: str = chess.STARTING_FEN) -> "Position":
        return cls._wrap(chess.Board(fen))

    @classmethod
    def _wrap(cls, board: chess.Board) -> "Position":
        # takes ownership of an already private board, skipping the copy
        pos = cls.__new__(cls)
        pos._board = board
        pos._zobrist = None
        return pos

    @property
    def board(self) -> chess.Board:
        """A copy of the underlying board; mutating it does not affect the Position."""
        return self._board.copy(stack=False)

    @property
    def turn(self) -> chess.Color:
        return self._board.turn

    @property
    def zobrist(self) -> int:
        if self._zobrist is None:
            self._zobrist = polyglot.zobrist_hash(self._board)
        return self._zobrist

    def fen(self) -> str:
        return self._board.fen()

    def legal_moves(self) -> List[chess.Move]:
        return list(self._board.legal_moves)

    def has_legal_moves(self) -> bool:
        return any(self._board.generate_legal_moves())

    def is_check(self) -> bool:
        return self._board.is_check()

    def successor(self, move: chess.Move) -> "Position":
        child = self._board.copy(stack=False)
        child.push(move)
        return Position._wrap(child)

    def occupied_by(self, color: chess.Color) -> chess.Bitboard:
        return self._board.occupied_co[color]

    def pieces_mask(self, piece_type: chess.PieceType, color: chess.Color) -> chess.Bitboard:
        return self._board.pieces_mask(piece_type, color)

    def mirror(self) -> "Position":
        """Colour-flipped counterpart (ranks flipped, sides and turn swapped)."""
        return Position._wrap(self._board.mirror())

    def __repr__(self) -> str:
        return f"Position({self.fen()!r})"


class ChessBoard:
    def __init__(self, fen: str = None):
        """Initialize from FEN or the standard starting position."""
        self.board = chess.Board(fen) if fen else chess.Board()
        self.move_history: List[str] = []

    @property
    def position(self) -> Position:
        """Snapshot of the current state for the search."""
        return Position(self.board)

    def reset(self):
        self.board.reset()
        self.move_history.clear()

    def set_fen(self, fen: str):
        """Set board state from a FEN string. Raises ValueError on bad FEN."""
        self.board.set_fen(fen)
        self.move_history.clear()

    def get_fen(self) -> str:
        return self.board.fen()

    def make_move(self, move_str: str) -> bool:
        """Push a UCI move (e.g. 'e2e4'). Returns True if it was legal."""
        try:
            move = chess.Move.from_uci(move_str)
        except ValueError:
            return False
        if move not in self.board.legal_moves:
            return False
        self.board.push(move)
        self.move_history.append(move_str)
        return True

    def undo_move(self):
        if self.move_history:
            self.board.pop()
            self.move_history.pop()

    def get_legal_moves(self) -> List[str]:
        return [m.uci() for m in self.board.legal_moves]

    def is_game_over(self) -> bool:
        return self.board.is_game_over()

    def print_board(self):
        print(self.board)
