import logging
from typing import Dict, Optional

import chess

from amarchess.config import CONFIG, EvalConfig

logger = logging.getLogger(__name__)

PIECE_TYPES = {
    "PAWN": chess.PAWN,
    "KNIGHT": chess.KNIGHT,
    "BISHOP": chess.BISHOP,
    "ROOK": chess.ROOK,
    "QUEEN": chess.QUEEN,
}


class Evaluator:
    """Material evaluator with a bishop-pair bonus.

    ``evaluate`` is white-positive. ``evaluate_relative`` is oriented to the
    side to move and is the only variant the search calls. Terminal positions
    are scored by the search before the evaluator is reached.
    """

    def __init__(self, cfg: Optional[EvalConfig] = None):
        self.cfg = cfg or CONFIG.eval
        self.weights: Dict[chess.PieceType, int] = {}
        for name, value in self.cfg.piece_values.items():
            piece_type = PIECE_TYPES.get(name.upper())
            if piece_type is None:
                logger.warning("Ignoring weight for unknown piece %r", name)
                continue
            self.weights[piece_type] = value

    def material(self, position, color: chess.Color) -> int:
        """Weighted piece count plus bishop-pair bonus for one side."""
        total = 0
        for pt, weight in self.weights.items():
            total += chess.popcount(position.pieces_mask(pt, color)) * weight
        if chess.popcount(position.pieces_mask(chess.BISHOP, color)) == 2:
            total += self.cfg.bishop_pair_bonus
        return total

    def evaluate(self, position) -> int:
        return self.material(position, chess.WHITE) - self.material(position, chess.BLACK)

    def evaluate_relative(self, position) -> int:
        score = self.evaluate(position)
        return score if position.turn == chess.WHITE else -score
