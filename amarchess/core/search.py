import logging
import time
from dataclasses import dataclass, field
from typing import List, Optional, Sequence, Tuple, Union

import chess

from amarchess.config import CONFIG, SearchConfig
from amarchess.core.board import Position
from amarchess.core.evaluator import Evaluator
from amarchess.core.ordering import capture_first, moves_of, sort_ranking
from amarchess.core.transposition import TranspositionTable
from amarchess.core.utils import format_info

logger = logging.getLogger(__name__)

# Symmetric sentinels: -MATE_SCORE negates to MATE_SCORE and both stay
# strictly inside the (-INF, INF) window.
MATE_SCORE = 1_000_000
DRAW_SCORE = 0
INF = MATE_SCORE + 1

Ranking = List[Tuple[chess.Move, int]]


class SearchError(Exception):
    """Base class for search invariant violations."""


class InvalidDepthError(SearchError, ValueError):
    pass


class NoLegalMovesError(SearchError):
    pass


@dataclass
class SearchContext:
    """Per-root-search state: the table and the node counter."""
    table: Optional[TranspositionTable] = None
    count_nodes: bool = True
    nodes: int = 0


@dataclass
class SearchResult:
    best_move: chess.Move
    score: int
    depth: int
    nodes: int
    ranking: Ranking = field(default_factory=list)
    iterations: List[Tuple[int, chess.Move, int]] = field(default_factory=list)


def check_depth(depth: int):
    if not isinstance(depth, int) or isinstance(depth, bool) or depth <= 0 or depth % 2:
        raise InvalidDepthError(f"Search depth must be a positive even number of plies, got {depth!r}")


def as_position(board: Union[Position, chess.Board]) -> Position:
    return board if isinstance(board, Position) else Position(board)


class SearchEngine:
    """Negamax with alpha-beta, iterative deepening and a per-search table.

    Capabilities are independent flags; every combination selects the same
    kind of search, only the amount of work differs.
    """

    def __init__(self, evaluator: Optional[Evaluator] = None, depth: Optional[int] = None,
                 config: Optional[SearchConfig] = None, *,
                 use_transposition: Optional[bool] = None,
                 capture_first: Optional[bool] = None,
                 count_nodes: Optional[bool] = None,
                 iterative_deepening: Optional[bool] = None):
        cfg = config or CONFIG.search
        self.evaluator = evaluator or Evaluator()
        self.max_depth = cfg.depth if depth is None else depth
        self.use_transposition = cfg.use_transposition if use_transposition is None else use_transposition
        self.capture_first = cfg.capture_first if capture_first is None else capture_first
        self.count_nodes = cfg.count_nodes if count_nodes is None else count_nodes
        self.iterative_deepening = (cfg.iterative_deepening if iterative_deepening is None
                                    else iterative_deepening)

    def _new_context(self) -> SearchContext:
        table = TranspositionTable() if self.use_transposition else None
        return SearchContext(table=table, count_nodes=self.count_nodes)

    # ── Search core ────────────────────────────────────────────────────────

    def search(self, board: Union[Position, chess.Board], depth: int,
               alpha: int = -INF, beta: int = INF) -> int:
        """Score ``board`` for its side to move, searching ``depth`` plies."""
        if depth < 0:
            raise InvalidDepthError(f"Remaining depth cannot be negative, got {depth}")
        return self._negamax(self._new_context(), as_position(board), depth, alpha, beta)

    def _negamax(self, ctx: SearchContext, position: Position, depth: int,
                 alpha: int, beta: int) -> int:
        if ctx.count_nodes:
            ctx.nodes += 1

        if depth == 0:
            if not position.has_legal_moves():
                return -MATE_SCORE if position.is_check() else DRAW_SCORE
            return self.evaluator.evaluate_relative(position)

        moves = position.legal_moves()
        if not moves:
            return -MATE_SCORE if position.is_check() else DRAW_SCORE

        if self.capture_first:
            moves = capture_first(position, moves)

        best = -INF
        for move in moves:
            score = self._child_score(ctx, position.successor(move), depth - 1, alpha, beta)
            if score > best:
                best = score
            if best > alpha:
                alpha = best
            if alpha >= beta:
                break
        return best

    def _child_score(self, ctx: SearchContext, child: Position, depth: int,
                     alpha: int, beta: int) -> int:
        """Score of ``child`` from its parent's side, via the table if enabled."""
        if ctx.table is None:
            return -self._negamax(ctx, child, depth, -beta, -alpha)

        key = child.zobrist
        cached = ctx.table.probe(key, depth)
        if cached is not None:
            return -cached
        score = self._negamax(ctx, child, depth, -beta, -alpha)
        ctx.table.store(key, score, depth)
        return -score

    # ── Root selection ─────────────────────────────────────────────────────

    def _rank_root(self, ctx: SearchContext, position: Position, depth: int,
                   moves: Sequence[chess.Move]) -> Ranking:
        alpha, beta = -INF, INF
        ranking: Ranking = []
        for i, move in enumerate(moves):
            score = self._child_score(ctx, position.successor(move), depth - 1, alpha, beta)
            ranking.append((move, score))
            if score > alpha:
                alpha = score
            if alpha >= beta:
                # keep unsearched moves so the next iteration still sees them
                ranking.extend((m, -INF) for m in moves[i + 1:])
                break
        return sort_ranking(ranking)

    def rank_moves(self, board: Union[Position, chess.Board], depth: int,
                   moves: Optional[Sequence[chess.Move]] = None) -> SearchResult:
        """One root search at ``depth`` over ``moves`` (default: all legal moves)."""
        check_depth(depth)
        position = as_position(board)
        if moves is None:
            moves = self._root_moves(position)
        if not moves:
            raise NoLegalMovesError(f"No legal moves in {position.fen()}")
        ctx = self._new_context()
        ranking = self._rank_root(ctx, position, depth, list(moves))
        best, score = ranking[0]
        return SearchResult(best, score, depth, ctx.nodes, ranking, [(depth, best, score)])

    def _root_moves(self, position: Position) -> List[chess.Move]:
        moves = position.legal_moves()
        return capture_first(position, moves) if self.capture_first else moves

    # ── Iterative deepening ────────────────────────────────────────────────

    def search_best_move(self, board: Union[Position, chess.Board],
                         depth: Optional[int] = None) -> SearchResult:
        target = self.max_depth if depth is None else depth
        check_depth(target)
        position = as_position(board)
        moves = self._root_moves(position)
        if not moves:
            raise NoLegalMovesError(f"No legal moves in {position.fen()}")

        start_time = time.time()
        total_nodes = 0
        iterations = []
        ranking: Ranking = []
        first = 2 if self.iterative_deepening else target
        for d in range(first, target + 1, 2):
            ctx = self._new_context()
            ranking = self._rank_root(ctx, position, d, moves)
            moves = moves_of(ranking)
            total_nodes += ctx.nodes

            best, score = ranking[0]
            iterations.append((d, best, score))
            logger.info(format_info(d, score, total_nodes, time.time() - start_time, best, MATE_SCORE))
            if ctx.table is not None:
                logger.debug("depth %d table: %d entries, %d hits, %d misses",
                             d, len(ctx.table), ctx.table.hits, ctx.table.misses)

        best, score = ranking[0]
        return SearchResult(best, score, target, total_nodes, ranking, iterations)

    def select_move(self, board: Union[Position, chess.Board], depth: Optional[int] = None,
                    maximizer: Optional[chess.Color] = None) -> chess.Move:
        """Best move for the side to move.

        ``maximizer`` may name the colour being maximized; negamax always
        maximizes for the side to move, so any other colour is rejected.
        """
        position = as_position(board)
        if maximizer is not None and maximizer != position.turn:
            raise ValueError("maximizer must be the side to move")
        return self.search_best_move(position, depth).best_move
