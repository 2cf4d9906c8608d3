"""Move ordering: capture-first inside the tree, score-sorted at the root."""

from typing import Iterable, List, Sequence, Tuple

import chess

from amarchess.core.board import Position


def capture_first(position: Position, moves: Iterable[chess.Move]) -> List[chess.Move]:
    """Moves landing on an opponent piece first, then the rest.

    Relative order inside each group is kept. En passant lands on an empty
    square and therefore counts as a quiet move here.
    """
    targets = position.occupied_by(not position.turn)
    captures = []
    quiet = []
    for move in moves:
        if chess.BB_SQUARES[move.to_square] & targets:
            captures.append(move)
        else:
            quiet.append(move)
    return captures + quiet


def sort_ranking(ranking: Iterable[Tuple[chess.Move, int]]) -> List[Tuple[chess.Move, int]]:
    # stable: equal scores keep the order they were searched in
    return sorted(ranking, key=lambda item: item[1], reverse=True)


def moves_of(ranking: Sequence[Tuple[chess.Move, int]]) -> List[chess.Move]:
    return [move for move, _ in ranking]
