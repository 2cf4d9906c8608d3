"""Transposition table keyed by 64-bit polyglot Zobrist hashes.

Each entry keeps the score of a position (from the side to move there) and
the remaining depth it was searched to. No bound flags and no full position
are stored: a hash collision yields a wrong cached score rather than an
error.

A table lives for one root search and is discarded afterwards:

    tt = TranspositionTable()
    tt.store(position.zobrist, score=120, depth=3)
    tt.probe(position.zobrist, depth=2)   # -> 120
    tt.probe(position.zobrist, depth=4)   # -> None, not deep enough
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterator, Optional


@dataclass(frozen=True)
class TTEntry:
    score: int
    depth: int

    def __iter__(self) -> Iterator[int]:
        return iter((self.score, self.depth))


class TranspositionTable:
    """Unbounded dict of Zobrist key -> TTEntry.

    Methods:
      - lookup(key) -> Optional[TTEntry]
      - probe(key, depth) -> Optional[int]   (score if stored depth >= depth)
      - store(key, score, depth)             (always overwrites)
      - clear()
    """

    def __init__(self):
        self._table: Dict[int, TTEntry] = {}
        self.hits = 0
        self.misses = 0

    def lookup(self, key: int) -> Optional[TTEntry]:
        return self._table.get(key)

    def probe(self, key: int, depth: int) -> Optional[int]:
        entry = self._table.get(key)
        if entry is not None and entry.depth >= depth:
            self.hits += 1
            return entry.score
        self.misses += 1
        return None

    def store(self, key: int, score: int, depth: int) -> None:
        self._table[key] = TTEntry(score, depth)

    def clear(self) -> None:
        self._table.clear()
        self.hits = 0
        self.misses = 0

    def __len__(self) -> int:
        return len(self._table)

    def __contains__(self, key: int) -> bool:
        return key in self._table
