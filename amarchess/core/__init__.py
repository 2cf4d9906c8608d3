"""Core engine components: position, evaluator, ordering, search, and transposition table."""

from .board import ChessBoard, Position
from .evaluator import Evaluator
from .search import SearchEngine, SearchResult
from .transposition import TranspositionTable
