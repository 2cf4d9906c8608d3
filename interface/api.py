"""FastAPI REST interface for the engine."""

import threading

import chess
from fastapi import FastAPI, HTTPException
from pydantic import BaseModel
from typing import Optional

from amarchess.core.board import Position
from amarchess.core.search import InvalidDepthError, NoLegalMovesError, SearchEngine
from amarchess.core.evaluator import Evaluator
from amarchess.config import CONFIG

app = FastAPI(title=CONFIG.ui.engine_name, version="1.0.0")

# Tables are per search, so the shared engine holds no state between requests.
engine = SearchEngine(Evaluator(), depth=CONFIG.search.depth)
board = chess.Board()
# Guards reads/updates of ``board`` only; never held during a search.
_board_lock = threading.Lock()


class FenRequest(BaseModel):
    fen: str


class MoveRequest(BaseModel):
    move: str  # UCI format e.g. "e2e4"


class SearchRequest(BaseModel):
    depth: Optional[int] = None


@app.get("/board")
def get_board():
    with _board_lock:
        return {
            "fen": board.fen(),
            "turn": "white" if board.turn == chess.WHITE else "black",
            "legal_moves": [m.uci() for m in board.legal_moves],
            "is_check": board.is_check(),
            "is_game_over": board.is_game_over(),
            "result": board.result() if board.is_game_over() else None,
        }


@app.post("/position")
def set_position(req: FenRequest):
    with _board_lock:
        try:
            board.set_fen(req.fen)
        except ValueError as e:
            raise HTTPException(status_code=400, detail=f"Invalid FEN: {e}")
        return {"fen": board.fen()}


@app.post("/move")
def make_move(req: MoveRequest):
    with _board_lock:
        try:
            move = chess.Move.from_uci(req.move)
        except ValueError:
            raise HTTPException(status_code=400, detail=f"Invalid UCI move: {req.move}")
        if move not in board.legal_moves:
            raise HTTPException(status_code=400, detail=f"Illegal move: {req.move}")
        board.push(move)
        return {"fen": board.fen(), "move": req.move}


@app.post("/search")
def search_move(req: SearchRequest = SearchRequest()):
    with _board_lock:
        position = Position(board)

    depth = engine.max_depth if req.depth is None else req.depth
    try:
        result = engine.search_best_move(position, depth)
    except InvalidDepthError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except NoLegalMovesError:
        raise HTTPException(status_code=400, detail="Game is already over")
    return {
        "best_move": result.best_move.uci(),
        "score": result.score,
        "depth": result.depth,
        "nodes": result.nodes,
        "fen": position.fen(),
    }


@app.post("/reset")
def reset_board():
    with _board_lock:
        board.reset()
        return {"fen": board.fen()}
