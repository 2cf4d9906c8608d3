import logging
from typing import Optional

import chess


def configure_logging(level: str = "INFO"):
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def format_score(score: int, mate_score: int) -> str:
    # mate scores carry no distance, so only the sign is reported
    if abs(score) >= mate_score:
        return "mate 1" if score > 0 else "mate -1"
    return f"cp {score}"


def format_info(d: int, score: int, nodes: int, elapsed: float,
                best: Optional[chess.Move], mate_score: int) -> str:
    best_str = best.uci() if best else "-"
    nps = int(nodes / elapsed) if elapsed > 0 else 0
    return (f"info depth {d} score {format_score(score, mate_score)} nodes {nodes} "
            f"nps {nps} time {int(elapsed * 1000)} pv {best_str}")
