# amarchess/config.py
import logging
import os
import tomllib
from dataclasses import dataclass, field
from typing import Dict

logger = logging.getLogger(__name__)

# Material weights (centipawns)
PIECE_VALUES = {
    "PAWN": 100,
    "KNIGHT": 300,
    "BISHOP": 330,
    "ROOK": 560,
    "QUEEN": 950,
}

@dataclass
class SearchConfig:
    depth: int = 4  # plies, must be even
    iterative_deepening: bool = True
    use_transposition: bool = True
    capture_first: bool = True
    count_nodes: bool = True

@dataclass
class EvalConfig:
    piece_values: Dict[str, int] = field(default_factory=lambda: PIECE_VALUES.copy())
    bishop_pair_bonus: int = 50

@dataclass
class UIConfig:
    engine_name: str = "AmarChess"
    engine_author: str = "AmarChess developers"

@dataclass
class Config:
    search: SearchConfig = field(default_factory=SearchConfig)
    eval: EvalConfig = field(default_factory=EvalConfig)
    ui: UIConfig = field(default_factory=UIConfig)
    log_level: str = "INFO"

    @staticmethod
    def load_from_toml(path: str = "config.toml") -> "Config":
        cfg = Config()
        if not os.path.exists(path):
            return cfg
        with open(path, "rb") as f:
            raw = tomllib.load(f)
        for section in ("search", "eval", "ui"):
            target = getattr(cfg, section)
            for k, v in raw.get(section, {}).items():
                if hasattr(target, k):
                    setattr(target, k, v)
                else:
                    logger.warning("Unknown config key %s.%s in %s", section, k, path)
        if "log_level" in raw:
            cfg.log_level = str(raw["log_level"]).upper()
        return cfg

# single globally importable config instance
CONFIG = Config.load_from_toml(os.environ.get("AMARCHESS_CONFIG_TOML", "config.toml"))
# env override of depth for quick debugging
_override_depth = os.environ.get("AMARCHESS_SEARCH_DEPTH")
if _override_depth:
    try:
        CONFIG.search.depth = int(_override_depth)
    except ValueError:
        logger.warning("Ignoring non-integer AMARCHESS_SEARCH_DEPTH=%r", _override_depth)
