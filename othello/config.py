# othello/config.py
from dataclasses import dataclass, field
from typing import Dict, Optional
import os
import tomllib

# Per-tier cell weights for the positional signal
TIER_WEIGHTS = {
    "CORNER": 1.0,
    "CORNER_ADJACENT": -0.5,
    "CORNER_DIAGONAL": -1.0,
    "OUTER_EDGE": 0.8,
    "INNER_EDGE": -0.5,
    "INTERIOR": 0.3,
}

@dataclass
class SearchConfig:
    depth: int = 5
    time_limit_ms: Optional[int] = None  # None means depth-only
    short_circuit_single_move: bool = True
    prune: bool = True

@dataclass
class EvalConfig:
    tier_weights: Dict[str, float] = field(default_factory=lambda: TIER_WEIGHTS.copy())
    blend_weight: float = 0.5  # share of the positional signal

@dataclass
class AnalyzerConfig:
    # utility gaps (best minus played) from the mover's point of view
    TH_BEST: float = 0.01
    TH_GOOD: float = 0.05
    TH_INACCURACY: float = 0.12
    TH_MISTAKE: float = 0.25

@dataclass
class UIConfig:
    engine_name: str = "Othello Engine"
    board_size: int = 8
    api_port: int = 8000

@dataclass
class Config:
    search: SearchConfig = field(default_factory=SearchConfig)
    eval: EvalConfig = field(default_factory=EvalConfig)
    analyzer: AnalyzerConfig = field(default_factory=AnalyzerConfig)
    ui: UIConfig = field(default_factory=UIConfig)
    log_level: str = "INFO"

    @staticmethod
    def load_from_toml(path: str = "config.toml") -> "Config":
        cfg = Config()
        if not os.path.exists(path):
            return cfg
        with open(path, "rb") as f:
            raw = tomllib.load(f)
        for section in ("search", "eval", "analyzer", "ui"):
            target = getattr(cfg, section)
            for k, v in raw.get(section, {}).items():
                if not hasattr(target, k):
                    continue
                if k == "tier_weights":
                    # partial tables only override the tiers they name
                    merged = target.tier_weights.copy()
                    merged.update({name.upper(): float(w) for name, w in v.items()})
                    v = merged
                setattr(target, k, v)
        if "log_level" in raw:
            cfg.log_level = str(raw["log_level"]).upper()
        return cfg

# single globally importable config instance
CONFIG = Config.load_from_toml(os.environ.get("OTHELLO_CONFIG_TOML", "config.toml"))
# allow env override of depth for quick debugging
override_depth = os.environ.get("OTHELLO_SEARCH_DEPTH")
if override_depth:
    CONFIG.search.depth = int(override_depth)
