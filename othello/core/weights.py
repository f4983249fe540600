"""Static per-cell weights for the positional part of the evaluation.

Every cell falls into one tier according to how far it sits from the nearest
column edge (`dc`) and the nearest row edge (`dr`):

    CORNER           dc == 0 and dr == 0
    CORNER_ADJACENT  one of them 0, the other 1
    CORNER_DIAGONAL  dc == 1 and dr == 1
    OUTER_EDGE       dc == 0 or dr == 0 (rest of the border)
    INNER_EDGE       dc == 1 or dr == 1 (rest of the second ring)
    INTERIOR         everything else

Distances are measured to the nearest edge, so the table is invariant under
all rotations and reflections of the board.
"""

import math
from dataclasses import dataclass
from typing import Dict, Mapping, Optional, Tuple

from othello.config import TIER_WEIGHTS
from othello.core.board import check_size

TIERS = tuple(TIER_WEIGHTS)


def cell_tier(size: int, col: int, row: int) -> str:
    dc = min(col, size - 1 - col)
    dr = min(row, size - 1 - row)
    if dc == 0 and dr == 0:
        return "CORNER"
    if (dc, dr) in ((0, 1), (1, 0)):
        return "CORNER_ADJACENT"
    if dc == 1 and dr == 1:
        return "CORNER_DIAGONAL"
    if dc == 0 or dr == 0:
        return "OUTER_EDGE"
    if dc == 1 or dr == 1:
        return "INNER_EDGE"
    return "INTERIOR"


@dataclass(frozen=True)
class WeightTable:
    size: int
    weights: Tuple[Tuple[float, ...], ...]  # weights[row][col]
    total: float     # sum of all weights
    extreme: float   # sum of absolute weights, bounds |own - opponent|

    def weight(self, col: int, row: int) -> float:
        return self.weights[row][col]


def build_weight_table(size: int, tier_weights: Optional[Mapping[str, float]] = None) -> WeightTable:
    check_size(size)
    tiers: Dict[str, float] = dict(TIER_WEIGHTS)
    if tier_weights:
        unknown = set(tier_weights) - set(TIERS)
        if unknown:
            raise ValueError(f"Unknown weight tiers: {sorted(unknown)}")
        tiers.update(tier_weights)

    weights = tuple(
        tuple(float(tiers[cell_tier(size, col, row)]) for col in range(size))
        for row in range(size)
    )
    flat = [w for row in weights for w in row]
    extreme = math.fsum(abs(w) for w in flat)
    if extreme == 0:
        raise ValueError("All tier weights are zero")
    return WeightTable(size=size, weights=weights, total=math.fsum(flat), extreme=extreme)
