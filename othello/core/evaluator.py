import math
from typing import Optional, Tuple

from othello.config import CONFIG
from othello.core.board import EMPTY, BLACK, GameState, opponent
from othello.core.weights import WeightTable, build_weight_table


class Evaluator:
    """Static evaluation: blend of a positional and a progression signal.

    Scores are relative to a perspective player. The search passes the root
    mover explicitly so every leaf of one search is scored from the same side.
    """

    def __init__(self, blend_weight: Optional[float] = None, tier_weights=None):
        self.cfg = CONFIG.eval
        self.blend_weight = self.cfg.blend_weight if blend_weight is None else blend_weight
        if not 0.0 <= self.blend_weight <= 1.0:
            raise ValueError(f"Blend weight must be within [0, 1], got {self.blend_weight}")
        self.tier_weights = dict(tier_weights if tier_weights is not None else self.cfg.tier_weights)
        self._table: Optional[WeightTable] = None

    def table_for(self, size: int) -> WeightTable:
        """Weight table for `size`, built on first use and on size changes."""
        if self._table is None or self._table.size != size:
            self._table = build_weight_table(size, self.tier_weights)
        return self._table

    def evaluate(self, state: GameState, perspective: Optional[int] = None) -> float:
        """Utility of `state` for `perspective` (defaults to the player to move)."""
        player = perspective or state.player
        w = self.blend_weight
        return w * self.positional(state, player) + (1 - w) * self.progression(state, player)

    def positional(self, state: GameState, player: int) -> float:
        """Weighted cell ownership difference, in [-1, 1]."""
        table = self.table_for(state.size)
        other = opponent(player)
        own, opp = [], []
        for row, cells in enumerate(state.board):
            for col, cell in enumerate(cells):
                if cell == EMPTY:
                    continue
                if cell == player:
                    own.append(table.weights[row][col])
                elif cell == other:
                    opp.append(table.weights[row][col])
        # fsum: exact regardless of visiting order, so mirrored positions tie exactly
        return (math.fsum(own) - math.fsum(opp)) / table.extreme

    def progression(self, state: GameState, player: int) -> float:
        """Tile share weighted by game phase, in [-1.5, 0.5].

        Early on (board mostly empty) owning many tiles is penalised; once the
        board fills up the same share becomes an advantage.
        """
        own, opp = self._counts(state, player)
        cells = state.size * state.size
        occupation = (own + opp) / cells
        own_share = own / cells
        return (2 * occupation - 1) * own_share - 0.5

    @staticmethod
    def _counts(state: GameState, player: int) -> Tuple[int, int]:
        black, white = state.token_counts()
        return (black, white) if player == BLACK else (white, black)
