"""Depth-limited minimax with alpha-beta pruning.

Leaves are always scored from the root mover's point of view: the perspective
is fixed when the search starts and handed down unchanged, while the
maximizing flag alternates with the player to move.
"""

import logging
import math
import time
from dataclasses import dataclass
from typing import Optional, Tuple

from othello.config import CONFIG
from othello.core.board import NO_MOVE, GameState, Position
from othello.core.evaluator import Evaluator
from othello.core.utils import format_info

logger = logging.getLogger(__name__)

INF = math.inf


@dataclass
class SearchResult:
    move: Position
    utility: float
    depth: int = 0
    nodes: int = 0
    elapsed_ms: float = 0.0


class SearchEngine:
    def __init__(
        self,
        evaluator: Optional[Evaluator] = None,
        depth: Optional[int] = None,
        prune: Optional[bool] = None,
        time_limit_ms: Optional[int] = None,
        short_circuit: Optional[bool] = None,
    ):
        cfg = CONFIG.search
        self.evaluator = evaluator or Evaluator()
        self.max_depth = self._check_depth(cfg.depth if depth is None else depth)
        self.prune = cfg.prune if prune is None else prune
        self.time_limit_ms = cfg.time_limit_ms if time_limit_ms is None else time_limit_ms
        self.short_circuit = cfg.short_circuit_single_move if short_circuit is None else short_circuit
        self.nodes = 0
        self._deadline: Optional[float] = None

    @staticmethod
    def _check_depth(depth: int) -> int:
        if not isinstance(depth, int) or depth < 1:
            raise ValueError(f"Search depth must be a positive integer, got {depth!r}")
        return depth

    # Public API
    def decide_move(self, state: GameState) -> Position:
        """Move to play in `state`, or NO_MOVE when the mover has to pass."""
        if state is None:
            raise ValueError("decide_move() needs a game state")
        self.nodes = 0
        moves = state.legal_moves()
        if not moves:
            return NO_MOVE
        if len(moves) == 1 and self.short_circuit:
            return moves[0]
        return self.search(state).move

    def search(self, state: GameState, depth: Optional[int] = None) -> SearchResult:
        """Run the full search at `depth` (engine default if omitted)."""
        if state is None:
            raise ValueError("search() needs a game state")
        depth = self._check_depth(self.max_depth if depth is None else depth)

        self.nodes = 0
        start = time.monotonic()
        self._deadline = start + self.time_limit_ms / 1000 if self.time_limit_ms else None
        try:
            move, utility = self.minimax(state, depth, True, -INF, INF, state.player)
        finally:
            self._deadline = None
        elapsed_ms = (time.monotonic() - start) * 1000

        logger.info(format_info(depth, utility, self.nodes, elapsed_ms, move))
        return SearchResult(move, utility, depth, self.nodes, elapsed_ms)

    def minimax(
        self,
        state: GameState,
        depth: int,
        maximizing: bool,
        alpha: float,
        beta: float,
        perspective: int,
    ) -> Tuple[Position, float]:
        self.nodes += 1
        moves = state.legal_moves()
        if depth == 0 or not moves:
            return NO_MOVE, self.evaluator.evaluate(state, perspective)

        best_move = NO_MOVE
        best_value = -INF if maximizing else INF

        for move in moves:
            child = state.apply_move(move)
            # out of time: score the remaining children statically
            child_depth = 0 if self._expired() else depth - 1
            _, value = self.minimax(child, child_depth, not maximizing, alpha, beta, perspective)

            if maximizing:
                if value > best_value:
                    best_value, best_move = value, move
                alpha = max(alpha, best_value)
                if self.prune and best_value >= beta:
                    break
            else:
                if value < best_value:
                    best_value, best_move = value, move
                beta = min(beta, best_value)
                if self.prune and best_value <= alpha:
                    break

        return best_move, best_value

    def _expired(self) -> bool:
        return self._deadline is not None and time.monotonic() >= self._deadline
