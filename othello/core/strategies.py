"""Interchangeable move choosers sharing the `decide_move(state)` capability."""

import random
from typing import Callable, Dict, Optional, Protocol

from othello.core.board import NO_MOVE, GameState, Position
from othello.core.search import SearchEngine


class Strategy(Protocol):
    def decide_move(self, state: GameState) -> Position:
        ...


class FirstMoveStrategy:
    """Plays the first legal move in enumeration order."""

    def decide_move(self, state: GameState) -> Position:
        moves = state.legal_moves()
        return moves[0] if moves else NO_MOVE


class RandomStrategy:
    """Uniformly random legal move; seed it for reproducible games."""

    def __init__(self, seed: Optional[int] = None):
        self.rng = random.Random(seed)

    def decide_move(self, state: GameState) -> Position:
        moves = state.legal_moves()
        return self.rng.choice(moves) if moves else NO_MOVE


class GreedyStrategy:
    """One-ply lookahead maximising the mover's token count."""

    def decide_move(self, state: GameState) -> Position:
        index = state.player - 1
        best_move = NO_MOVE
        max_tokens = 0
        for move in state.legal_moves():
            tokens = state.apply_move(move).token_counts()
            if tokens[index] > max_tokens:
                max_tokens = tokens[index]
                best_move = move
        return best_move


STRATEGIES: Dict[str, Callable[..., Strategy]] = {
    "minimax": SearchEngine,
    "greedy": GreedyStrategy,
    "random": RandomStrategy,
    "first": FirstMoveStrategy,
}


def make_strategy(name: str, **kwargs) -> Strategy:
    """Build a strategy from its registry name, passing `kwargs` through."""
    factory = STRATEGIES.get(name.lower())
    if factory is None:
        raise ValueError(f"Unknown strategy {name!r}, expected one of {sorted(STRATEGIES)}")
    return factory(**kwargs)
