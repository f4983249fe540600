import logging
from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from othello.config import CONFIG
from othello.core.board import NO_MOVE, BLACK, GameState, Position
from othello.core.search import SearchEngine
from othello.core.strategies import Strategy
from othello.core.utils import format_move

logger = logging.getLogger(__name__)


class Engine:
    def __init__(self, depth: Optional[int] = None, size: Optional[int] = None):
        self.size = size or CONFIG.ui.board_size
        self.state = GameState.initial(self.size)
        self.search = SearchEngine(depth=depth)
        self.move_history: List[Position] = []

    def reset(self, size: Optional[int] = None):
        self.size = size or self.size
        self.state = GameState.initial(self.size)
        self.move_history.clear()

    def get_best_move(self) -> Tuple[Position, Optional[float]]:
        """Engine's move for the current player; utility is None when no search ran."""
        moves = self.state.legal_moves()
        if len(moves) <= 1 and self.search.short_circuit:
            return self.search.decide_move(self.state), None
        result = self.search.search(self.state)
        return result.move, result.utility

    def make_move(self, col: int, row: int) -> bool:
        """Play (col, row) for the player to move. Returns True if legal."""
        move = Position(col, row)
        if not self.state.is_legal(move):
            return False
        self.state = self.state.apply_move(move)
        self.move_history.append(move)
        return True

    def pass_turn(self) -> bool:
        """Pass, allowed only when the player to move has no legal move."""
        if self.state.legal_moves():
            return False
        self.state = self.state.apply_move(NO_MOVE)
        self.move_history.append(NO_MOVE)
        return True

    def legal_moves(self) -> List[Position]:
        return self.state.legal_moves()

    def is_finished(self) -> bool:
        return self.state.is_finished()


@dataclass
class GameRecord:
    moves: List[Position] = field(default_factory=list)
    final_state: Optional[GameState] = None
    counts: Tuple[int, int] = (0, 0)
    winner: Optional[int] = None  # None when stopped before the end


def play_game(
    black: Strategy,
    white: Strategy,
    state: Optional[GameState] = None,
    max_plies: Optional[int] = None,
) -> GameRecord:
    """Play a single game between two strategies and record it."""
    state = state or GameState.initial(CONFIG.ui.board_size)
    record = GameRecord()

    while not state.is_finished():
        if max_plies is not None and len(record.moves) >= max_plies:
            break
        legal = state.legal_moves()
        if not legal:
            move = NO_MOVE
        else:
            strategy = black if state.player == BLACK else white
            move = strategy.decide_move(state)
            if move not in legal:
                raise ValueError(
                    f"{type(strategy).__name__} chose {format_move(move)}, "
                    f"which is not legal for player {state.player}"
                )
        logger.debug("player %d plays %s", state.player, format_move(move))
        state = state.apply_move(move)
        record.moves.append(move)

    record.final_state = state
    record.counts = state.token_counts()
    record.winner = state.winner()
    return record
