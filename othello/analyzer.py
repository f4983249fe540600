# othello/analyzer.py
from typing import Any, Dict, List, Sequence

from othello.config import CONFIG
from othello.core.board import NO_MOVE, GameState, Position
from othello.core.search import INF, SearchEngine
from othello.core.utils import format_move


class Analyzer:
    def __init__(self, search_engine: SearchEngine):
        self.search_engine = search_engine
        self.cfg = CONFIG.analyzer

    def _score_move(self, state: GameState, move: Position, depth: int) -> float:
        """Value of playing `move` for the mover, searched one ply shallower
        than the root so it is comparable with the engine's best line."""
        child = state.apply_move(move)
        _, value = self.search_engine.minimax(child, depth - 1, False, -INF, INF, state.player)
        return value

    def _label(self, delta: float) -> str:
        if delta <= self.cfg.TH_BEST:
            return "Excellent"
        if delta <= self.cfg.TH_GOOD:
            return "Good"
        if delta <= self.cfg.TH_INACCURACY:
            return "Inaccuracy"
        if delta <= self.cfg.TH_MISTAKE:
            return "Mistake"
        return "Blunder"

    def classify_move(self, state: GameState, move: Position) -> Dict[str, Any]:
        """
        Classify one move played in `state` (which is left untouched).
        Utilities are from the mover's point of view; delta_vs_best is how much
        the engine's best line is better than the played move (>= 0).
        """
        legal = state.legal_moves()
        if not legal:
            if move != NO_MOVE:
                raise ValueError(f"Player {state.player} has no legal move, got {format_move(move)}")
            return {
                "move": format_move(move),
                "player": state.player,
                "best_move": format_move(NO_MOVE),
                "best_score": None,
                "move_score": None,
                "delta_vs_best": 0.0,
                "label": "Forced pass",
            }
        if move not in legal:
            raise ValueError(f"Illegal move {format_move(move)} for player {state.player}")

        result = self.search_engine.search(state)
        move_score = self._score_move(state, move, result.depth)
        delta = max(0.0, result.utility - move_score)

        if len(legal) == 1:
            label = "Only move"
        elif move == result.move:
            label = "Best move"
        else:
            label = self._label(delta)

        return {
            "move": format_move(move),
            "player": state.player,
            "best_move": format_move(result.move),
            "best_score": result.utility,
            "move_score": move_score,
            "delta_vs_best": delta,
            "label": label,
        }

    def analyze_game(self, moves: Sequence[Position], size: int = 8) -> List[Dict[str, Any]]:
        """
        Classify every move of a game played from the initial position.
        Passes may be listed as NO_MOVE or left out.
        """
        state = GameState.initial(size)
        report = []
        for move in moves:
            move = Position(*move)
            if move != NO_MOVE and not state.legal_moves():
                state = state.apply_move(NO_MOVE)
            report.append(self.classify_move(state, move))
            state = state.apply_move(move)
        return report
