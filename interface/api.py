"""FastAPI REST interface for the engine."""

import threading
from typing import List, Optional

from fastapi import FastAPI, HTTPException
from pydantic import BaseModel

from othello.config import CONFIG
from othello.core.board import BLACK, NO_MOVE, GameState, Position
from othello.core.search import SearchEngine

app = FastAPI(title=CONFIG.ui.engine_name, version="1.0.0")

# Shared engine instance; the evaluator keeps its weight table across requests.
engine = SearchEngine(depth=CONFIG.search.depth)
state = GameState.initial(CONFIG.ui.board_size)
_state_lock = threading.Lock()


class PositionRequest(BaseModel):
    rows: List[str]
    player: int = BLACK


class MoveRequest(BaseModel):
    col: int
    row: int


class SearchRequest(BaseModel):
    depth: Optional[int] = None


class ResetRequest(BaseModel):
    size: Optional[int] = None


def _move_json(move: Position):
    return None if move == NO_MOVE else {"col": move.col, "row": move.row}


def _describe(s: GameState):
    black, white = s.token_counts()
    return {
        "rows": s.to_rows(),
        "player": s.player,
        "legal_moves": [_move_json(m) for m in s.legal_moves()],
        "counts": {"black": black, "white": white},
        "is_finished": s.is_finished(),
        "winner": s.winner(),
    }


@app.get("/board")
def get_board():
    with _state_lock:
        return _describe(state)


@app.post("/position")
def set_position(req: PositionRequest):
    global state
    with _state_lock:
        try:
            state = GameState.from_rows(req.rows, req.player)
        except ValueError as e:
            raise HTTPException(status_code=400, detail=f"Invalid position: {e}")
        return _describe(state)


@app.post("/move")
def make_move(req: MoveRequest):
    global state
    with _state_lock:
        if state.is_finished():
            raise HTTPException(status_code=400, detail="Game is already over")
        try:
            state = state.apply_move(Position(req.col, req.row))
        except ValueError as e:
            raise HTTPException(status_code=400, detail=str(e))
        return _describe(state)


@app.post("/pass")
def pass_turn():
    global state
    with _state_lock:
        if state.legal_moves():
            raise HTTPException(status_code=400, detail="Cannot pass while a legal move exists")
        if state.is_finished():
            raise HTTPException(status_code=400, detail="Game is already over")
        state = state.apply_move(NO_MOVE)
        return _describe(state)


@app.post("/search")
def search_move(req: SearchRequest = SearchRequest()):
    with _state_lock:
        if state.is_finished():
            raise HTTPException(status_code=400, detail="Game is already over")
        search_state = state

    moves = search_state.legal_moves()
    result = None
    if not moves:
        move = NO_MOVE
    elif len(moves) == 1 and req.depth is None and engine.short_circuit:
        move = moves[0]
    else:
        try:
            result = engine.search(search_state, depth=req.depth)
        except ValueError as e:
            raise HTTPException(status_code=400, detail=str(e))
        move = result.move

    return {
        "best_move": _move_json(move),
        "score": result.utility if result else None,
        "nodes": result.nodes if result else 0,
        "rows": search_state.to_rows(),
    }


@app.post("/reset")
def reset_board(req: ResetRequest = ResetRequest()):
    global state
    with _state_lock:
        try:
            state = GameState.initial(req.size or CONFIG.ui.board_size)
        except ValueError as e:
            raise HTTPException(status_code=400, detail=str(e))
        return _describe(state)
