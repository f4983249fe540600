from othello.core.board import Position


def format_move(move: Position) -> str:
    return "pass" if move.is_pass else f"({move.col},{move.row})"


def format_info(depth, score, nodes, elapsed_ms, move: Position) -> str:
    nps = int(nodes * 1000 / elapsed_ms) if elapsed_ms > 0 else 0
    return (f"info depth {depth} score {score:.4f} nodes {nodes} nps {nps} "
            f"time {int(elapsed_ms)} move {format_move(move)}")
