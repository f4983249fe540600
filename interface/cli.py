"""Self-play from the command line: one game between two named strategies."""

import argparse
import logging
import sys

from othello.config import CONFIG
from othello.core.board import BLACK, WHITE, GameState
from othello.core.strategies import STRATEGIES, make_strategy
from othello.core.utils import format_move
from othello.main import play_game

NAMES = {BLACK: "Black", WHITE: "White"}


def build(name: str, depth: int, seed):
    if name == "minimax":
        return make_strategy(name, depth=depth)
    if name == "random":
        return make_strategy(name, seed=seed)
    return make_strategy(name)


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Play one Othello game between two strategies.")
    parser.add_argument("--black", choices=sorted(STRATEGIES), default="minimax")
    parser.add_argument("--white", choices=sorted(STRATEGIES), default="greedy")
    parser.add_argument("--depth", type=int, default=CONFIG.search.depth)
    parser.add_argument("--size", type=int, default=CONFIG.ui.board_size)
    parser.add_argument("--seed", type=int, default=None)
    args = parser.parse_args(argv)

    logging.basicConfig(level=CONFIG.log_level, format="%(levelname)s %(name)s: %(message)s")

    try:
        state = GameState.initial(args.size)
        black = build(args.black, args.depth, args.seed)
        white = build(args.white, args.depth, args.seed)
    except ValueError as e:
        parser.error(str(e))

    record = play_game(black, white, state)

    player = BLACK
    for ply, move in enumerate(record.moves, start=1):
        print(f"{ply:3d}. {NAMES[player]:5s} {format_move(move)}")
        player = WHITE if player == BLACK else BLACK

    black_count, white_count = record.counts
    print("----------------------------")
    print(f"Black ({args.black}) {black_count} - {white_count} White ({args.white})")
    if record.winner in NAMES:
        print(f"Winner: {NAMES[record.winner]}")
    else:
        print("Draw")
    return 0


if __name__ == "__main__":
    sys.exit(main())
