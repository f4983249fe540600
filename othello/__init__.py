"""Othello decision engine: minimax search with alpha-beta pruning."""
