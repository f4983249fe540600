"""Core engine components: rules, weight table, evaluator, search and strategies."""

from .board import GameState, Position, NO_MOVE, EMPTY, BLACK, WHITE
from .weights import WeightTable, build_weight_table
from .evaluator import Evaluator
from .search import SearchEngine, SearchResult
from .strategies import FirstMoveStrategy, GreedyStrategy, RandomStrategy, make_strategy
