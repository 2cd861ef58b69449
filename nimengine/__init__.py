"""Nim minimax / alpha-beta search engine package."""

from .analytics import AnalyticsRow, SearchStats, compare
from .constants import Algorithm
from .game import NimGame
from .node import SearchNode
from .search import run_search, search
from .selector import choose_move

__all__ = [
    "Algorithm",
    "AnalyticsRow",
    "NimGame",
    "SearchNode",
    "SearchStats",
    "choose_move",
    "compare",
    "run_search",
    "search",
]
