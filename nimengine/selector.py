"""Engine move selection on top of the game tree search."""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass

from .analytics import AnalyticsRow, SearchStats, compare, stats_for
from .config import DEFAULT_CONFIG, EngineConfig
from .constants import Algorithm, search_depth_for
from .node import SearchNode
from .search import run_search

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class MoveSelection:
    move: int
    algorithm: Algorithm
    search_depth: int
    stats: SearchStats
    rows: list[AnalyticsRow]
    tree: SearchNode
    nodes: int


def pick_child(root: SearchNode) -> int:
    """Move size of the lowest-scored non-pruned child; the smaller move wins ties."""
    choice = 1
    best_score: float = float("inf")
    for take, child in enumerate(root.children, start=1):
        if not child.pruned and child.score < best_score:
            best_score = child.score
            choice = take
    return choice


def choose_move(
    algorithm: Algorithm,
    pile_size: int,
    *,
    rng: random.Random | None = None,
    config: EngineConfig = DEFAULT_CONFIG,
) -> MoveSelection:
    if pile_size < 1:
        raise ValueError("choose_move needs at least one stone on the table")

    algorithm = Algorithm(algorithm)
    depth = search_depth_for(pile_size, config.max_depth)

    rows = compare(pile_size, rng=rng, max_depth=config.max_depth)
    stats = stats_for(rows, algorithm, depth)

    result = run_search(algorithm, pile_size, False, depth)
    move = pick_child(result.root)

    logger.info(
        "%s chose %d from %d stones (depth %d, %d nodes)",
        algorithm.value,
        move,
        pile_size,
        depth,
        result.nodes,
    )
    return MoveSelection(
        move=move,
        algorithm=algorithm,
        search_depth=depth,
        stats=stats,
        rows=rows,
        tree=result.root,
        nodes=result.nodes,
    )
