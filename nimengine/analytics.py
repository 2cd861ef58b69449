"""Per-depth comparison of minimax and alpha-beta search cost."""

from __future__ import annotations

import logging
import random
from dataclasses import asdict, dataclass
from typing import Callable

from .constants import (
    ALPHABETA_JITTER,
    MAX_ANALYTIC_DEPTH,
    MINIMAX_JITTER,
    TIME_PER_NODE,
    Algorithm,
    search_depth_for,
)
from .search import run_search

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class AnalyticsRow:
    depth: int
    minimax_nodes: int
    alphabeta_nodes: int
    minimax_time: float
    alphabeta_time: float

    def to_dict(self) -> dict:
        return asdict(self)


@dataclass(slots=True)
class SearchStats:
    minimax_nodes: int = 0
    alphabeta_nodes: int = 0
    elapsed_time: float = 0.0

    def to_dict(self) -> dict:
        return asdict(self)


def estimate_time(nodes: int, jitter: float, rng: random.Random) -> float:
    """Synthetic search time: proportional to node count plus noise in [0, jitter).

    This is an estimate for charting relative cost, not a measurement.
    """
    return nodes * TIME_PER_NODE + rng.random() * jitter


def compare(
    pile_size: int,
    *,
    quiet: bool = False,
    rng: random.Random | None = None,
    max_depth: int = MAX_ANALYTIC_DEPTH,
    on_row: Callable[[AnalyticsRow], None] | None = None,
) -> list[AnalyticsRow]:
    """Run both algorithms at every depth from 1 to ``min(pile_size, max_depth)``.

    The root is evaluated as the side to move, minimizing. With ``quiet`` every
    time estimate is 0 so nothing is shown before a real comparison.
    """
    if pile_size < 0:
        raise ValueError(f"pile_size must be >= 0, got {pile_size}")

    rng = rng or random.Random()
    rows: list[AnalyticsRow] = []

    for depth in range(1, search_depth_for(pile_size, max_depth) + 1):
        minimax_nodes = run_search(Algorithm.MINIMAX, pile_size, False, depth).nodes
        alphabeta_nodes = run_search(Algorithm.ALPHABETA, pile_size, False, depth).nodes

        if quiet:
            minimax_time = 0.0
            alphabeta_time = 0.0
        else:
            minimax_time = estimate_time(minimax_nodes, MINIMAX_JITTER, rng)
            alphabeta_time = estimate_time(alphabeta_nodes, ALPHABETA_JITTER, rng)

        row = AnalyticsRow(
            depth=depth,
            minimax_nodes=minimax_nodes,
            alphabeta_nodes=alphabeta_nodes,
            minimax_time=minimax_time,
            alphabeta_time=alphabeta_time,
        )
        logger.debug("pile=%d %s", pile_size, row)
        rows.append(row)
        if on_row is not None:
            on_row(row)

    return rows


def stats_for(rows: list[AnalyticsRow], algorithm: Algorithm, depth: int) -> SearchStats:
    """Stats at ``depth``, or from the deepest row when there is no exact match."""
    if not rows:
        return SearchStats()

    row = next((r for r in rows if r.depth == depth), rows[-1])
    elapsed = row.minimax_time if Algorithm(algorithm) == Algorithm.MINIMAX else row.alphabeta_time
    return SearchStats(
        minimax_nodes=row.minimax_nodes,
        alphabeta_nodes=row.alphabeta_nodes,
        elapsed_time=elapsed,
    )
