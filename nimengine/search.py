"""Minimax and alpha-beta game tree search over Nim positions."""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass

from .constants import MAX_ANALYTIC_DEPTH, Algorithm, legal_takes, search_depth_for
from .node import SearchNode

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class NodeCounter:
    """Visit counter owned by the caller of a single search invocation."""

    visits: int = 0


@dataclass(slots=True)
class SearchResult:
    root: SearchNode
    nodes: int
    algorithm: Algorithm
    target_depth: int

    @property
    def score(self) -> int:
        return self.root.score


def terminal_score(is_maximizing: bool) -> int:
    # The side to move at a terminal node is scored as the loser.
    return -1 if is_maximizing else 1


def search(
    algorithm: Algorithm,
    stones_left: int,
    is_maximizing: bool,
    alpha: float,
    beta: float,
    depth: int,
    target_depth: int,
    counter: NodeCounter,
) -> SearchNode:
    """Build the search tree rooted at ``stones_left`` and score it.

    Scores are from the maximizing player's point of view. Every call
    increments ``counter`` once; placeholders for pruned branches are
    synthesized without a call and are not counted.
    """
    if stones_left < 0:
        raise ValueError(f"stones_left must be >= 0, got {stones_left}")
    if target_depth < 0:
        raise ValueError(f"target_depth must be >= 0, got {target_depth}")

    counter.visits += 1
    node = SearchNode(stones=stones_left, is_maximizing=is_maximizing, depth=depth)

    if stones_left == 0 or depth >= target_depth:
        node.score = terminal_score(is_maximizing)
        return node

    best_val = -math.inf if is_maximizing else math.inf
    pruning = False

    for take in legal_takes(stones_left):
        if pruning and algorithm == Algorithm.ALPHABETA:
            node.children.append(SearchNode.placeholder(stones_left - take, not is_maximizing, depth + 1))
            continue

        child = search(
            algorithm,
            stones_left - take,
            not is_maximizing,
            alpha,
            beta,
            depth + 1,
            target_depth,
            counter,
        )
        node.children.append(child)

        if is_maximizing:
            best_val = max(best_val, child.score)
            alpha = max(alpha, best_val)
        else:
            best_val = min(best_val, child.score)
            beta = min(beta, best_val)

        if algorithm == Algorithm.ALPHABETA and beta <= alpha:
            pruning = True

    node.score = int(best_val)
    return node


def run_search(
    algorithm: Algorithm,
    stones: int,
    is_maximizing: bool = False,
    target_depth: int | None = None,
    max_depth: int = MAX_ANALYTIC_DEPTH,
) -> SearchResult:
    """Run one independent search from ``stones`` with a fresh counter."""
    algorithm = Algorithm(algorithm)
    if target_depth is None:
        target_depth = search_depth_for(stones, max_depth)

    counter = NodeCounter()
    root = search(algorithm, stones, is_maximizing, -math.inf, math.inf, 0, target_depth, counter)
    logger.debug(
        "%s search stones=%d depth=%d root_max=%s score=%d nodes=%d",
        algorithm.value,
        stones,
        target_depth,
        is_maximizing,
        root.score,
        counter.visits,
    )
    return SearchResult(root=root, nodes=counter.visits, algorithm=algorithm, target_depth=target_depth)
