"""Engine-wide constants and the algorithm selector."""

from __future__ import annotations

from enum import Enum

INITIAL_PILE = 7
MAX_TAKE = 3
MAX_ANALYTIC_DEPTH = 7

# Presentation delay before an automated move is applied.
ENGINE_MOVE_DELAY_MS = 800

# Synthetic timing: cost per visited node plus a bounded jitter.
TIME_PER_NODE = 0.15
MINIMAX_JITTER = 0.2
ALPHABETA_JITTER = 0.1

PLAYER = "player"
ENGINE = "engine"


class Algorithm(str, Enum):
    MINIMAX = "minimax"
    ALPHABETA = "alphabeta"


def legal_takes(stones: int) -> range:
    if stones < 0:
        raise ValueError(f"Stone count must be >= 0, got {stones}")
    return range(1, min(MAX_TAKE, stones) + 1)


def search_depth_for(stones: int, max_depth: int = MAX_ANALYTIC_DEPTH) -> int:
    return min(stones, max_depth)
