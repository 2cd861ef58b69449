"""Turn-based game session between a human player and the engine."""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass, field

from .analytics import AnalyticsRow, SearchStats, compare, stats_for
from .config import DEFAULT_CONFIG, EngineConfig
from .constants import ENGINE, PLAYER, Algorithm, legal_takes, search_depth_for
from .search import SearchResult, run_search
from .selector import MoveSelection, choose_move

logger = logging.getLogger(__name__)


class IllegalMoveError(ValueError):
    pass


@dataclass(frozen=True, slots=True)
class MoveRecord:
    player: str
    taken: int
    left: int


@dataclass(frozen=True, slots=True)
class PendingMove:
    """An engine decision tied to the game generation it was computed for."""

    selection: MoveSelection
    generation: int
    stones: int


@dataclass(frozen=True, slots=True)
class PositionView:
    """Tree, analytics table and stats shown for the current position."""

    search: SearchResult | None
    rows: list[AnalyticsRow]
    stats: SearchStats


@dataclass(slots=True)
class NimGame:
    config: EngineConfig = DEFAULT_CONFIG
    algorithm: Algorithm = Algorithm.ALPHABETA
    rng: random.Random | None = None
    stones: int = field(init=False)
    player_turn: bool = field(init=False, default=True)
    winner: str | None = field(init=False, default=None)
    history: list[MoveRecord] = field(init=False, default_factory=list)
    generation: int = field(init=False, default=0)
    rows: list[AnalyticsRow] = field(init=False, default_factory=list)
    stats: SearchStats = field(init=False, default_factory=SearchStats)

    def __post_init__(self) -> None:
        self.algorithm = Algorithm(self.algorithm)
        self.stones = self.config.initial_pile

    @property
    def over(self) -> bool:
        return self.winner is not None

    def legal_moves(self) -> list[int]:
        if self.over:
            return []
        return list(legal_takes(self.stones))

    def reset(self) -> None:
        self.stones = self.config.initial_pile
        self.player_turn = True
        self.winner = None
        self.history.clear()
        self.rows = []
        self.stats = SearchStats()
        self.generation += 1
        logger.debug("game reset, generation %d", self.generation)

    def player_move(self, taken: int) -> MoveRecord:
        if self.over:
            raise IllegalMoveError("Game is over")
        if not self.player_turn:
            raise IllegalMoveError("It is the engine's turn")
        if taken not in legal_takes(self.stones):
            raise IllegalMoveError(f"Cannot take {taken} from {self.stones} stones")
        return self._apply(PLAYER, taken)

    def plan_engine_move(self) -> PendingMove:
        if self.over or self.player_turn:
            raise IllegalMoveError("It is not the engine's turn")
        selection = choose_move(self.algorithm, self.stones, rng=self.rng, config=self.config)
        return PendingMove(selection=selection, generation=self.generation, stones=self.stones)

    def commit_engine_move(self, pending: PendingMove) -> bool:
        """Apply a planned move unless the game moved on since it was planned."""
        if (
            pending.generation != self.generation
            or pending.stones != self.stones
            or self.over
            or self.player_turn
        ):
            logger.info(
                "dropping stale engine move %d (planned for generation %d, now %d)",
                pending.selection.move,
                pending.generation,
                self.generation,
            )
            return False
        self._apply(ENGINE, pending.selection.move)
        self.rows = pending.selection.rows
        self.stats = pending.selection.stats
        return True

    def engine_move(self) -> MoveSelection:
        pending = self.plan_engine_move()
        self.commit_engine_move(pending)
        return pending.selection

    def preview(self) -> SearchResult | None:
        """Search tree for the current position, root evaluated as the side to move."""
        if self.stones == 0:
            return None
        depth = search_depth_for(self.stones, self.config.max_depth)
        return run_search(self.algorithm, self.stones, False, depth)

    def refresh(self) -> PositionView:
        """Recompute the tree and analytics for the current position.

        Before the first move the table is computed quiet, so no timing is
        shown until a real comparison has happened. A finished game keeps
        the last table.
        """
        if self.over or self.stones == 0:
            return PositionView(search=None, rows=list(self.rows), stats=self.stats)

        depth = search_depth_for(self.stones, self.config.max_depth)
        self.rows = compare(self.stones, quiet=not self.history, rng=self.rng, max_depth=self.config.max_depth)
        self.stats = stats_for(self.rows, self.algorithm, depth)
        return PositionView(search=self.preview(), rows=list(self.rows), stats=self.stats)

    def _apply(self, player: str, taken: int) -> MoveRecord:
        self.stones -= taken
        record = MoveRecord(player=player, taken=taken, left=self.stones)
        self.history.insert(0, record)

        if self.stones == 0:
            self.winner = player
            logger.info("game over, %s took the last stone", player)
        else:
            self.player_turn = player == ENGINE
        return record
