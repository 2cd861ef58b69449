"""Runtime configuration for the engine, session and CLI."""

from __future__ import annotations

import os
from dataclasses import dataclass

from .constants import ENGINE_MOVE_DELAY_MS, INITIAL_PILE, MAX_ANALYTIC_DEPTH


@dataclass(frozen=True, slots=True)
class EngineConfig:
    """Values shared by the move selector, the game session and the CLI.

    initial_pile: stones on the table when a game starts or is reset
    max_depth: ceiling for analytic and move-selection search depth
    move_delay_ms: pause before an automated engine move is applied
    """

    initial_pile: int = INITIAL_PILE
    max_depth: int = MAX_ANALYTIC_DEPTH
    move_delay_ms: int = ENGINE_MOVE_DELAY_MS

    def __post_init__(self) -> None:
        if self.initial_pile < 1:
            raise ValueError("initial_pile must be >= 1")
        if self.max_depth < 1:
            raise ValueError("max_depth must be >= 1")
        if self.move_delay_ms < 0:
            raise ValueError("move_delay_ms must be >= 0")

    @classmethod
    def from_env(cls) -> EngineConfig:
        return cls(
            initial_pile=_env_int("NIM_INITIAL_PILE", INITIAL_PILE),
            max_depth=_env_int("NIM_MAX_DEPTH", MAX_ANALYTIC_DEPTH),
            move_delay_ms=_env_int("NIM_MOVE_DELAY_MS", ENGINE_MOVE_DELAY_MS),
        )


def _env_int(name: str, default: int) -> int:
    raw = os.environ.get(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError as exc:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from exc


DEFAULT_CONFIG = EngineConfig()
