"""Request models shared by the HTTP and WebSocket routes."""

from __future__ import annotations

from pydantic import BaseModel, Field

from nimengine.constants import INITIAL_PILE, MAX_ANALYTIC_DEPTH, Algorithm

MAX_STONES = 64


class SearchRequest(BaseModel):
    stones: int = Field(default=INITIAL_PILE, ge=0, le=MAX_STONES)
    algorithm: Algorithm = Field(default=Algorithm.ALPHABETA)
    target_depth: int | None = Field(default=None, ge=0, le=MAX_ANALYTIC_DEPTH)
    is_root_maximizing: bool = Field(default=False)


class AnalyticsRequest(BaseModel):
    stones: int = Field(default=INITIAL_PILE, ge=0, le=MAX_STONES)
    quiet: bool = Field(default=False)
    seed: int | None = Field(default=None)


class EngineMoveRequest(BaseModel):
    stones: int = Field(default=INITIAL_PILE, ge=1, le=MAX_STONES)
    algorithm: Algorithm = Field(default=Algorithm.ALPHABETA)
    seed: int | None = Field(default=None)


class MoveRequest(BaseModel):
    stones: int = Field(default=INITIAL_PILE, ge=0, le=MAX_STONES)
    # Legality is checked against the pile so every illegal take is a 400.
    take: int
