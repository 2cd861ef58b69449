"""FastAPI server exposing search, analytics and gameplay endpoints."""

from __future__ import annotations

import logging
import random

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware

from nimengine.analytics import AnalyticsRow, compare
from nimengine.constants import (
    ENGINE_MOVE_DELAY_MS,
    INITIAL_PILE,
    MAX_ANALYTIC_DEPTH,
    Algorithm,
    legal_takes,
    search_depth_for,
)
from nimengine.search import run_search
from nimengine.selector import MoveSelection, choose_move

from .schemas import AnalyticsRequest, EngineMoveRequest, MoveRequest, SearchRequest
from .websocket import router as websocket_router

logger = logging.getLogger(__name__)


app = FastAPI(title="Nim Search API", version="0.1.0")

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(websocket_router)


def _rng(seed: int | None) -> random.Random:
    return random.Random(seed)


def _position_payload(stones: int) -> dict:
    return {
        "stones": stones,
        "legal_moves": list(legal_takes(stones)),
        "status": "ongoing" if stones > 0 else "finished",
    }


def _row_payload(row: AnalyticsRow) -> dict:
    return {
        "depth": row.depth,
        "minimax_nodes": row.minimax_nodes,
        "alphabeta_nodes": row.alphabeta_nodes,
        "minimax_time": round(row.minimax_time, 2),
        "alphabeta_time": round(row.alphabeta_time, 2),
    }


def _selection_payload(selection: MoveSelection) -> dict:
    return {
        "move": selection.move,
        "algorithm": selection.algorithm.value,
        "search_depth": selection.search_depth,
        "nodes": selection.nodes,
        "stats": {
            "minimax_nodes": selection.stats.minimax_nodes,
            "alphabeta_nodes": selection.stats.alphabeta_nodes,
            "elapsed_time": round(selection.stats.elapsed_time, 2),
        },
        "rows": [_row_payload(row) for row in selection.rows],
        "tree": selection.tree.to_dict(),
    }


@app.get("/")
def root() -> dict:
    return {
        "status": "ok",
        "service": "nim-search",
        "algorithms": [algorithm.value for algorithm in Algorithm],
        "initial_pile": INITIAL_PILE,
        "max_depth": MAX_ANALYTIC_DEPTH,
        "engine_move_delay_ms": ENGINE_MOVE_DELAY_MS,
    }


@app.get("/health")
def health() -> dict[str, str]:
    return {"status": "ok"}


@app.post("/search")
def search_position(payload: SearchRequest) -> dict:
    target_depth = payload.target_depth
    if target_depth is None:
        target_depth = search_depth_for(payload.stones)
    result = run_search(payload.algorithm, payload.stones, payload.is_root_maximizing, target_depth)
    return {
        "algorithm": result.algorithm.value,
        "target_depth": result.target_depth,
        "score": result.score,
        "nodes": result.nodes,
        "tree": result.root.to_dict(),
    }


@app.post("/analytics")
def analytics(payload: AnalyticsRequest) -> dict:
    rows = compare(payload.stones, quiet=payload.quiet, rng=_rng(payload.seed))
    return {"stones": payload.stones, "rows": [_row_payload(row) for row in rows]}


@app.post("/engine-move")
def engine_move(payload: EngineMoveRequest) -> dict:
    try:
        selection = choose_move(payload.algorithm, payload.stones, rng=_rng(payload.seed))
    except ValueError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    response = _position_payload(payload.stones - selection.move)
    response.update(_selection_payload(selection))
    return response


@app.post("/move")
def move(payload: MoveRequest) -> dict:
    if payload.take not in legal_takes(payload.stones):
        logger.warning("rejected move: take %d from %d", payload.take, payload.stones)
        raise HTTPException(status_code=400, detail=f"Illegal move: take {payload.take} from {payload.stones}")
    response = _position_payload(payload.stones - payload.take)
    response["last_move"] = payload.take
    return response


@app.post("/reset")
def reset() -> dict:
    return _position_payload(INITIAL_PILE)
