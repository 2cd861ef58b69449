"""WebSocket routes for streaming per-depth analytics."""

from __future__ import annotations

import asyncio
import logging
import random

from fastapi import APIRouter, WebSocket, WebSocketDisconnect

from nimengine.analytics import AnalyticsRow, compare

from .schemas import AnalyticsRequest

logger = logging.getLogger(__name__)

router = APIRouter()


def _serialize_row(row: AnalyticsRow) -> dict:
    return {
        "type": "row",
        "depth": row.depth,
        "minimax_nodes": row.minimax_nodes,
        "alphabeta_nodes": row.alphabeta_nodes,
        "minimax_time": round(row.minimax_time, 2),
        "alphabeta_time": round(row.alphabeta_time, 2),
    }


def _serialize_complete(stones: int, rows: list[AnalyticsRow]) -> dict:
    return {
        "type": "complete",
        "stones": stones,
        "depths": len(rows),
        "rows": [{k: v for k, v in _serialize_row(row).items() if k != "type"} for row in rows],
    }


@router.websocket("/ws/analytics")
async def analytics_websocket(websocket: WebSocket) -> None:
    await websocket.accept()

    try:
        while True:
            payload = await websocket.receive_json()
            event_queue: asyncio.Queue[dict | None] = asyncio.Queue()
            loop = asyncio.get_running_loop()

            def on_row(row: AnalyticsRow) -> None:
                loop.call_soon_threadsafe(event_queue.put_nowait, _serialize_row(row))

            async def run_compare() -> None:
                try:
                    request = AnalyticsRequest.model_validate(payload)
                    rng = random.Random(request.seed)
                    rows = await asyncio.to_thread(
                        lambda: compare(request.stones, quiet=request.quiet, rng=rng, on_row=on_row),
                    )
                    await event_queue.put(_serialize_complete(request.stones, rows))
                except Exception as exc:  # noqa: BLE001
                    logger.warning("analytics stream failed: %s", exc)
                    await event_queue.put({"type": "error", "message": str(exc)})
                finally:
                    await event_queue.put(None)

            worker = asyncio.create_task(run_compare())

            while True:
                item = await event_queue.get()
                if item is None:
                    break
                await websocket.send_json(item)

            await worker
    except WebSocketDisconnect:
        return
