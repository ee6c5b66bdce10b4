"""Real-time now-playing channel (WebSocket and Server-Sent Events)"""

import asyncio
import logging

from fastapi import APIRouter, Depends, WebSocket, WebSocketDisconnect, status
from sse_starlette.sse import EventSourceResponse

from ...application.services.broadcast_coordinator import BroadcastCoordinator
from ...core.config import settings
from ..dependencies import get_coordinator

logger = logging.getLogger(__name__)

router = APIRouter(tags=["now-playing"])

SSE_POLL_SECONDS = 15.0
CLOSE_TIMEOUT_SECONDS = 5.0


async def _read_until_closed(websocket: WebSocket) -> None:
    # Client messages are ignored; reading detects the close
    while True:
        message = await websocket.receive()
        if message["type"] == "websocket.disconnect":
            return


@router.websocket("/ws")
async def now_playing_ws(
    websocket: WebSocket,
    coordinator: BroadcastCoordinator = Depends(get_coordinator),
):
    """Push-only channel: current track on connect, then every accepted track."""
    await websocket.accept()
    dropped = asyncio.Event()
    # Register before the sync push so a concurrent broadcast is not missed
    subscriber_id = coordinator.registry.register(websocket.send_text, on_drop=dropped.set)
    reader = asyncio.ensure_future(_read_until_closed(websocket))
    waiter = asyncio.ensure_future(dropped.wait())
    try:
        await coordinator.sync_new_subscriber(subscriber_id)
        await asyncio.wait({reader, waiter}, return_when=asyncio.FIRST_COMPLETED)
        if not reader.done():
            # Removed by the registry (failed push or shutdown): end the session
            await _close(websocket)
    finally:
        reader.cancel()
        waiter.cancel()
        coordinator.registry.unregister(subscriber_id)


async def _close(websocket: WebSocket) -> None:
    try:
        await asyncio.wait_for(
            websocket.close(code=status.WS_1011_INTERNAL_ERROR), timeout=CLOSE_TIMEOUT_SECONDS
        )
    except (asyncio.TimeoutError, RuntimeError, WebSocketDisconnect) as e:
        logger.debug("Close of dropped WebSocket failed: %s", e)


@router.get("/stream")
async def now_playing_stream(coordinator: BroadcastCoordinator = Depends(get_coordinator)):
    """Server-Sent Events variant of the now-playing channel."""
    queue: asyncio.Queue = asyncio.Queue(maxsize=settings.SSE_QUEUE_SIZE)

    async def send(payload: str) -> None:
        # A full queue means the client stopped reading; QueueFull drops it
        queue.put_nowait(payload)

    async def event_generator():
        # Registered only once streaming starts, so the finally always pairs with it
        subscriber_id = coordinator.registry.register(send)
        try:
            await coordinator.sync_new_subscriber(subscriber_id)
            while coordinator.registry.get(subscriber_id) is not None:
                try:
                    payload = await asyncio.wait_for(queue.get(), timeout=SSE_POLL_SECONDS)
                except asyncio.TimeoutError:
                    continue
                yield {"event": "track", "data": payload}
        finally:
            coordinator.registry.unregister(subscriber_id)

    return EventSourceResponse(event_generator())
