"""Registry of live real-time subscribers (single process)."""

import asyncio
import logging
import threading
from dataclasses import dataclass, field
from typing import Awaitable, Callable, Dict, List, Optional

from ...domain.value_objects.entity_ids import SubscriberId

logger = logging.getLogger(__name__)

SendHandle = Callable[[str], Awaitable[None]]
DropHook = Callable[[], None]


@dataclass(eq=False)
class Subscriber:
    id: SubscriberId
    send: SendHandle
    on_drop: Optional[DropHook] = None
    alive: bool = field(default=True)

    async def deliver(self, payload: str) -> bool:
        """Send unless the subscriber was removed; returns whether it sent."""
        if not self.alive:
            return False
        await self.send(payload)
        return True

    def drop(self) -> None:
        self.alive = False
        if self.on_drop is not None:
            self.on_drop()


class SubscriberRegistry:
    """Membership set of connected subscribers.

    The lock only guards the membership dict; sends happen outside it.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._subscribers: Dict[SubscriberId, Subscriber] = {}

    def register(self, send: SendHandle, on_drop: Optional[DropHook] = None) -> SubscriberId:
        """Add a subscriber; on_drop runs once when the registry removes it."""
        subscriber = Subscriber(id=SubscriberId.generate(), send=send, on_drop=on_drop)
        with self._lock:
            self._subscribers[subscriber.id] = subscriber
            total = len(self._subscribers)
        logger.info("Client connected: %s (%d connected)", subscriber.id, total)
        return subscriber.id

    def unregister(self, subscriber_id: SubscriberId) -> None:
        with self._lock:
            subscriber = self._subscribers.pop(subscriber_id, None)
            total = len(self._subscribers)
        if subscriber is None:
            return
        subscriber.drop()
        logger.info("Client disconnected: %s (%d connected)", subscriber_id, total)

    def get(self, subscriber_id: SubscriberId) -> Optional[Subscriber]:
        with self._lock:
            return self._subscribers.get(subscriber_id)

    def snapshot(self) -> List[Subscriber]:
        with self._lock:
            return list(self._subscribers.values())

    def count(self) -> int:
        with self._lock:
            return len(self._subscribers)

    async def for_each(self, fn: Callable[[Subscriber], Awaitable[None]]) -> None:
        """Apply fn to every live subscriber concurrently.

        Liveness is re-checked when each call starts, so a subscriber removed
        after the snapshot was taken is skipped.
        """
        async def _apply(subscriber: Subscriber) -> None:
            if subscriber.alive:
                await fn(subscriber)

        await asyncio.gather(*(_apply(s) for s in self.snapshot()))

    def close_all(self) -> None:
        with self._lock:
            subscribers = list(self._subscribers.values())
            self._subscribers.clear()
        for subscriber in subscribers:
            subscriber.drop()
        if subscribers:
            logger.info("Dropped %d subscriber(s)", len(subscribers))
