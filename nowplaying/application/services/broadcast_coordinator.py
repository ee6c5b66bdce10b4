"""Store-write-and-fan-out for accepted tracks"""

import asyncio
import json
import logging

from ...core.config import settings
from ...domain.entities.track import TrackRecord
from ...domain.value_objects.entity_ids import SubscriberId
from ...infrastructure.realtime.current_track_store import CurrentTrackStore
from ...infrastructure.realtime.subscriber_registry import Subscriber, SubscriberRegistry

logger = logging.getLogger(__name__)


def serialize_track(track: TrackRecord) -> str:
    return json.dumps(track.to_dict())


class BroadcastCoordinator:
    """Single serialization point for every push to subscribers.

    `accept` and `sync_new_subscriber` share one lock, so every subscriber
    receives tracks in accept order and a sync push never lands after a newer
    broadcast.
    """

    def __init__(
        self,
        store: CurrentTrackStore,
        registry: SubscriberRegistry,
        send_timeout: float = settings.SUBSCRIBER_SEND_TIMEOUT,
    ) -> None:
        self.store = store
        self.registry = registry
        self.send_timeout = send_timeout
        self._lock = asyncio.Lock()

    async def accept(self, track: TrackRecord) -> None:
        async with self._lock:
            self.store.set(track)
            payload = serialize_track(track)

            async def _push(subscriber: Subscriber) -> None:
                await self._push(subscriber, payload)

            await self.registry.for_each(_push)
            logger.info("Now playing: %s (%s)", track.title, track.source_id)

    async def sync_new_subscriber(self, subscriber_id: SubscriberId) -> None:
        async with self._lock:
            track = self.store.get()
            if track is None:
                return
            subscriber = self.registry.get(subscriber_id)
            if subscriber is None:
                return
            await self._push(subscriber, serialize_track(track))

    async def _push(self, subscriber: Subscriber, payload: str) -> None:
        try:
            await asyncio.wait_for(subscriber.deliver(payload), timeout=self.send_timeout)
        except Exception as e:
            # A failed push is treated as a disconnect
            logger.warning("Push to %s failed (%s: %s), dropping", subscriber.id, type(e).__name__, e)
            self.registry.unregister(subscriber.id)
