"""Process-wide now-playing state (single global channel, single process)."""

from ..application.services.broadcast_coordinator import BroadcastCoordinator
from ..infrastructure.realtime.current_track_store import CurrentTrackStore
from ..infrastructure.realtime.subscriber_registry import SubscriberRegistry

track_store = CurrentTrackStore()
subscriber_registry = SubscriberRegistry()
coordinator = BroadcastCoordinator(track_store, subscriber_registry)
