import os

# Must be set before nowplaying.core.config is imported
os.environ["TESTING"] = "true"

import pytest

from nowplaying.application.services.broadcast_coordinator import BroadcastCoordinator
from nowplaying.infrastructure.realtime.current_track_store import CurrentTrackStore
from nowplaying.infrastructure.realtime.subscriber_registry import SubscriberRegistry


@pytest.fixture
def coordinator() -> BroadcastCoordinator:
    return BroadcastCoordinator(CurrentTrackStore(), SubscriberRegistry(), send_timeout=1.0)
