"""Play Track Use Case"""

import asyncio
import logging

from ...core.config import settings
from ...domain.entities.track import TrackRecord
from ...domain.exceptions import NowPlayingError, ResolutionTimeout
from ..services.broadcast_coordinator import BroadcastCoordinator
from ..services.track_resolver import TrackResolver

logger = logging.getLogger(__name__)


class PlayTrackUseCase:
    """Resolve a query and make the result the current track for everyone"""

    def __init__(
        self,
        resolver: TrackResolver,
        coordinator: BroadcastCoordinator,
        timeout: float = settings.RESOLVE_TIMEOUT_SECONDS,
    ):
        self.resolver = resolver
        self.coordinator = coordinator
        self.timeout = timeout

    async def execute(self, query: str) -> TrackRecord:
        """Raises a NowPlayingError subclass; state is untouched on failure."""
        try:
            track = await asyncio.wait_for(self.resolver.resolve(query), timeout=self.timeout)
        except asyncio.TimeoutError:
            logger.warning("Resolving %r timed out after %.1fs", query, self.timeout)
            raise ResolutionTimeout(f"Resolving '{query}' took longer than {self.timeout:g}s")
        except NowPlayingError as e:
            logger.info("Play command for %r failed: %s", query, e)
            raise

        await self.coordinator.accept(track)
        return track
