"""Free-text query -> playable TrackRecord"""

import logging

from ...domain.entities.track import TrackRecord, watch_url
from ...domain.exceptions import InvalidQuery, NotFound, NowPlayingError, ResolutionFailed
from ...domain.services.track_lookup import IAudioResolver, ISearchService

logger = logging.getLogger(__name__)


class TrackResolver:
    """Two-step lookup: search for the top match, then resolve its audio.

    No retries and no caching; audio URLs expire, so every call re-resolves.
    """

    def __init__(self, search_service: ISearchService, audio_resolver: IAudioResolver):
        self.search_service = search_service
        self.audio_resolver = audio_resolver

    async def resolve(self, query: str) -> TrackRecord:
        query = (query or "").strip()
        if not query:
            raise InvalidQuery("Query must not be empty")

        result = await self.search_service.search(query)
        if result is None:
            logger.info("No video found for %r", query)
            raise NotFound(f"No video found for '{query}'")

        try:
            audio_locator = await self.audio_resolver.resolve_audio(watch_url(result.identifier))
        except NowPlayingError:
            raise
        except Exception as e:
            logger.exception("Unexpected audio resolution error for %s", result.identifier)
            raise ResolutionFailed(f"Audio resolution failed: {e}") from e

        return TrackRecord.create(
            source_id=result.identifier,
            title=result.title,
            thumbnail=result.thumbnail,
            owner=result.owner_name,
            audio_locator=audio_locator,
        )
