"""YouTube Data API search"""

import logging
from typing import Optional

import httpx

from ...core.config import settings
from ...domain.exceptions import ResolutionFailed
from ...domain.services.track_lookup import ISearchService, SearchResult

logger = logging.getLogger(__name__)


class YouTubeSearchService(ISearchService):
    """Maps a free-text query to the single best-ranked video."""

    def __init__(self, http_client: Optional[httpx.AsyncClient] = None) -> None:
        self.api_key = settings.YOUTUBE_API_KEY
        self.api_url = settings.YOUTUBE_API_URL.rstrip("/")
        self.http_client = http_client or httpx.AsyncClient(
            timeout=httpx.Timeout(settings.SEARCH_TIMEOUT_SECONDS, connect=5.0)
        )

    async def search(self, query: str) -> Optional[SearchResult]:
        params = {
            "q": query,
            "part": "snippet",
            "type": "video",
            "maxResults": 1,
            "key": self.api_key,
        }
        try:
            resp = await self.http_client.get(f"{self.api_url}/search", params=params)
        except httpx.HTTPError as e:
            logger.error("YouTube search request failed: %s", e)
            raise ResolutionFailed(f"Search request failed: {e}") from e

        if resp.status_code != 200:
            logger.error("YouTube search error %s: %s", resp.status_code, resp.text[:200])
            raise ResolutionFailed(f"Search API error {resp.status_code}")

        try:
            data = resp.json()
        except ValueError as e:
            raise ResolutionFailed("Search API returned invalid JSON") from e
        if not isinstance(data, dict):
            logger.error("YouTube search returned a %s body", type(data).__name__)
            raise ResolutionFailed("Search API returned an unexpected body")

        items = data.get("items") or []
        if not items:
            return None
        return self._map_item(items[0])

    @staticmethod
    def _map_item(item: dict) -> SearchResult:
        snippet = item.get("snippet") or {}
        thumbnails = snippet.get("thumbnails") or {}
        thumbnail = (thumbnails.get("high") or thumbnails.get("default") or {}).get("url", "")
        video_id = (item.get("id") or {}).get("videoId")
        if not video_id:
            raise ResolutionFailed("Search result has no video id")
        return SearchResult(
            identifier=video_id,
            title=snippet.get("title", ""),
            thumbnail=thumbnail,
            owner_name=snippet.get("channelTitle", ""),
        )

    async def aclose(self) -> None:
        await self.http_client.aclose()
