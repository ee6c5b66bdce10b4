"""Audio stream resolution via yt-dlp"""

import asyncio
import logging
from typing import List, Optional

import yt_dlp
from yt_dlp.utils import DownloadError

from ...domain.exceptions import ResolutionFailed
from ...domain.services.track_lookup import IAudioResolver

logger = logging.getLogger(__name__)

YDL_OPTS = {
    "quiet": True,
    "no_warnings": True,
    "noplaylist": True,
    "skip_download": True,
}


def select_audio_format(formats: List[dict]) -> Optional[dict]:
    """Return the top-ranked audio-only format.

    yt-dlp lists formats from worst to best, so the last audio-only entry wins.
    """
    audio_only = [
        f for f in formats
        if f.get("url")
        and f.get("vcodec") == "none"
        and f.get("acodec") not in (None, "none")
    ]
    return audio_only[-1] if audio_only else None


class AudioResolutionService(IAudioResolver):

    def __init__(self, ydl_opts: Optional[dict] = None) -> None:
        self.ydl_opts = dict(ydl_opts or YDL_OPTS)

    def _extract_formats(self, watch_url: str) -> List[dict]:
        with yt_dlp.YoutubeDL(self.ydl_opts) as ydl:
            info = ydl.extract_info(watch_url, download=False)
        return (info or {}).get("formats") or []

    async def resolve_audio(self, watch_url: str) -> str:
        try:
            # yt-dlp is blocking; keep it off the event loop
            formats = await asyncio.to_thread(self._extract_formats, watch_url)
        except DownloadError as e:
            logger.error("Audio extraction failed for %s: %s", watch_url, e)
            raise ResolutionFailed(f"Audio extraction failed: {e}") from e

        chosen = select_audio_format(formats)
        if chosen is None:
            logger.warning("No audio-only format for %s (%d formats)", watch_url, len(formats))
            raise ResolutionFailed("No audio-only format available")
        return chosen["url"]
