"""Track entity"""

from dataclasses import dataclass

EMBED_URL_TEMPLATE = "https://www.youtube.com/embed/{source_id}?autoplay=1"
WATCH_URL_TEMPLATE = "https://www.youtube.com/watch?v={source_id}"


@dataclass(frozen=True)
class TrackRecord:
    """The one currently selected playable track.

    Never mutated; a new record replaces the old one wholesale.
    """
    title: str
    source_id: str
    embed_locator: str
    thumbnail: str
    owner: str
    audio_locator: str

    @classmethod
    def create(
        cls,
        source_id: str,
        title: str,
        thumbnail: str,
        owner: str,
        audio_locator: str,
    ) -> 'TrackRecord':
        """Factory method deriving the embed locator from the source id"""
        return cls(
            title=title,
            source_id=source_id,
            embed_locator=EMBED_URL_TEMPLATE.format(source_id=source_id),
            thumbnail=thumbnail,
            owner=owner,
            audio_locator=audio_locator,
        )

    def to_dict(self) -> dict:
        """Wire representation shared by HTTP responses and real-time pushes"""
        return {
            "title": self.title,
            "embedUrl": self.embed_locator,
            "thumbnail": self.thumbnail,
            "owner": self.owner,
            "videoId": self.source_id,
            "audioFile": self.audio_locator,
        }


def watch_url(source_id: str) -> str:
    """Canonical watch URI for a source id"""
    return WATCH_URL_TEMPLATE.format(source_id=source_id)
