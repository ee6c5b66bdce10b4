"""Track and user DTOs for API requests and responses"""

from pydantic import BaseModel, ConfigDict, Field

from ...domain.entities.track import TrackRecord


class PlayTrackRequest(BaseModel):
    """Request DTO for the JSON variant of the play command"""
    query: str = Field(..., max_length=500, alias='songName')

    model_config = ConfigDict(populate_by_name=True)


class TrackResponse(BaseModel):
    """Response DTO; keys match the real-time push payload"""
    title: str
    embedUrl: str
    thumbnail: str
    owner: str
    videoId: str
    audioFile: str

    @classmethod
    def from_entity(cls, track: TrackRecord) -> 'TrackResponse':
        return cls(**track.to_dict())


class UserExistsResponse(BaseModel):
    exists: bool
