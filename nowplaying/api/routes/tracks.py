"""Play command and current track routes"""

from fastapi import APIRouter, Depends, Query, Response, status

from ...application.dtos.track_dtos import PlayTrackRequest, TrackResponse
from ...application.services.broadcast_coordinator import BroadcastCoordinator
from ...application.use_cases.play_track import PlayTrackUseCase
from ...domain.exceptions import NowPlayingError
from ..dependencies import get_coordinator, get_play_track_use_case
from ..errors import to_http_exception

router = APIRouter(tags=["tracks"])


async def _play(query: str, use_case: PlayTrackUseCase) -> TrackResponse:
    try:
        track = await use_case.execute(query)
    except NowPlayingError as e:
        raise to_http_exception(e)
    return TrackResponse.from_entity(track)


@router.get("/play", response_model=TrackResponse)
async def play_track(
    song_name: str = Query("", alias="songName"),
    use_case: PlayTrackUseCase = Depends(get_play_track_use_case),
):
    """Resolve a song query and broadcast it as the current track"""
    return await _play(song_name, use_case)


@router.post("/play", response_model=TrackResponse)
async def play_track_json(
    request: PlayTrackRequest,
    use_case: PlayTrackUseCase = Depends(get_play_track_use_case),
):
    """JSON body variant of the play command"""
    return await _play(request.query, use_case)


@router.get("/current", response_model=TrackResponse)
async def get_current_track(coordinator: BroadcastCoordinator = Depends(get_coordinator)):
    """Current track, or 204 when nothing has been played yet"""
    track = coordinator.store.get()
    if track is None:
        return Response(status_code=status.HTTP_204_NO_CONTENT)
    return TrackResponse.from_entity(track)
