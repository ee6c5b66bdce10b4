"""API dependencies"""

from typing import Optional

from fastapi import Depends
from sqlalchemy.orm import Session

from ..application.services.broadcast_coordinator import BroadcastCoordinator
from ..application.services.track_resolver import TrackResolver
from ..application.use_cases.check_user_exists import CheckUserExistsUseCase
from ..application.use_cases.play_track import PlayTrackUseCase
from ..db.database import get_db
from ..domain.repositories.user_repository import IUserRepository
from ..domain.services.track_lookup import IAudioResolver, ISearchService
from ..infrastructure.external_services.audio_resolution_service import AudioResolutionService
from ..infrastructure.external_services.youtube_search_service import YouTubeSearchService
from ..infrastructure.repositories.user_repository_impl import UserRepositoryImpl
from .event_broadcaster import coordinator

_search_service: Optional[YouTubeSearchService] = None


def get_coordinator() -> BroadcastCoordinator:
    """Get the process-wide broadcast coordinator"""
    return coordinator


def get_search_service() -> ISearchService:
    """Get search service (shares one HTTP client)"""
    global _search_service
    if _search_service is None:
        _search_service = YouTubeSearchService()
    return _search_service


async def close_search_service() -> None:
    global _search_service
    if _search_service is not None:
        await _search_service.aclose()
        _search_service = None


def get_audio_resolver() -> IAudioResolver:
    """Get audio resolution service"""
    return AudioResolutionService()


def get_track_resolver(
    search_service: ISearchService = Depends(get_search_service),
    audio_resolver: IAudioResolver = Depends(get_audio_resolver),
) -> TrackResolver:
    return TrackResolver(search_service, audio_resolver)


def get_play_track_use_case(
    resolver: TrackResolver = Depends(get_track_resolver),
    coordinator: BroadcastCoordinator = Depends(get_coordinator),
) -> PlayTrackUseCase:
    return PlayTrackUseCase(resolver, coordinator)


def get_user_repository(db: Session = Depends(get_db)) -> IUserRepository:
    """Get user repository"""
    return UserRepositoryImpl(db)


def get_check_user_exists_use_case(
    user_repository: IUserRepository = Depends(get_user_repository),
) -> CheckUserExistsUseCase:
    return CheckUserExistsUseCase(user_repository)
