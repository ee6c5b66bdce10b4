"""User lookup routes"""

from fastapi import APIRouter, Depends

from ...application.dtos.track_dtos import UserExistsResponse
from ...application.use_cases.check_user_exists import CheckUserExistsUseCase
from ...domain.exceptions import NowPlayingError
from ..dependencies import get_check_user_exists_use_case
from ..errors import to_http_exception

router = APIRouter()


@router.get("/{username}/exists", response_model=UserExistsResponse)
async def user_exists(
    username: str,
    use_case: CheckUserExistsUseCase = Depends(get_check_user_exists_use_case),
):
    """Check whether a username is registered"""
    try:
        exists = await use_case.execute(username)
    except NowPlayingError as e:
        raise to_http_exception(e)
    return UserExistsResponse(exists=exists)
