from fastapi import HTTPException, status

from ..domain.exceptions import (
    InvalidQuery,
    NotFound,
    NowPlayingError,
    PersistenceUnavailable,
    ResolutionFailed,
    ResolutionTimeout,
)

STATUS_CODES = {
    InvalidQuery: status.HTTP_400_BAD_REQUEST,
    NotFound: status.HTTP_404_NOT_FOUND,
    ResolutionFailed: status.HTTP_502_BAD_GATEWAY,
    ResolutionTimeout: status.HTTP_504_GATEWAY_TIMEOUT,
    PersistenceUnavailable: status.HTTP_503_SERVICE_UNAVAILABLE,
}


def to_http_exception(error: NowPlayingError) -> HTTPException:
    """Map a domain error to its response status and structured detail"""
    return HTTPException(
        status_code=STATUS_CODES.get(type(error), status.HTTP_500_INTERNAL_SERVER_ERROR),
        detail={"error": error.code, "message": str(error)},
    )
