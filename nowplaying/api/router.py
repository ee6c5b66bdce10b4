"""Main API router"""

from fastapi import APIRouter

from .routes import now_playing, tracks, users
from ..core.config import settings

# Main API router
api_router = APIRouter()

# Include all routes
api_router.include_router(tracks.router, prefix="/tracks", tags=["tracks"])
api_router.include_router(users.router, prefix="/users", tags=["users"])
api_router.include_router(now_playing.router, prefix="/now-playing", tags=["now-playing"])


@api_router.get("/health")
async def health_check():
    """Health check endpoint"""
    return {"status": "healthy", "version": settings.VERSION}
