"""
FastAPI main application
"""

import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError

from .core.config import settings
from .api.router import api_router
from .api.dependencies import close_search_service
from .api.event_broadcaster import subscriber_registry
from .api.routes.now_playing import now_playing_ws
from .api.routes.tracks import play_track
from .api.routes.users import user_exists
from .db.database import SessionLocal, close_engine, verify_connection

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan events"""
    if not settings.TESTING:
        try:
            verify_connection()
        except SQLAlchemyError as e:
            logger.error("Error connecting to database: %s", e)
            raise
    logger.info("Starting %s %s", settings.PROJECT_NAME, settings.VERSION)
    yield
    # Shutdown: dropping subscribers ends their WebSocket sessions
    logger.info("Shutting down %s", settings.PROJECT_NAME)
    subscriber_registry.close_all()
    await close_search_service()
    close_engine()


# Create FastAPI app
app = FastAPI(
    title=settings.PROJECT_NAME,
    description=settings.DESCRIPTION,
    version=settings.VERSION,
    lifespan=lifespan,
)

# Configure CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.ALLOWED_HOSTS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include API routes
app.include_router(api_router, prefix=settings.API_V1_PREFIX)

# Root-level routes kept for existing clients (bypassing /api/v1 prefix)
app.api_route("/playSong", methods=["GET"])(play_track)
app.api_route("/userExists/{username}", methods=["GET"])(user_exists)
app.add_api_websocket_route("/ws", now_playing_ws)


@app.get("/")
async def root():
    """Root endpoint"""
    return {"message": f"{settings.PROJECT_NAME} API", "version": settings.VERSION}


@app.get("/health")
async def health_check():
    """Health check endpoint that verifies database connectivity"""
    db = SessionLocal()
    try:
        db.execute(text("SELECT 1"))
        db_status = "healthy"
    except SQLAlchemyError as e:
        logger.warning("Database health check failed: %s", e)
        db_status = "unhealthy"
    finally:
        db.close()

    return {
        "status": "healthy" if db_status == "healthy" else "degraded",
        "database": db_status,
        "subscribers": subscriber_registry.count(),
        "version": settings.VERSION,
    }


def run() -> None:
    """Console entry point; uvicorn turns SIGINT/SIGTERM into a lifespan shutdown."""
    uvicorn.run(
        "nowplaying.main:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.DEBUG,
        log_level=settings.LOG_LEVEL.lower(),
    )


if __name__ == "__main__":
    run()
