"""Application configuration"""

from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field


class Settings(BaseSettings):
    """Application settings."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=True, extra="ignore")

    # API Configuration
    API_V1_PREFIX: str = "/api/v1"
    PROJECT_NAME: str = "NowPlaying"
    VERSION: str = "1.0.0"
    DESCRIPTION: str = "Shared now-playing track synchronization service"

    # Server
    HOST: str = Field(default="0.0.0.0")
    PORT: int = Field(default=5000)

    # Database (user existence lookups)
    DATABASE_URL: str = Field(default="mysql+pymysql://root@localhost/nowplaying")

    # YouTube Data API (track search)
    YOUTUBE_API_KEY: str = Field(default="")
    YOUTUBE_API_URL: str = Field(default="https://www.googleapis.com/youtube/v3")
    SEARCH_TIMEOUT_SECONDS: float = Field(default=10.0)

    # Play command / broadcast
    RESOLVE_TIMEOUT_SECONDS: float = Field(default=30.0)  # whole search + audio pipeline
    SUBSCRIBER_SEND_TIMEOUT: float = Field(default=5.0)
    SSE_QUEUE_SIZE: int = Field(default=16)

    # CORS
    ALLOWED_HOSTS: list[str] = Field(default=["*"])

    # Development
    LOG_LEVEL: str = Field(default="INFO")
    DEBUG: bool = Field(default=False)
    TESTING: bool = Field(default=False)


settings = Settings()
