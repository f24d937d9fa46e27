"""
Application configuration
Uses Pydantic Settings for environment variable management
"""
from functools import lru_cache
from typing import List, Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables"""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=True, extra="ignore")

    # Application
    APP_NAME: str = "Bookshelf"
    APP_VERSION: str = "1.0.0"
    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"

    # Server
    HOST: str = "127.0.0.1"
    PORT: int = 8000

    # API
    API_V1_PREFIX: str = "/api/v1"
    CORS_ORIGINS: List[str] = ["*"]

    # Store
    SEED_SAMPLE_DATA: bool = True

    # Open Library search
    OPEN_LIBRARY_URL: str = "https://openlibrary.org"
    OPEN_LIBRARY_COVERS_URL: str = "https://covers.openlibrary.org"
    OPEN_LIBRARY_USER_AGENT: str = "Bookshelf/1.0 (personal book tracker)"
    OPEN_LIBRARY_TIMEOUT: Optional[float] = None
    SEARCH_DEFAULT_LIMIT: int = 10
    SEARCH_MAX_LIMIT: int = 100


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance"""
    return Settings()
