# arm_backend/core/config.py

import os
from functools import lru_cache
from typing import List
from pydantic import ConfigDict
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """
    Application settings.
    Loads values from environment variables (.env file)
    """
    # Database settings
    DATABASE_URL: str = ""

    # Environment
    ENVIRONMENT: str = "development"
    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"

    # Admin verification (second and third factor on top of a user session)
    ADMIN_PASSWORD: str = "admin123"
    ADMIN_SECRET_CODE: str = "arm2024secure"

    # User sessions
    SESSION_TTL_DAYS: int = 7

    # CORS for the mobile / web client
    CORS_ORIGINS: str = "*"

    # Startup behaviour
    SEED_DEFAULT_DATA: bool = True
    RUN_MIGRATIONS: bool = False

    # Public chat
    CHAT_HISTORY_LIMIT: int = 100

    # Media storage
    MEDIA_UPLOAD_DIR: str = "media_uploads"
    MEDIA_URL_PATH: str = "/media"
    MEDIA_MAX_UPLOAD_BYTES: int = 10 * 1024 * 1024

    # AI assistant (any OpenAI-compatible chat completions endpoint)
    AI_API_KEY: str = ""
    AI_API_BASE_URL: str = "https://api.openai.com/v1"
    AI_MODEL: str = "gpt-5-mini"
    AI_TIMEOUT_SECONDS: float = 60.0

    @property
    def cors_origins_list(self) -> List[str]:
        return [origin.strip() for origin in self.CORS_ORIGINS.split(",") if origin.strip()]

    model_config = ConfigDict(
        env_file=os.environ.get('ENV_FILE', '.env') if os.path.exists(os.environ.get('ENV_FILE', '.env')) else None,
        case_sensitive=True,
        extra="ignore",
    )


@lru_cache()
def get_settings():
    """Cached settings to avoid loading .env file for every request"""
    return Settings()


def clear_settings_cache():
    """Clear the settings cache - useful when switching between environments"""
    get_settings.cache_clear()
