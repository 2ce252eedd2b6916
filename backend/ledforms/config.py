"""Application configuration via environment variables."""

from pydantic_settings import BaseSettings
from functools import lru_cache


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Server
    HOST: str = "0.0.0.0"
    PORT: int = 8000
    DEBUG: bool = False
    LOG_LEVEL: str = "info"
    CORS_ORIGINS: list[str] = ["*"]

    # Formatting
    DEFAULT_LOCALE: str = "en"

    # Rate Limiting (form validation submissions per client)
    RATE_LIMIT_MAX_SUBMISSIONS: int = 30
    RATE_LIMIT_WINDOW_SECONDS: int = 60

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


@lru_cache
def get_settings() -> Settings:
    return Settings()
