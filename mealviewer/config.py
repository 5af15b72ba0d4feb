"""Configuration management for the MealViewer client."""

from functools import lru_cache
from pydantic_settings import BaseSettings, SettingsConfigDict


DEFAULT_BASE_URL = "https://api.mealviewer.com/api/v4"
DEFAULT_TIMEOUT = 30.0  # seconds
DEFAULT_USER_AGENT = "BrandCast/FamilyCast MealViewer Integration"


class Settings(BaseSettings):
    """Client settings loaded from MEALVIEWER_* environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="MEALVIEWER_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # API
    base_url: str = DEFAULT_BASE_URL
    timeout: float = DEFAULT_TIMEOUT
    user_agent: str = DEFAULT_USER_AGENT

    # Diagnostics
    debug: bool = False
    log_level: str = "info"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
