"""
Configuration module using pydantic-settings.

Loads settings from environment variables with sensible defaults.
"""

import logging
from datetime import date
from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="SLEEPER_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # API Configuration
    api_title: str = "Sleeper Dashboard API"
    api_version: str = "0.1.0"
    api_description: str = "League dashboard and player/roster analytics for Sleeper leagues"
    debug: bool = False
    log_level: str = "INFO"

    # Sleeper API
    sleeper_base_url: str = "https://api.sleeper.app/v1"
    sleeper_cdn_url: str = "https://sleepercdn.com"
    sleeper_timeout: float = 30.0

    # Cache Settings
    players_cache_ttl: int = 24 * 60 * 60  # 24 hours in seconds

    # Default Season (can be overridden per request)
    default_season: int = Field(default_factory=lambda: date.today().year)

    # Optional JSON file overriding the heuristic scoring tables
    heuristics_file: str | None = None

    # Server Configuration
    host: str = "0.0.0.0"
    port: int = 8000
    reload: bool = False


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


def configure_logging(level: str | int | None = None) -> None:
    """Install a single stream handler on the root logger."""
    settings = get_settings()
    if level is None:
        level = "DEBUG" if settings.debug else settings.log_level

    root = logging.getLogger()
    root.setLevel(level)
    if not any(getattr(h, "_sleeper_dashboard", False) for h in root.handlers):
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        handler._sleeper_dashboard = True  # type: ignore[attr-defined]
        root.addHandler(handler)
