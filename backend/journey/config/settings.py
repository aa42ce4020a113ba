"""
Application Configuration

This module provides type-safe configuration loading using Pydantic settings.
Environment variables are loaded from .env file and validated.

Usage:
    from journey.config import settings

    # Access settings
    pages_target = settings.JOURNAL_TARGET_PAGES
    interval = settings.REVIEW_INTERVAL_DAYS
"""

from functools import lru_cache
from pathlib import Path
from typing import Any

import yaml
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Application
    APP_NAME: str = "SAL Journey"
    DEBUG: bool = False

    # Calendar days are evaluated in this zone. Naive timestamps are taken as-is.
    TIMEZONE: str = "UTC"

    # Redis mirror of the client-side record store
    REDIS_URL: str = "redis://localhost:6379/0"

    # Journal
    JOURNAL_WORDS_PER_PAGE: int = 250
    JOURNAL_TARGET_PAGES: int = 200

    # Tasks (size of the SAL Challenge catalog, not derived from data)
    TOTAL_CHALLENGE_TASKS: int = 25

    # Vocabulary
    VOCABULARY_TARGET_WORDS: int = 100
    REVIEW_INTERVAL_DAYS: int = 7

    # Life arenas are scored on a 0-10 scale
    ARENA_SCORE_SCALE: float = 10.0

    # Streaks and heatmap
    STREAK_MILESTONES: list[int] = [7, 30, 100, 365]
    ACTIVITY_LEVEL_HIGH: float = 0.75
    ACTIVITY_LEVEL_MEDIUM_HIGH: float = 0.5
    ACTIVITY_LEVEL_MEDIUM: float = 0.25

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        extra = "ignore"  # Ignore extra env vars not defined in this class


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


settings = get_settings()


@lru_cache()
def load_yaml_config() -> dict[str, Any]:
    """Load application configuration from config/default.yaml."""
    config_path = Path(__file__).parent.parent.parent.parent / "config" / "default.yaml"

    if not config_path.exists():
        return {}

    with open(config_path) as f:
        return yaml.safe_load(f) or {}


yaml_config: dict[str, Any] = load_yaml_config()
