"""
Application settings - pydantic-settings configuration.

This module defines application configuration using pydantic-settings
for environment variable loading with validation and defaults.
"""

from functools import lru_cache
from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict

# Bundled sample of the IANA registry (uri-schemes-1.csv layout), not the full table
DEFAULT_REGISTRY_PATH = Path(__file__).resolve().parents[1] / "data" / "uri-schemes-sample.csv"


class Settings(BaseSettings):
    """Application settings with environment variable support."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Registry source
    registry_path: Path = DEFAULT_REGISTRY_PATH

    # Verification settings
    permanent_only: bool = True  # Only gate on Permanent schemes


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
