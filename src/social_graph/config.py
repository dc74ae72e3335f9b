"""Configuration management using Pydantic Settings.

This module provides centralized, type-safe configuration for the Social Graph engine.
Configuration is loaded from environment variables with sensible defaults.
"""

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class AppSettings(BaseSettings):
    """Application-level settings."""

    model_config = SettingsConfigDict(env_prefix="APP_")

    # Bound to every log event by setup_logging()
    name: str = "social-graph"
    env: Literal["development", "staging", "production"] = "development"
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "DEBUG"


class GraphSettings(BaseSettings):
    """Graph engine settings."""

    model_config = SettingsConfigDict(env_prefix="GRAPH_")

    # Ranking defaults
    default_top_n: int = Field(default=5, ge=1, le=1000)
    recommendation_top_n: int = Field(default=5, ge=1, le=1000)

    # Snapshot export
    snapshot_indent: int = Field(default=2, ge=0, le=8)


class Settings(BaseSettings):
    """Main settings container aggregating all configuration sections."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    app: AppSettings = Field(default_factory=AppSettings)
    graph: GraphSettings = Field(default_factory=GraphSettings)


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance.

    Uses LRU cache to ensure settings are only loaded once.

    Returns:
        Settings: The application settings instance.
    """
    return Settings()
