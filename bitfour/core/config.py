"""
Configuration management using pydantic-settings.

Loads settings from environment variables and .env file.
Board geometry is fixed and deliberately absent from here.
"""

from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


# ─────────────────────────────────────────────────────────────
# NESTED SETTINGS
# ─────────────────────────────────────────────────────────────


class LoggingSettings(BaseSettings):
    """Root logger configuration used by the CLI."""

    model_config = SettingsConfigDict(
        env_prefix="LOG_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "WARNING"
    format: str = "%(asctime)s %(levelname)s %(name)s: %(message)s"


class EventSettings(BaseSettings):
    """Event bus configuration."""

    model_config = SettingsConfigDict(
        env_prefix="EVENTS_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    log_enabled: bool = True
    max_log_size: int = Field(default=100, ge=1, description="Events kept in the bus log")


class DisplaySettings(BaseSettings):
    """Symbols used when rendering boards as text."""

    model_config = SettingsConfigDict(
        env_prefix="DISPLAY_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    player_a_symbol: str = Field(default="X", min_length=1, max_length=1)
    player_b_symbol: str = Field(default="O", min_length=1, max_length=1)
    empty_symbol: str = Field(default=".", min_length=1, max_length=1)


# ─────────────────────────────────────────────────────────────
# MAIN SETTINGS
# ─────────────────────────────────────────────────────────────


class Settings(BaseSettings):
    """
    Main application settings.

    Loads from .env file and environment variables.
    Environment variables take precedence over .env file.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",  # Ignore unknown env vars
    )

    logging: LoggingSettings = Field(default_factory=LoggingSettings)
    events: EventSettings = Field(default_factory=EventSettings)
    display: DisplaySettings = Field(default_factory=DisplaySettings)


# ─────────────────────────────────────────────────────────────
# SINGLETON ACCESS
# ─────────────────────────────────────────────────────────────

_settings: Settings | None = None


def get_settings() -> Settings:
    """Get application settings (singleton)."""
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def reset_settings() -> None:
    """Reset settings singleton (for testing)."""
    global _settings
    _settings = None
