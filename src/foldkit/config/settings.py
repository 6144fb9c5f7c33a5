"""Configuration settings using Pydantic Settings.

Provides typed configuration with environment variable support.

Usage:
    from foldkit.config import FoldkitSettings, get_settings

    # Load from environment variables (FOLDKIT_*)
    settings = get_settings()

    # Or override with explicit values
    settings = FoldkitSettings(default_throttle_interval_ms=250)
"""

from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class FoldkitSettings(BaseSettings):  # type: ignore[misc]
    """Library-wide defaults.

    Attributes:
        default_throttle_interval_ms: Window used by throttle() when no interval is given.
        timer_thread_name: Name of the background thread running timers.
        warn_unhashable: Emit UnhashableElementWarning when a membership table
            falls back to identity keys.

    Environment Variables:
        FOLDKIT_DEFAULT_THROTTLE_INTERVAL_MS
        FOLDKIT_TIMER_THREAD_NAME
        FOLDKIT_WARN_UNHASHABLE
    """

    model_config = SettingsConfigDict(
        env_prefix="FOLDKIT_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    default_throttle_interval_ms: float = Field(default=100.0, gt=0)
    timer_thread_name: str = "foldkit-timer"
    warn_unhashable: bool = True


_settings: FoldkitSettings | None = None


def get_settings() -> FoldkitSettings:
    """Get the process-wide settings, loading them on first use."""
    global _settings
    if _settings is None:
        _settings = FoldkitSettings()
    return _settings


def reset_settings() -> None:
    """Drop cached settings so the next get_settings() re-reads the environment."""
    global _settings
    _settings = None
