"""Configuration module using Pydantic Settings.

Usage:
    from foldkit.config import get_settings

    interval = get_settings().default_throttle_interval_ms
"""

from foldkit.config.settings import FoldkitSettings, get_settings, reset_settings

__all__ = [
    "FoldkitSettings",
    "get_settings",
    "reset_settings",
]
