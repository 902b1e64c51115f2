"""Configuration module using Pydantic Settings.

Provides typed behaviour switches with environment variable support.

Usage:
    from objectkit.config import BehaviorSettings, get_settings

    settings = get_settings()
    legacy = BehaviorSettings(legacy_key_count=True)
"""

from objectkit.config.settings import BehaviorSettings, get_settings, reset_settings

__all__ = [
    "BehaviorSettings",
    "get_settings",
    "reset_settings",
]
