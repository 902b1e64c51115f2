"""Behaviour settings using Pydantic Settings.

Usage:
    from objectkit.config import BehaviorSettings

    # Load from environment variables (OBJECTKIT_*)
    settings = BehaviorSettings()

    # Or override with explicit values
    settings = BehaviorSettings(strict_slots=False)
"""

from __future__ import annotations

try:
    from pydantic_settings import BaseSettings, SettingsConfigDict
except ImportError as e:
    raise ImportError(
        "pydantic-settings is required for config module. "
        "Install with: pip install objectkit"
    ) from e


class BehaviorSettings(BaseSettings):  # type: ignore[misc]
    """Switches controlling the compatibility policies of the structural helpers.

    Attributes:
        legacy_key_count: Skip the key count comparison in deep_equal, so an
            object equals any superset of itself (left operand decides).
        legacy_nested_serializable: A non-serializable nested object does not
            fail the enclosing is_serializable scan.
        strict_slots: Raise AccessViolationError on rejected Record writes and
            deletes. When False, rejected operations are silent no-ops.

    Environment Variables:
        OBJECTKIT_LEGACY_KEY_COUNT
        OBJECTKIT_LEGACY_NESTED_SERIALIZABLE
        OBJECTKIT_STRICT_SLOTS
    """

    model_config = SettingsConfigDict(
        env_prefix="OBJECTKIT_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    legacy_key_count: bool = False
    legacy_nested_serializable: bool = False
    strict_slots: bool = True


_settings: BehaviorSettings | None = None


def get_settings() -> BehaviorSettings:
    """Return the process-wide settings, loading them on first use.

    Returns:
        Cached BehaviorSettings instance.
    """
    global _settings
    if _settings is None:
        _settings = BehaviorSettings()
    return _settings


def reset_settings() -> None:
    """Drop the cached settings so the next access re-reads the environment."""
    global _settings
    _settings = None
