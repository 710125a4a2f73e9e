"""Configuration settings using Pydantic Settings.

Provides typed library defaults with environment variable support.

Usage:
    from typedcollection.config import CollectionSettings, get_settings

    # Load from environment variables (TYPEDCOLLECTION_*)
    settings = get_settings()

    # Or override with explicit values
    settings = CollectionSettings(mutable=True)
"""

from __future__ import annotations

from functools import lru_cache

try:
    from pydantic_settings import BaseSettings, SettingsConfigDict
except ImportError as e:
    raise ImportError(
        "pydantic-settings is required for the config module. "
        "Install with: pip install pydantic-settings"
    ) from e


class CollectionSettings(BaseSettings):  # type: ignore[misc]
    """Library-wide collection defaults.

    Attributes:
        mutable: Default mutability of collections built with ``collection()``.
        warn_on_key_collision: Warn when ``combine()`` or ``flip()`` produce
            duplicate keys and values are dropped.

    Environment Variables:
        TYPEDCOLLECTION_MUTABLE
        TYPEDCOLLECTION_WARN_ON_KEY_COLLISION
    """

    model_config = SettingsConfigDict(
        env_prefix="TYPEDCOLLECTION_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    mutable: bool = False
    warn_on_key_collision: bool = True


@lru_cache(maxsize=1)
def get_settings() -> CollectionSettings:
    """Process-wide settings, read once. Call ``get_settings.cache_clear()`` to reload."""
    return CollectionSettings()
