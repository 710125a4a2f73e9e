"""Configuration module using Pydantic Settings.

Usage:
    from typedcollection.config import CollectionSettings, get_settings

    settings = get_settings()
    settings.mutable
"""

from typedcollection.config.settings import CollectionSettings, get_settings

__all__ = [
    "CollectionSettings",
    "get_settings",
]
