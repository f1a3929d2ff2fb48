"""Configuration module - public API.

Centralized configuration management using Pydantic BaseSettings.

Exports:
    Settings: Main settings class (for testing/overrides)
    I18nSettings: Translation engine settings class
    get_settings: Process-wide settings singleton accessor
"""

from functools import lru_cache

from scopetext.configuration.i18n import I18nSettings
from scopetext.configuration.settings import Settings


@lru_cache
def get_settings() -> Settings:
    """Get the application-scoped settings singleton.

    The @lru_cache decorator ensures only one instance is created per process.
    Tests can call ``get_settings.cache_clear()`` after patching the environment.
    """
    return Settings()


__all__ = ["Settings", "I18nSettings", "get_settings"]
