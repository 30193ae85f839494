"""Configuration loading for passport.

Configuration is loaded from TOML files with environment variable overrides.

Usage:
    from passport.config import get_settings

    settings = get_settings()
    level = settings.observability.logging.level
"""

from functools import lru_cache

from passport.config.loader import load_config
from passport.config.settings import Settings, set_toml_config
from passport.observability.logging import setup_logging


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Get the singleton settings instance.

    The result is cached for the lifetime of the process.
    Call `get_settings.cache_clear()` to reload configuration.
    """
    set_toml_config(load_config())
    return Settings()


def reload_settings() -> Settings:
    """Clear the settings cache and reload configuration."""
    get_settings.cache_clear()
    return get_settings()


def configure_logging(settings: Settings) -> None:
    """Apply the logging section of the settings to structlog."""
    logging_config = settings.observability.logging
    setup_logging(
        level=logging_config.level,
        format=logging_config.format,
        redact_pii=logging_config.redact_pii,
    )


__all__ = ["configure_logging", "get_settings", "reload_settings", "Settings"]
