"""Configuration model exports."""

from passport.config.models.localization import LocalizationConfig
from passport.config.models.observability import LoggingConfig, ObservabilityConfig

__all__ = [
    "LocalizationConfig",
    "LoggingConfig",
    "ObservabilityConfig",
]
