"""Configuration module for lifecycle-actions."""

from .logging_config import (
    setup_logging,
    LogLevel,
    LogVerbosity,
    LogFormat,
    LoggingConfig,
)
from .settings import (
    DEFAULT_API_BASE_PATH,
    DEFAULT_AUTO_CLOSE_MS,
    LifecycleActionsSettings,
    get_settings,
)

__all__ = [
    # Logging
    "setup_logging",
    "LogLevel",
    "LogVerbosity",
    "LogFormat",
    "LoggingConfig",

    # Settings
    "DEFAULT_API_BASE_PATH",
    "DEFAULT_AUTO_CLOSE_MS",
    "LifecycleActionsSettings",
    "get_settings",
]
