"""Configuration for neo-pagination: logging setup and paginator defaults."""

from .logging_config import (
    LogFormat,
    LogLevel,
    LogVerbosity,
    LoggingConfig,
    get_logger,
    setup_logging,
)
from .settings import (
    DEFAULT_ITEMS_PER_PAGE,
    DEFAULT_PAGES_IN_RANGE,
    PaginationSettings,
    get_pagination_settings,
)

__all__ = [
    # Logging
    "LogFormat",
    "LogLevel",
    "LogVerbosity",
    "LoggingConfig",
    "get_logger",
    "setup_logging",

    # Settings
    "DEFAULT_ITEMS_PER_PAGE",
    "DEFAULT_PAGES_IN_RANGE",
    "PaginationSettings",
    "get_pagination_settings",
]
