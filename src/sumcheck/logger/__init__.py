"""Logging utilities for sumcheck.

This package provides structured logging with:
- Console output on stderr, colored on a terminal (stdout carries digests)
- File rotation using standard RotatingFileHandler
- Levels applied from settings.conf once it has been read
- Hierarchical logger naming (e.g., sumcheck.core.checker)

Usage:
    >>> from sumcheck.logger import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.info("Checking %s", sums_file)  # Use %-style formatting

Environment Variables:
    SUMCHECK_LOG_DIR: Override the directory of the log file.

Rules for contributors:
    1. Always use: logger = get_logger(__name__)
    2. Never call logging.basicConfig()
    3. Never attach handlers to child loggers
    4. Never use f-strings in log calls
    5. User-facing result lines (OK, FAILED, digests) are written to the
       output streams directly, never through the logger
"""

from sumcheck.logger.config import (
    update_logger_from_config as _update_config,
)
from sumcheck.logger.formatters import HybridConsoleFormatter
from sumcheck.logger.handlers import ConfigurationError
from sumcheck.logger.logger import (
    clear_logger_state,
    flush_all_handlers,
    get_logger,
    setup_logging,
)
from sumcheck.logger.state import _state, get_state

__all__ = [
    "ConfigurationError",
    "HybridConsoleFormatter",
    "_state",  # For testing only
    "clear_logger_state",
    "flush_all_handlers",
    "get_logger",
    "setup_logging",
    "update_logger_from_config",
]


def update_logger_from_config(settings) -> None:
    """Update logger handler levels from loaded settings.

    Args:
        settings: Settings instance from sumcheck.config

    """
    _update_config(get_state(), settings)
