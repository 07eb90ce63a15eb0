"""Configuration loading and updating for logging system.

The logger is configured at import time with bootstrap defaults, before the
settings file has been read. Once settings are loaded the runner calls
update_logger_from_config() to apply the configured levels.
"""

import logging
import os
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import TYPE_CHECKING

from sumcheck.constants import (
    CONFIG_DIR_NAME,
    DEFAULT_CONFIG_SUBDIR,
    DEFAULT_CONSOLE_LOG_LEVEL,
    DEFAULT_LOG_LEVEL,
    ENV_LOG_DIR,
    LOG_FILE_NAME,
)

if TYPE_CHECKING:
    from sumcheck.config.settings import Settings
    from sumcheck.logger.state import _LoggerState


def load_log_settings() -> tuple[str, str, Path]:
    """Load default console level, file level, and file path.

    Environment Variable Override:
        SUMCHECK_LOG_DIR: Overrides the log directory path. The test suite
        points it at a temporary directory so tests never write to the
        user's home directory.

    Returns:
        Tuple of (console_level, file_level, log_path)

    """
    env_log_dir = os.getenv(ENV_LOG_DIR)
    if env_log_dir:
        default_path = Path(env_log_dir).expanduser() / LOG_FILE_NAME
    else:
        default_path = (
            Path.home()
            / CONFIG_DIR_NAME
            / DEFAULT_CONFIG_SUBDIR
            / "logs"
            / LOG_FILE_NAME
        )

    return DEFAULT_CONSOLE_LOG_LEVEL, DEFAULT_LOG_LEVEL, default_path


def update_logger_from_config(
    state: "_LoggerState", settings: "Settings"
) -> None:
    """Update logger handler levels from loaded settings.

    Only updates handler levels or detaches the file handler, never adds
    handlers.

    Args:
        state: Logger state object (from logger.state module)
        settings: Settings loaded from settings.conf

    """
    console_level = getattr(
        logging, settings.console_log_level, logging.WARNING
    )
    file_level = getattr(logging, settings.log_level, logging.INFO)

    root_logger = logging.getLogger("sumcheck")
    for handler in list(state.handlers):
        if isinstance(handler, RotatingFileHandler):
            if settings.file_logging:
                handler.setLevel(file_level)
            else:
                handler.close()
                root_logger.removeHandler(handler)
                state.handlers.remove(handler)
        elif isinstance(handler, logging.StreamHandler):
            handler.setLevel(console_level)

    state.config_applied = True
