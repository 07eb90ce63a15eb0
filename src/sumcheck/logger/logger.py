"""Main logger module providing public API functions.

- setup_logging(): Configure the root logger once per process
- get_logger(): Get a module logger under the sumcheck hierarchy
- flush_all_handlers(): Ensure pending log records are written
- clear_logger_state(): Clear global logger state for testing
"""

import atexit
import contextlib
import logging
from pathlib import Path

from sumcheck.logger.config import load_log_settings
from sumcheck.logger.handlers import ConfigurationError, setup_root_logger
from sumcheck.logger.state import get_state


def flush_all_handlers() -> None:
    """Flush all root handlers so buffered records reach their targets."""
    for handler in get_state().handlers:
        with contextlib.suppress(OSError, ValueError):
            # Ignore flush errors (handler closed/unavailable)
            handler.flush()


def _cleanup_logging() -> None:
    """Flush handlers on interpreter exit."""
    flush_all_handlers()


atexit.register(_cleanup_logging)


def setup_logging(
    name: str = "sumcheck",
    console_level: str | None = None,
    file_level: str | None = None,
    log_file: Path | None = None,
    enable_file_logging: bool = True,  # noqa: FBT001, FBT002
) -> logging.Logger:
    """Configure logging and return the requested logger.

    The root "sumcheck" logger is initialized exactly once; child loggers
    such as "sumcheck.core.checker" propagate to it.

    If the log directory cannot be created the root logger falls back to
    console-only output; a checksum run should never fail because of its
    own log file.

    Args:
        name: Logger name, typically __name__ for module-level loggers
        console_level: Console log level ("DEBUG", "INFO", "WARNING")
        file_level: File log level ("DEBUG", "INFO")
        log_file: Path to log file
            (default: ~/.config/sumcheck/logs/sumcheck.log)
        enable_file_logging: Whether to enable file logging

    Returns:
        Logger instance (singleton per name via logging.getLogger)

    """
    state = get_state()
    with state.lock:
        if not state.root_initialized:
            if console_level is None or file_level is None or log_file is None:
                cfg_console, cfg_file, cfg_path = load_log_settings()
                console_level = console_level or cfg_console
                file_level = file_level or cfg_file
                log_file = log_file or cfg_path

            try:
                setup_root_logger(
                    state,
                    console_level,
                    file_level,
                    log_file,
                    enable_file_logging,
                )
            except ConfigurationError as e:
                setup_root_logger(
                    state, console_level, file_level, log_file, False
                )
                logging.getLogger("sumcheck").warning("%s", e)

    return logging.getLogger(name)


def get_logger(name: str = "sumcheck") -> logging.Logger:
    """Get or create logger instance.

    Best Practice:
        >>> logger = get_logger(__name__)
        >>> logger.debug("Digest of %s is %s", path, digest)

    Args:
        name: Logger name, typically __name__ for module loggers

    Returns:
        Configured logger instance (singleton per name)

    """
    return setup_logging(name=name)


def clear_logger_state() -> None:
    """Clear global logger state for testing purposes.

    Closes and removes the root handlers and resets the state flags so the
    next get_logger() call configures logging from scratch.

    Warning:
        This function is intended for testing only.

    """
    state = get_state()
    with state.lock:
        root_logger = logging.getLogger("sumcheck")
        for handler in root_logger.handlers[:]:
            handler.close()
            root_logger.removeHandler(handler)

        state.handlers = []
        state.root_initialized = False
        state.config_applied = False
