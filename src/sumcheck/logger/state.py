"""Logger state management module.

This module provides the global logger state singleton used throughout
sumcheck. A single root logger instance is configured once per process and
every module logger propagates to it.
"""

import logging
import threading


class _LoggerState:
    """Container for logger state (avoids module-level mutable globals).

    Attributes:
        lock: Thread lock for singleton initialization
        root_initialized: Whether root logger has been set up
        config_applied: Whether settings file levels have been applied
        handlers: Handlers attached to the root logger

    """

    def __init__(self) -> None:
        """Initialize logger state."""
        self.lock = threading.Lock()
        self.root_initialized = False
        self.config_applied = False
        self.handlers: list[logging.Handler] = []


# Single source of truth for logger state across the application
_state = _LoggerState()


def get_state() -> _LoggerState:
    """Get the global logger state singleton.

    Returns:
        The global logger state instance

    """
    return _state
