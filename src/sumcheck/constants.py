"""Centralized constants module for sumcheck.

This module serves as the single source of truth for all shared constants
across the sumcheck codebase. Constants are organized by logical categories
and use typing.Final annotations to ensure immutability.

Usage:
    from sumcheck.constants import DEFAULT_ALGORITHM
"""

from typing import Final

# =============================================================================
# Configuration Constants
# =============================================================================

# Configuration directory and file names
CONFIG_FILE_NAME: Final[str] = "settings.conf"

# Default config directory name under the user's home directory
CONFIG_DIR_NAME: Final[str] = ".config"

# Application-specific subdirectory under the config directory
DEFAULT_CONFIG_SUBDIR: Final[str] = "sumcheck"

# Environment overrides (used by the test suite to isolate the home directory)
ENV_CONFIG_DIR: Final[str] = "SUMCHECK_CONFIG_DIR"
ENV_LOG_DIR: Final[str] = "SUMCHECK_LOG_DIR"

# Configuration defaults
DEFAULT_LOG_LEVEL: Final[str] = "INFO"
DEFAULT_CONSOLE_LOG_LEVEL: Final[str] = "WARNING"
DEFAULT_LOCALE: Final[str] = "en_US"
DEFAULT_FILE_LOGGING: Final[bool] = True
DEFAULT_SUMMARY_WITH_STATUS: Final[bool] = False
DEFAULT_BACKUP_COUNT: Final[int] = 3

# Config section and key names
SECTION_DEFAULT: Final[str] = "DEFAULT"

KEY_LOCALE: Final[str] = "locale"
KEY_LOG_LEVEL: Final[str] = "log_level"
KEY_CONSOLE_LOG_LEVEL: Final[str] = "console_log_level"
KEY_FILE_LOGGING: Final[str] = "file_logging"
KEY_SUMMARY_WITH_STATUS: Final[str] = "summary_with_status"

VALID_LOG_LEVELS: Final[tuple[str, ...]] = (
    "DEBUG",
    "INFO",
    "WARNING",
    "ERROR",
    "CRITICAL",
)

# =============================================================================
# Logging Constants
# =============================================================================

LOG_FILE_NAME: Final[str] = "sumcheck.log"

# Maximum size for rotated log files (bytes)
LOG_ROTATION_THRESHOLD_BYTES: Final[int] = 1024 * 1024  # 1 MB

# Number of backup files to keep for rotated logs
LOG_BACKUP_COUNT: Final[int] = DEFAULT_BACKUP_COUNT

# Console and file format strings used by the logger
LOG_CONSOLE_FORMAT: Final[str] = (
    "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
LOG_CONSOLE_DATE_FORMAT: Final[str] = "%H:%M:%S"
LOG_FILE_FORMAT: Final[str] = (
    "%(asctime)s - %(name)s - %(levelname)s - "
    "%(funcName)s:%(lineno)d - %(message)s"
)
LOG_FILE_DATE_FORMAT: Final[str] = "%Y-%m-%d %H:%M:%S"

# Color mapping for console output levels
LOG_COLORS: Final[dict[str, str]] = {
    "DEBUG": "\033[36m",  # Cyan
    "INFO": "\033[32m",  # Green
    "WARNING": "\033[33m",  # Yellow
    "ERROR": "\033[31m",  # Red
    "CRITICAL": "\033[35m",  # Magenta
    "RESET": "\033[0m",
}

# =============================================================================
# Digest Constants
# =============================================================================

DEFAULT_ALGORITHM: Final[str] = "MD5"

# Read size used when streaming a file through a digest backend
DIGEST_CHUNK_SIZE: Final[int] = 65536  # 64KB

# Algorithms that ship a console script binding
PROGRAM_ALGORITHMS: Final[dict[str, str]] = {
    "sumcheck-md5": "MD5",
    "sumcheck-sha1": "SHA1",
    "sumcheck-sha256": "SHA256",
    "sumcheck-sha512": "SHA512",
}

# =============================================================================
# Sums File Line Formats
# =============================================================================

# Separator between digest and filename in the default (GNU) format
DEFAULT_FORMAT_SEPARATOR: Final[str] = "  "

# Prefix that marks a default-format line; anything else is parsed as tagged
DEFAULT_LINE_PREFIX_PATTERN: Final[str] = r"^[A-Za-z0-9]+  "
DEFAULT_LINE_PATTERN: Final[str] = r"^([A-Za-z0-9]+)  (.+)$"

# Formatted with the escaped, upper-case algorithm name
TAGGED_LINE_PATTERN_TEMPLATE: Final[str] = (
    r"^{algorithm} \((.+)\) = ([A-Za-z0-9]+)$"
)

# =============================================================================
# Command Line Constants
# =============================================================================

OPTION_PREFIXES: Final[tuple[str, ...]] = ("-", "/")
OPTION_TERMINATOR: Final[str] = "--"

CHECK_FLAGS: Final[tuple[str, ...]] = ("--check", "-c")
HELP_FLAGS: Final[tuple[str, ...]] = ("--help", "/?")
VERSION_FLAG: Final[str] = "--version"
TAG_FLAG: Final[str] = "--tag"
QUIET_FLAG: Final[str] = "--quiet"
STATUS_FLAG: Final[str] = "--status"

GLOB_CHARACTERS: Final[tuple[str, ...]] = ("*", "?")
CURRENT_DIR_PREFIXES: Final[tuple[str, ...]] = ("./", ".\\")

EXIT_SUCCESS: Final[int] = 0
EXIT_FAILURE: Final[int] = 1

# =============================================================================
# Message Catalog Constants
# =============================================================================

MESSAGE_DOMAIN: Final[str] = "sumcheck"
