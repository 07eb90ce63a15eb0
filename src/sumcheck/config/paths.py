"""Path constants and utilities for sumcheck configuration."""

import os
from pathlib import Path

from sumcheck.constants import (
    CONFIG_DIR_NAME,
    CONFIG_FILE_NAME,
    DEFAULT_CONFIG_SUBDIR,
    ENV_CONFIG_DIR,
)


class Paths:
    """Application paths and directory structure."""

    HOME_DIR = Path.home()
    CONFIG_DIR = HOME_DIR / CONFIG_DIR_NAME / DEFAULT_CONFIG_SUBDIR
    LOGS_DIR = CONFIG_DIR / "logs"

    # Message catalogs (bundled with package)
    PACKAGE_DIR = Path(__file__).parent.parent
    LOCALES_DIR = PACKAGE_DIR / "locales"

    @classmethod
    def config_dir(cls) -> Path:
        """Return the configuration directory.

        Honors the SUMCHECK_CONFIG_DIR environment override.

        Returns:
            Directory expected to hold settings.conf
        """
        env_dir = os.getenv(ENV_CONFIG_DIR)
        if env_dir:
            return Path(env_dir).expanduser()
        return cls.CONFIG_DIR

    @classmethod
    def settings_file(cls) -> Path:
        """Return the path of settings.conf."""
        return cls.config_dir() / CONFIG_FILE_NAME
