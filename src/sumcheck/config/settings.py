"""Settings manager for the INI configuration file.

settings.conf lives in ~/.config/sumcheck/ and only has a DEFAULT section:

    [DEFAULT]
    locale = fr_FR
    log_level = DEBUG             # file log level
    console_log_level = WARNING
    file_logging = true
    summary_with_status = false   # print mismatch count under --status

A missing file means defaults. The file is never written by sumcheck.
"""

import configparser
from dataclasses import dataclass
from pathlib import Path

from sumcheck.config.paths import Paths
from sumcheck.constants import (
    DEFAULT_CONSOLE_LOG_LEVEL,
    DEFAULT_FILE_LOGGING,
    DEFAULT_LOCALE,
    DEFAULT_LOG_LEVEL,
    DEFAULT_SUMMARY_WITH_STATUS,
    KEY_CONSOLE_LOG_LEVEL,
    KEY_FILE_LOGGING,
    KEY_LOCALE,
    KEY_LOG_LEVEL,
    KEY_SUMMARY_WITH_STATUS,
    SECTION_DEFAULT,
    VALID_LOG_LEVELS,
)
from sumcheck.exceptions import SettingsError
from sumcheck.logger import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class Settings:
    """User settings that apply to every run."""

    locale: str = DEFAULT_LOCALE
    log_level: str = DEFAULT_LOG_LEVEL
    console_log_level: str = DEFAULT_CONSOLE_LOG_LEVEL
    file_logging: bool = DEFAULT_FILE_LOGGING
    summary_with_status: bool = DEFAULT_SUMMARY_WITH_STATUS


class SettingsManager:
    """Loads settings.conf into a Settings instance."""

    def __init__(self, settings_file: Path | None = None) -> None:
        """Initialize settings manager.

        Args:
            settings_file: Settings file path
                (defaults to Paths.settings_file())

        """
        self.settings_file = settings_file or Paths.settings_file()

    def get_default_settings(self) -> dict[str, str]:
        """Get default settings values as INI strings.

        Returns:
            Default settings dictionary

        """
        return {
            KEY_LOCALE: DEFAULT_LOCALE,
            KEY_LOG_LEVEL: DEFAULT_LOG_LEVEL,
            KEY_CONSOLE_LOG_LEVEL: DEFAULT_CONSOLE_LOG_LEVEL,
            KEY_FILE_LOGGING: str(DEFAULT_FILE_LOGGING).lower(),
            KEY_SUMMARY_WITH_STATUS: str(DEFAULT_SUMMARY_WITH_STATUS).lower(),
        }

    def _create_parser(self) -> configparser.ConfigParser:
        config = configparser.ConfigParser(
            inline_comment_prefixes=("#", ";"),
            interpolation=None,
        )
        config.read_dict({SECTION_DEFAULT: self.get_default_settings()})
        return config

    def load(self) -> Settings:
        """Load settings from the INI file.

        Returns:
            Loaded settings, or defaults when the file does not exist

        Raises:
            SettingsError: If the file cannot be parsed or holds an
                invalid value

        """
        config = self._create_parser()

        if self.settings_file.exists():
            try:
                config.read(self.settings_file, encoding="utf-8")
            except (configparser.Error, UnicodeDecodeError) as e:
                raise SettingsError(
                    str(e), target=str(self.settings_file)
                ) from e
            logger.debug("Loaded settings from %s", self.settings_file)
        else:
            logger.debug(
                "No settings file at %s, using defaults", self.settings_file
            )

        section = config[SECTION_DEFAULT]
        return Settings(
            locale=section.get(KEY_LOCALE, DEFAULT_LOCALE).strip(),
            log_level=self._get_level(section, KEY_LOG_LEVEL),
            console_log_level=self._get_level(section, KEY_CONSOLE_LOG_LEVEL),
            file_logging=self._get_bool(section, KEY_FILE_LOGGING),
            summary_with_status=self._get_bool(
                section, KEY_SUMMARY_WITH_STATUS
            ),
        )

    def _get_level(self, section: configparser.SectionProxy, key: str) -> str:
        value = section.get(key, "").strip().upper()
        if value not in VALID_LOG_LEVELS:
            msg = (
                f"{key} must be one of {', '.join(VALID_LOG_LEVELS)}, "
                f"got '{value}'"
            )
            raise SettingsError(msg, target=str(self.settings_file))
        return value

    def _get_bool(self, section: configparser.SectionProxy, key: str) -> bool:
        try:
            return section.getboolean(key)
        except ValueError as e:
            raise SettingsError(
                f"{key}: {e}", target=str(self.settings_file)
            ) from e
