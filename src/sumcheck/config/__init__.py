"""Configuration management for sumcheck."""

from sumcheck.config.paths import Paths
from sumcheck.config.settings import Settings, SettingsManager

__all__ = ["Paths", "Settings", "SettingsManager"]
