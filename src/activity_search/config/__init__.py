"""Config – 12-factor settings for search and filter engines."""

from activity_search.config.settings import EnvSettingsLoader, SearchSettings, Settings, SettingsLoader
from activity_search.config.validation import (
    ConfigError,
    InvalidSettingValueError,
    MissingRequiredSettingError,
)

__all__ = [
    "ConfigError",
    "EnvSettingsLoader",
    "InvalidSettingValueError",
    "MissingRequiredSettingError",
    "SearchSettings",
    "Settings",
    "SettingsLoader",
]
