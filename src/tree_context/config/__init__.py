"""Config – settings, the env loader and validation errors."""

from tree_context.config.settings import EnvSettingsLoader, TreeContextSettings
from tree_context.config.validation import (
    ConfigError,
    InvalidSettingValueError,
    MissingRequiredSettingError,
)

__all__ = [
    "ConfigError",
    "EnvSettingsLoader",
    "InvalidSettingValueError",
    "MissingRequiredSettingError",
    "TreeContextSettings",
]
