"""Config settings – env-based configuration."""
from tree_context.config.settings.loaders import EnvSettingsLoader
from tree_context.config.settings.tree import LOG_LEVELS, TreeContextSettings

__all__ = [
    "LOG_LEVELS",
    "EnvSettingsLoader",
    "TreeContextSettings",
]
