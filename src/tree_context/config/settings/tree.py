"""Config settings – TreeContextSettings."""
from __future__ import annotations

import dataclasses
from typing import ClassVar

from tree_context.config.settings.loaders import EnvSettingsLoader
from tree_context.config.validation import InvalidSettingValueError

LOG_LEVELS = frozenset({"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"})


@dataclasses.dataclass(frozen=True)
class TreeContextSettings:
    """Ambient settings for the library's logging.

    Read from ``TREE_CONTEXT_LOG_LEVEL`` and ``TREE_CONTEXT_JSON_LOGS``.
    Nothing here changes how cancellation behaves.
    """

    _prefix: ClassVar[str] = "TREE_CONTEXT"

    log_level: str = "INFO"
    json_logs: bool = True

    def __post_init__(self) -> None:
        if self.log_level.upper() not in LOG_LEVELS:
            raise InvalidSettingValueError(
                "log_level", self.log_level, f"expected one of {sorted(LOG_LEVELS)}"
            )

    @classmethod
    def from_env(cls) -> "TreeContextSettings":
        return EnvSettingsLoader().load(cls)


__all__ = ["LOG_LEVELS", "TreeContextSettings"]
