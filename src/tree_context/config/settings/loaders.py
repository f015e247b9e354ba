"""Config settings – EnvSettingsLoader."""
from __future__ import annotations

import dataclasses
import os
from collections.abc import Callable, Mapping
from typing import Any, TypeVar

from tree_context.config.validation import InvalidSettingValueError, MissingRequiredSettingError

T = TypeVar("T")

_TRUTHY = frozenset({"1", "true", "yes", "on"})
_FALSY = frozenset({"0", "false", "no", "off"})


def _parse_bool(raw: str) -> bool:
    value = raw.strip().lower()
    if value in _TRUTHY:
        return True
    if value in _FALSY:
        return False
    raise ValueError("expected one of 1/0, true/false, yes/no, on/off")


_PARSERS: dict[str, Callable[[str], Any]] = {
    "bool": _parse_bool,
    "int": int,
    "float": float,
}


class EnvSettingsLoader:
    """Build a settings dataclass from ``<PREFIX>_<FIELD>`` variables.

    *environ* defaults to :data:`os.environ`. Field annotations may be real
    types or postponed strings; ``bool``, ``int`` and ``float`` are parsed,
    anything else is passed through as text.
    """

    def __init__(self, environ: Mapping[str, str] | None = None) -> None:
        self._environ = os.environ if environ is None else environ

    def load(self, settings_class: type[T]) -> T:
        prefix = getattr(settings_class, "_prefix", "")
        kwargs: dict[str, Any] = {}
        for field in dataclasses.fields(settings_class):  # type: ignore[arg-type]
            key = f"{prefix}_{field.name}".upper() if prefix else field.name.upper()
            raw = self._environ.get(key)
            if raw is None:
                if field.default is dataclasses.MISSING and field.default_factory is dataclasses.MISSING:
                    raise MissingRequiredSettingError(key)
                continue
            parse = _PARSERS.get(getattr(field.type, "__name__", field.type), str)
            try:
                kwargs[field.name] = parse(raw)
            except ValueError as exc:
                raise InvalidSettingValueError(key, raw, str(exc)) from exc
        return settings_class(**kwargs)


__all__ = ["EnvSettingsLoader"]
