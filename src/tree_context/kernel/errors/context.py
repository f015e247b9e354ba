"""Errors raised by the cancellation tree itself."""

from __future__ import annotations

from typing import Any

from tree_context.kernel.errors.base import BaseError


class TreeContextError(BaseError):
    """Base class for every error raised by tree-context."""

    default_code = "tree_context_error"


class ContextClosedError(TreeContextError):
    """A context was used after :meth:`Context.cancel` consumed it."""

    default_code = "context_closed"

    def __init__(self, label: str, operation: str, **kwargs: Any) -> None:
        super().__init__(
            f"Context {label!r} was cancelled; cannot {operation}",
            detail={"context": label, "operation": operation},
            **kwargs,
        )
        self.label = label
        self.operation = operation


class InvalidTimeoutError(TreeContextError):
    """A timeout was given that no deadline can be built from."""

    default_code = "invalid_timeout"

    def __init__(self, value: object, **kwargs: Any) -> None:
        super().__init__(
            f"Timeout must be a non-negative number of seconds or a Deadline, got {value!r}",
            detail={"value": repr(value)},
            **kwargs,
        )
        self.value = value


__all__ = ["ContextClosedError", "InvalidTimeoutError", "TreeContextError"]
