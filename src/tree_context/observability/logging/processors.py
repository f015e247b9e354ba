"""Observability – get_logger helper and context-label binding."""
from __future__ import annotations

import contextlib
from collections.abc import Iterator
from typing import Any

import structlog

CONTEXT_LABEL_KEY = "tree_context"


def get_logger(name: str | None = None, **initial_values: Any) -> Any:
    """Return a bound structlog logger for application code.

    The library itself logs through :mod:`logging`, so nothing reaches the
    console until the application configures a handler.

    Parameters
    ----------
    name:
        Logger name (typically ``__name__`` of the calling module).
    **initial_values:
        Key-value pairs to bind on the returned logger.
    """
    logger = structlog.get_logger(name)
    if initial_values:
        logger = logger.bind(**initial_values)
    return logger


@contextlib.contextmanager
def bound_context_label(label: str) -> Iterator[None]:
    """Bind ``tree_context=<label>`` for every log line emitted in this scope.

    Picked up by ``structlog.contextvars.merge_contextvars``, so user code
    running inside a spawned task logs with its context's label.
    """
    with structlog.contextvars.bound_contextvars(**{CONTEXT_LABEL_KEY: label}):
        yield


__all__ = ["CONTEXT_LABEL_KEY", "bound_context_label", "get_logger"]
