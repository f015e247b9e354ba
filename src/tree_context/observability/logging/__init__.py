"""Observability – structured logging helpers."""
from tree_context.observability.logging.factory import JsonLoggerFactory, configure_logging
from tree_context.observability.logging.processors import (
    CONTEXT_LABEL_KEY,
    bound_context_label,
    get_logger,
)

__all__ = [
    "CONTEXT_LABEL_KEY",
    "JsonLoggerFactory",
    "bound_context_label",
    "configure_logging",
    "get_logger",
]
