"""Observability – logging."""
from tree_context.observability.logging import JsonLoggerFactory, configure_logging, get_logger

__all__ = ["JsonLoggerFactory", "configure_logging", "get_logger"]
