"""Observability – JsonLoggerFactory."""
from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

import structlog

if TYPE_CHECKING:
    from tree_context.config.settings import TreeContextSettings


class JsonLoggerFactory:
    """Configure structlog to render through the stdlib root handler."""

    @staticmethod
    def configure(level: int = logging.INFO, *, console: bool = False) -> None:
        shared_processors: list[Any] = [
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
        ]
        structlog.configure(
            processors=shared_processors + [structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
            logger_factory=structlog.stdlib.LoggerFactory(),
            wrapper_class=structlog.stdlib.BoundLogger,
            cache_logger_on_first_use=True,
        )
        renderer: Any = (
            structlog.dev.ConsoleRenderer() if console else structlog.processors.JSONRenderer()
        )
        formatter = structlog.stdlib.ProcessorFormatter(
            # stdlib records, including this library's own, get the same fields.
            foreign_pre_chain=shared_processors,
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                renderer,
            ],
        )
        handler = logging.StreamHandler()
        handler.setFormatter(formatter)
        root = logging.getLogger()
        root.handlers.clear()
        root.addHandler(handler)
        root.setLevel(level)


def configure_logging(settings: TreeContextSettings) -> None:
    """Apply :class:`TreeContextSettings` to the logging stack."""
    JsonLoggerFactory.configure(
        level=logging.getLevelName(settings.log_level.upper()),
        console=not settings.json_logs,
    )


__all__ = ["JsonLoggerFactory", "configure_logging"]
