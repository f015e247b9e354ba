"""Context – race a task against cancellation and an optional deadline."""
from __future__ import annotations

import asyncio
import logging
from typing import Any, TypeVar

from tree_context.signal import Subscription

T = TypeVar("T")

logger = logging.getLogger(__name__)


async def race(
    work: asyncio.Future[T],
    cancelled: Subscription,
    timeout: float | None,
    *,
    label: str,
) -> T | None:
    """Return *work*'s result if it finishes first, else ``None``.

    ``None`` covers both a fired/closed Signal and an elapsed *timeout*;
    callers cannot tell them apart. An exception raised by *work* propagates
    unchanged. When *work* and the Signal finish in the same wakeup the result
    of *work* wins.
    """
    try:
        await asyncio.wait(
            {work, cancelled.future},
            timeout=timeout,
            return_when=asyncio.FIRST_COMPLETED,
        )
        won = work.done()
    finally:
        cancelled.close()
        if not work.done():
            work.cancel()

    if won:
        logger.debug("task.completed context=%s", label)
        return work.result()
    if cancelled.outcome is not None:
        logger.debug("task.cancelled context=%s outcome=%s", label, cancelled.outcome.value)
    else:
        logger.debug("task.timed_out context=%s timeout=%s", label, timeout)
    return None


def abandon(work: asyncio.Future[Any], cancelled: Subscription, _runner: asyncio.Future[Any]) -> None:
    """Done-callback for the race task: never leave the work or listener behind."""
    cancelled.close()
    if not work.done():
        work.cancel()


__all__ = ["abandon", "race"]
