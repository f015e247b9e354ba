"""Context – one-shot parent -> child cancellation relay."""
from __future__ import annotations

import asyncio
import logging
import weakref

from tree_context.signal import SignalSender, Subscription

logger = logging.getLogger(__name__)


async def _relay(
    parent: Subscription,
    child: weakref.ref[SignalSender],
    label: str,
) -> bool:
    try:
        await parent.wait()
    finally:
        parent.close()
    sender = child()
    if sender is None:
        # Child already destroyed; its own Signal closed with it.
        logger.debug("relay.discarded context=%s", label)
        return False
    notified = sender.emit()
    del sender
    logger.debug("relay.relayed context=%s notified=%d", label, notified)
    return True


def spawn_propagator(
    parent: Subscription,
    child: weakref.ref[SignalSender],
    label: str,
) -> asyncio.Task[bool]:
    """Start the relay for one parent -> child edge.

    The task waits once on *parent*, then forwards into the child's Signal if
    the child is still alive. It resolves to ``True`` when it relayed and
    ``False`` when the child was gone. It never retries and never holds the
    child beyond the emit.
    """
    return asyncio.get_running_loop().create_task(
        _relay(parent, child, label),
        name=f"tree-context-relay:{label}",
    )


__all__ = ["spawn_propagator"]
