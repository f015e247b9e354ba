"""Context – a node in the cancellation tree."""
from __future__ import annotations

import asyncio
import logging
import functools
import inspect
import uuid
import weakref
from collections.abc import Awaitable
from typing import Any, TypeVar

from tree_context.context.propagator import spawn_propagator
from tree_context.context.race import abandon, race
from tree_context.kernel.errors import ContextClosedError, TreeContextError
from tree_context.observability.logging import bound_context_label
from tree_context.signal import SignalSender, create
from tree_context.timeouts import Timeout, resolve_timeout

T = TypeVar("T")

logger = logging.getLogger(__name__)


class Context:
    """Scope for spawned asyncio work.

    Cancelling the context, or dropping the last reference to it, cancels
    every task spawned on it and on every live descendant context. Children
    are made with :meth:`new_child_context`; the parent keeps no reference to
    them, so a child can be dropped on its own at any time.

    Usage::

        root = Context()
        child = root.new_child_context()
        handle = child.spawn(poll_forever())
        root.cancel()
        assert await handle is None

    Contexts are also context managers; leaving the block cancels them::

        async with Context() as ctx:
            ctx.spawn(worker())
    """

    __slots__ = ("_sender", "_label", "_children", "_background", "__weakref__")

    def __init__(self, name: str | None = None) -> None:
        self._sender: SignalSender | None = create()
        self._label = name or f"ctx-{uuid.uuid4().hex[:8]}"
        self._children = 0
        self._background: set[asyncio.Task[Any]] = set()
        logger.debug("context.created context=%s", self._label)

    @classmethod
    def new(cls, name: str | None = None) -> "Context":
        """Create a root context."""
        return cls(name)

    @classmethod
    def with_parent(cls, parent: "Context", name: str | None = None) -> "Context":
        """Same as ``parent.new_child_context(name)``."""
        return parent.new_child_context(name)

    @property
    def label(self) -> str:
        return self._label

    def new_child_context(self, name: str | None = None) -> "Context":
        """Create a child that is cancelled whenever this context is.

        Must be called from inside a running event loop. This context is left
        untouched and stays usable.
        """
        sender = self._require_sender("create a child context")
        self._children += 1
        child = Context(name or f"{self._label}/{self._children}")
        relay = spawn_propagator(
            sender.subscribe(),
            weakref.ref(child._sender),  # type: ignore[arg-type]
            child._label,
        )
        self._track(relay)
        logger.debug("context.child_created context=%s child=%s", self._label, child._label)
        return child

    def cancel(self) -> None:
        """Cancel every task under this context and its descendants.

        Consumes the context: further ``spawn*`` or ``new_child_context``
        calls raise :class:`ContextClosedError`. Calling it twice is harmless.
        """
        sender, self._sender = self._sender, None
        if sender is None:
            return
        sender.close()
        logger.debug("context.cancelled context=%s", self._label)

    def spawn(self, awaitable: Awaitable[T]) -> asyncio.Task[T | None]:
        """Spawn *awaitable* with no deadline. See :meth:`spawn_with_timeout`."""
        return self.spawn_with_timeout(awaitable, None)

    def spawn_with_timeout(
        self,
        awaitable: Awaitable[T],
        timeout: Timeout = None,
    ) -> asyncio.Task[T | None]:
        """Schedule *awaitable* and race it against cancellation and *timeout*.

        *timeout* is seconds (``float``), a :class:`Deadline`, or ``None``.
        The returned task resolves to the awaitable's result if it finished
        first, or ``None`` if this context (or an ancestor) was cancelled or
        the deadline passed. Exceptions raised by the awaitable, and
        cancellation of the returned task itself, surface through the task
        and are never turned into ``None``.
        """
        try:
            sender = self._require_sender("spawn a task")
            seconds = resolve_timeout(timeout)
            loop = asyncio.get_running_loop()
        except (TreeContextError, RuntimeError):
            # Close the coroutine cleanly to avoid "never awaited" warnings
            if inspect.iscoroutine(awaitable):
                awaitable.close()
            raise
        cancelled = sender.subscribe()
        with bound_context_label(self._label):
            try:
                work = asyncio.ensure_future(awaitable)
            except TypeError:
                cancelled.close()
                raise
            runner = loop.create_task(
                race(work, cancelled, seconds, label=self._label),
                name=f"tree-context-task:{self._label}",
            )
        runner.add_done_callback(functools.partial(abandon, work, cancelled))
        self._track(runner)
        logger.debug("task.spawned context=%s timeout=%s", self._label, seconds)
        return runner

    def _require_sender(self, operation: str) -> SignalSender:
        if self._sender is None:
            raise ContextClosedError(self._label, operation)
        return self._sender

    def _track(self, task: asyncio.Task[Any]) -> None:
        # asyncio keeps only weak references to tasks.
        self._background.add(task)
        task.add_done_callback(self._background.discard)

    def __enter__(self) -> "Context":
        return self

    def __exit__(self, *_: object) -> None:
        self.cancel()

    async def __aenter__(self) -> "Context":
        return self

    async def __aexit__(self, *_: object) -> None:
        self.cancel()

    def __repr__(self) -> str:
        return f"<Context {self._label}>"


__all__ = ["Context"]
