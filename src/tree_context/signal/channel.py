"""Signal – multi-consumer, close-on-drop notification channel.

A Signal has exactly one owning :class:`SignalSender`. Receivers are
:class:`Subscription` objects; a pending receive completes when a value is
emitted **or** when the sender is released (explicit :meth:`SignalSender.close`
or garbage collection). Consumers see both as the same thing: ``wait()``
returns ``True``.

Usage::

    sender = create()
    sub = sender.subscribe()
    ...
    del sender            # last owning handle gone -> every receiver completes
    await sub.wait()      # -> True, sub.outcome is SignalOutcome.CLOSED
"""
from __future__ import annotations

import asyncio
import enum
import threading
import weakref


class SignalOutcome(enum.Enum):
    """How a subscription completed."""

    EMITTED = "emitted"
    CLOSED = "closed"


def _running_loop() -> asyncio.AbstractEventLoop | None:
    try:
        return asyncio.get_running_loop()
    except RuntimeError:
        return None


class Subscription:
    """One receiver on a Signal, bound to the loop that created it."""

    __slots__ = ("_state", "_loop", "_future", "outcome")

    def __init__(self, state: _SignalState, loop: asyncio.AbstractEventLoop) -> None:
        self._state = state
        self._loop = loop
        self._future: asyncio.Future[SignalOutcome] = loop.create_future()
        self.outcome: SignalOutcome | None = None

    @property
    def future(self) -> asyncio.Future[SignalOutcome]:
        """The waiter future, for use inside ``asyncio.wait`` races."""
        return self._future

    @property
    def done(self) -> bool:
        return self.outcome is not None

    async def wait(self) -> bool:
        """Wait until the Signal fires or closes. Always returns ``True``."""
        await self._future
        return True

    def close(self) -> None:
        """Stop listening; a no-op once the subscription has completed."""
        self._state.detach(self)
        if not self._future.done():
            self._future.cancel()

    def _notify(self, outcome: SignalOutcome) -> None:
        # May be called from any thread, including a finalizer.
        loop = self._loop
        if loop.is_closed():
            return
        if _running_loop() is loop:
            self._settle(outcome)
        else:
            try:
                loop.call_soon_threadsafe(self._settle, outcome)
            except RuntimeError:
                # Loop closed after the check above; nothing can await it.
                return

    def _settle(self, outcome: SignalOutcome) -> None:
        if self._future.done():
            return
        self.outcome = outcome
        self._future.set_result(outcome)

    def __repr__(self) -> str:
        state = self.outcome.value if self.outcome else "pending"
        return f"<Subscription {state}>"


class _SignalState:
    """Subscriber set plus latched outcome. Never references the sender."""

    __slots__ = ("_lock", "_subscribers", "_emitted", "_closed")

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._subscribers: set[Subscription] = set()
        self._emitted = False
        self._closed = False

    def attach(self, sub: Subscription) -> SignalOutcome | None:
        with self._lock:
            if self._closed:
                return SignalOutcome.CLOSED
            if self._emitted:
                return SignalOutcome.EMITTED
            self._subscribers.add(sub)
            return None

    def detach(self, sub: Subscription) -> None:
        with self._lock:
            self._subscribers.discard(sub)

    def emit(self) -> int:
        with self._lock:
            if self._closed or self._emitted:
                return 0
            self._emitted = True
            pending = list(self._subscribers)
            self._subscribers.clear()
        for sub in pending:
            sub._notify(SignalOutcome.EMITTED)  # noqa: SLF001
        return len(pending)

    def close(self) -> None:
        with self._lock:
            if self._closed:
                return
            self._closed = True
            pending = list(self._subscribers)
            self._subscribers.clear()
        for sub in pending:
            sub._notify(SignalOutcome.CLOSED)  # noqa: SLF001

    @property
    def emitted(self) -> bool:
        return self._emitted

    @property
    def closed(self) -> bool:
        return self._closed

    @property
    def subscriber_count(self) -> int:
        with self._lock:
            return len(self._subscribers)


class SignalSender:
    """The owning emitter handle of a Signal.

    Exactly one sender exists per Signal. When it is closed or collected the
    Signal closes for good. Other parties that must not keep the Signal alive
    hold a :func:`weakref.ref` to the sender instead.
    """

    __slots__ = ("_state", "_finalizer", "__weakref__")

    def __init__(self) -> None:
        self._state = _SignalState()
        self._finalizer = weakref.finalize(self, self._state.close)
        self._finalizer.atexit = False

    def subscribe(self) -> Subscription:
        """Return a new receiver. Must be called from inside a running loop."""
        loop = asyncio.get_running_loop()
        sub = Subscription(self._state, loop)
        outcome = self._state.attach(sub)
        if outcome is not None:
            sub._settle(outcome)  # noqa: SLF001
        return sub

    def emit(self) -> int:
        """Fire the Signal; returns the number of receivers notified.

        Emission latches: receivers subscribed afterwards complete at once.
        """
        return self._state.emit()

    def close(self) -> None:
        """Close the Signal now instead of waiting for collection. Idempotent."""
        self._finalizer()

    @property
    def fired(self) -> bool:
        return self._state.emitted

    @property
    def closed(self) -> bool:
        return self._state.closed

    @property
    def subscriber_count(self) -> int:
        return self._state.subscriber_count

    def __repr__(self) -> str:
        if self.closed:
            state = "closed"
        elif self.fired:
            state = "fired"
        else:
            state = "open"
        return f"<SignalSender {state} subscribers={self.subscriber_count}>"


def create() -> SignalSender:
    """Create a fresh, open Signal and return its owning handle."""
    return SignalSender()


__all__ = ["SignalOutcome", "SignalSender", "Subscription", "create"]
