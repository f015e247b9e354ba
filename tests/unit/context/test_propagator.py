"""Unit tests for the one-shot parent -> child relay."""

from __future__ import annotations

import asyncio
import gc
import weakref

from tree_context.context import spawn_propagator
from tree_context.signal import SignalOutcome, create


class TestRelay:
    def test_parent_close_is_forwarded_to_live_child(self) -> None:
        async def run() -> None:
            parent, child = create(), create()
            relay = spawn_propagator(parent.subscribe(), weakref.ref(child), "child")
            child_sub = child.subscribe()
            parent.close()
            assert await asyncio.wait_for(relay, 1) is True
            assert child_sub.outcome is SignalOutcome.EMITTED
            assert not child.closed

        asyncio.run(run())

    def test_parent_emit_is_forwarded_too(self) -> None:
        async def run() -> None:
            parent, child = create(), create()
            relay = spawn_propagator(parent.subscribe(), weakref.ref(child), "child")
            parent.emit()
            assert await asyncio.wait_for(relay, 1) is True
            assert child.fired

        asyncio.run(run())

    def test_gone_child_is_discarded_silently(self) -> None:
        async def run() -> None:
            parent, child = create(), create()
            relay = spawn_propagator(parent.subscribe(), weakref.ref(child), "child")
            del child
            gc.collect()
            parent.close()
            assert await asyncio.wait_for(relay, 1) is False

        asyncio.run(run())

    def test_relay_does_not_keep_child_alive(self) -> None:
        async def run() -> None:
            parent, child = create(), create()
            relay = spawn_propagator(parent.subscribe(), weakref.ref(child), "child")
            ref = weakref.ref(child)
            del child
            gc.collect()
            assert ref() is None
            assert not relay.done()
            parent.close()
            await asyncio.wait_for(relay, 1)

        asyncio.run(run())

    def test_relay_parks_until_parent_fires(self) -> None:
        async def run() -> None:
            parent, child = create(), create()
            relay = spawn_propagator(parent.subscribe(), weakref.ref(child), "child")
            await asyncio.sleep(0.02)
            assert not relay.done()
            assert not child.fired
            parent.close()
            await asyncio.wait_for(relay, 1)

        asyncio.run(run())

    def test_relay_task_is_named_after_child(self) -> None:
        async def run() -> None:
            parent, child = create(), create()
            relay = spawn_propagator(parent.subscribe(), weakref.ref(child), "root/1")
            assert relay.get_name() == "tree-context-relay:root/1"
            parent.close()
            await relay

        asyncio.run(run())

    def test_cancelled_relay_detaches_from_parent(self) -> None:
        async def run() -> None:
            parent, child = create(), create()
            relay = spawn_propagator(parent.subscribe(), weakref.ref(child), "child")
            await asyncio.sleep(0)
            assert parent.subscriber_count == 1
            relay.cancel()
            await asyncio.gather(relay, return_exceptions=True)
            assert relay.cancelled()
            assert parent.subscriber_count == 0
            assert parent.emit() == 0
            assert not child.fired

        asyncio.run(run())
