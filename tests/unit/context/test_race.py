"""Unit tests for the race runner."""

from __future__ import annotations

import asyncio

import pytest

from tree_context.context import race
from tree_context.signal import create


async def _value(v: object, delay: float = 0.0) -> object:
    await asyncio.sleep(delay)
    return v


class TestRace:
    def test_work_wins(self) -> None:
        async def run() -> object:
            sender = create()
            work = asyncio.ensure_future(_value("done"))
            return await race(work, sender.subscribe(), None, label="t")

        assert asyncio.run(run()) == "done"

    def test_signal_wins_and_work_is_cancelled(self) -> None:
        async def run() -> None:
            sender = create()
            sub = sender.subscribe()
            work = asyncio.ensure_future(_value("late", delay=10))
            asyncio.get_running_loop().call_later(0.01, sender.emit)
            assert await race(work, sub, None, label="t") is None
            await asyncio.sleep(0.01)
            assert work.cancelled()

        asyncio.run(run())

    def test_timeout_wins(self) -> None:
        async def run() -> None:
            sender = create()
            sub = sender.subscribe()
            work = asyncio.ensure_future(_value("late", delay=10))
            assert await race(work, sub, 0.01, label="t") is None
            assert sub.outcome is None
            assert sender.subscriber_count == 0

        asyncio.run(run())

    def test_subscription_detached_after_work_wins(self) -> None:
        async def run() -> None:
            sender = create()
            await race(asyncio.ensure_future(_value(1)), sender.subscribe(), None, label="t")
            assert sender.subscriber_count == 0

        asyncio.run(run())

    def test_work_exception_propagates(self) -> None:
        async def boom() -> None:
            raise ValueError("inner error")

        async def run() -> None:
            sender = create()
            await race(asyncio.ensure_future(boom()), sender.subscribe(), None, label="t")

        with pytest.raises(ValueError, match="inner error"):
            asyncio.run(run())

    def test_finished_work_wins_a_tie(self) -> None:
        async def run() -> object:
            sender = create()
            sender.emit()
            work = asyncio.get_running_loop().create_future()
            work.set_result(7)
            return await race(work, sender.subscribe(), None, label="t")

        assert asyncio.run(run()) == 7
