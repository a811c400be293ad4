from __future__ import annotations

import asyncio

import pytest

from genutils import Completed, Yielded, event_to_generator
from genutils.events import (
    UniquePolicy,
    queue_1,
    queue_newest,
    queue_oldest,
    queue_sticky,
    queue_unique,
    queue_update_shallow,
)
from genutils.events.queues import FifoQueue, ShallowUpdateQueue, UniqueQueue


async def drain(events, count):
    return [await events.pull() for _ in range(count)]


@pytest.mark.asyncio
async def test_fifo_delivers_everything_then_completes():
    events, controller = event_to_generator()
    controller.send(0)
    controller.send(5)
    controller.send(7)
    controller.end("done")
    assert await drain(events, 4) == [Yielded(0), Yielded(5), Yielded(7), Completed("done")]


@pytest.mark.asyncio
async def test_pull_waits_for_a_value():
    events, controller = event_to_generator()
    pending = asyncio.ensure_future(events.pull())
    await asyncio.sleep(0)
    assert not pending.done()
    controller.send("x")
    assert await pending == Yielded("x")


@pytest.mark.asyncio
async def test_async_for_stops_at_end():
    events, controller = event_to_generator()

    async def produce():
        for i in range(3):
            await asyncio.sleep(0)
            controller.send(i)
        controller.end()

    producer = asyncio.ensure_future(produce())
    assert [value async for value in events] == [0, 1, 2]
    await producer


@pytest.mark.asyncio
async def test_throw_raises_from_the_sequence():
    events, controller = event_to_generator()
    controller.send(1)
    controller.throw(ValueError("boom"))
    assert await events.pull() == Yielded(1)
    with pytest.raises(ValueError, match="boom"):
        await events.pull()


@pytest.mark.asyncio
async def test_clear_drops_waiting_values():
    events, controller = event_to_generator()
    controller.send(1)
    controller.send(2)
    controller.clear()
    controller.send(3)
    assert await events.pull() == Yielded(3)


@pytest.mark.asyncio
async def test_queue_1_keeps_latest():
    events, controller = event_to_generator(queue_1)
    for value in (0, 5, 7):
        controller.send(value)
    assert await events.pull() == Yielded(7)
    controller.end("done")
    assert await events.pull() == Completed("done")


@pytest.mark.asyncio
async def test_queue_sticky_repeats_last_value():
    events, controller = event_to_generator(queue_sticky)
    controller.send(1)
    assert await drain(events, 2) == [Yielded(1), Yielded(1)]
    controller.send(2)
    assert await events.pull() == Yielded(2)


@pytest.mark.asyncio
async def test_bounded_queues():
    events, controller = event_to_generator(queue_oldest(2))
    for value in (1, 2, 3):
        controller.send(value)
    assert await drain(events, 2) == [Yielded(1), Yielded(2)]

    events, controller = event_to_generator(queue_newest(2))
    for value in (1, 2, 3):
        controller.send(value)
    assert await drain(events, 2) == [Yielded(2), Yielded(3)]


def test_bounded_queue_size_must_be_positive():
    with pytest.raises(ValueError):
        queue_oldest(0)
    with pytest.raises(ValueError):
        queue_newest(-1)


@pytest.mark.asyncio
async def test_queue_unique():
    events, controller = event_to_generator(queue_unique())
    for value in (1, 2, 1, 3):
        controller.send(value)
    controller.end("done")
    assert await drain(events, 4) == [Yielded(1), Yielded(2), Yielded(3), Completed("done")]


def test_unique_queue_policies():
    q = UniqueQueue(UniquePolicy(newest=True))
    for value in (1, 2, 1):
        q.push(value)
    assert [q.shift(), q.shift(), q.shift()] == [2, 1, None]

    q = UniqueQueue(UniquePolicy(key=lambda item: item["id"]))
    q.push({"id": 1, "v": "a"})
    q.push({"id": 1, "v": "b"})
    assert len(q) == 1
    assert q.shift() == {"id": 1, "v": "a"}


def test_unique_policy_requires_callable_key():
    with pytest.raises(ValueError):
        UniquePolicy(key="id")  # type: ignore[arg-type]


@pytest.mark.asyncio
async def test_queue_update_shallow_coalesces_diffs():
    events, controller = event_to_generator(queue_update_shallow({"a": 1}))
    controller.send({"a": 1, "b": 2})
    controller.send({"a": 2, "b": 2})
    assert await events.pull() == Yielded({"b": 2, "a": 2})
    controller.send({"a": 2, "b": 2})
    controller.end("done")
    assert await events.pull() == Completed("done")


def test_shallow_update_queue():
    q = ShallowUpdateQueue({"a": 1, "b": 1})
    assert q.push({"a": 1, "b": 1}) == 0
    q.push({"a": 2})
    assert q.shift() == {"a": 2, "b": None}
    assert q.shift() is None


def test_fifo_queue():
    q = FifoQueue()
    assert q.push("a") == 1
    assert q.push("b") == 2
    assert q.shift() == "a"
    q.clear()
    assert len(q) == 0
    assert q.shift() is None
