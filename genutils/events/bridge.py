"""
Callback bridge
===============

Turn push-style callbacks into a pull-style async sequence.

    events, controller = event_to_generator()
    button.on_click(controller.send)
    async for click in events:
        ...

end() and throw() queue behind the data already sent, so the sequence
finishes only after earlier values were delivered (with the default
FIFO policy; other policies may drop or reorder them).
"""

from __future__ import annotations

import asyncio
import logging
import typing
from collections.abc import AsyncGenerator
from dataclasses import dataclass

from ..enhanced import EnhancedAsyncGenerator, enhance_async
from ..resumable import AsyncReturn
from .queues import Queue, QueueFactory, Signal, queue_fifo

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True, eq=False)
class _End(Signal):
    value: typing.Any


@dataclass(frozen=True, slots=True, eq=False)
class _Raise(Signal):
    error: BaseException


class EventController[T, R]:
    """Push side of event_to_generator."""

    __slots__ = ("_queue", "_ready")

    def __init__(self, queue: Queue[typing.Any], ready: asyncio.Event) -> None:
        self._queue = queue
        self._ready = ready

    def _push(self, item: typing.Any) -> None:
        self._queue.push(item)
        self._ready.set()

    def send(self, value: T) -> None:
        self._push(value)

    def end(self, value: R | None = None) -> None:
        """Finish the sequence with ``value`` once queued items are pulled."""
        logger.debug("event bridge ending with %r", value)
        self._push(_End(value))

    def throw(self, error: BaseException) -> None:
        """Raise ``error`` from the sequence once queued items are pulled."""
        logger.debug("event bridge failing with %r", error)
        self._push(_Raise(error))

    def clear(self) -> None:
        """Drop everything waiting in the queue."""
        self._queue.clear()


def event_to_generator[T, R](
    queue: QueueFactory[typing.Any] = queue_fifo,
) -> tuple[EnhancedAsyncGenerator[T, typing.Any, R], EventController[T, R]]:
    """Build a (sequence, controller) pair sharing one queue."""
    pending = queue()
    ready = asyncio.Event()

    async def run() -> AsyncGenerator[T, typing.Any]:
        while True:
            while not len(pending):
                ready.clear()
                await ready.wait()
            item = pending.shift()
            match item:
                case _End(value):
                    raise AsyncReturn(value)
                case _Raise(error):
                    raise error
            yield typing.cast(T, item)

    return enhance_async(run()), EventController(pending, ready)


__all__ = ("EventController", "event_to_generator")
