"""
Merge combinators
=================

merge interleaves sync sources round-robin; merge_async runs one pull
per source concurrently and yields items in arrival order.
"""

from __future__ import annotations

import asyncio
import logging
import typing
from collections.abc import AsyncGenerator, Generator

from .._helpers import best_effort
from .._types import Completed, Step, Yielded
from ..enhanced import EnhancedAsyncGenerator, EnhancedGenerator, enhance, enhance_async
from ..functions import to_async_generator, to_generator
from ..resumable import astep, astep_throw, aterminate, step, step_throw, terminate

logger = logging.getLogger(__name__)


def merge(*sources: typing.Any) -> EnhancedGenerator[typing.Any, typing.Any, None]:
    """
    Round-robin over the live sources until all of them complete.

    merge(range_(0, 3), range_(10, 15)) yields 0, 10, 1, 11, 2, 12, 13, 14.
    A sent value goes to whichever source is pulled next.
    A value thrown in by the consumer is thrown into every live source
    and then raised; replacement items those sources yield are discarded.
    """
    upstreams = [to_generator(source) for source in sources]

    def run() -> Generator[typing.Any, typing.Any, None]:
        live = list(range(len(upstreams)))
        sent: typing.Any = None
        try:
            while live:
                for position in list(live):
                    match step(upstreams[position], sent):
                        case Completed(_):
                            live.remove(position)
                        case Yielded(value):
                            try:
                                sent = yield value
                            except Exception as exc:
                                for other in live:
                                    with best_effort(upstreams[other]):
                                        step_throw(upstreams[other], exc)
                                raise
        finally:
            for position in live:
                with best_effort(upstreams[position]):
                    terminate(upstreams[position], wrapper.returning)

    wrapper = enhance(run())
    return wrapper


def merge_async(*sources: typing.Any) -> EnhancedAsyncGenerator[typing.Any, typing.Any, None]:
    """
    Yield items from all sources as soon as they arrive.

    Every live source has exactly one pull in flight. Items that arrive
    together are delivered in source order. On early exit the pulls in
    flight are cancelled and every live source is finalized.
    As with merge, a thrown value is raised after reaching every live
    source, and replacement items are discarded.
    """
    upstreams = [to_async_generator(source) for source in sources]

    async def run() -> AsyncGenerator[typing.Any, typing.Any]:
        live = set(range(len(upstreams)))
        pending: dict[asyncio.Task[Step[typing.Any, typing.Any]], int] = {}

        def pull(position: int, value: typing.Any = None) -> None:
            pending[asyncio.create_task(astep(upstreams[position], value))] = position

        async def cancel_pending() -> None:
            if not pending:
                return
            logger.debug("merge_async: cancelling %d pending pulls", len(pending))
            for task in pending:
                task.cancel()
            await asyncio.gather(*pending, return_exceptions=True)
            pending.clear()

        try:
            for position in sorted(live):
                pull(position)
            while pending:
                finished, _ = await asyncio.wait(pending, return_when=asyncio.FIRST_COMPLETED)
                for task in sorted(finished, key=pending.__getitem__):
                    position = pending.pop(task)
                    match task.result():
                        case Completed(_):
                            live.discard(position)
                        case Yielded(value):
                            try:
                                sent = yield value
                            except Exception as exc:
                                await cancel_pending()
                                for other in sorted(live):
                                    with best_effort(upstreams[other]):
                                        await astep_throw(upstreams[other], exc)
                                raise
                            pull(position, sent)
        finally:
            await cancel_pending()
            for position in sorted(live):
                with best_effort(upstreams[position]):
                    await aterminate(upstreams[position], wrapper.returning)

    wrapper = enhance_async(run())
    return wrapper


__all__ = ("merge", "merge_async")
