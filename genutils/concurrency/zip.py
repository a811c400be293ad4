"""
Zip combinators
===============

Pull one item from every source per round and yield them together.
"""

from __future__ import annotations

import typing
from collections.abc import AsyncGenerator, Generator

from .._helpers import best_effort
from .._types import Completed, Yielded
from ..enhanced import EnhancedAsyncGenerator, EnhancedGenerator, enhance, enhance_async
from ..functions import to_async_generator, to_generator
from ..resumable import AsyncReturn, astep, astep_throw, aterminate, step, step_throw, terminate


def zip_(*sources: typing.Any) -> EnhancedGenerator[tuple[typing.Any, ...], typing.Any, typing.Any]:
    """
    Yield tuples of one item per source, in source order.

    Completes with the return value of the first source that runs out;
    the other sources are then finalized. A value thrown in by the
    consumer is thrown into every live source and then raised.
    """
    upstreams = [to_generator(source) for source in sources]

    def run() -> Generator[tuple[typing.Any, ...], typing.Any, typing.Any]:
        live = [True] * len(upstreams)
        try:
            if not upstreams:
                return None
            while True:
                items: list[typing.Any] = []
                for position, it in enumerate(upstreams):
                    match step(it):
                        case Completed(value):
                            live[position] = False
                            return value
                        case Yielded(value):
                            items.append(value)
                try:
                    yield tuple(items)
                except Exception as exc:
                    for position, it in enumerate(upstreams):
                        if live[position]:
                            with best_effort(it):
                                step_throw(it, exc)
                    raise
        finally:
            for position, it in enumerate(upstreams):
                if live[position]:
                    with best_effort(it):
                        terminate(it, wrapper.returning)

    wrapper = enhance(run())
    return wrapper


def zip_async(*sources: typing.Any) -> EnhancedAsyncGenerator[tuple[typing.Any, ...], typing.Any, typing.Any]:
    """Async zip_(); each round pulls the sources one by one, in order."""
    upstreams = [to_async_generator(source) for source in sources]

    async def run() -> AsyncGenerator[tuple[typing.Any, ...], typing.Any]:
        live = [True] * len(upstreams)
        try:
            if not upstreams:
                return
            while True:
                items: list[typing.Any] = []
                for position, it in enumerate(upstreams):
                    match await astep(it):
                        case Completed(value):
                            live[position] = False
                            raise AsyncReturn(value)
                        case Yielded(value):
                            items.append(value)
                try:
                    yield tuple(items)
                except Exception as exc:
                    for position, it in enumerate(upstreams):
                        if live[position]:
                            with best_effort(it):
                                await astep_throw(it, exc)
                    raise
        finally:
            for position, it in enumerate(upstreams):
                if live[position]:
                    with best_effort(it):
                        await aterminate(it, wrapper.returning)

    wrapper = enhance_async(run())
    return wrapper


__all__ = ("zip_", "zip_async")
