"""
Filter combinators
==================

Pass through only the upstream items whose predicate is truthy.
"""

from __future__ import annotations

import typing
from collections.abc import AsyncGenerator, Generator

from .._helpers import resolve
from .._types import Completed, IndexedPredicate, Yielded
from ..enhanced import EnhancedAsyncGenerator, EnhancedGenerator, enhance, enhance_async
from ..functions import to_async_generator, to_generator
from ..resumable import AsyncReturn, aresume, aterminate, resume, terminate


def filter_[T](source: typing.Any, p: IndexedPredicate[T]) -> EnhancedGenerator[T, typing.Any, typing.Any]:
    """
    Yield upstream items for which p(value, index) is truthy.

    Every upstream item gets an index, kept or not. A rejected item
    does not reach the consumer, so the value sent for it is the last
    one our consumer sent.
    """
    upstream = to_generator(source)

    def run() -> Generator[T, typing.Any, typing.Any]:
        sent: typing.Any = None
        error: Exception | None = None
        done = False
        index = 0
        try:
            while True:
                match resume(upstream, sent, error):
                    case Completed(value):
                        done = True
                        return value
                    case Yielded(value):
                        error = None
                        try:
                            if p(value, index):
                                sent = yield value
                        except Exception as exc:
                            error = exc
                        index += 1
        finally:
            if not done:
                terminate(upstream, wrapper.returning)

    wrapper = enhance(run())
    return wrapper


def filter_async[T](source: typing.Any, p: IndexedPredicate[T]) -> EnhancedAsyncGenerator[T, typing.Any, typing.Any]:
    upstream = to_async_generator(source)

    async def run() -> AsyncGenerator[T, typing.Any]:
        sent: typing.Any = None
        error: Exception | None = None
        done = False
        index = 0
        try:
            while True:
                match await aresume(upstream, sent, error):
                    case Completed(value):
                        done = True
                        raise AsyncReturn(value)
                    case Yielded(value):
                        error = None
                        try:
                            if await resolve(p(value, index)):
                                sent = yield value
                        except Exception as exc:
                            error = exc
                        index += 1
        finally:
            if not done:
                await aterminate(upstream, wrapper.returning)

    wrapper = enhance_async(run())
    return wrapper


__all__ = ("filter_", "filter_async")
