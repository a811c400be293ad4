"""
Map combinators
===============

map_ / map_async yield f(value, index) for every upstream item;
for_each / for_each_async consume a sequence for its side effects.
"""

from __future__ import annotations

import typing
from collections.abc import AsyncGenerator, Generator

from .._helpers import resolve
from .._types import Completed, IndexedFn, MaybeAwaitable, Yielded
from ..enhanced import EnhancedAsyncGenerator, EnhancedGenerator, enhance, enhance_async
from ..functions import to_async_generator, to_async_iterable, to_generator, to_iterable
from ..resumable import AsyncReturn, aresume, aterminate, resume, terminate

# ============================================================================
# Sync
# ============================================================================


def map_[T, V](source: typing.Any, f: IndexedFn[T, V]) -> EnhancedGenerator[V, typing.Any, typing.Any]:
    """
    Yield f(value, index) for each upstream item.

    A value thrown in by the consumer (or raised by f) is thrown into
    upstream; if upstream yields a replacement it is mapped like any
    other item.
    """
    upstream = to_generator(source)

    def run() -> Generator[V, typing.Any, typing.Any]:
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
                            sent = yield f(value, index)
                        except Exception as exc:
                            error = exc
                        index += 1
        finally:
            if not done:
                terminate(upstream, wrapper.returning)

    wrapper = enhance(run())
    return wrapper


def for_each[T](source: typing.Any, f: IndexedFn[T, typing.Any]) -> None:
    """Call f(value, index) for every item until the sequence completes."""
    for index, value in enumerate(to_iterable(source)):
        f(value, index)


# ============================================================================
# Async
# ============================================================================


def map_async[T, V](
    source: typing.Any,
    f: IndexedFn[T, MaybeAwaitable[V]],
) -> EnhancedAsyncGenerator[V, typing.Any, typing.Any]:
    """Async map_(); f may return an awaitable."""
    upstream = to_async_generator(source)

    async def run() -> AsyncGenerator[V, typing.Any]:
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
                            sent = yield await resolve(f(value, index))
                        except Exception as exc:
                            error = exc
                        index += 1
        finally:
            if not done:
                await aterminate(upstream, wrapper.returning)

    wrapper = enhance_async(run())
    return wrapper


async def for_each_async[T](source: typing.Any, f: IndexedFn[T, MaybeAwaitable[typing.Any]]) -> None:
    index = 0
    async for value in to_async_iterable(source):
        await resolve(f(value, index))
        index += 1


__all__ = ("for_each", "for_each_async", "map_", "map_async")
