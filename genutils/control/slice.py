"""
Slice combinators
=================

Skip ``start`` items, then pass through items up to index ``end``.
"""

from __future__ import annotations

import typing
from collections.abc import AsyncGenerator, Generator

from .._types import UNBOUNDED, Completed, Yielded
from ..enhanced import EnhancedAsyncGenerator, EnhancedGenerator, enhance, enhance_async
from ..functions import to_async_generator, to_generator
from ..resumable import AsyncReturn, aresume, astep, aterminate, resume, step, terminate


def _check_bounds(start: int, end: int) -> None:
    if start < 0 or end < 0:
        raise ValueError("slice bounds must be >= 0")


def slice_[T](
    source: typing.Any,
    start: int = 0,
    end: int = UNBOUNDED,
) -> EnhancedGenerator[T, typing.Any, typing.Any]:
    """
    Yield the items at positions [start, end).

    Stopping at ``end`` finalizes upstream and completes with None.
    Running out earlier completes with upstream's own return value.
    A value thrown in for the last item is raised, not forwarded.
    """
    _check_bounds(start, end)
    upstream = to_generator(source)

    def run() -> Generator[T, typing.Any, typing.Any]:
        sent: typing.Any = None
        error: Exception | None = None
        done = False
        index = 0
        try:
            while index < start:
                match step(upstream):
                    case Completed(value):
                        done = True
                        return value
                    case Yielded(_):
                        index += 1
            while index < end:
                match resume(upstream, sent, error):
                    case Completed(value):
                        done = True
                        return value
                    case Yielded(value):
                        error = None
                        index += 1
                        try:
                            sent = yield value
                        except Exception as exc:
                            error = exc
            if error is not None:
                raise error
            return None
        finally:
            if not done:
                terminate(upstream, wrapper.returning)

    wrapper = enhance(run())
    return wrapper


def slice_async[T](
    source: typing.Any,
    start: int = 0,
    end: int = UNBOUNDED,
) -> EnhancedAsyncGenerator[T, typing.Any, typing.Any]:
    _check_bounds(start, end)
    upstream = to_async_generator(source)

    async def run() -> AsyncGenerator[T, typing.Any]:
        sent: typing.Any = None
        error: Exception | None = None
        done = False
        index = 0
        try:
            while index < start:
                match await astep(upstream):
                    case Completed(value):
                        done = True
                        raise AsyncReturn(value)
                    case Yielded(_):
                        index += 1
            while index < end:
                match await aresume(upstream, sent, error):
                    case Completed(value):
                        done = True
                        raise AsyncReturn(value)
                    case Yielded(value):
                        error = None
                        index += 1
                        try:
                            sent = yield value
                        except Exception as exc:
                            error = exc
            if error is not None:
                raise error
        finally:
            if not done:
                await aterminate(upstream, wrapper.returning)

    wrapper = enhance_async(run())
    return wrapper


__all__ = ("slice_", "slice_async")
