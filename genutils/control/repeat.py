"""
Repeat combinators
==================

repeat yields one value over and over; repeat_last keeps yielding the
final item of a sequence after it runs out.
"""

from __future__ import annotations

import typing
from collections.abc import AsyncGenerator, Generator

from .._types import UNBOUNDED, Completed, Yielded
from ..enhanced import EnhancedAsyncGenerator, EnhancedGenerator, enhance, enhance_async
from ..functions import to_async_generator, to_generator
from ..resumable import AsyncReturn, aresume, aterminate, resume, terminate

# ============================================================================
# Sync
# ============================================================================


def repeat[T](value: T, times: int = UNBOUNDED) -> EnhancedGenerator[T, typing.Any, None]:
    """Yield value ``times`` times."""

    def run() -> Generator[T, typing.Any, None]:
        for _ in range(times):
            yield value

    return enhance(run())


def repeat_last[T](source: typing.Any, times: int = UNBOUNDED) -> EnhancedGenerator[T | None, typing.Any, typing.Any]:
    """
    Pass upstream through, then yield its last item ``times`` more times.

    An empty upstream repeats None. Completes with upstream's return value.
    """
    upstream = to_generator(source)

    def run() -> Generator[T | None, typing.Any, typing.Any]:
        sent: typing.Any = None
        error: Exception | None = None
        done = False
        last: T | None = None
        try:
            while not done:
                match resume(upstream, sent, error):
                    case Completed(value):
                        done = True
                        returned = value
                    case Yielded(value):
                        error = None
                        last = value
                        try:
                            sent = yield value
                        except Exception as exc:
                            error = exc
        finally:
            if not done:
                terminate(upstream, wrapper.returning)
        for _ in range(times):
            yield last
        return returned

    wrapper = enhance(run())
    return wrapper


# ============================================================================
# Async
# ============================================================================


def repeat_async[T](value: T, times: int = UNBOUNDED) -> EnhancedAsyncGenerator[T, typing.Any, None]:
    async def run() -> AsyncGenerator[T, typing.Any]:
        for _ in range(times):
            yield value

    return enhance_async(run())


def repeat_last_async[T](
    source: typing.Any,
    times: int = UNBOUNDED,
) -> EnhancedAsyncGenerator[T | None, typing.Any, typing.Any]:
    upstream = to_async_generator(source)

    async def run() -> AsyncGenerator[T | None, typing.Any]:
        sent: typing.Any = None
        error: Exception | None = None
        done = False
        last: T | None = None
        try:
            while not done:
                match await aresume(upstream, sent, error):
                    case Completed(value):
                        done = True
                        returned = value
                    case Yielded(value):
                        error = None
                        last = value
                        try:
                            sent = yield value
                        except Exception as exc:
                            error = exc
        finally:
            if not done:
                await aterminate(upstream, wrapper.returning)
        for _ in range(times):
            yield last
        raise AsyncReturn(returned)

    wrapper = enhance_async(run())
    return wrapper


__all__ = ("repeat", "repeat_async", "repeat_last", "repeat_last_async")
