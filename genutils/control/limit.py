"""
Limit combinators
=================

Guard against sequences that run longer than expected.
"""

from __future__ import annotations

import contextlib
import logging
import typing
from collections.abc import AsyncGenerator, Generator

from .._errors import LimitExceededError
from .._types import Completed, Yielded
from ..enhanced import EnhancedAsyncGenerator, EnhancedGenerator, enhance, enhance_async
from ..functions import to_async_generator, to_generator
from ..resumable import AsyncReturn, aresume, astep_throw, aterminate, resume, step_throw, terminate

logger = logging.getLogger(__name__)


def limit[T](source: typing.Any, max_items: int) -> EnhancedGenerator[T, typing.Any, typing.Any]:
    """
    Pass through at most ``max_items`` items.

    If upstream offers one more, LimitExceededError is thrown into
    upstream and then raised to the consumer. A source that completes
    right at the limit completes normally.
    """
    upstream = to_generator(source)

    def run() -> Generator[T, typing.Any, typing.Any]:
        sent: typing.Any = None
        error: Exception | None = None
        done = False
        count = 0
        try:
            while True:
                match resume(upstream, sent, error):
                    case Completed(value):
                        done = True
                        return value
                    case Yielded(value):
                        error = None
                        if count >= max_items:
                            exceeded = LimitExceededError(max_items)
                            logger.debug("limit(%d) exceeded by %r", max_items, upstream)
                            with contextlib.suppress(LimitExceededError):
                                step_throw(upstream, exceeded)
                            raise exceeded
                        count += 1
                        try:
                            sent = yield value
                        except Exception as exc:
                            error = exc
        finally:
            if not done:
                terminate(upstream, wrapper.returning)

    wrapper = enhance(run())
    return wrapper


def limit_async[T](source: typing.Any, max_items: int) -> EnhancedAsyncGenerator[T, typing.Any, typing.Any]:
    upstream = to_async_generator(source)

    async def run() -> AsyncGenerator[T, typing.Any]:
        sent: typing.Any = None
        error: Exception | None = None
        done = False
        count = 0
        try:
            while True:
                match await aresume(upstream, sent, error):
                    case Completed(value):
                        done = True
                        raise AsyncReturn(value)
                    case Yielded(value):
                        error = None
                        if count >= max_items:
                            exceeded = LimitExceededError(max_items)
                            logger.debug("limit_async(%d) exceeded by %r", max_items, upstream)
                            with contextlib.suppress(LimitExceededError):
                                await astep_throw(upstream, exceeded)
                            raise exceeded
                        count += 1
                        try:
                            sent = yield value
                        except Exception as exc:
                            error = exc
        finally:
            if not done:
                await aterminate(upstream, wrapper.returning)

    wrapper = enhance_async(run())
    return wrapper


__all__ = ("limit", "limit_async")
