"""
Concat combinators
==================

Drain sources one after another, each to completion.
"""

from __future__ import annotations

import typing
from collections.abc import AsyncGenerator, Generator

from .._errors import NotIterableError
from .._helpers import best_effort
from .._types import Completed, Yielded
from ..enhanced import EnhancedAsyncGenerator, EnhancedGenerator, enhance, enhance_async
from ..functions import is_async_genable, is_async_generator, is_genable, is_generator, to_async_generator, to_generator
from ..resumable import aresume, aterminate, resume, terminate


def concat(*sources: typing.Any) -> EnhancedGenerator[typing.Any, typing.Any, None]:
    """
    Yield every item of each source in order.

    On early exit the current source is finalized, and so is every
    source that is already a generator but was not started yet.
    """
    for source in sources:
        if not is_genable(source):
            raise NotIterableError(source)

    def run() -> Generator[typing.Any, typing.Any, None]:
        sent: typing.Any = None
        error: Exception | None = None
        current: typing.Any = None
        position = 0
        done = False
        try:
            for position, source in enumerate(sources):
                current = to_generator(source)
                while True:
                    match resume(current, sent, error):
                        case Completed(_):
                            break
                        case Yielded(value):
                            error = None
                            try:
                                sent = yield value
                            except Exception as exc:
                                error = exc
                current, sent, error = None, None, None
            done = True
        finally:
            if not done:
                if current is not None:
                    terminate(current, wrapper.returning)
                for source in sources[position + 1 :]:
                    if is_generator(source):
                        with best_effort(source):
                            terminate(source, wrapper.returning)

    wrapper = enhance(run())
    return wrapper


def concat_async(*sources: typing.Any) -> EnhancedAsyncGenerator[typing.Any, typing.Any, None]:
    """Async concat(); sync and async sources can be mixed."""
    for source in sources:
        if not is_async_genable(source):
            raise NotIterableError(source)

    async def run() -> AsyncGenerator[typing.Any, typing.Any]:
        sent: typing.Any = None
        error: Exception | None = None
        current: typing.Any = None
        position = 0
        done = False
        try:
            for position, source in enumerate(sources):
                current = to_async_generator(source)
                while True:
                    match await aresume(current, sent, error):
                        case Completed(_):
                            break
                        case Yielded(value):
                            error = None
                            try:
                                sent = yield value
                            except Exception as exc:
                                error = exc
                current, sent, error = None, None, None
            done = True
        finally:
            if not done:
                if current is not None:
                    await aterminate(current, wrapper.returning)
                for source in sources[position + 1 :]:
                    if is_async_generator(source) or is_generator(source):
                        with best_effort(source):
                            await aterminate(source, wrapper.returning)

    wrapper = enhance_async(run())
    return wrapper


__all__ = ("concat", "concat_async")
