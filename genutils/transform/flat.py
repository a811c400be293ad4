"""
Flatten combinators
===================

Depth-first expansion of nested iterables, optionally mapping values
on the way. Strings, bytes and mappings are never expanded.

Nested sequences are kept on an explicit stack; on early exit every
live nested sequence is finalized innermost first, then the source.
"""

from __future__ import annotations

import typing
from collections.abc import AsyncGenerator, Generator

from .._helpers import ATOMS, best_effort, resolve
from .._types import Completed, IndexedFn, Yielded
from ..enhanced import EnhancedAsyncGenerator, EnhancedGenerator, enhance, enhance_async
from ..functions import is_async_genable, is_genable, to_async_generator, to_generator
from ..resumable import AsyncReturn, aresume, aterminate, resume, terminate

# (sequence, remaining depth, whether its values go through f)
type _Frame = tuple[typing.Any, int, bool]


def _nested(value: typing.Any) -> bool:
    return not isinstance(value, ATOMS) and is_genable(value)


def _anested(value: typing.Any) -> bool:
    return not isinstance(value, ATOMS) and is_async_genable(value)


# ============================================================================
# Sync
# ============================================================================


def _flatten(
    source: typing.Any,
    f: IndexedFn[typing.Any, typing.Any] | None,
    depth: int,
) -> EnhancedGenerator[typing.Any, typing.Any, typing.Any]:
    root = to_generator(source)

    def run() -> Generator[typing.Any, typing.Any, typing.Any]:
        stack: list[_Frame] = [(root, depth, f is not None)]
        sent: typing.Any = None
        error: Exception | None = None
        done = False
        index = 0
        try:
            while True:
                it, level, mapped = stack[-1]
                try:
                    result = resume(it, sent, error)
                except Exception as exc:
                    if len(stack) == 1:
                        raise
                    # A nested sequence gave up; its parent gets the error
                    stack.pop()
                    sent, error = None, exc
                    continue
                sent, error = None, None
                match result:
                    case Completed(value):
                        stack.pop()
                        if not stack:
                            done = True
                            return value
                    case Yielded(value):
                        try:
                            if mapped:
                                value = f(value, index)  # type: ignore[misc]
                                index += 1
                            if level > 0 and _nested(value):
                                stack.append((to_generator(value), level - 1, mapped and level > 1))
                            else:
                                sent = yield value
                        except Exception as exc:
                            error = exc
        finally:
            if not done:
                for it, _, _ in reversed(stack[1:]):
                    with best_effort(it):
                        terminate(it, wrapper.returning)
                terminate(root, wrapper.returning)

    wrapper = enhance(run())
    return wrapper


def flat(source: typing.Any, depth: int = 1) -> EnhancedGenerator[typing.Any, typing.Any, typing.Any]:
    """
    Expand nested iterables up to ``depth`` levels.

    flat([3, [2, [1, [0]]], 7]) yields 3, 2, [1, [0]], 7.
    """
    return _flatten(source, None, depth)


def flat_map[T](
    source: typing.Any,
    f: IndexedFn[T, typing.Any],
    depth: int = 1,
) -> EnhancedGenerator[typing.Any, typing.Any, typing.Any]:
    """
    Map with f, then expand the results up to ``depth`` levels.

    Values of nested levels are mapped too while depth remains, so with
    depth=2 f sees the top level and the first nested level. The index
    counts every call of f.
    """
    return _flatten(source, f, depth)


# ============================================================================
# Async
# ============================================================================


def _flatten_async(
    source: typing.Any,
    f: IndexedFn[typing.Any, typing.Any] | None,
    depth: int,
) -> EnhancedAsyncGenerator[typing.Any, typing.Any, typing.Any]:
    root = to_async_generator(source)

    async def run() -> AsyncGenerator[typing.Any, typing.Any]:
        stack: list[_Frame] = [(root, depth, f is not None)]
        sent: typing.Any = None
        error: Exception | None = None
        done = False
        index = 0
        try:
            while True:
                it, level, mapped = stack[-1]
                try:
                    result = await aresume(it, sent, error)
                except Exception as exc:
                    if len(stack) == 1:
                        raise
                    stack.pop()
                    sent, error = None, exc
                    continue
                sent, error = None, None
                match result:
                    case Completed(value):
                        stack.pop()
                        if not stack:
                            done = True
                            raise AsyncReturn(value)
                    case Yielded(value):
                        try:
                            if mapped:
                                value = await resolve(f(value, index))  # type: ignore[misc]
                                index += 1
                            if level > 0 and _anested(value):
                                stack.append((to_async_generator(value), level - 1, mapped and level > 1))
                            else:
                                sent = yield value
                        except Exception as exc:
                            error = exc
        finally:
            if not done:
                for it, _, _ in reversed(stack[1:]):
                    with best_effort(it):
                        await aterminate(it, wrapper.returning)
                await aterminate(root, wrapper.returning)

    wrapper = enhance_async(run())
    return wrapper


def flat_async(source: typing.Any, depth: int = 1) -> EnhancedAsyncGenerator[typing.Any, typing.Any, typing.Any]:
    return _flatten_async(source, None, depth)


def flat_map_async[T](
    source: typing.Any,
    f: IndexedFn[T, typing.Any],
    depth: int = 1,
) -> EnhancedAsyncGenerator[typing.Any, typing.Any, typing.Any]:
    """Async flat_map(); f may return an awaitable, nested values may be async iterables."""
    return _flatten_async(source, f, depth)


__all__ = ("flat", "flat_async", "flat_map", "flat_map_async")
