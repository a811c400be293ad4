"""
Protocol guards and coercion
============================

Structural checks that classify a value as an iterator / iterable /
generator (sync and async), and coercions that normalize any accepted
shape into the canonical one every combinator is written against.
"""

from __future__ import annotations

import typing
from collections.abc import AsyncGenerator, AsyncIterable, AsyncIterator, Awaitable, Generator, Iterable, Iterator

from ._errors import NotIterableError
from ._helpers import resolve
from ._types import Completed, Yielded
from .resumable import AsyncResumable, AsyncReturn, aresume, resume, terminate


def _has(x: typing.Any, *names: str) -> bool:
    cls = type(x)
    return all(callable(getattr(cls, name, None)) for name in names)


# ============================================================================
# Guards
# ============================================================================


def is_iterator(x: typing.Any) -> bool:
    return _has(x, "__next__")


def is_iterable(x: typing.Any) -> bool:
    return _has(x, "__iter__")


def is_generator(x: typing.Any) -> bool:
    """Full resumable contract: iteration plus send/throw/close."""
    return _has(x, "__iter__", "__next__", "send", "throw", "close")


def is_async_iterator(x: typing.Any) -> bool:
    return _has(x, "__anext__")


def is_async_iterable(x: typing.Any) -> bool:
    return _has(x, "__aiter__")


def is_async_generator(x: typing.Any) -> bool:
    return _has(x, "__aiter__", "__anext__", "asend", "athrow", "aclose")


def is_genable(x: typing.Any) -> bool:
    """Accepted anywhere a sync source is expected."""
    return is_iterator(x) or is_iterable(x)


def is_async_genable(x: typing.Any) -> bool:
    """Accepted anywhere an async source is expected (sync sources included)."""
    return is_async_iterator(x) or is_async_iterable(x) or is_genable(x)


# ============================================================================
# Sync coercion
# ============================================================================


class _Once[T]:
    """Iterable over a single-pass iterator: __iter__ always returns the same one."""

    __slots__ = ("_it",)

    def __init__(self, it: Iterator[T]) -> None:
        self._it = it

    def __iter__(self) -> Iterator[T]:
        return self._it


def _passthrough[T](it: Iterator[T]) -> Generator[T, typing.Any, typing.Any]:
    # Bare iterators may lack close(); nothing is forwarded on early exit
    sent: typing.Any = None
    error: Exception | None = None
    while True:
        match resume(it, sent, error):
            case Completed(value):
                return value
            case Yielded(value):
                error = None
                try:
                    sent = yield value
                except Exception as exc:
                    error = exc


def to_iterator[T](x: Iterator[T] | Iterable[T]) -> Iterator[T]:
    if is_iterator(x):
        return typing.cast(Iterator[T], x)
    if is_iterable(x):
        return iter(typing.cast(Iterable[T], x))
    raise NotIterableError(x)


def to_generator[T](x: Iterator[T] | Iterable[T]) -> Generator[T, typing.Any, typing.Any]:
    if is_generator(x):
        return typing.cast(Generator[T, typing.Any, typing.Any], x)
    return _passthrough(to_iterator(x))


def to_iterable[T](x: Iterator[T] | Iterable[T]) -> Iterable[T]:
    if is_iterable(x):
        return typing.cast(Iterable[T], x)
    if is_iterator(x):
        return _Once(typing.cast(Iterator[T], x))
    raise NotIterableError(x)


def to_iterable_iterator[T](x: Iterator[T] | Iterable[T]) -> Iterator[T]:
    """Value that is an Iterator and an Iterable at once."""
    if is_iterator(x) and is_iterable(x):
        return typing.cast(Iterator[T], x)
    return to_generator(x)


# ============================================================================
# Async coercion
# ============================================================================


def async_adaptor[T](it: Iterator[T | Awaitable[T]]) -> AsyncResumable[T, typing.Any, typing.Any]:
    """
    Drive a sync iterator from async code.

    Awaitable items are awaited before being yielded. Sent values and
    thrown errors are forwarded to it; on early exit it is finalized
    if it supports that.
    """

    async def run() -> AsyncGenerator[T, typing.Any]:
        sent: typing.Any = None
        error: Exception | None = None
        done = False
        try:
            while True:
                match resume(it, sent, error):
                    case Completed(value):
                        done = True
                        raise AsyncReturn(value)
                    case Yielded(value):
                        error = None
                        try:
                            sent = yield await resolve(value)
                        except Exception as exc:
                            error = exc
        finally:
            if not done:
                terminate(it, wrapper.returning)

    wrapper: AsyncResumable[T, typing.Any, typing.Any] = AsyncResumable(run())
    return wrapper


async def _apassthrough[T](ait: AsyncIterator[T]) -> AsyncGenerator[T, typing.Any]:
    sent: typing.Any = None
    error: Exception | None = None
    while True:
        match await aresume(ait, sent, error):
            case Completed(value):
                raise AsyncReturn(value)
            case Yielded(value):
                error = None
                try:
                    sent = yield value
                except Exception as exc:
                    error = exc


def to_async_iterator[T](x: typing.Any) -> AsyncIterator[T]:
    if is_async_iterator(x):
        return x
    if is_async_iterable(x):
        return aiter(x)
    if is_genable(x):
        return async_adaptor(to_iterator(x))
    raise NotIterableError(x)


def to_async_generator[T](x: typing.Any) -> AsyncGenerator[T, typing.Any]:
    if is_async_generator(x):
        return x
    if is_async_iterator(x):
        return AsyncResumable(_apassthrough(x))
    if is_async_iterable(x):
        return to_async_generator(aiter(x))
    if is_genable(x):
        return async_adaptor(to_iterator(x))
    raise NotIterableError(x)


class _AsyncOnce[T]:
    __slots__ = ("_ait",)

    def __init__(self, ait: AsyncIterator[T]) -> None:
        self._ait = ait

    def __aiter__(self) -> AsyncIterator[T]:
        return self._ait


def to_async_iterable[T](x: typing.Any) -> AsyncIterable[T]:
    if is_async_iterable(x):
        return x
    if is_async_iterator(x):
        return _AsyncOnce(x)
    if is_genable(x):
        return async_adaptor(to_iterator(x))
    raise NotIterableError(x)


__all__ = (
    "async_adaptor",
    "is_async_genable",
    "is_async_generator",
    "is_async_iterable",
    "is_async_iterator",
    "is_genable",
    "is_generator",
    "is_iterable",
    "is_iterator",
    "to_async_generator",
    "to_async_iterable",
    "to_async_iterator",
    "to_generator",
    "to_iterable",
    "to_iterable_iterator",
    "to_iterator",
)
