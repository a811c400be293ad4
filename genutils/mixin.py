"""
Iterable mixins
===============

Give re-iterable objects the combinator surface. Every operation starts
a fresh pass (``iter(self)`` / ``aiter(self)``), so the object itself is
never consumed.

    class Deck(EnhancedIterable):
        def __iter__(self):
            return iter(self.cards)

    Deck().filter(lambda c, _: c.red).as_array()
"""

from __future__ import annotations

import typing
from collections.abc import AsyncIterator, Callable, Iterator

from .enhanced import EnhancedAsyncGenerator, EnhancedGenerator, enhance, enhance_async
from .enhancements import OPERATIONS


class EnhancedIterable:
    __slots__ = ()

    def __getattr__(self, name: str) -> typing.Any:
        if name in OPERATIONS:
            return getattr(enhance(iter(typing.cast(typing.Any, self))), name)
        raise AttributeError(f"{type(self).__name__!r} object has no attribute {name!r}")


class EnhancedAsyncIterable:
    __slots__ = ()

    def __getattr__(self, name: str) -> typing.Any:
        if name in OPERATIONS:
            return getattr(enhance_async(aiter(typing.cast(typing.Any, self))), name)
        raise AttributeError(f"{type(self).__name__!r} object has no attribute {name!r}")


class Wrapped[T](EnhancedIterable):
    """Re-iterable view of a generator function with fixed arguments."""

    __slots__ = ("_factory", "_args")

    def __init__(self, factory: Callable[..., Iterator[T]], args: tuple[typing.Any, ...]) -> None:
        self._factory = factory
        self._args = args

    def __iter__(self) -> EnhancedGenerator[T, typing.Any, typing.Any]:
        return enhance(self._factory(*self._args))


class AsyncWrapped[T](EnhancedAsyncIterable):
    __slots__ = ("_factory", "_args")

    def __init__(self, factory: Callable[..., typing.Any], args: tuple[typing.Any, ...]) -> None:
        self._factory = factory
        self._args = args

    def __aiter__(self) -> EnhancedAsyncGenerator[T, typing.Any, typing.Any]:
        return enhance_async(self._factory(*self._args))


def wrap[T](factory: Callable[..., Iterator[T]], *args: typing.Any) -> Wrapped[T]:
    """
    Wrap a generator function so the result can be iterated many times.

    Each iteration calls ``factory(*args)`` again.
    """
    return Wrapped(factory, args)


def wrap_async[T](factory: Callable[..., AsyncIterator[T]], *args: typing.Any) -> AsyncWrapped[T]:
    return AsyncWrapped(factory, args)


__all__ = ("AsyncWrapped", "EnhancedAsyncIterable", "EnhancedIterable", "Wrapped", "wrap", "wrap_async")
