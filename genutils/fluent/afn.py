"""
Builder forms (async)
=====================

Same builders as ``fluent.fn`` bound to the async operation set.
Consuming stages (as_array, reduce, join, ...) return coroutines, so
the result of a pipe ending in one of them is awaited.

    from genutils.fluent import afn

    names = afn.map_(lambda user, _: fetch_name(user))
    await afn.pipe(users, names, afn.limit(10), afn.join(", "))
"""

from __future__ import annotations

import typing
from collections.abc import Awaitable, Callable

from .._types import MISSING, UNBOUNDED, Comparator, IndexedFn, IndexedPredicate, MaybeAwaitable, Reducer
from ..ops import Async
from .fn import Stage, pipe


def map_[T, V](f: IndexedFn[T, MaybeAwaitable[V]]) -> Stage:
    return lambda source: Async.map(source, f)


def filter_[T](p: IndexedPredicate[T]) -> Stage:
    return lambda source: Async.filter(source, p)


def flat(depth: int = 1) -> Stage:
    return lambda source: Async.flat(source, depth)


def flat_map[T](f: IndexedFn[T, typing.Any], depth: int = 1) -> Stage:
    return lambda source: Async.flat_map(source, f, depth)


def limit(max_items: int) -> Stage:
    return lambda source: Async.limit(source, max_items)


def slice_(start: int = 0, end: int = UNBOUNDED) -> Stage:
    return lambda source: Async.slice(source, start, end)


def repeat_last(times: int = UNBOUNDED) -> Stage:
    return lambda source: Async.repeat_last(source, times)


def for_each[T](f: IndexedFn[T, typing.Any]) -> Stage:
    return lambda source: Async.for_each(source, f)


def reduce[A, T](f: Reducer[A, T], init: typing.Any = MISSING) -> Stage:
    return lambda source: Async.reduce(source, f, init)


def some[T](p: IndexedPredicate[T]) -> Stage:
    return lambda source: Async.some(source, p)


def every[T](p: IndexedPredicate[T]) -> Stage:
    return lambda source: Async.every(source, p)


def as_array() -> Stage:
    return Async.as_array


def join(sep: str = ",") -> Stage:
    return lambda source: Async.join(source, sep)


def sort[T](cmp: Comparator[T] | None = None) -> Callable[..., Awaitable[list[T]]]:
    """Builder taking any number of sources: ``sort(cmp)(a, b)``."""
    return lambda *sources: Async.sort(*sources, cmp=cmp)


__all__ = (
    "as_array",
    "every",
    "filter_",
    "flat",
    "flat_map",
    "for_each",
    "join",
    "limit",
    "map_",
    "pipe",
    "reduce",
    "repeat_last",
    "slice_",
    "some",
    "sort",
)
