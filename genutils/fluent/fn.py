"""
Builder forms (sync)
====================

Each builder captures the arguments and returns a function that takes
the source, so stages can be defined once and applied to many sources.

    from genutils.fluent import fn

    evens = fn.filter_(lambda v, _: v % 2 == 0)
    fn.pipe(range_(0, 10), evens, fn.map_(lambda v, _: v * v), fn.as_array())
"""

from __future__ import annotations

import typing
from collections.abc import Callable

from .._types import MISSING, UNBOUNDED, Comparator, IndexedFn, IndexedPredicate, Reducer
from ..ops import Sync

type Stage = Callable[[typing.Any], typing.Any]


def pipe(source: typing.Any, *stages: Stage) -> typing.Any:
    """Feed source through each stage in turn."""
    for stage in stages:
        source = stage(source)
    return source


def map_[T, V](f: IndexedFn[T, V]) -> Stage:
    return lambda source: Sync.map(source, f)


def filter_[T](p: IndexedPredicate[T]) -> Stage:
    return lambda source: Sync.filter(source, p)


def flat(depth: int = 1) -> Stage:
    return lambda source: Sync.flat(source, depth)


def flat_map[T](f: IndexedFn[T, typing.Any], depth: int = 1) -> Stage:
    return lambda source: Sync.flat_map(source, f, depth)


def limit(max_items: int) -> Stage:
    return lambda source: Sync.limit(source, max_items)


def slice_(start: int = 0, end: int = UNBOUNDED) -> Stage:
    return lambda source: Sync.slice(source, start, end)


def repeat_last(times: int = UNBOUNDED) -> Stage:
    return lambda source: Sync.repeat_last(source, times)


def for_each[T](f: IndexedFn[T, typing.Any]) -> Stage:
    return lambda source: Sync.for_each(source, f)


def reduce[A, T](f: Reducer[A, T], init: typing.Any = MISSING) -> Stage:
    return lambda source: Sync.reduce(source, f, init)


def some[T](p: IndexedPredicate[T]) -> Stage:
    return lambda source: Sync.some(source, p)


def every[T](p: IndexedPredicate[T]) -> Stage:
    return lambda source: Sync.every(source, p)


def as_array() -> Stage:
    return Sync.as_array


def join(sep: str = ",") -> Stage:
    return lambda source: Sync.join(source, sep)


def sort[T](cmp: Comparator[T] | None = None) -> Callable[..., list[T]]:
    """Builder taking any number of sources: ``sort(cmp)(a, b)``."""
    return lambda *sources: Sync.sort(*sources, cmp=cmp)


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
