"""
Reduce combinators
==================

Fold a sequence to one value, or test its items with a predicate.
These consume the sequence.
"""

from __future__ import annotations

import typing

from .._errors import EmptyReduceError
from .._helpers import resolve
from .._types import MISSING, Completed, IndexedPredicate, Reducer, Yielded
from ..functions import to_async_iterator, to_iterator
from ..resumable import astep, aterminate, step, terminate

# ============================================================================
# Sync
# ============================================================================


def reduce[A, T](source: typing.Any, f: Reducer[A, T], init: typing.Any = MISSING) -> A:
    """
    Fold items left to right with f(accumulator, value).

    Without ``init`` the first item seeds the accumulator; an empty
    source then raises EmptyReduceError.
    """
    it = to_iterator(source)
    acc = init
    if acc is MISSING:
        match step(it):
            case Completed(_):
                raise EmptyReduceError()
            case Yielded(value):
                acc = value
    while True:
        match step(it):
            case Completed(_):
                return acc
            case Yielded(value):
                acc = f(acc, value)


def some[T](source: typing.Any, p: IndexedPredicate[T]) -> bool:
    """True at the first item satisfying p; the rest of the source is finalized."""
    it = to_iterator(source)
    index = 0
    while True:
        match step(it):
            case Completed(_):
                return False
            case Yielded(value):
                if p(value, index):
                    terminate(it)
                    return True
                index += 1


def every[T](source: typing.Any, p: IndexedPredicate[T]) -> bool:
    """False at the first item failing p; the rest of the source is finalized."""
    it = to_iterator(source)
    index = 0
    while True:
        match step(it):
            case Completed(_):
                return True
            case Yielded(value):
                if not p(value, index):
                    terminate(it)
                    return False
                index += 1


# ============================================================================
# Async
# ============================================================================


async def reduce_async[A, T](source: typing.Any, f: Reducer[A, T], init: typing.Any = MISSING) -> A:
    it = to_async_iterator(source)
    acc = init
    if acc is MISSING:
        match await astep(it):
            case Completed(_):
                raise EmptyReduceError()
            case Yielded(value):
                acc = value
    while True:
        match await astep(it):
            case Completed(_):
                return acc
            case Yielded(value):
                acc = await resolve(f(acc, value))


async def some_async[T](source: typing.Any, p: IndexedPredicate[T]) -> bool:
    it = to_async_iterator(source)
    index = 0
    while True:
        match await astep(it):
            case Completed(_):
                return False
            case Yielded(value):
                if await resolve(p(value, index)):
                    await aterminate(it)
                    return True
                index += 1


async def every_async[T](source: typing.Any, p: IndexedPredicate[T]) -> bool:
    it = to_async_iterator(source)
    index = 0
    while True:
        match await astep(it):
            case Completed(_):
                return True
            case Yielded(value):
                if not await resolve(p(value, index)):
                    await aterminate(it)
                    return False
                index += 1


__all__ = ("every", "every_async", "reduce", "reduce_async", "some", "some_async")
