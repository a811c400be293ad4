"""
Collect combinators
===================

Drain a sequence into a list, a joined string or a sorted list.
All of them consume the whole sequence, so the source must be finite.
"""

from __future__ import annotations

import functools
import typing

from .._types import Comparator
from ..concurrency.merge import merge, merge_async
from ..functions import to_async_iterable, to_iterable


def _text(value: typing.Any) -> str:
    return "" if value is None else str(value)


def as_array[T](source: typing.Any) -> list[T]:
    return list(to_iterable(source))


def join(source: typing.Any, sep: str = ",") -> str:
    """Join the items as strings; None renders as an empty string."""
    return sep.join(_text(value) for value in to_iterable(source))


def sort[T](*sources: typing.Any, cmp: Comparator[T] | None = None) -> list[T]:
    """
    Merge sources round-robin, drain them and sort the result.

    ``cmp`` is a three-way comparison; natural ordering when omitted.
    """
    items: list[T] = as_array(merge(*sources))
    if cmp is None:
        items.sort()  # type: ignore[call-arg]
    else:
        items.sort(key=functools.cmp_to_key(cmp))
    return items


async def as_array_async[T](source: typing.Any) -> list[T]:
    return [value async for value in to_async_iterable(source)]


async def join_async(source: typing.Any, sep: str = ",") -> str:
    return sep.join([_text(value) for value in await as_array_async(source)])


async def sort_async[T](*sources: typing.Any, cmp: Comparator[T] | None = None) -> list[T]:
    """Async sort(); sources are merged in arrival order before sorting."""
    items: list[T] = await as_array_async(merge_async(*sources))
    if cmp is None:
        items.sort()  # type: ignore[call-arg]
    else:
        items.sort(key=functools.cmp_to_key(cmp))
    return items


__all__ = ("as_array", "as_array_async", "join", "join_async", "sort", "sort_async")
