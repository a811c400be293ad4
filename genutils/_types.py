"""
Core type definitions for genutils.

Step results, callback shapes and sentinels shared by every combinator.
"""

from __future__ import annotations

import enum
import sys
import typing
from collections.abc import AsyncIterable, AsyncIterator, Awaitable, Callable, Iterable, Iterator
from dataclasses import dataclass

# ============================================================================
# Pull results
# ============================================================================


@dataclass(frozen=True, slots=True)
class Yielded[T]:
    """The sequence produced an item."""

    value: T


@dataclass(frozen=True, slots=True)
class Completed[R]:
    """The sequence finished with a final value."""

    value: R


type Step[T, R] = Yielded[T] | Completed[R]

# ============================================================================
# Callback aliases
# ============================================================================

# Value plus its position in the upstream sequence
type IndexedFn[T, V] = Callable[[T, int], V]
type IndexedPredicate[T] = Callable[[T, int], typing.Any]

type Reducer[A, T] = Callable[[A, T], A]

# Three-way comparison, negative/zero/positive
type Comparator[T] = Callable[[T, T], int]

type MaybeAwaitable[T] = T | Awaitable[T]

# ============================================================================
# Source shapes
# ============================================================================

type Genable[T] = Iterator[T] | Iterable[T]
type AsyncGenable[T] = AsyncIterator[T] | AsyncIterable[T] | Iterator[T] | Iterable[T]

type SyncType = typing.Literal["sync", "async"]

# "No bound" for limit/slice/repeat counts
UNBOUNDED: typing.Final = sys.maxsize


class Missing(enum.Enum):
    MISSING = enum.auto()


# Marks an omitted reduce seed, None is a valid seed
MISSING: typing.Final = Missing.MISSING

__all__ = (
    "AsyncGenable",
    "Comparator",
    "Completed",
    "Genable",
    "IndexedFn",
    "IndexedPredicate",
    "MISSING",
    "MaybeAwaitable",
    "Missing",
    "Reducer",
    "Step",
    "SyncType",
    "UNBOUNDED",
    "Yielded",
)
