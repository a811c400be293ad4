"""
Enhancement trampoline
======================

Combinator surface shared by every enhanced sequence. Each method is a
one-line delegation to the active operation set (``Sync`` or ``Async``),
passing ``self`` as the source. No combinator logic lives here.
"""

from __future__ import annotations

import abc
import typing

from ._types import MISSING, UNBOUNDED, Comparator, IndexedFn, IndexedPredicate, Reducer, Step, SyncType

if typing.TYPE_CHECKING:
    from .ops import Ops


class Enhancements[T, N, R](abc.ABC):
    """
    Mixin base for enhanced sequences.

    ``returning`` holds the value last passed to ``return_``, so the
    finalizer of a combinator can hand the same value upstream.
    ``mode`` marks sync vs async delivery.
    """

    __slots__ = ()

    mode: typing.ClassVar[SyncType]
    returning: typing.Any

    @property
    @abc.abstractmethod
    def _impl(self) -> Ops: ...

    @abc.abstractmethod
    def pull(self, value: typing.Any = None) -> typing.Any: ...

    @abc.abstractmethod
    def pull_throw(self, error: BaseException) -> typing.Any: ...

    @abc.abstractmethod
    def return_(self, value: typing.Any = None) -> typing.Any: ...

    # Consuming operations (awaitable on async sequences)

    def as_array(self) -> typing.Any:
        return self._impl.as_array(self)

    def for_each(self, f: IndexedFn[T, typing.Any]) -> typing.Any:
        return self._impl.for_each(self, f)

    def reduce[A](self, f: Reducer[A, T], init: typing.Any = MISSING) -> typing.Any:
        return self._impl.reduce(self, f, init)

    def some(self, p: IndexedPredicate[T]) -> typing.Any:
        return self._impl.some(self, p)

    def every(self, p: IndexedPredicate[T]) -> typing.Any:
        return self._impl.every(self, p)

    def join(self, sep: str = ",") -> typing.Any:
        return self._impl.join(self, sep)

    def sort(self, cmp: Comparator[T] | None = None) -> typing.Any:
        return self._impl.sort(self, cmp=cmp)

    # Sequence operations

    def limit(self, max_items: int) -> Enhancements[T, N, R]:
        return self._impl.limit(self, max_items)

    def map[V](self, f: IndexedFn[T, V]) -> Enhancements[V, N, R]:
        return self._impl.map(self, f)

    def filter(self, p: IndexedPredicate[T]) -> Enhancements[T, N, R]:
        return self._impl.filter(self, p)

    def flat(self, depth: int = 1) -> Enhancements[typing.Any, N, R]:
        return self._impl.flat(self, depth)

    def flat_map(self, f: IndexedFn[typing.Any, typing.Any], depth: int = 1) -> Enhancements[typing.Any, N, R]:
        return self._impl.flat_map(self, f, depth)

    def slice(self, start: int = 0, end: int = UNBOUNDED) -> Enhancements[T, N, typing.Any]:
        return self._impl.slice(self, start, end)

    def concat(self, *others: typing.Any) -> Enhancements[typing.Any, N, typing.Any]:
        return self._impl.concat(self, *others)

    def repeat_last(self, times: int = UNBOUNDED) -> Enhancements[T | None, N, R]:
        return self._impl.repeat_last(self, times)

    def repeat[V](self, value: V, times: int = UNBOUNDED) -> Enhancements[T | V, N, typing.Any]:
        """Append ``times`` copies of value after this sequence."""
        return self._impl.concat(self, self._impl.repeat(value, times))

    def zip(self, *others: typing.Any) -> Enhancements[tuple[typing.Any, ...], N, typing.Any]:
        return self._impl.zip(self, *others)

    def merge(self, *others: typing.Any) -> Enhancements[typing.Any, N, typing.Any]:
        return self._impl.merge(self, *others)


# Names served by the trampoline, used by the iterable mixins
OPERATIONS: typing.Final = frozenset(
    {
        "as_array",
        "concat",
        "every",
        "filter",
        "flat",
        "flat_map",
        "for_each",
        "join",
        "limit",
        "map",
        "merge",
        "reduce",
        "repeat",
        "repeat_last",
        "slice",
        "some",
        "sort",
        "zip",
    }
)

__all__ = ("OPERATIONS", "Enhancements")
