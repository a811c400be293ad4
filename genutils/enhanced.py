"""
Enhancement attachment
======================

Wraps one running generator so that it is still that generator (native
protocol and attributes reachable) and also carries the combinator
surface. Nothing shared is mutated: each wrapper serves one sequence.
"""

from __future__ import annotations

import typing
from collections.abc import AsyncGenerator, Generator

from ._types import SyncType
from .enhancements import Enhancements
from .functions import to_async_generator, to_generator
from .resumable import AsyncResumable, Resumable

if typing.TYPE_CHECKING:
    from .ops import Ops


class EnhancedGenerator[T, N, R](Resumable[T, N, R], Enhancements[T, N, R]):
    __slots__ = ()

    mode: typing.ClassVar[SyncType] = "sync"

    @property
    def _impl(self) -> Ops:
        from .ops import Sync

        return Sync


class EnhancedAsyncGenerator[T, N, R](AsyncResumable[T, N, R], Enhancements[T, N, R]):
    __slots__ = ()

    mode: typing.ClassVar[SyncType] = "async"

    @property
    def _impl(self) -> Ops:
        from .ops import Async

        return Async


def enhance[T](source: typing.Any) -> EnhancedGenerator[T, typing.Any, typing.Any]:
    """
    Coerce source to a generator and attach the sync combinator surface.

    Enhancing an enhanced sequence returns it unchanged.
    """
    if isinstance(source, EnhancedGenerator):
        return source
    gen: Generator[T, typing.Any, typing.Any] = to_generator(source)
    return EnhancedGenerator(gen)


def enhance_async[T](source: typing.Any) -> EnhancedAsyncGenerator[T, typing.Any, typing.Any]:
    """Async enhance(); accepts async and sync sources."""
    if isinstance(source, EnhancedAsyncGenerator):
        return source
    agen: AsyncGenerator[T, typing.Any] = to_async_generator(source)
    return EnhancedAsyncGenerator(agen)


def of[T](*values: T) -> EnhancedGenerator[T, typing.Any, None]:
    return enhance(values)


def of_async[T](*values: T) -> EnhancedAsyncGenerator[T, typing.Any, None]:
    return enhance_async(values)


__all__ = ("EnhancedAsyncGenerator", "EnhancedGenerator", "enhance", "enhance_async", "of", "of_async")
