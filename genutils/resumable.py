"""
Resumable sequences
===================

Generator wrappers that expose the yield / return / throw handshake as
Step values, plus free helpers that drive any iterator shape the same way.

Python generators have no ``return(value)``: ``return_`` records the value,
raises GeneratorExit at the suspension point and reports ``Completed(value)``.
Async generator bodies cannot ``return value`` at all, they raise
``AsyncReturn(value)`` and AsyncResumable reports it as the final value.
"""

from __future__ import annotations

import inspect
import types
import typing
from collections.abc import AsyncGenerator, Awaitable, Callable, Generator

from ._types import Completed, Step, Yielded


class AsyncReturn(BaseException):
    """Final value of an async generator body wrapped by AsyncResumable."""

    value: typing.Any

    def __init__(self, value: typing.Any = None) -> None:
        self.value = value
        super().__init__(value)


def _stop_value(stop: StopAsyncIteration) -> typing.Any:
    return stop.args[0] if stop.args else None


def _fresh(it: typing.Any) -> bool:
    # A just-created native generator rejects non-None sends
    return isinstance(it, types.GeneratorType) and inspect.getgeneratorstate(it) == inspect.GEN_CREATED


def _afresh(it: typing.Any) -> bool:
    return isinstance(it, types.AsyncGeneratorType) and inspect.getasyncgenstate(it) == inspect.AGEN_CREATED


# ============================================================================
# Sync
# ============================================================================


def _finish(throw: Callable[[BaseException], typing.Any], value: typing.Any) -> Step[typing.Any, typing.Any]:
    try:
        item = throw(GeneratorExit())
    except StopIteration as stop:
        return Completed(value if stop.value is None else stop.value)
    except GeneratorExit:
        return Completed(value)
    return Yielded(item)


class Resumable[T, N, R](Generator[T, N, R]):
    """
    Wrapper around a running generator.

    Keeps the native generator protocol (send/throw/close/iteration) and
    adds pull/pull_throw/return_ returning Step values. Once Completed is
    observed, every further pull reports the same Completed.
    """

    __slots__ = ("_gen", "_started", "_completed", "returning")

    def __init__(self, gen: Generator[T, N, R]) -> None:
        self._gen = gen
        self._started = False
        self._completed: Completed[R] | None = None
        self.returning: typing.Any = None

    def __getattr__(self, name: str) -> typing.Any:
        if name.startswith("_"):
            raise AttributeError(name)
        return getattr(self._gen, name)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._gen!r})"

    @property
    def done(self) -> bool:
        return self._completed is not None

    def send(self, value: N) -> T:
        if self._completed is not None:
            raise StopIteration(self._completed.value)
        if not self._started:
            self._started = True
            value = typing.cast(N, None)
        try:
            return self._gen.send(value)
        except StopIteration as stop:
            self._completed = Completed(stop.value)
            raise

    def throw(self, error: typing.Any, /) -> T:  # type: ignore[override]
        self._started = True
        try:
            return self._gen.throw(error)
        except StopIteration as stop:
            self._completed = Completed(stop.value)
            raise

    def close(self) -> None:
        if isinstance(self.return_(), Yielded):
            raise RuntimeError("generator ignored GeneratorExit")

    def pull(self, value: typing.Any = None) -> Step[T, R]:
        try:
            return Yielded(self.send(value))
        except StopIteration as stop:
            return Completed(stop.value)

    def pull_throw(self, error: BaseException) -> Step[T, R]:
        try:
            return Yielded(self.throw(error))
        except StopIteration as stop:
            return Completed(stop.value)

    def return_(self, value: typing.Any = None) -> Step[T, R]:
        self.returning = value
        if self._completed is not None:
            return Completed(value)
        result = _finish(self._gen.throw, value)
        if isinstance(result, Completed):
            self._completed = result
        return result


def step(it: typing.Any, value: typing.Any = None) -> Step[typing.Any, typing.Any]:
    """Pull one item from it, sending value where the shape accepts one."""
    try:
        if value is None or _fresh(it) or not hasattr(it, "send"):
            item = next(it)
        else:
            item = it.send(value)
    except StopIteration as stop:
        return Completed(stop.value)
    return Yielded(item)


def step_throw(it: typing.Any, error: BaseException) -> Step[typing.Any, typing.Any]:
    """Inject error at it's suspension point; plain iterators just re-raise."""
    throw = getattr(it, "throw", None)
    if throw is None:
        raise error
    try:
        item = throw(error)
    except StopIteration as stop:
        return Completed(stop.value)
    return Yielded(item)


def resume(it: typing.Any, value: typing.Any, error: BaseException | None) -> Step[typing.Any, typing.Any]:
    """Continue it after our own suspension: forward error if there was one, else send value."""
    if error is not None:
        return step_throw(it, error)
    return step(it, value)


def terminate(it: typing.Any, value: typing.Any = None) -> Step[typing.Any, typing.Any]:
    """
    Finalize it with a return value.

    Returns Yielded if the generator refused to stop; callers do not retry.
    """
    if isinstance(it, Resumable):
        return it.return_(value)
    throw = getattr(it, "throw", None)
    if callable(throw):
        return _finish(throw, value)
    close = getattr(it, "close", None)
    if callable(close):
        close()
    return Completed(value)


# ============================================================================
# Async
# ============================================================================


async def _afinish(
    athrow: Callable[[BaseException], Awaitable[typing.Any]],
    value: typing.Any,
) -> Step[typing.Any, typing.Any]:
    try:
        item = await athrow(GeneratorExit())
    except AsyncReturn as ret:
        return Completed(value if ret.value is None else ret.value)
    except (GeneratorExit, StopAsyncIteration):
        return Completed(value)
    return Yielded(item)


class AsyncResumable[T, N, R](AsyncGenerator[T, N]):
    """Async twin of Resumable; translates AsyncReturn into the final value."""

    __slots__ = ("_agen", "_started", "_completed", "returning")

    def __init__(self, agen: AsyncGenerator[T, N]) -> None:
        self._agen = agen
        self._started = False
        self._completed: Completed[R] | None = None
        self.returning: typing.Any = None

    def __getattr__(self, name: str) -> typing.Any:
        if name.startswith("_"):
            raise AttributeError(name)
        return getattr(self._agen, name)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._agen!r})"

    @property
    def done(self) -> bool:
        return self._completed is not None

    async def asend(self, value: N) -> T:
        if self._completed is not None:
            raise StopAsyncIteration(self._completed.value)
        if not self._started:
            self._started = True
            value = typing.cast(N, None)
        try:
            return await self._agen.asend(value)
        except AsyncReturn as ret:
            self._completed = Completed(ret.value)
        except StopAsyncIteration as stop:
            self._completed = Completed(_stop_value(stop))
        raise StopAsyncIteration(self._completed.value)

    async def athrow(self, error: typing.Any, /) -> T:  # type: ignore[override]
        if self._completed is not None:
            raise error
        self._started = True
        try:
            return await self._agen.athrow(error)
        except AsyncReturn as ret:
            self._completed = Completed(ret.value)
        except StopAsyncIteration as stop:
            self._completed = Completed(_stop_value(stop))
        raise StopAsyncIteration(self._completed.value)

    async def aclose(self) -> None:
        if isinstance(await self.return_(), Yielded):
            raise RuntimeError("async generator ignored GeneratorExit")

    async def pull(self, value: typing.Any = None) -> Step[T, R]:
        try:
            return Yielded(await self.asend(value))
        except StopAsyncIteration as stop:
            return Completed(_stop_value(stop))

    async def pull_throw(self, error: BaseException) -> Step[T, R]:
        try:
            return Yielded(await self.athrow(error))
        except StopAsyncIteration as stop:
            return Completed(_stop_value(stop))

    async def return_(self, value: typing.Any = None) -> Step[T, R]:
        self.returning = value
        if self._completed is not None:
            return Completed(value)
        result = await _afinish(self._agen.athrow, value)
        if isinstance(result, Completed):
            self._completed = result
        return result


async def astep(it: typing.Any, value: typing.Any = None) -> Step[typing.Any, typing.Any]:
    """Async step(): pull one item from an async iterator."""
    try:
        if value is None or _afresh(it) or not hasattr(it, "asend"):
            item = await anext(it)
        else:
            item = await it.asend(value)
    except StopAsyncIteration as stop:
        return Completed(_stop_value(stop))
    return Yielded(item)


async def astep_throw(it: typing.Any, error: BaseException) -> Step[typing.Any, typing.Any]:
    athrow = getattr(it, "athrow", None)
    if athrow is None:
        raise error
    try:
        item = await athrow(error)
    except StopAsyncIteration as stop:
        return Completed(_stop_value(stop))
    return Yielded(item)


async def aresume(it: typing.Any, value: typing.Any, error: BaseException | None) -> Step[typing.Any, typing.Any]:
    if error is not None:
        return await astep_throw(it, error)
    return await astep(it, value)


async def aterminate(it: typing.Any, value: typing.Any = None) -> Step[typing.Any, typing.Any]:
    """Async terminate(); sync sources are finalized synchronously."""
    if isinstance(it, AsyncResumable):
        return await it.return_(value)
    athrow = getattr(it, "athrow", None)
    if callable(athrow):
        return await _afinish(athrow, value)
    aclose = getattr(it, "aclose", None)
    if callable(aclose):
        await aclose()
        return Completed(value)
    return terminate(it, value)


__all__ = (
    "AsyncResumable",
    "AsyncReturn",
    "Resumable",
    "aresume",
    "astep",
    "astep_throw",
    "aterminate",
    "resume",
    "step",
    "step_throw",
    "terminate",
)
