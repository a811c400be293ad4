"""
Deferred values
===============

Future wraps a zero-argument computation and runs it at most once.
The outcome is cached as a kungfu Result, so the value or the error is
replayed on every access.

    fut = Future(load_config)
    config = fut.eval()                                # runs now
    result = await fut.then(lambda cfg: cfg["name"])   # Ok("...") or Error(exc)

With ``delay=True`` registering a continuation does not start the
computation; it waits for an explicit ``eval()``.
"""

from __future__ import annotations

import asyncio
import typing
from collections.abc import Callable, Generator

from kungfu import Error, LazyCoroResult, Ok, Result

from ._helpers import resolve


class Future[T]:
    __slots__ = ("_fn", "_delay", "_outcome", "_ready")

    def __init__(self, fn: Callable[[], T], *, delay: bool = False) -> None:
        self._fn: Callable[[], T] | None = fn
        self._delay = delay
        self._outcome: Result[T, Exception] | None = None
        self._ready: asyncio.Event | None = None

    def __repr__(self) -> str:
        state = "pending" if self._outcome is None else repr(self._outcome)
        return f"Future({state})"

    @property
    def done(self) -> bool:
        return self._outcome is not None

    def _settle(self) -> Result[T, Exception]:
        if self._outcome is None:
            fn, self._fn = self._fn, None
            if fn is None:
                raise RuntimeError("Future evaluated from inside its own computation")
            try:
                self._outcome = Ok(fn())
            except Exception as exc:
                self._outcome = Error(exc)
            if self._ready is not None:
                self._ready.set()
        return self._outcome

    def eval(self) -> T:
        """Run the computation if it has not run yet; return its value or raise its error."""
        match self._settle():
            case Ok(value):
                return value
            case Error(exc):
                raise exc
        raise AssertionError("unreachable")

    async def _wait(self) -> Result[T, Exception]:
        if self._outcome is None:
            if self._ready is None:
                self._ready = asyncio.Event()
            await self._ready.wait()
        return typing.cast(Result[T, Exception], self._outcome)

    def then[U](
        self,
        on_value: Callable[[T], U] | None = None,
        on_error: Callable[[Exception], U] | None = None,
    ) -> LazyCoroResult[T | U, Exception]:
        """
        Register a continuation.

        Returns a LazyCoroResult; awaiting it waits for the outcome and
        applies on_value / on_error (either may be async). A callback
        that raises yields Error. Without callbacks the outcome is
        passed through and evaluation is not triggered.
        """
        if not self._delay and (on_value is not None or on_error is not None):
            self._settle()

        async def run() -> Result[T | U, Exception]:
            outcome = await self._wait()
            try:
                match outcome:
                    case Ok(value):
                        if on_value is None:
                            return Ok(value)
                        return Ok(await resolve(on_value(value)))
                    case Error(exc):
                        if on_error is None:
                            return Error(exc)
                        return Ok(await resolve(on_error(exc)))
            except Exception as exc:
                return Error(exc)
            raise AssertionError("unreachable")

        return LazyCoroResult(run)

    def __await__(self) -> Generator[typing.Any, None, T]:
        if not self._delay:
            self._settle()
        outcome = yield from self._wait().__await__()
        match outcome:
            case Ok(value):
                return value
            case Error(exc):
                raise exc
        raise AssertionError("unreachable")


__all__ = ("Future",)
