"""Shared fixtures: generators that record how they were finalized."""

from __future__ import annotations

import typing

import pytest

from genutils import EnhancedAsyncGenerator, EnhancedGenerator, enhance, enhance_async


class Tracked:
    """range(n) as an enhanced generator; records whether it saw a throw or a return."""

    def __init__(self, n: int) -> None:
        self.did_return = False
        self.did_throw: Exception | None = None
        self.gen: EnhancedGenerator[int, typing.Any, None] = enhance(self._run(n))

    def _run(self, n: int) -> typing.Generator[int, typing.Any, None]:
        try:
            for i in range(n):
                try:
                    yield i
                except Exception as exc:
                    self.did_throw = exc
                    raise
        finally:
            if self.did_throw is None:
                self.did_return = True


class AsyncTracked:
    def __init__(self, n: int) -> None:
        self.did_return = False
        self.did_throw: Exception | None = None
        self.gen: EnhancedAsyncGenerator[int, typing.Any, None] = enhance_async(self._run(n))

    async def _run(self, n: int) -> typing.AsyncGenerator[int, typing.Any]:
        try:
            for i in range(n):
                try:
                    yield i
                except Exception as exc:
                    self.did_throw = exc
                    raise
        finally:
            if self.did_throw is None:
                self.did_return = True


@pytest.fixture
def tracked() -> type[Tracked]:
    return Tracked


@pytest.fixture
def atracked() -> type[AsyncTracked]:
    return AsyncTracked
