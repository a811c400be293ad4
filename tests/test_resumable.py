from __future__ import annotations

import pytest

from genutils import AsyncResumable, AsyncReturn, Completed, Resumable, Yielded, step, terminate


def counter(n):
    for i in range(n):
        yield i
    return "done"


def test_pull_reports_items_then_return_value():
    r = Resumable(counter(2))
    assert r.pull() == Yielded(0)
    assert r.pull() == Yielded(1)
    assert r.pull() == Completed("done")
    # Completion is sticky
    assert r.pull() == Completed("done")
    assert r.done


def test_first_sent_value_is_ignored():
    r = Resumable(counter(1))
    assert r.pull("ignored") == Yielded(0)


def test_return_value_is_reported_after_finalization():
    r = Resumable(counter(5))
    r.pull()
    assert r.return_(8) == Completed(8)
    assert r.returning == 8
    assert r.pull() == Completed(8)


def test_return_before_start_completes():
    r = Resumable(counter(5))
    assert r.return_(3) == Completed(3)
    assert r.pull() == Completed(3)


def test_generator_may_replace_return_value():
    def cleanup():
        try:
            yield 1
        except GeneratorExit:
            return "cleanup"

    r = Resumable(cleanup())
    r.pull()
    assert r.return_(8) == Completed("cleanup")


def test_refused_return_is_reported_not_retried():
    def stubborn():
        try:
            yield 1
        except GeneratorExit:
            yield "refused"

    r = Resumable(stubborn())
    r.pull()
    assert r.return_(5) == Yielded("refused")
    assert not r.done
    r.close()
    assert r.done


def test_throw_is_reported_or_raised():
    def forgiving():
        try:
            yield 1
        except ValueError:
            yield -1

    r = Resumable(forgiving())
    r.pull()
    assert r.pull_throw(ValueError()) == Yielded(-1)
    assert r.pull() == Completed(None)

    r = Resumable(counter(3))
    r.pull()
    with pytest.raises(KeyError):
        r.pull_throw(KeyError("x"))


def test_native_attributes_are_delegated():
    r = Resumable(counter(1))
    assert r.gi_running is False


def test_step_and_terminate_on_plain_iterators():
    it = iter([1])
    assert step(it) == Yielded(1)
    assert step(it) == Completed(None)
    assert terminate(iter([1, 2]), 4) == Completed(4)


@pytest.mark.asyncio
async def test_async_return_value():
    async def body():
        yield 1
        raise AsyncReturn("fin")

    r = AsyncResumable(body())
    assert await r.pull() == Yielded(1)
    assert await r.pull() == Completed("fin")
    assert await r.pull() == Completed("fin")


@pytest.mark.asyncio
async def test_async_iteration_stops_at_return():
    async def body():
        yield 1
        yield 2
        raise AsyncReturn("fin")

    assert [v async for v in AsyncResumable(body())] == [1, 2]


@pytest.mark.asyncio
async def test_async_return_runs_finalizer():
    finalized = []

    async def body():
        try:
            yield 1
            yield 2
        finally:
            finalized.append(True)

    r = AsyncResumable(body())
    await r.pull()
    assert await r.return_(8) == Completed(8)
    assert finalized == [True]
    assert await r.pull() == Completed(8)
