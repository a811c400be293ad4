"""Every combinator keeps the return / throw handshake with its upstream."""

from __future__ import annotations

import pytest

from genutils import Completed, Yielded, enhance, enhance_async, range_

SYNC = [
    pytest.param(lambda g: g, 0, id="enhance"),
    pytest.param(lambda g: g.map(lambda v, _: v), 0, id="map"),
    pytest.param(lambda g: g.filter(lambda v, _: True), 0, id="filter"),
    pytest.param(lambda g: g.slice(0), 0, id="slice"),
    pytest.param(lambda g: g.limit(10), 0, id="limit"),
    pytest.param(lambda g: g.flat(), 0, id="flat"),
    pytest.param(lambda g: g.flat_map(lambda v, _: v), 0, id="flat_map"),
    pytest.param(lambda g: g.repeat_last(1), 0, id="repeat_last"),
    pytest.param(lambda g: enhance([]).concat(g), 0, id="concat"),
    pytest.param(lambda g: g.zip(range_(0, 5)), (0, 0), id="zip"),
    pytest.param(lambda g: g.merge(range_(10, 15)), 0, id="merge"),
]

ASYNC = [
    pytest.param(lambda g: g, 0, id="enhance"),
    pytest.param(lambda g: g.map(lambda v, _: v), 0, id="map"),
    pytest.param(lambda g: g.filter(lambda v, _: True), 0, id="filter"),
    pytest.param(lambda g: g.slice(0), 0, id="slice"),
    pytest.param(lambda g: g.limit(10), 0, id="limit"),
    pytest.param(lambda g: g.flat(), 0, id="flat"),
    pytest.param(lambda g: g.flat_map(lambda v, _: v), 0, id="flat_map"),
    pytest.param(lambda g: g.repeat_last(1), 0, id="repeat_last"),
    pytest.param(lambda g: enhance_async([]).concat(g), 0, id="concat"),
    pytest.param(lambda g: g.zip(range_(0, 5)), (0, 0), id="zip"),
]


@pytest.mark.parametrize(("build", "first"), SYNC)
def test_return_reaches_upstream(tracked, build, first):
    t = tracked(5)
    g = build(t.gen)
    assert g.pull() == Yielded(first)
    assert g.return_(8) == Completed(8)
    assert t.did_return
    assert g.pull() == Completed(8)


@pytest.mark.parametrize(("build", "first"), SYNC)
def test_throw_reaches_upstream(tracked, build, first):
    t = tracked(5)
    g = build(t.gen)
    assert g.pull() == Yielded(first)
    with pytest.raises(RuntimeError, match="foo"):
        g.pull_throw(RuntimeError("foo"))
    assert isinstance(t.did_throw, RuntimeError)
    assert not t.did_return


@pytest.mark.parametrize(("build", "first"), SYNC)
def test_close_finalizes_upstream(tracked, build, first):
    t = tracked(5)
    g = build(t.gen)
    assert g.pull() == Yielded(first)
    g.close()
    assert t.did_return
    assert g.done


@pytest.mark.asyncio
@pytest.mark.parametrize(("build", "first"), ASYNC)
async def test_async_return_reaches_upstream(atracked, build, first):
    t = atracked(5)
    g = build(t.gen)
    assert await g.pull() == Yielded(first)
    assert await g.return_(8) == Completed(8)
    assert t.did_return
    assert await g.pull() == Completed(8)


@pytest.mark.asyncio
@pytest.mark.parametrize(("build", "first"), ASYNC)
async def test_async_throw_reaches_upstream(atracked, build, first):
    t = atracked(5)
    g = build(t.gen)
    assert await g.pull() == Yielded(first)
    with pytest.raises(RuntimeError, match="foo"):
        await g.pull_throw(RuntimeError("foo"))
    assert isinstance(t.did_throw, RuntimeError)
    assert not t.did_return


@pytest.mark.asyncio
async def test_async_merge_return_reaches_every_source(atracked):
    first, second = atracked(5), atracked(5)
    g = first.gen.merge(second.gen)
    assert await g.pull() == Yielded(0)
    assert await g.return_(8) == Completed(8)
    assert first.did_return
    assert second.did_return


@pytest.mark.asyncio
async def test_async_merge_throw_reaches_every_source(atracked):
    first, second = atracked(5), atracked(5)
    g = first.gen.merge(second.gen)
    await g.pull()
    with pytest.raises(RuntimeError, match="foo"):
        await g.pull_throw(RuntimeError("foo"))
    assert isinstance(first.did_throw, RuntimeError)
    assert isinstance(second.did_throw, RuntimeError)
