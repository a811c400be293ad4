from __future__ import annotations

import pytest

from genutils import (
    Completed,
    EnhancedGenerator,
    Enhancements,
    NotIterableError,
    Yielded,
    async_adaptor,
    enhance,
    enhance_async,
    is_async_genable,
    is_async_generator,
    is_async_iterable,
    is_async_iterator,
    is_genable,
    is_generator,
    is_iterable,
    is_iterator,
    of,
    to_async_iterator,
    to_generator,
    to_iterable,
    to_iterable_iterator,
    to_iterator,
)


def gen():
    yield 1
    yield 2


async def agen():
    yield 1


class BareIterator:
    """Has __next__ but no __iter__."""

    def __init__(self, items):
        self._items = list(items)

    def __next__(self):
        if not self._items:
            raise StopIteration
        return self._items.pop(0)


def test_sync_guards():
    assert is_iterator(iter([]))
    assert not is_iterator([])
    assert is_iterable([])
    assert is_iterable("abc")
    assert not is_iterable(5)
    assert is_generator(gen())
    assert not is_generator(iter([]))
    assert is_genable(BareIterator([]))
    assert not is_genable(None)


def test_async_guards():
    it = agen()
    assert is_async_iterator(it)
    assert is_async_iterable(it)
    assert is_async_generator(it)
    assert not is_async_iterable([])
    assert is_async_genable([])
    assert not is_async_genable(5)


def test_guards_look_at_the_type():
    class Fake:
        pass

    fake = Fake()
    fake.__next__ = lambda: 1
    assert not is_iterator(fake)


def test_to_iterator():
    it = iter([1])
    assert to_iterator(it) is it
    assert list(to_iterator((1, 2))) == [1, 2]
    with pytest.raises(NotIterableError) as info:
        to_iterator(5)
    assert info.value.value == 5
    assert isinstance(info.value, TypeError)


def test_to_generator_keeps_generators():
    g = gen()
    assert to_generator(g) is g
    wrapped = to_generator([1, 2])
    assert is_generator(wrapped)
    assert list(wrapped) == [1, 2]


def test_to_iterable_of_bare_iterator():
    assert list(to_iterable(BareIterator([1, 2]))) == [1, 2]


def test_to_iterable_iterator():
    it = iter([1])
    assert to_iterable_iterator(it) is it
    result = to_iterable_iterator(BareIterator([3]))
    assert is_iterator(result) and is_iterable(result)
    assert list(result) == [3]


@pytest.mark.asyncio
async def test_async_adaptor_forwards_return():
    finalized = []

    def body():
        try:
            yield 1
            yield 2
        finally:
            finalized.append(True)

    adapted = async_adaptor(body())
    assert await adapted.pull() == Yielded(1)
    assert await adapted.return_(3) == Completed(3)
    assert finalized == [True]


@pytest.mark.asyncio
async def test_async_adaptor_forwards_sent_values():
    def echo():
        received = yield "ready"
        yield received

    adapted = async_adaptor(echo())
    assert await adapted.pull() == Yielded("ready")
    assert await adapted.pull("ping") == Yielded("ping")


@pytest.mark.asyncio
async def test_to_async_iterator_of_sync_source():
    assert [v async for v in to_async_iterator([1, 2])] == [1, 2]


def test_enhance_is_idempotent():
    g = enhance([1])
    assert enhance(g) is g
    assert isinstance(g, EnhancedGenerator)
    assert isinstance(g, Enhancements)
    assert g.mode == "sync"


def test_enhanced_generator_keeps_native_surface():
    g = enhance(gen())
    assert g.gi_running is False
    assert next(g) == 1
    assert list(g) == [2]


def test_enhanced_generator_works_with_yield_from():
    def inner():
        yield 1
        return "inner done"

    def outer():
        result = yield from enhance(inner())
        yield result

    assert list(outer()) == [1, "inner done"]


def test_enhance_rejects_non_iterables():
    with pytest.raises(NotIterableError):
        enhance(5)


def test_of():
    assert of(1, 2, 3).as_array() == [1, 2, 3]
    assert of().as_array() == []


@pytest.mark.asyncio
async def test_enhance_async():
    g = enhance_async(agen())
    assert enhance_async(g) is g
    assert g.mode == "async"
    assert await g.as_array() == [1]
    assert await enhance_async([4, 5]).map(lambda v, _: -v).as_array() == [-4, -5]
