from __future__ import annotations

import pytest

from genutils import EnhancedAsyncIterable, EnhancedIterable, range_, wrap, wrap_async
from genutils.fluent import afn, fn


class Deck(EnhancedIterable):
    def __init__(self, cards):
        self.cards = cards

    def __iter__(self):
        return iter(self.cards)


class AsyncDeck(EnhancedAsyncIterable):
    def __init__(self, cards):
        self.cards = cards

    async def __aiter__(self):
        for card in self.cards:
            yield card


def count(n):
    yield from range(n)


async def acount(n):
    for i in range(n):
        yield i


def test_enhanced_iterable_starts_fresh_pass_each_time():
    deck = Deck([1, 2, 3])
    assert deck.map(lambda v, _: v * 2).as_array() == [2, 4, 6]
    assert deck.filter(lambda v, _: v > 1).as_array() == [2, 3]
    assert deck.join("") == "123"
    assert deck.cards == [1, 2, 3]


def test_enhanced_iterable_unknown_attribute():
    with pytest.raises(AttributeError):
        Deck([]).shuffle  # noqa: B018


@pytest.mark.asyncio
async def test_enhanced_async_iterable():
    deck = AsyncDeck([3, 1, 2])
    assert await deck.sort() == [1, 2, 3]
    assert await deck.map(lambda v, _: -v).as_array() == [-3, -1, -2]


def test_wrap_is_reiterable():
    numbers = wrap(count, 3)
    assert list(numbers) == [0, 1, 2]
    assert list(numbers) == [0, 1, 2]
    assert numbers.map(lambda v, _: v + 1).as_array() == [1, 2, 3]


@pytest.mark.asyncio
async def test_wrap_async_is_reiterable():
    numbers = wrap_async(acount, 3)
    assert await numbers.as_array() == [0, 1, 2]
    assert [v async for v in numbers] == [0, 1, 2]


def test_pipe_with_sync_builders():
    evens = fn.filter_(lambda v, _: v % 2 == 0)
    square = fn.map_(lambda v, _: v * v)
    assert fn.pipe(range_(0, 10), evens, square, fn.as_array()) == [0, 4, 16, 36, 64]
    assert fn.pipe(range_(0, 4), fn.slice_(1, 3), fn.join("+")) == "1+2"
    assert fn.pipe([[1], [2, [3]]], fn.flat(2), fn.reduce(lambda acc, v: acc + v)) == 6


def test_sync_builders_are_reusable():
    first_two = fn.limit(2)
    assert fn.pipe([1, 2], first_two, fn.as_array()) == [1, 2]
    assert fn.pipe(["a"], first_two, fn.as_array()) == ["a"]
    assert fn.sort(lambda a, b: b - a)([1, 3], [2]) == [3, 2, 1]
    assert fn.pipe([0, 1], fn.some(lambda v, _: v == 1))


@pytest.mark.asyncio
async def test_pipe_with_async_builders():
    async def double(value, _):
        return value * 2

    assert await afn.pipe(range_(0, 4), afn.map_(double), afn.as_array()) == [0, 2, 4, 6]
    assert await afn.pipe(acount(5), afn.filter_(lambda v, _: v % 2), afn.join()) == "1,3"
    assert await afn.sort()(acount(2), [5, -1]) == [-1, 0, 1, 5]
