"""
Queue policies
==============

Buffers between a push-style producer and the pull-style sequence built
by event_to_generator. Each policy decides what to keep when items
arrive faster than they are pulled.

Factories (zero-argument callables returning a fresh queue):

- queue_fifo: unbounded, every item in order (default)
- queue_1: one slot, a new item replaces the waiting one
- queue_sticky: one slot that is never emptied by shift()
- queue_oldest(n): keep the first n waiting items, drop newcomers
- queue_newest(n): keep the last n waiting items, drop the oldest
- queue_unique(newest=False, key=identity): one waiting item per key
- queue_update_shallow(init): coalesce mappings into a shallow diff
"""

from __future__ import annotations

import functools
import typing
from collections import deque
from collections.abc import Callable, Mapping
from dataclasses import dataclass

from .._helpers import identity


class Signal:
    """Base for end-of-stream markers that travel through a queue."""

    __slots__ = ()


@typing.runtime_checkable
class Queue[T](typing.Protocol):
    def __len__(self) -> int: ...

    def push(self, value: T) -> int: ...

    def shift(self) -> T | None: ...

    def clear(self) -> None: ...


type QueueFactory[T] = Callable[[], Queue[T]]


def _check_size(size: int) -> None:
    if size < 1:
        raise ValueError("queue size must be >= 1")


@dataclass(frozen=True, slots=True)
class UniquePolicy:
    """Configuration for queue_unique."""

    newest: bool = False
    key: Callable[[typing.Any], typing.Hashable] = identity

    def __post_init__(self) -> None:
        if not callable(self.key):
            raise ValueError("UniquePolicy.key must be callable")


# ============================================================================
# Queues
# ============================================================================


class FifoQueue[T]:
    __slots__ = ("_items",)

    def __init__(self) -> None:
        self._items: deque[T] = deque()

    def __len__(self) -> int:
        return len(self._items)

    def push(self, value: T) -> int:
        self._items.append(value)
        return len(self._items)

    def shift(self) -> T | None:
        return self._items.popleft() if self._items else None

    def clear(self) -> None:
        self._items.clear()


class LatestQueue[T]:
    """Single slot; push replaces whatever is waiting."""

    __slots__ = ("_value", "_empty")

    def __init__(self) -> None:
        self._value: T | None = None
        self._empty = True

    def __len__(self) -> int:
        return 0 if self._empty else 1

    def push(self, value: T) -> int:
        self._value = value
        self._empty = False
        return 1

    def shift(self) -> T | None:
        value, self._value = self._value, None
        self._empty = True
        return value

    def clear(self) -> None:
        self._value = None
        self._empty = True


class StickyQueue[T]:
    """Single slot; shift() hands out the last pushed value again and again."""

    __slots__ = ("_value", "_empty")

    def __init__(self) -> None:
        self._value: T | None = None
        self._empty = True

    def __len__(self) -> int:
        return 0 if self._empty else 1

    def push(self, value: T) -> int:
        self._value = value
        self._empty = False
        return 1

    def shift(self) -> T | None:
        return self._value

    def clear(self) -> None:
        self._value = None
        self._empty = True


class OldestQueue[T]:
    """Bounded; once full, new items are dropped."""

    __slots__ = ("_items", "_size")

    def __init__(self, size: int) -> None:
        self._items: deque[T] = deque()
        self._size = size

    def __len__(self) -> int:
        return len(self._items)

    def push(self, value: T) -> int:
        if len(self._items) < self._size:
            self._items.append(value)
        return len(self._items)

    def shift(self) -> T | None:
        return self._items.popleft() if self._items else None

    def clear(self) -> None:
        self._items.clear()


class NewestQueue[T]:
    """Bounded; once full, the oldest item is dropped."""

    __slots__ = ("_items",)

    def __init__(self, size: int) -> None:
        self._items: deque[T] = deque(maxlen=size)

    def __len__(self) -> int:
        return len(self._items)

    def push(self, value: T) -> int:
        self._items.append(value)
        return len(self._items)

    def shift(self) -> T | None:
        return self._items.popleft() if self._items else None

    def clear(self) -> None:
        self._items.clear()


class UniqueQueue[T]:
    """
    One waiting item per key, in first-arrival order.

    With ``newest`` a repeated key replaces the waiting item and moves it
    to the back; otherwise the repeat is dropped.
    """

    __slots__ = ("_items", "_policy")

    def __init__(self, policy: UniquePolicy) -> None:
        self._items: dict[typing.Hashable, T] = {}
        self._policy = policy

    def __len__(self) -> int:
        return len(self._items)

    def push(self, value: T) -> int:
        # Signals compare by identity, so they never collide with data
        key = value if isinstance(value, Signal) else self._policy.key(value)
        if self._policy.newest:
            self._items.pop(key, None)
            self._items[key] = value
        elif key not in self._items:
            self._items[key] = value
        return len(self._items)

    def shift(self) -> T | None:
        if not self._items:
            return None
        return self._items.pop(next(iter(self._items)))

    def clear(self) -> None:
        self._items.clear()


class ShallowUpdateQueue:
    """
    Coalesces pushed mappings into one pending update.

    Only keys whose value differs from the state seen so far are kept;
    a key missing from a pushed mapping counts as None. shift() returns
    the pending update and folds it into the state. A Signal is handed
    out after the pending update.
    """

    __slots__ = ("_state", "_pending", "_signal")

    def __init__(self, init: Mapping[str, typing.Any]) -> None:
        self._state: dict[str, typing.Any] = dict(init)
        self._pending: dict[str, typing.Any] = {}
        self._signal: Signal | None = None

    def __len__(self) -> int:
        return 1 if self._pending or self._signal is not None else 0

    def push(self, value: Mapping[str, typing.Any] | Signal) -> int:
        if isinstance(value, Signal):
            self._signal = value
            return len(self)
        keys = [*self._state, *(key for key in value if key not in self._state)]
        for key in keys:
            new = value.get(key)
            if self._state.get(key) != new:
                self._pending[key] = new
        return len(self)

    def shift(self) -> dict[str, typing.Any] | Signal | None:
        if self._pending:
            update, self._pending = self._pending, {}
            self._state.update(update)
            return update
        signal, self._signal = self._signal, None
        return signal

    def clear(self) -> None:
        self._pending = {}
        self._signal = None


# ============================================================================
# Factories
# ============================================================================


def queue_fifo() -> FifoQueue[typing.Any]:
    return FifoQueue()


def queue_1() -> LatestQueue[typing.Any]:
    return LatestQueue()


def queue_sticky() -> StickyQueue[typing.Any]:
    return StickyQueue()


def queue_oldest(size: int = 1) -> QueueFactory[typing.Any]:
    _check_size(size)
    return functools.partial(OldestQueue, size)


def queue_newest(size: int = 1) -> QueueFactory[typing.Any]:
    _check_size(size)
    return functools.partial(NewestQueue, size)


def queue_unique(
    *,
    newest: bool = False,
    key: Callable[[typing.Any], typing.Hashable] = identity,
) -> QueueFactory[typing.Any]:
    return functools.partial(UniqueQueue, UniquePolicy(newest=newest, key=key))


def queue_update_shallow(init: Mapping[str, typing.Any] | None = None) -> QueueFactory[typing.Any]:
    snapshot = dict(init or {})
    return functools.partial(ShallowUpdateQueue, snapshot)


__all__ = (
    "FifoQueue",
    "LatestQueue",
    "NewestQueue",
    "OldestQueue",
    "Queue",
    "QueueFactory",
    "ShallowUpdateQueue",
    "Signal",
    "StickyQueue",
    "UniquePolicy",
    "UniqueQueue",
    "queue_1",
    "queue_fifo",
    "queue_newest",
    "queue_oldest",
    "queue_sticky",
    "queue_unique",
    "queue_update_shallow",
)
