"""
Operation sets
==============

``Sync`` and ``Async`` bundle one implementation of every combinator for
a delivery mode. Enhanced sequences dispatch through ``_impl`` to one of
them, so each combinator is written once per mode.

    from genutils import Sync, Async

    Sync.map([1, 2, 3], lambda v, _: v * 2).as_array()    # [2, 4, 6]
    await Async.map(source, fetch).filter(ok).as_array()
"""

from __future__ import annotations

import typing
from collections.abc import Callable
from dataclasses import dataclass

from ._types import SyncType
from .collection.collect import as_array, as_array_async, join, join_async, sort, sort_async
from .collection.reduce import every, every_async, reduce, reduce_async, some, some_async
from .concurrency.concat import concat, concat_async
from .concurrency.merge import merge, merge_async
from .concurrency.zip import zip_, zip_async
from .control.limit import limit, limit_async
from .control.repeat import repeat, repeat_async, repeat_last, repeat_last_async
from .control.slice import slice_, slice_async
from .enhanced import enhance, enhance_async, of, of_async
from .transform.filter import filter_, filter_async
from .transform.flat import flat, flat_async, flat_map, flat_map_async
from .transform.map import for_each, for_each_async, map_, map_async

type _Op = Callable[..., typing.Any]


@dataclass(frozen=True, slots=True)
class Ops:
    """Every combinator for one delivery mode."""

    mode: SyncType
    enhance: _Op
    of: _Op
    as_array: _Op
    for_each: _Op
    reduce: _Op
    some: _Op
    every: _Op
    join: _Op
    sort: _Op
    limit: _Op
    map: _Op
    filter: _Op
    flat: _Op
    flat_map: _Op
    slice: _Op
    concat: _Op
    repeat: _Op
    repeat_last: _Op
    zip: _Op
    merge: _Op


Sync: typing.Final = Ops(
    mode="sync",
    enhance=enhance,
    of=of,
    as_array=as_array,
    for_each=for_each,
    reduce=reduce,
    some=some,
    every=every,
    join=join,
    sort=sort,
    limit=limit,
    map=map_,
    filter=filter_,
    flat=flat,
    flat_map=flat_map,
    slice=slice_,
    concat=concat,
    repeat=repeat,
    repeat_last=repeat_last,
    zip=zip_,
    merge=merge,
)

Async: typing.Final = Ops(
    mode="async",
    enhance=enhance_async,
    of=of_async,
    as_array=as_array_async,
    for_each=for_each_async,
    reduce=reduce_async,
    some=some_async,
    every=every_async,
    join=join_async,
    sort=sort_async,
    limit=limit_async,
    map=map_async,
    filter=filter_async,
    flat=flat_async,
    flat_map=flat_map_async,
    slice=slice_async,
    concat=concat_async,
    repeat=repeat_async,
    repeat_last=repeat_last_async,
    zip=zip_async,
    merge=merge_async,
)

__all__ = ("Async", "Ops", "Sync")
