"""
Generator combinators for sync and async Python.

map / filter / flat / slice / zip / merge / reduce and friends over lazy
sequences, keeping all three channels of a generator intact: yielded
values, the final return value, and values sent back at each step.

Architecture:
- Plain functions per operation (``map_``, ``map_async``, ...)
- Operation sets ``Sync`` and ``Async`` bundling them per delivery mode
- Enhanced generators exposing the same operations as chainable methods
- Builder forms in ``fluent.fn`` / ``fluent.afn``
"""

# Core types
from ._errors import EmptyReduceError, LimitExceededError, NotIterableError, ZeroStepError
from ._types import MISSING, UNBOUNDED, Completed, IndexedFn, IndexedPredicate, Reducer, Step, Yielded

# Resumable protocol
from .resumable import (
    AsyncResumable,
    AsyncReturn,
    Resumable,
    aresume,
    astep,
    aterminate,
    resume,
    step,
    terminate,
)

# Guards and coercion
from .functions import (
    async_adaptor,
    is_async_genable,
    is_async_generator,
    is_async_iterable,
    is_async_iterator,
    is_genable,
    is_generator,
    is_iterable,
    is_iterator,
    to_async_generator,
    to_async_iterable,
    to_async_iterator,
    to_generator,
    to_iterable,
    to_iterable_iterator,
    to_iterator,
)

# Enhancement
from .enhancements import Enhancements
from .enhanced import EnhancedAsyncGenerator, EnhancedGenerator, enhance, enhance_async, of, of_async
from .mixin import EnhancedAsyncIterable, EnhancedIterable, wrap, wrap_async

# Operations
from .collection import (
    as_array,
    as_array_async,
    every,
    every_async,
    join,
    join_async,
    reduce,
    reduce_async,
    some,
    some_async,
    sort,
    sort_async,
)
from .concurrency import concat, concat_async, merge, merge_async, zip_, zip_async
from .control import limit, limit_async, repeat, repeat_async, repeat_last, repeat_last_async, slice_, slice_async
from .transform import (
    filter_,
    filter_async,
    flat,
    flat_async,
    flat_map,
    flat_map_async,
    for_each,
    for_each_async,
    map_,
    map_async,
)
from .ops import Async, Ops, Sync

# Builders
from . import fluent

# Collaborators
from . import events
from .events import EventController, event_to_generator
from .future import Future
from .range import range_

__all__ = (
    # Types
    "Completed",
    "IndexedFn",
    "IndexedPredicate",
    "MISSING",
    "Reducer",
    "Step",
    "UNBOUNDED",
    "Yielded",
    # Errors
    "EmptyReduceError",
    "LimitExceededError",
    "NotIterableError",
    "ZeroStepError",
    # Resumable
    "AsyncResumable",
    "AsyncReturn",
    "Resumable",
    "aresume",
    "astep",
    "aterminate",
    "resume",
    "step",
    "terminate",
    # Guards and coercion
    "async_adaptor",
    "is_async_genable",
    "is_async_generator",
    "is_async_iterable",
    "is_async_iterator",
    "is_genable",
    "is_generator",
    "is_iterable",
    "is_iterator",
    "to_async_generator",
    "to_async_iterable",
    "to_async_iterator",
    "to_generator",
    "to_iterable",
    "to_iterable_iterator",
    "to_iterator",
    # Enhancement
    "Enhancements",
    "EnhancedAsyncGenerator",
    "EnhancedGenerator",
    "EnhancedAsyncIterable",
    "EnhancedIterable",
    "enhance",
    "enhance_async",
    "of",
    "of_async",
    "wrap",
    "wrap_async",
    # Operation sets
    "Async",
    "Ops",
    "Sync",
    # Sync operations
    "as_array",
    "concat",
    "every",
    "filter_",
    "flat",
    "flat_map",
    "for_each",
    "join",
    "limit",
    "map_",
    "merge",
    "reduce",
    "repeat",
    "repeat_last",
    "slice_",
    "some",
    "sort",
    "zip_",
    # Async operations
    "as_array_async",
    "concat_async",
    "every_async",
    "filter_async",
    "flat_async",
    "flat_map_async",
    "for_each_async",
    "join_async",
    "limit_async",
    "map_async",
    "merge_async",
    "reduce_async",
    "repeat_async",
    "repeat_last_async",
    "slice_async",
    "some_async",
    "sort_async",
    "zip_async",
    # Builders
    "fluent",
    # Collaborators
    "EventController",
    "Future",
    "event_to_generator",
    "events",
    "range_",
)
