from .collect import as_array, as_array_async, join, join_async, sort, sort_async
from .reduce import every, every_async, reduce, reduce_async, some, some_async

__all__ = (
    # Collect
    "as_array",
    "as_array_async",
    "join",
    "join_async",
    "sort",
    "sort_async",
    # Reduce
    "reduce",
    "reduce_async",
    "some",
    "some_async",
    "every",
    "every_async",
)
