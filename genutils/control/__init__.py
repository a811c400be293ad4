from .limit import limit, limit_async
from .repeat import repeat, repeat_async, repeat_last, repeat_last_async
from .slice import slice_, slice_async

__all__ = (
    # Limit
    "limit",
    "limit_async",
    # Slice
    "slice_",
    "slice_async",
    # Repeat
    "repeat",
    "repeat_async",
    "repeat_last",
    "repeat_last_async",
)
