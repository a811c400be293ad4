from .filter import filter_, filter_async
from .flat import flat, flat_async, flat_map, flat_map_async
from .map import for_each, for_each_async, map_, map_async

__all__ = (
    # Map
    "map_",
    "map_async",
    "for_each",
    "for_each_async",
    # Filter
    "filter_",
    "filter_async",
    # Flat
    "flat",
    "flat_async",
    "flat_map",
    "flat_map_async",
)
