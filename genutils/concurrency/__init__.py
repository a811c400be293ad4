from .concat import concat, concat_async
from .merge import merge, merge_async
from .zip import zip_, zip_async

__all__ = (
    "concat",
    "concat_async",
    "merge",
    "merge_async",
    "zip_",
    "zip_async",
)
