from . import afn, fn

__all__ = ("afn", "fn")
