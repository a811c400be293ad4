"""Internal helpers for genutils.

Small functions shared across combinator modules.
These are not part of the public API."""

from __future__ import annotations

import contextlib
import inspect
import logging
import typing
from collections.abc import Awaitable, Iterator, Mapping

logger = logging.getLogger(__name__)

# Identity function
def identity[T](x: T) -> T:
    """Identity function: returns its argument unchanged."""
    return x

async def resolve[T](value: T | Awaitable[T]) -> T:
    """Await value if it is awaitable, otherwise return it as is."""
    if inspect.isawaitable(value):
        return await value
    return typing.cast(T, value)

@contextlib.contextmanager
def best_effort(source: typing.Any) -> Iterator[None]:
    """
    Suppress errors raised while finalizing one of several sources.

    Fan-out combinators finalize every sibling; one failing source
    must not stop the rest from being finalized.
    """
    try:
        yield
    except Exception:
        logger.debug("Ignoring error while finalizing %r", source, exc_info=True)

# Iterable, but flattened as single values
ATOMS: typing.Final = (str, bytes, bytearray, Mapping)

__all__ = ("ATOMS", "best_effort", "identity", "resolve")
