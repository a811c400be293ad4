"""
Range producer
==============

Numeric sequences as enhanced generators. Unlike the builtin, floats
are accepted and the default end is effectively unbounded.
"""

from __future__ import annotations

import typing
from collections.abc import Generator

from ._errors import ZeroStepError
from ._types import UNBOUNDED
from .enhanced import EnhancedGenerator, enhance

type Number = int | float


def range_(start: Number = 0, end: Number = UNBOUNDED, step: Number = 1) -> EnhancedGenerator[Number, typing.Any, None]:
    """
    Yield start, start + step, ... while short of end.

    A negative step counts down. step == 0 raises ZeroStepError right away.
    """
    if step == 0:
        raise ZeroStepError()

    def run() -> Generator[Number, typing.Any, None]:
        value = start
        if step > 0:
            while value < end:
                yield value
                value += step
        else:
            while value > end:
                yield value
                value += step

    return enhance(run())


__all__ = ("range_",)
