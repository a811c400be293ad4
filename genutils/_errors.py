from __future__ import annotations

import typing


class NotIterableError(TypeError):
    """Value is neither an iterator nor an iterable."""

    value: typing.Any

    def __init__(self, value: typing.Any) -> None:
        self.value = value
        super().__init__(f"{type(value).__name__!r} object is not iterable")


class LimitExceededError(ValueError):
    """Sequence produced more items than limit() allows."""

    max_items: int

    def __init__(self, max_items: int) -> None:
        self.max_items = max_items
        super().__init__(f"Generator produced excessive values > {max_items}")


class EmptyReduceError(TypeError):
    """reduce() without a seed over an empty sequence."""

    def __init__(self) -> None:
        super().__init__("No initial value in reduce")


class ZeroStepError(ValueError):
    """range_() called with step == 0."""

    def __init__(self) -> None:
        super().__init__("Step must not be zero.")


__all__ = ("EmptyReduceError", "LimitExceededError", "NotIterableError", "ZeroStepError")
