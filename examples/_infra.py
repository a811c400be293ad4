from __future__ import annotations

import asyncio
import sys
from collections.abc import AsyncGenerator, Callable, Coroutine
from dataclasses import dataclass
from pathlib import Path

_PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(_PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(_PROJECT_ROOT))


@dataclass(frozen=True, slots=True)
class Reading:
    sensor: str
    value: float


@dataclass(slots=True)
class FakeSensor:
    name: str
    delay_seconds: float = 0.0
    values: tuple[float, ...] = ()

    async def readings(self) -> AsyncGenerator[Reading, None]:
        for value in self.values:
            await asyncio.sleep(self.delay_seconds)
            yield Reading(sensor=self.name, value=value)


def banner(title: str) -> None:  # pragma: no cover (examples only)
    print(f"\n== {title} ==")


def run(main: Callable[[], Coroutine[object, object, None]]) -> None:  # pragma: no cover (examples only)
    asyncio.run(main())
