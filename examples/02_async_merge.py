from __future__ import annotations

from _infra import FakeSensor, Reading, banner, run

from genutils import merge_async
from genutils.fluent import afn


async def main() -> None:
    banner("02_async_merge: readings in arrival order")

    fast = FakeSensor(name="fast", delay_seconds=0.01, values=(1.0, 1.5, 2.0, 2.5))
    slow = FakeSensor(name="slow", delay_seconds=0.025, values=(10.0, 20.0))

    async for reading in merge_async(fast.readings(), slow.readings()):
        print(f"{reading.sensor:>5}: {reading.value}")

    banner("02_async_merge: first three above threshold")

    def above(reading: Reading, _: int) -> bool:
        return reading.value > 1.2

    picked = await afn.pipe(
        merge_async(fast.readings(), slow.readings()),
        afn.filter_(above),
        afn.slice_(0, 3),
        afn.as_array(),
    )
    print([f"{r.sensor}={r.value}" for r in picked])


if __name__ == "__main__":
    run(main)
