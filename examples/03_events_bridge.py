from __future__ import annotations

import asyncio

from _infra import banner, run

from genutils import event_to_generator
from genutils.events import queue_1, queue_update_shallow


async def main() -> None:
    banner("03_events_bridge: callbacks to a sequence")

    clicks, controller = event_to_generator()

    async def user() -> None:
        for x in (10, 20, 30):
            await asyncio.sleep(0.01)
            controller.send(x)
        controller.end("closed")

    clicking = asyncio.create_task(user())
    async for x in clicks.map(lambda x, i: f"click #{i} at x={x}"):
        print(x)
    await clicking

    banner("03_events_bridge: only the latest value survives")

    latest, controller = event_to_generator(queue_1)
    for progress in (10, 40, 90):
        controller.send(progress)
    print("progress:", (await latest.pull()).value)

    banner("03_events_bridge: shallow state diffs")

    updates, controller = event_to_generator(queue_update_shallow({"user": "ann", "online": False}))
    controller.send({"user": "ann", "online": True})
    controller.send({"user": "ann", "online": True, "typing": True})
    print("diff:", (await updates.pull()).value)


if __name__ == "__main__":
    run(main)
