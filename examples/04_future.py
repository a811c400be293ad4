from __future__ import annotations

from _infra import banner, run

from genutils import Future
from kungfu import Error, Ok


def load_config() -> dict[str, str]:
    print("loading config...")
    return {"name": "demo"}


async def main() -> None:
    banner("04_future: run once, replay outcome")

    config = Future(load_config, delay=True)
    name = config.then(lambda cfg: cfg["name"])
    print("registered, done =", config.done)
    config.eval()
    config.eval()

    match await name:
        case Ok(value):
            print("name:", value)
        case Error(err):
            print(f"error: {err!r}")

    broken = Future(lambda: {}["missing"])
    match await broken.then(on_error=lambda e: f"recovered from {type(e).__name__}"):
        case Ok(value):
            print(value)
        case Error(err):
            print(f"error: {err!r}")


if __name__ == "__main__":
    run(main)
