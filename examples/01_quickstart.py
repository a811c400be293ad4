from __future__ import annotations

from _infra import banner, run

from genutils import enhance, range_
from genutils.fluent import fn


def lines():
    # Generator with a return value: the count of lines produced
    produced = 0
    for text in ("alpha", "", "beta", "gamma", ""):
        yield text
        produced += 1
    return produced


async def main() -> None:
    banner("01_quickstart: chaining on enhanced generators")

    words = enhance(lines()).filter(lambda line, _: line).map(lambda line, i: f"{i}:{line.upper()}")
    print(words.as_array())

    print(range_(0, 20, 3).slice(1, 4).join(" "))
    print(range_(0, 3).repeat("-", 2).as_array())
    print(range_(0, 3).zip(["a", "b", "c"], range_(100)).as_array())

    banner("01_quickstart: builders")

    squares_of_evens = (
        fn.filter_(lambda v, _: v % 2 == 0),
        fn.map_(lambda v, _: v * v),
    )
    print(fn.pipe(range_(0, 10), *squares_of_evens, fn.as_array()))
    print(fn.pipe([3, [2, [1, [0]]], 7], fn.flat(3), fn.sort()))


if __name__ == "__main__":
    run(main)
