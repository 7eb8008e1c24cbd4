"""Throughput of `run` for chains of increasing length.

Run from the repository root with ``python -m benchmarks.bench``.
"""

import asyncio
import json
import logging
import time
from pathlib import Path
from timeit import timeit
from typing import TypeAlias

from chainify import AsyncController, Controller
from chainify.types import AsyncRunnable, Runnable

logger = logging.getLogger(__name__)

Results: TypeAlias = dict[str, dict[str, float]]

CHAIN_LENGTHS = (1, 10, 100)
NUMBER = 2_000
RESULTS_FILE = Path("./benchmarks/benches.json")


def passthrough(_payload: object, next_: Runnable) -> None:
    next_()


async def apassthrough(_payload: object, next_: AsyncRunnable) -> None:
    await next_()


def measure_sync(length: int) -> float:
    controller = Controller()
    for _ in range(length):
        _ = controller.chain(passthrough)
    return timeit(lambda: controller.run(None), number=NUMBER)


def measure_async(length: int, loop: asyncio.AbstractEventLoop) -> float:
    controller = AsyncController()
    for _ in range(length):
        _ = controller.chain(apassthrough)
    return timeit(
        lambda: loop.run_until_complete(controller.run(None)),
        number=NUMBER,
    )


def main() -> None:
    start = time.monotonic()
    results: Results = {"sync_run": {}, "async_run": {}}
    loop = asyncio.new_event_loop()
    try:
        for length in CHAIN_LENGTHS:
            results["sync_run"][str(length)] = measure_sync(length)
            results["async_run"][str(length)] = measure_async(length, loop)
            logger.info("Measured chains of %d unit(s)", length)
    finally:
        loop.close()

    with RESULTS_FILE.open(mode="w", encoding="utf-8") as fp:
        json.dump(results, fp, indent=2)
    logger.info(
        "Benchmarks completed in %.2fs, results saved to %s",
        time.monotonic() - start,
        RESULTS_FILE,
    )


if __name__ == "__main__":
    logging.basicConfig(
        level=logging.INFO,
        format="[%(levelname)s] %(message)s",
        handlers=[logging.StreamHandler()],
    )
    main()
