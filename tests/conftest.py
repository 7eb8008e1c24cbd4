from collections.abc import Awaitable, Callable

import pytest

from chainify.types import AsyncRunnable, Runnable


@pytest.fixture
def log() -> list[str]:
    return []


def pusher(
    name: str,
    *,
    advance: bool = True,
) -> Callable[[list[str], Runnable], None]:
    def unit(log: list[str], next_: Runnable) -> None:
        log.append(name)
        if advance:
            next_()

    return unit


def apusher(
    name: str,
    *,
    advance: bool = True,
) -> Callable[[list[str], AsyncRunnable], Awaitable[None]]:
    async def unit(log: list[str], next_: AsyncRunnable) -> None:
        log.append(name)
        if advance:
            await next_()

    return unit
