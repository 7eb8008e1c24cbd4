import asyncio
import logging
from unittest.mock import ANY, AsyncMock

import pytest

from chainify import AsyncController, AsyncNext
from chainify.exceptions import ContinuationReusedError
from chainify.types import AsyncRunnable
from tests.conftest import apusher


async def test_runs_units_in_order(log: list[str]) -> None:
    controller = AsyncController()
    for name in ("a", "b", "c"):
        _ = controller.chain(apusher(name))

    assert await controller.run(log) is controller
    assert log == ["a", "b", "c"]


async def test_empty_chain() -> None:
    controller = AsyncController()
    assert await controller.run("request") is controller


async def test_units_receive_arguments_and_continuation() -> None:
    unit = AsyncMock()
    _ = await AsyncController().chain(unit).run("a", 1)

    unit.assert_awaited_once_with("a", 1, ANY)
    assert isinstance(unit.await_args.args[-1], AsyncNext)


@pytest.mark.parametrize("halt_at", [0, 1, 2])
async def test_short_circuit(halt_at: int, log: list[str]) -> None:
    names = ["a", "b", "c", "d"]
    controller = AsyncController()
    for index, name in enumerate(names):
        _ = controller.chain(apusher(name, advance=index != halt_at))

    _ = await controller.run(log)
    assert log == names[: halt_at + 1]


async def test_next_unit_starts_after_next_is_awaited() -> None:
    events: list[str] = []

    async def first(events: list[str], next_: AsyncRunnable) -> None:
        events.append("first:start")
        await asyncio.sleep(0)
        events.append("first:advance")
        await next_()
        events.append("first:end")

    async def second(events: list[str], _next: AsyncRunnable) -> None:
        events.append("second:start")
        await asyncio.sleep(0)
        events.append("second:end")

    _ = await AsyncController().chain(first).chain(second).run(events)
    assert events == [
        "first:start",
        "first:advance",
        "second:start",
        "second:end",
        "first:end",
    ]


async def test_run_resolves_after_halting_unit(log: list[str]) -> None:
    tail = AsyncMock()

    async def guard(log: list[str], _next: AsyncRunnable) -> None:
        await asyncio.sleep(0)
        log.append("guard")

    _ = await AsyncController().chain(guard).chain(tail).run(log)
    assert log == ["guard"]
    tail.assert_not_awaited()


async def test_next_after_end_is_noop(log: list[str]) -> None:
    async def last(log: list[str], next_: AsyncRunnable) -> None:
        log.append("last")
        await next_()
        await next_()

    _ = await AsyncController().chain(apusher("a")).chain(last).run(log)
    assert log == ["a", "last"]


async def test_repeated_next_resumes_from_cursor(log: list[str]) -> None:
    async def replay(log: list[str], next_: AsyncRunnable) -> None:
        log.append("a")
        await next_()
        await next_()

    controller = (
        AsyncController()
        .chain(replay)
        .chain(apusher("b", advance=False))
        .chain(apusher("c", advance=False))
    )
    _ = await controller.run(log)
    assert log == ["a", "b", "c"]


async def test_failure_propagates_through_awaiting_units() -> None:
    error = RuntimeError("rejected")
    unwound: list[str] = []
    tail = AsyncMock()

    async def outer(next_: AsyncRunnable) -> None:
        try:
            await next_()
        finally:
            unwound.append("outer")

    async def failing(_next: AsyncRunnable) -> None:
        await asyncio.sleep(0)
        raise error

    controller = AsyncController().chain(outer).chain(failing).chain(tail)
    with pytest.raises(RuntimeError, match="rejected") as exc_info:
        _ = await controller.run()

    assert exc_info.value is error
    assert unwound == ["outer"]
    tail.assert_not_awaited()


async def test_concurrent_runs_have_independent_cursors() -> None:
    def step(name: str):  # noqa: ANN202
        async def unit(
            tag: str,
            events: list[str],
            next_: AsyncRunnable,
        ) -> None:
            events.append(f"{name}{tag}")
            await asyncio.sleep(0)
            await next_()

        return unit

    controller = AsyncController()
    for name in ("a", "b", "c"):
        _ = controller.chain(step(name))

    events: list[str] = []
    _ = await asyncio.gather(
        controller.run("1", events),
        controller.run("2", events),
    )
    assert events == ["a1", "a2", "b1", "b2", "c1", "c2"]


async def test_chain_during_run_affects_only_later_runs(
    log: list[str],
) -> None:
    controller = AsyncController()

    async def grow(log: list[str], next_: AsyncRunnable) -> None:
        log.append("grow")
        _ = controller.chain(apusher("late"))
        await next_()

    _ = await controller.chain(grow).run(log)
    assert log == ["grow"]

    log.clear()
    _ = await controller.run(log)
    assert log == ["grow", "late"]


async def test_strict_rejects_second_next(log: list[str]) -> None:
    async def twice(log: list[str], next_: AsyncRunnable) -> None:
        log.append("twice")
        await next_()
        await next_()

    controller = (
        AsyncController(strict=True)
        .chain(apusher("head"))
        .chain(twice)
        .chain(apusher("tail"))
    )
    with pytest.raises(ContinuationReusedError) as exc_info:
        _ = await controller.run(log)

    assert exc_info.value.position == 1
    assert log == ["head", "twice", "tail"]


async def test_failure_logging(caplog: pytest.LogCaptureFixture) -> None:
    caplog.set_level(logging.DEBUG, logger="chainify.controller")
    controller = AsyncController(name="requests").chain(
        AsyncMock(side_effect=KeyError),
    )

    with pytest.raises(KeyError):
        _ = await controller.run()

    assert caplog.messages == [
        "Running requests with 1 unit(s)",
        "requests failed after reaching position 1 of 1 (state=failed)",
    ]
