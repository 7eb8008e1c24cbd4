"""A request pipeline built from chained units.

A guard short-circuits unauthenticated requests, a timing unit wraps the
rest of the chain, and a terminal handler produces the response.
"""

import asyncio
import logging
import time
from dataclasses import dataclass, field

from chainify import AsyncController, Controller
from chainify.types import AsyncRunnable, Runnable

logger = logging.getLogger(__name__)


@dataclass(slots=True, kw_only=True)
class Request:
    path: str
    user: str | None = None
    headers: dict[str, str] = field(default_factory=dict)


@dataclass(slots=True)
class Response:
    status: int = 404
    body: str = ""


def authenticate(
    request: Request,
    response: Response,
    next_: Runnable,
) -> None:
    if request.user is None:
        response.status = 401
        response.body = "Unauthorized"
        return
    next_()


def add_request_id(
    request: Request,
    _response: Response,
    next_: Runnable,
) -> None:
    request.headers.setdefault("x-request-id", str(id(request)))
    next_()


def handle(request: Request, response: Response) -> None:
    response.status = 200
    response.body = f"Hello {request.user} from {request.path}"


async def timing(
    request: Request,
    _response: Response,
    next_: AsyncRunnable,
) -> None:
    start = time.monotonic()
    await next_()
    logger.info("%s took %.4fs", request.path, time.monotonic() - start)


async def authenticate_async(
    request: Request,
    response: Response,
    next_: AsyncRunnable,
) -> None:
    if request.user is None:
        response.status = 401
        response.body = "Unauthorized"
        return
    await next_()


async def handle_async(request: Request, response: Response) -> None:
    await asyncio.sleep(0.01)
    handle(request, response)


def create_pipeline() -> Controller:
    return (
        Controller(name="sync-pipeline")
        .chain(authenticate)
        .chain(add_request_id)
        .chain(handle, terminal=True)
    )


def create_async_pipeline() -> AsyncController:
    return (
        AsyncController(name="async-pipeline")
        .chain(timing)
        .chain(authenticate_async)
        .chain(handle_async, terminal=True)
    )


async def _main() -> None:
    pipeline = create_pipeline()
    for request in (Request(path="/"), Request(path="/", user="alice")):
        response = Response()
        _ = pipeline.run(request, response)
        logger.info(
            "sync %s -> %s %s",
            request.user,
            response.status,
            response.body,
        )

    async_pipeline = create_async_pipeline()
    response = Response()
    _ = await async_pipeline.run(Request(path="/async", user="bob"), response)
    logger.info("async -> %s %s", response.status, response.body)


if __name__ == "__main__":
    logging.basicConfig(
        level=logging.DEBUG,
        format="[%(levelname)s] %(name)s: %(message)s",
        handlers=[logging.StreamHandler()],
    )
    asyncio.run(_main())
