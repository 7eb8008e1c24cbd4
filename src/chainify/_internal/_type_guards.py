import inspect
from collections.abc import Awaitable, Callable
from typing import Any, TypeGuard


def is_async_callable(
    func: Callable[..., Any],
) -> TypeGuard[Callable[..., Awaitable[Any]]]:
    if inspect.iscoroutinefunction(func):
        return True
    # Instances with an `async def __call__`.
    call = getattr(type(func), "__call__", None)
    return inspect.iscoroutinefunction(call)
