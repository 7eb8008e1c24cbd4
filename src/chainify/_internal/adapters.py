from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any, Final

from typing_extensions import override

from chainify._internal._type_guards import is_async_callable

if TYPE_CHECKING:
    from collections.abc import Callable


class Terminal(ABC):
    """Adapter for a unit that accepts only the run arguments.

    The controller always appends the continuation; the adapter drops it
    before calling the wrapped function.
    """

    __slots__: tuple[str, ...] = ("func",)

    def __init__(self, func: Callable[..., Any]) -> None:
        self.func: Final = func

    @abstractmethod
    def __call__(self, *args: Any) -> Any:  # noqa: ANN401
        raise NotImplementedError

    @override
    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.func!r})"


class SyncTerminal(Terminal):
    @override
    def __call__(self, *args: Any) -> Any:
        return self.func(*args[:-1])


class AsyncTerminal(Terminal):
    @override
    async def __call__(self, *args: Any) -> Any:
        return await self.func(*args[:-1])


class LiftedTerminal(Terminal):
    """Runs a plain function as a unit of an asynchronous chain."""

    @override
    async def __call__(self, *args: Any) -> Any:
        return self.func(*args[:-1])


def create_terminal(
    func: Callable[..., Any],
    *,
    awaitable: bool,
) -> Terminal:
    if isinstance(func, Terminal):
        func = func.func

    if is_async_callable(func):
        return AsyncTerminal(func)
    if awaitable:
        return LiftedTerminal(func)
    return SyncTerminal(func)


def terminal(func: Callable[..., Any], /) -> Terminal:
    """Wrap `func` so it can be chained without accepting `next`.

    Controllers re-adapt the wrapper when it is chained, so plain and
    coroutine functions work with both controller variants.
    """
    return create_terminal(func, awaitable=False)
