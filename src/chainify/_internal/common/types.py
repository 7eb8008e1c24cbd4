from collections.abc import Awaitable, Callable
from typing import Any, ParamSpec, TypeAlias, TypeVar

ParamsT = ParamSpec("ParamsT")
ReturnT = TypeVar("ReturnT")

Consumer: TypeAlias = Callable[ParamsT, None]
AsyncConsumer: TypeAlias = Callable[ParamsT, Awaitable[None]]

Provider: TypeAlias = Callable[[], ReturnT]
AsyncProvider: TypeAlias = Callable[[], Awaitable[ReturnT]]

Runnable: TypeAlias = Callable[[], None]
AsyncRunnable: TypeAlias = Callable[[], Awaitable[None]]

# Normalized unit shape: the run arguments followed by the continuation.
Unit: TypeAlias = Callable[..., Any]
AsyncUnit: TypeAlias = Callable[..., Awaitable[Any]]
