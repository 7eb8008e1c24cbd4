"""Callable shapes used by chained units and their continuations."""

from chainify._internal.common.types import (
    AsyncConsumer,
    AsyncProvider,
    AsyncRunnable,
    AsyncUnit,
    Consumer,
    Provider,
    Runnable,
    Unit,
)

__all__ = (
    "AsyncConsumer",
    "AsyncProvider",
    "AsyncRunnable",
    "AsyncUnit",
    "Consumer",
    "Provider",
    "Runnable",
    "Unit",
)
