from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any, Final, Generic, TypeVar

from typing_extensions import Self, override

from chainify._internal.adapters import Terminal
from chainify._internal.common.constants import RunState
from chainify._internal.configuration import ControllerConfiguration
from chainify._internal.cursor import Cursor

if TYPE_CHECKING:
    from collections.abc import Callable

UnitT = TypeVar("UnitT")

logger = logging.getLogger("chainify.controller")


class BaseController(ABC, Generic[UnitT]):
    """Ordered chain of units run one after another.

    Every unit is invoked with the `run` arguments followed by a `next`
    continuation. Calling `next` runs the following unit; not calling it
    stops the chain for that run.
    """

    __slots__: tuple[str, ...] = ("_callbacks", "config")

    def __init__(
        self,
        *,
        name: str | None = None,
        strict: bool = False,
    ) -> None:
        self._callbacks: list[UnitT] = []
        self.config: Final = ControllerConfiguration(
            name=name or type(self).__name__,
            strict=strict,
        )

    @property
    def callbacks(self) -> tuple[UnitT, ...]:
        return tuple(self._callbacks)

    @override
    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(name={self.config.name!r}, "
            f"callbacks={len(self._callbacks)}, strict={self.config.strict})"
        )

    def chain(
        self,
        callback: Callable[..., Any],
        *,
        terminal: bool = False,
    ) -> Self:
        """Append a unit to the chain.

        The last parameter of `callback` receives `next`. Pass
        `terminal=True` for a callback that takes only the run arguments.
        """
        if terminal or isinstance(callback, Terminal):
            unit = self._adapt_terminal(callback)
        else:
            unit = callback
        self._callbacks.append(unit)  # pyright: ignore[reportArgumentType]
        return self

    @abstractmethod
    def _adapt_terminal(self, callback: Callable[..., Any]) -> UnitT:
        raise NotImplementedError

    def _begin(self, args: tuple[Any, ...]) -> Cursor[UnitT]:
        cursor = Cursor(args=args, callbacks=tuple(self._callbacks))
        logger.debug(
            "Running %s with %d unit(s)",
            self.config.name,
            len(cursor.callbacks),
        )
        return cursor

    def _finish(self, cursor: Cursor[UnitT]) -> None:
        cursor.state = RunState.FINISHED
        logger.debug(
            "%s %s at position %d of %d (state=%s)",
            self.config.name,
            "halted" if cursor.halted else "completed",
            cursor.position,
            len(cursor.callbacks),
            cursor.state.value,
        )

    def _fail(self, cursor: Cursor[UnitT]) -> None:
        cursor.state = RunState.FAILED
        logger.debug(
            "%s failed after reaching position %d of %d (state=%s)",
            self.config.name,
            cursor.position,
            len(cursor.callbacks),
            cursor.state.value,
        )
