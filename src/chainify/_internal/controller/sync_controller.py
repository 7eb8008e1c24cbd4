from __future__ import annotations

from typing import TYPE_CHECKING, Any

from typing_extensions import Self, override

from chainify._internal._type_guards import is_async_callable
from chainify._internal.adapters import create_terminal
from chainify._internal.common.types import Unit
from chainify._internal.continuation import Next
from chainify._internal.controller.base import BaseController

if TYPE_CHECKING:
    from collections.abc import Callable


class Controller(BaseController[Unit]):
    """A controller for synchronous sequential middleware.

    `run` returns once the first unit returns. Calls to `next` made from
    inside a unit run the remainder of the chain on the same call stack.
    """

    __slots__: tuple[str, ...] = ()

    @override
    def _adapt_terminal(self, callback: Callable[..., Any]) -> Unit:
        unit = create_terminal(callback, awaitable=False)
        if is_async_callable(unit.func):
            msg = (
                f"Cannot chain coroutine function {unit.func!r} on a "
                "synchronous controller. Use AsyncController instead."
            )
            raise TypeError(msg)
        return unit

    def run(self, *args: Any) -> Self:  # noqa: ANN401
        if not self._callbacks:
            return self

        cursor = self._begin(args)
        try:
            Next(cursor, strict=self.config.strict)()
        except Exception:
            self._fail(cursor)
            raise
        self._finish(cursor)
        return self
