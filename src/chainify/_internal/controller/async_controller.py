from __future__ import annotations

from typing import TYPE_CHECKING, Any

from typing_extensions import Self, override

from chainify._internal.adapters import create_terminal
from chainify._internal.common.types import AsyncUnit
from chainify._internal.continuation import AsyncNext
from chainify._internal.controller.base import BaseController

if TYPE_CHECKING:
    from collections.abc import Callable


class AsyncController(BaseController[AsyncUnit]):
    """A controller for asynchronous sequential middleware.

    Units are awaited one at a time. A unit awaiting `next()` resumes only
    after the rest of the chain it started has resolved.
    """

    __slots__: tuple[str, ...] = ()

    @override
    def _adapt_terminal(self, callback: Callable[..., Any]) -> AsyncUnit:
        return create_terminal(callback, awaitable=True)

    async def run(self, *args: Any) -> Self:  # noqa: ANN401
        if not self._callbacks:
            return self

        cursor = self._begin(args)
        try:
            await AsyncNext(cursor, strict=self.config.strict)()
        except Exception:
            self._fail(cursor)
            raise
        self._finish(cursor)
        return self
