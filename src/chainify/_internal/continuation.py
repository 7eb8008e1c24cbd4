from __future__ import annotations

from typing import TYPE_CHECKING, Generic, TypeVar

from typing_extensions import Self

from chainify._internal.common.types import AsyncUnit, Unit
from chainify._internal.exceptions import ContinuationReusedError

if TYPE_CHECKING:
    from chainify._internal.cursor import Cursor

UnitT = TypeVar("UnitT", Unit, AsyncUnit)

ROOT_POSITION = -1


class BaseNext(Generic[UnitT]):
    __slots__: tuple[str, ...] = ("_called", "_cursor", "_owner", "_strict")

    def __init__(
        self,
        cursor: Cursor[UnitT],
        *,
        strict: bool = False,
        owner: int = ROOT_POSITION,
    ) -> None:
        self._cursor: Cursor[UnitT] = cursor
        self._strict: bool = strict
        self._owner: int = owner
        self._called: bool = False

    def _claim(self) -> None:
        if not self._strict:
            return
        if self._called:
            raise ContinuationReusedError(position=self._owner)
        self._called = True

    def _handoff(self) -> Self:
        # Non-strict runs share one continuation between all units.
        if not self._strict:
            return self
        owner = self._cursor.position - 1
        return type(self)(self._cursor, strict=True, owner=owner)


class Next(BaseNext[Unit]):
    __slots__: tuple[str, ...] = ()

    def __call__(self) -> None:
        self._claim()
        unit = self._cursor.advance()
        if unit is None:
            return
        unit(*self._cursor.args, self._handoff())


class AsyncNext(BaseNext[AsyncUnit]):
    __slots__: tuple[str, ...] = ()

    async def __call__(self) -> None:
        self._claim()
        unit = self._cursor.advance()
        if unit is None:
            return
        await unit(*self._cursor.args, self._handoff())
