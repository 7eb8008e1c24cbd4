from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Generic, TypeVar

from chainify._internal.common.constants import RunState

UnitT = TypeVar("UnitT")


@dataclass(slots=True, kw_only=True)
class Cursor(Generic[UnitT]):
    """Advancement state owned by a single `run` invocation.

    `callbacks` is the snapshot of the chain taken when the run started,
    so units chained while the run is in flight never become visible to it.
    `position` only moves forward.
    """

    args: tuple[Any, ...]
    callbacks: tuple[UnitT, ...]
    position: int = 0
    state: RunState = RunState.IDLE

    @property
    def exhausted(self) -> bool:
        return self.position >= len(self.callbacks)

    @property
    def halted(self) -> bool:
        return not self.exhausted

    def advance(self) -> UnitT | None:
        if self.exhausted:
            return None
        unit = self.callbacks[self.position]
        self.position += 1
        self.state = RunState.ADVANCING
        return unit
