"""Sequential middleware controllers.

This module exposes the synchronous and asynchronous chain runners. Units
are registered in order with `chain` and invoked one after another by
`run`; each unit receives a `next` continuation that decides whether the
rest of the chain runs.
"""

from importlib.metadata import version as get_version

from chainify._internal.adapters import terminal
from chainify._internal.common.constants import RunState
from chainify._internal.configuration import ControllerConfiguration
from chainify._internal.continuation import AsyncNext, Next
from chainify._internal.controller.async_controller import AsyncController
from chainify._internal.controller.base import BaseController
from chainify._internal.controller.sync_controller import Controller

__version__ = get_version("chainify")
__all__ = (
    "AsyncController",
    "AsyncNext",
    "BaseController",
    "Controller",
    "ControllerConfiguration",
    "Next",
    "RunState",
    "terminal",
)
