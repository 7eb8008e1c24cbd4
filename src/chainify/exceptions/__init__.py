"""Custom exceptions for the chainify library.

Failures raised by chained units are never wrapped; they reach the `run`
caller unchanged. The exceptions below report misuse of a controller.
"""

from chainify._internal.exceptions import (
    BaseChainifyError,
    ContinuationReusedError,
)

__all__ = (
    "BaseChainifyError",
    "ContinuationReusedError",
)
