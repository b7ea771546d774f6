"""Failure classification for procedure-call logging.

Continuations fail by raising. Hosts that reject with a value that is not
an exception (a status code, a message string, None) wrap it in
`CallRejected` so the value survives the trip through the middleware.
`classify_failure` turns either form into the `error` / `errorType` pair
written on the failure entry.
"""

from __future__ import annotations

import math
from typing import Any

from pydantic import BaseModel, ConfigDict


class CallRejected(Exception):
    """A procedure call rejected with an arbitrary (non-exception) value.

    Example:
        >>> raise CallRejected(404)
    """

    def __init__(self, value: Any) -> None:
        super().__init__(value)
        self.value = value

    def __str__(self) -> str:
        return _lexical(self.value)


class FailureInfo(BaseModel):
    """Loggable description of a failure: message and kind name."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    error: str
    error_type: str


def classify_failure(exc: BaseException) -> FailureInfo:
    """Describe a raised failure for the failure log entry.

    Exceptions report their message and class name. Values carried by
    `CallRejected` report their lexical form and a value-kind tag
    ("string", "number", "boolean", "object").
    """
    if isinstance(exc, CallRejected):
        return _classify_value(exc.value)
    return FailureInfo(error=str(exc), error_type=type(exc).__name__)


def _classify_value(value: Any) -> FailureInfo:
    match value:
        case BaseException():
            return FailureInfo(error=str(value), error_type=type(value).__name__)
        case str():
            return FailureInfo(error=value, error_type="string")
        case bool():
            return FailureInfo(error=_lexical(value), error_type="boolean")
        case int() | float():
            return FailureInfo(error=_lexical(value), error_type="number")
        case _:
            # None lands here too: "null" / "object"
            return FailureInfo(error=_lexical(value), error_type="object")


def _lexical(value: Any) -> str:
    """String form of a rejected value."""
    match value:
        case None: return "null"
        case bool(): return "true" if value else "false"
        case float() if math.isnan(value): return "NaN"
        case float() if math.isinf(value): return "Infinity" if value > 0 else "-Infinity"
        case float() if value.is_integer(): return str(int(value))
        case _: return str(value)
