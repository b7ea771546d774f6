"""Sink contract shared by the middleware and scoped loggers.

A sink is anything exposing four severity-keyed methods that accept a
message and an optional structured context. rpclog never formats or
transports entries itself; it only calls into the injected sink.
"""

from __future__ import annotations

from typing import Any, Literal, Protocol, runtime_checkable

LogLevel = Literal["debug", "info", "warn", "error"]

# Open mapping; an optional "component" key plus call-specific fields.
# Absent fields are omitted, never stored as None.
LogContext = dict[str, Any]


@runtime_checkable
class Logger(Protocol):
    """Protocol for injected logging sinks.

    Implementations must not raise for any input, including a missing
    context.

    Example:
        >>> class PrintSink:
        ...     def debug(self, message, context=None): print("debug", message, context)
        ...     def info(self, message, context=None): print("info", message, context)
        ...     def warn(self, message, context=None): print("warn", message, context)
        ...     def error(self, message, context=None): print("error", message, context)
        >>> isinstance(PrintSink(), Logger)
        True
    """

    def debug(self, message: str, context: LogContext | None = None) -> None: ...
    def info(self, message: str, context: LogContext | None = None) -> None: ...
    def warn(self, message: str, context: LogContext | None = None) -> None: ...
    def error(self, message: str, context: LogContext | None = None) -> None: ...


class NoopLogger:
    """Sink that silently discards everything."""

    __slots__ = ()

    def debug(self, message: str, context: LogContext | None = None) -> None: pass
    def info(self, message: str, context: LogContext | None = None) -> None: pass
    def warn(self, message: str, context: LogContext | None = None) -> None: pass
    def error(self, message: str, context: LogContext | None = None) -> None: pass

    def __repr__(self) -> str:
        return "NoopLogger()"
