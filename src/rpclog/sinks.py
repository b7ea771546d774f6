"""Sink adapters over existing logging backends.

`StdlibSink` forwards entries to a `logging.Logger`, handing the structured
context over as `record.context`. Handlers and formatters stay with the
host application.

Example:
    >>> import logging
    >>> from rpclog import configure
    >>> from rpclog.sinks import StdlibSink
    >>> configure({"logger": StdlibSink(logging.getLogger("api.rpc"))})
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from .config import LoggingMiddlewareConfig, configure, get_noop_logger
from .settings import MiddlewareSettings, get_settings
from .types import LogContext, Logger


@dataclass(frozen=True, slots=True)
class StdlibSink:
    """Sink that writes through a stdlib logger. `warn` maps to WARNING."""

    logger: logging.Logger = field(default_factory=lambda: logging.getLogger("rpclog"))

    def _log(self, level: int, message: str, context: LogContext | None) -> None:
        self.logger.log(level, message, extra={"context": dict(context or {})})

    def debug(self, message: str, context: LogContext | None = None) -> None: self._log(logging.DEBUG, message, context)
    def info(self, message: str, context: LogContext | None = None) -> None: self._log(logging.INFO, message, context)
    def warn(self, message: str, context: LogContext | None = None) -> None: self._log(logging.WARNING, message, context)
    def error(self, message: str, context: LogContext | None = None) -> None: self._log(logging.ERROR, message, context)


def sink_from_settings(settings: MiddlewareSettings | None = None) -> Logger:
    """Build the sink named by settings ("noop" or "stdlib")."""
    settings = settings or get_settings()
    match settings.sink:
        case "stdlib": return StdlibSink(logging.getLogger(settings.logger_name))
        case _: return get_noop_logger()


def configure_from_settings(settings: MiddlewareSettings | None = None) -> Logger:
    """Install the sink named by settings and return it."""
    sink = sink_from_settings(settings)
    configure(LoggingMiddlewareConfig(logger=sink))
    return sink
