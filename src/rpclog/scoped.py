"""Component-scoped loggers over the configured sink."""

from __future__ import annotations

from dataclasses import dataclass

from .config import get_config
from .types import LogContext


@dataclass(frozen=True, slots=True)
class ScopedLogger:
    """Logger that stamps a fixed component tag on every entry.

    The sink is looked up on each call, so `configure` after creation
    still takes effect. Caller context is merged over the tag: a
    caller-supplied "component" key wins.

    Example:
        >>> log = create_logger("auth")
        >>> log.info("login", {"userId": "u1"})
        # sink.info("login", {"component": "auth", "userId": "u1"})
    """

    component: str

    def _context(self, context: LogContext | None) -> LogContext:
        return {"component": self.component, **(context or {})}

    def debug(self, message: str, context: LogContext | None = None) -> None:
        get_config().logger.debug(message, self._context(context))

    def info(self, message: str, context: LogContext | None = None) -> None:
        get_config().logger.info(message, self._context(context))

    def warn(self, message: str, context: LogContext | None = None) -> None:
        get_config().logger.warn(message, self._context(context))

    def error(self, message: str, context: LogContext | None = None) -> None:
        get_config().logger.error(message, self._context(context))


def create_logger(component: str) -> ScopedLogger:
    """Create a logger tagged with `component`."""
    return ScopedLogger(component)


# Backward-compatible alias
create_scoped_logger = create_logger
