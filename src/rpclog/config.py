"""Process-wide logging configuration for the middleware.

Hosts call `configure` once at startup to inject a sink. Until then (and
after `reset_config`) a shared no-op sink is active, so the middleware
never fails for lack of configuration.

Example:
    >>> from rpclog import configure, get_config, LoggingMiddlewareConfig
    >>> configure(LoggingMiddlewareConfig(logger=my_sink))
    >>> get_config().logger is my_sink
    True
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass, replace

from .types import Logger, NoopLogger

log = logging.getLogger("rpclog")

_NOOP_LOGGER = NoopLogger()


@dataclass(frozen=True, slots=True)
class LoggingMiddlewareConfig:
    """Active configuration: the sink every consumer logs through."""

    logger: Logger


_DEFAULT_CONFIG = LoggingMiddlewareConfig(logger=_NOOP_LOGGER)
_current: LoggingMiddlewareConfig = _DEFAULT_CONFIG


def configure(config: LoggingMiddlewareConfig | Mapping[str, Logger]) -> None:
    """Replace the active configuration with a shallow copy of `config`.

    Nothing is merged with the previous configuration. A mapping with a
    "logger" key is accepted as shorthand.
    """
    global _current
    if isinstance(config, Mapping):
        _current = LoggingMiddlewareConfig(logger=config["logger"])
    else:
        _current = replace(config)
    log.debug("rpclog sink configured: %r", _current.logger)


def get_config() -> LoggingMiddlewareConfig:
    """Return the active configuration. Treat it as read-only."""
    return _current


def reset_config() -> None:
    """Restore the default no-op configuration. Idempotent."""
    global _current
    _current = _DEFAULT_CONFIG
    log.debug("rpclog sink reset to no-op")


def get_noop_logger() -> Logger:
    """Return the shared no-op sink (same instance on every call)."""
    return _NOOP_LOGGER
