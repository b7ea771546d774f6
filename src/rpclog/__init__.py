"""rpclog - structured logging middleware for procedure calls.

Wraps each procedure call with a start entry and exactly one terminal
entry (completed or failed), carrying timing, session and client context.
The sink is injected once at startup; until then a no-op sink is used.

Quick Start:
    >>> import logging
    >>> from rpclog import configure, logging_middleware
    >>> from rpclog.sinks import StdlibSink
    >>>
    >>> configure({"logger": StdlibSink(logging.getLogger("api.rpc"))})
    >>>
    >>> result = await logging_middleware(
    ...     ctx={"session": {"id": "s1"}, "client": {"deviceType": "mobile"}},
    ...     path="user.delete",
    ...     type="mutation",
    ...     next=lambda: delete_user("u1"),
    ... )

Component Loggers:
    >>> from rpclog import create_logger
    >>> log = create_logger("billing")
    >>> log.warn("card declined", {"userId": "u1"})

Chains:
    >>> from rpclog import LoggingMiddleware, compose
    >>> run = compose([LoggingMiddleware()], handler)
    >>> await run(ctx, "post.list", "query")
"""

from .config import (
    LoggingMiddlewareConfig,
    configure,
    get_config,
    get_noop_logger,
    reset_config,
)
from .errors import CallRejected, FailureInfo, classify_failure
from .middleware import (
    COMPONENT,
    CallEnvelope,
    LoggingMiddleware,
    Middleware,
    Next,
    compose,
    logging_middleware,
)
from .scoped import ScopedLogger, create_logger, create_scoped_logger
from .types import LogContext, Logger, LogLevel, NoopLogger

__version__ = "0.1.0"

__all__ = [
    # Configuration
    "LoggingMiddlewareConfig",
    "configure",
    "get_config",
    "get_noop_logger",
    "reset_config",
    # Sink contract
    "LogContext",
    "LogLevel",
    "Logger",
    "NoopLogger",
    # Middleware
    "COMPONENT",
    "CallEnvelope",
    "LoggingMiddleware",
    "Middleware",
    "Next",
    "compose",
    "logging_middleware",
    # Errors
    "CallRejected",
    "FailureInfo",
    "classify_failure",
    # Scoped loggers
    "ScopedLogger",
    "create_logger",
    "create_scoped_logger",
]
