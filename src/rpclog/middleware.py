"""Procedure-call logging middleware and chain composition.

Middleware follows continuation-passing style: each middleware receives
the call context, procedure path and type, and a zero-argument `next`
that runs the rest of the pipeline.

`LoggingMiddleware` writes one "called" entry before `next` runs and
exactly one terminal entry after it: "completed" on success, "failed" on
error. Failures are re-raised untouched.

Example:
    >>> from rpclog import configure, logging_middleware
    >>> configure({"logger": my_sink})
    >>> await logging_middleware(
    ...     ctx={"session": {"id": "s1", "userId": "u1"}},
    ...     path="user.get",
    ...     type="query",
    ...     next=lambda: fetch_user("u1"),
    ... )
"""

from __future__ import annotations

import inspect
import time
from collections.abc import Awaitable, Callable, Mapping, Sequence
from dataclasses import dataclass
from typing import Any, Protocol, runtime_checkable

from .config import LoggingMiddlewareConfig, get_config
from .errors import classify_failure
from .types import LogContext

COMPONENT = "trpc-middleware"

MSG_CALLED = "tRPC procedure called"
MSG_COMPLETED = "tRPC procedure completed"
MSG_FAILED = "tRPC procedure failed"

# Continuation: runs the rest of the pipeline. May return a plain value or an awaitable.
Next = Callable[[], "Awaitable[Any] | Any"]

# Handler at the end of a composed chain
Handler = Callable[[Any, str | None, str | None], Awaitable[Any]]

_MISSING: Any = object()


def now_ms() -> int:
    """Monotonic clock reading in whole milliseconds."""
    return time.monotonic_ns() // 1_000_000


@dataclass(slots=True)
class CallEnvelope:
    """One intercepted procedure invocation."""

    ctx: Any
    next: Next
    path: str | None = None
    type: str | None = None  # noqa: A003 - procedure type (query/mutation/subscription)


@runtime_checkable
class Middleware(Protocol):
    """Protocol for procedure middleware.

    Example:
        >>> class AuditMiddleware:
        ...     async def __call__(self, *, ctx, path, type, next):
        ...         audit(path)
        ...         return await next()
    """

    async def __call__(self, *, ctx: Any, path: str | None, type: str | None, next: Next) -> Any:  # noqa: A002
        ...


@dataclass(slots=True)
class LoggingMiddleware:
    """Log procedure start, completion and failure with timing and caller context.

    Logs:
    - procedure path and type on entry
    - session context (sessionId, userId) when present
    - client context (clientIpHash, deviceType, browser) when present
    - duration and success/failure on exit
    - error message and error type on failure (then re-raises)

    Args:
        config: Explicit configuration. When None, the process-wide
            configuration is read on every call.

    Example:
        >>> mw = LoggingMiddleware(config=LoggingMiddlewareConfig(logger=sink))
        >>> await mw(ctx=ctx, path="post.list", type="query", next=handler)
    """

    config: LoggingMiddlewareConfig | None = None

    async def __call__(
        self,
        *,
        ctx: Any,
        next: Next,  # noqa: A002
        path: str | None = None,
        type: str | None = None,  # noqa: A002
    ) -> Any:
        return await self.intercept(CallEnvelope(ctx=ctx, next=next, path=path, type=type))

    async def intercept(self, envelope: CallEnvelope) -> Any:
        logger = (self.config or get_config()).logger
        start = now_ms()

        procedure = _name_or_unknown(envelope.path)
        procedure_type = _name_or_unknown(envelope.type)
        logger.info(MSG_CALLED, call_context(envelope.ctx, procedure, procedure_type))

        try:
            result = envelope.next()
            if inspect.isawaitable(result):
                result = await result
        except Exception as e:
            failure = classify_failure(e)
            logger.error(MSG_FAILED, {
                "component": COMPONENT,
                "procedure": procedure,
                "procedureType": procedure_type,
                "duration": f"{now_ms() - start}ms",
                "success": False,
                "error": failure.error,
                "errorType": failure.error_type,
            })
            raise

        logger.info(MSG_COMPLETED, {
            "component": COMPONENT,
            "procedure": procedure,
            "procedureType": procedure_type,
            "duration": f"{now_ms() - start}ms",
            "success": True,
        })
        return result


_default_middleware = LoggingMiddleware()


async def logging_middleware(
    *,
    ctx: Any,
    next: Next,  # noqa: A002
    path: str | None = None,
    type: str | None = None,  # noqa: A002
) -> Any:
    """Structured logging middleware bound to the process-wide configuration."""
    return await _default_middleware(ctx=ctx, next=next, path=path, type=type)


def call_context(ctx: Any, procedure: str, procedure_type: str) -> LogContext:
    """Build the start-of-call context.

    Session fields are skipped when missing or None. Client fields are
    skipped only when missing. Lookups that fail on odd context shapes
    omit the field instead of raising.
    """
    context: LogContext = {
        "component": COMPONENT,
        "procedure": procedure,
        "procedureType": procedure_type,
    }

    session = _field(ctx, "session")
    if (session_id := _field(session, "id")) is not _MISSING and session_id is not None:
        context["sessionId"] = session_id
    if (user_id := _field(session, "userId", "user_id")) is not _MISSING and user_id is not None:
        context["userId"] = user_id

    client = _field(ctx, "client")
    if (ip_hash := _field(client, "ipHash", "ip_hash")) is not _MISSING:
        context["clientIpHash"] = ip_hash
    if (device_type := _field(client, "deviceType", "device_type")) is not _MISSING:
        context["deviceType"] = device_type
    if (browser := _field(_field(client, "browser"), "name")) is not _MISSING:
        context["browser"] = browser

    return context


def compose(middleware: Sequence[Middleware], handler: Handler) -> Handler:
    """Wrap `handler` in middleware (first = outermost).

    Args:
        middleware: Ordered list of middleware
        handler: Async function (ctx, path, type) -> result at the end of the chain

    Returns:
        Composed async function: (ctx, path=None, type=None) -> result
    """
    chain: Handler = handler
    for mw in reversed(middleware):
        def make_wrapper(m: Middleware, nxt: Handler) -> Handler:
            async def wrapped(ctx: Any, path: str | None = None, type: str | None = None) -> Any:  # noqa: A002
                return await m(ctx=ctx, path=path, type=type, next=lambda: nxt(ctx, path, type))
            return wrapped
        chain = make_wrapper(mw, chain)

    async def run(ctx: Any, path: str | None = None, type: str | None = None) -> Any:  # noqa: A002
        return await chain(ctx, path, type)

    return run


# ─────────────────────────────────────────────────────────────────────────────
# Helpers
# ─────────────────────────────────────────────────────────────────────────────


def _name_or_unknown(value: object) -> str:
    return value if isinstance(value, str) and value else "unknown"


def _field(obj: Any, *names: str) -> Any:
    """Look up the first present key or attribute on a mapping or object.

    Returns _MISSING when `obj` is missing/None, none of the names exist,
    or the lookup itself raises (e.g. a property guarding unset state).
    """
    if obj is _MISSING or obj is None:
        return _MISSING
    for name in names:
        try:
            if isinstance(obj, Mapping):
                if name in obj:
                    return obj[name]
            elif (value := getattr(obj, name, _MISSING)) is not _MISSING:
                return value
        except Exception:  # noqa: BLE001
            continue
    return _MISSING
