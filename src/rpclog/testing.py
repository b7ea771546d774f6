"""Recording sink for testing code that logs through rpclog.

Example:
    >>> sink = RecordingSink()
    >>> configure({"logger": sink})
    >>> await logging_middleware(ctx={}, path="a.b", type="query", next=handler)
    >>> [e.message for e in sink.entries]
    ['tRPC procedure called', 'tRPC procedure completed']
"""

from __future__ import annotations

from dataclasses import dataclass, field

from .types import LogContext, LogLevel


@dataclass(frozen=True, slots=True)
class LogEntry:
    """One entry received by a RecordingSink."""
    level: LogLevel
    message: str
    context: LogContext | None


@dataclass
class RecordingSink:
    """Sink that keeps every entry in call order."""
    entries: list[LogEntry] = field(default_factory=list)

    def debug(self, message: str, context: LogContext | None = None) -> None:
        self.entries.append(LogEntry("debug", message, context))

    def info(self, message: str, context: LogContext | None = None) -> None:
        self.entries.append(LogEntry("info", message, context))

    def warn(self, message: str, context: LogContext | None = None) -> None:
        self.entries.append(LogEntry("warn", message, context))

    def error(self, message: str, context: LogContext | None = None) -> None:
        self.entries.append(LogEntry("error", message, context))

    def at(self, level: LogLevel) -> list[LogEntry]:
        """Entries written at `level`."""
        return [e for e in self.entries if e.level == level]

    def messages(self) -> list[str]:
        return [e.message for e in self.entries]

    def find(self, message: str) -> LogEntry:
        """The single entry with `message`; AssertionError unless exactly one exists."""
        found = [e for e in self.entries if e.message == message]
        if len(found) != 1:
            raise AssertionError(f"Expected one {message!r} entry, found {len(found)}")
        return found[0]

    def clear(self) -> None:
        self.entries.clear()
