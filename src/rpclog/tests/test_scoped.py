"""Tests for component-scoped loggers."""

from __future__ import annotations

import pytest

from rpclog import ScopedLogger, configure, create_logger, create_scoped_logger
from rpclog.testing import LogEntry, RecordingSink


@pytest.mark.parametrize("level", ["debug", "info", "warn", "error"])
def test_levels_forward_with_component(sink: RecordingSink, level: str) -> None:
    log = create_logger("auth")
    getattr(log, level)("hello", {"userId": "u1"})
    assert sink.entries == [LogEntry(level, "hello", {"component": "auth", "userId": "u1"})]


def test_missing_context_gets_component(sink: RecordingSink) -> None:
    create_logger("billing").info("charged")
    assert sink.entries[0].context == {"component": "billing"}


def test_caller_component_wins(sink: RecordingSink) -> None:
    create_logger("auth").warn("override", {"component": "custom"})
    assert sink.entries[0].context == {"component": "custom"}


def test_caller_context_not_mutated(sink: RecordingSink) -> None:
    ctx = {"requestId": "r1"}
    create_logger("auth").info("x", ctx)
    assert ctx == {"requestId": "r1"}


def test_sink_resolved_at_call_time() -> None:
    log = create_logger("late")
    log.info("dropped")  # no-op sink
    rec = RecordingSink()
    configure({"logger": rec})
    log.info("kept")
    assert rec.messages() == ["kept"]


def test_follows_reconfiguration() -> None:
    first, second = RecordingSink(), RecordingSink()
    configure({"logger": first})
    log = create_logger("svc")
    log.error("one")
    configure({"logger": second})
    log.error("two")
    assert first.messages() == ["one"]
    assert second.messages() == ["two"]


def test_alias_is_same_function() -> None:
    assert create_scoped_logger is create_logger


def test_returns_scoped_logger() -> None:
    log = create_logger("x")
    assert isinstance(log, ScopedLogger)
    assert log.component == "x"
