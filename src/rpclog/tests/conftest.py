"""Shared fixtures: a clean register and a recording sink per test."""

from __future__ import annotations

from collections.abc import Iterator

import pytest

from rpclog import configure, reset_config
from rpclog.testing import RecordingSink


@pytest.fixture(autouse=True)
def clean_config() -> Iterator[None]:
    """Reset the global sink before and after each test."""
    reset_config()
    yield
    reset_config()


@pytest.fixture
def sink() -> RecordingSink:
    """Recording sink installed as the active logger."""
    rec = RecordingSink()
    configure({"logger": rec})
    return rec


@pytest.fixture
def fixed_clock(monkeypatch: pytest.MonkeyPatch):
    """Replace the middleware clock with scripted readings."""
    def install(*readings: int) -> None:
        it = iter(readings)
        monkeypatch.setattr("rpclog.middleware.now_ms", lambda: next(it))
    return install
