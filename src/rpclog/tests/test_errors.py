"""Tests for failure classification."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from rpclog import CallRejected, FailureInfo, classify_failure


@pytest.mark.parametrize(
    ("exc", "error", "error_type"),
    [
        (TypeError("x is not callable"), "x is not callable", "TypeError"),
        (ValueError(), "", "ValueError"),
        (RuntimeError("boom"), "boom", "RuntimeError"),
    ],
)
def test_exceptions(exc: Exception, error: str, error_type: str) -> None:
    assert classify_failure(exc) == FailureInfo(error=error, error_type=error_type)


@pytest.mark.parametrize(
    ("value", "error", "error_type"),
    [
        ("denied", "denied", "string"),
        ("", "", "string"),
        (404, "404", "number"),
        (1.5, "1.5", "number"),
        (404.0, "404", "number"),
        (float("nan"), "NaN", "number"),
        (float("inf"), "Infinity", "number"),
        (float("-inf"), "-Infinity", "number"),
        (True, "true", "boolean"),
        (False, "false", "boolean"),
        (None, "null", "object"),
        ([1, 2], "[1, 2]", "object"),
        ({"code": "E1"}, "{'code': 'E1'}", "object"),
    ],
)
def test_rejected_values(value: object, error: str, error_type: str) -> None:
    info = classify_failure(CallRejected(value))
    assert (info.error, info.error_type) == (error, error_type)


def test_rejected_exception_reports_inner_kind() -> None:
    info = classify_failure(CallRejected(PermissionError("no access")))
    assert (info.error, info.error_type) == ("no access", "PermissionError")


def test_rejected_str_form() -> None:
    assert str(CallRejected(None)) == "null"
    assert str(CallRejected(404)) == "404"
    assert CallRejected("x").value == "x"


def test_failure_info_is_frozen() -> None:
    info = FailureInfo(error="e", error_type="t")
    with pytest.raises(ValidationError):
        info.error = "other"  # type: ignore[misc]
