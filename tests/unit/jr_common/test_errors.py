"""Tests for shared error helpers."""

from __future__ import annotations

from pathlib import Path

import pytest

from jr_common.errors import (
    ConfigurationError,
    InvalidJobNameError,
    RunDirectoryError,
    error_to_payload,
    wrap_error,
)


pytestmark = pytest.mark.unit_common


def test_error_to_payload_normalizes_context() -> None:
    err = RunDirectoryError(
        "boom",
        context={
            "path": Path("/tmp/test"),
            "count": 3,
            "nested": {"value": Path("nested")},
            "items": (Path("a"), "b"),
        },
    )
    payload = error_to_payload(err)
    assert payload["error_type"] == "RunDirectoryError"
    assert payload["error"] == "boom"
    assert payload["error_context"]["path"].endswith("test")
    assert payload["error_context"]["count"] == 3
    assert payload["error_context"]["nested"]["value"] == "nested"
    assert payload["error_context"]["items"] == ["a", "b"]


def test_wrap_error_chains_cause() -> None:
    cause = OSError("disk full")
    err = wrap_error(RunDirectoryError, "cannot create", context={"job": "j"}, cause=cause)
    assert isinstance(err, RunDirectoryError)
    assert err.__cause__ is cause
    assert err.to_dict() == {
        "type": "RunDirectoryError",
        "message": "cannot create",
        "context": {"job": "j"},
    }


def test_invalid_job_name_is_configuration_error() -> None:
    assert issubclass(InvalidJobNameError, ConfigurationError)
