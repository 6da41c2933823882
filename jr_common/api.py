"""Public API surface for jr_common."""

from jr_common.errors import (
    ConfigurationError,
    InvalidJobNameError,
    JobRunError,
    RunDirectoryError,
    StatusReadError,
    StatusWriteError,
    error_to_payload,
    wrap_error,
)
from jr_common.logging import configure_logging, get_tracer

__all__ = [
    "ConfigurationError",
    "InvalidJobNameError",
    "JobRunError",
    "RunDirectoryError",
    "StatusReadError",
    "StatusWriteError",
    "configure_logging",
    "error_to_payload",
    "get_tracer",
    "wrap_error",
]
