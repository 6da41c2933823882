"""Shared helpers for jobrun-logs."""

from jr_common.api import JobRunError, configure_logging, get_tracer

__all__ = ["configure_logging", "get_tracer", "JobRunError"]
