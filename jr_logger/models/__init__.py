"""Data models for job run logging."""

from jr_logger.models.config import JobsEnvironment, load_environment
from jr_logger.models.run_entry import RunEntry
from jr_logger.models.status import JobRunState, RunStatus

__all__ = ["JobRunState", "JobsEnvironment", "RunEntry", "RunStatus", "load_environment"]
