"""Per-run status and output logging for triggered jobs."""

from jr_logger.api import JobsEnvironment, RunLogger, RunStatus

__all__ = ["JobsEnvironment", "RunLogger", "RunStatus"]
