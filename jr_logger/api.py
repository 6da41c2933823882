"""Public API surface for jr_logger."""

from jr_logger.models import JobRunState, JobsEnvironment, RunEntry, RunStatus, load_environment
from jr_logger.run_logger import RunLogger
from jr_logger.services.filesystem import FileSystem, LocalFileSystem
from jr_logger.services.formatting import LogLevel
from jr_logger.services.run_catalog_service import RunCatalogService
from jr_logger.services.status_store import JsonStatusStore

__all__ = [
    "FileSystem",
    "JobRunState",
    "JobsEnvironment",
    "JsonStatusStore",
    "LocalFileSystem",
    "LogLevel",
    "RunCatalogService",
    "RunEntry",
    "RunLogger",
    "RunStatus",
    "load_environment",
]
