"""Helpers for job history paths and run identifiers."""

from __future__ import annotations

from datetime import datetime, timezone
from pathlib import Path

from jr_common.errors import InvalidJobNameError
from jr_logger.models.config import JobsEnvironment
from jr_logger.services.filesystem import FileSystem

TRIGGERED_PATH = "triggered"
STATUS_FILE = "status.json"
OUTPUT_LOG = "output.log"
ERROR_LOG = "error.log"
RUN_ID_FORMAT = "%Y%m%d%H%M%S"


def generate_run_id(moment: datetime) -> str:
    """Return the second-resolution run identifier for ``moment`` (UTC)."""
    if moment.tzinfo is not None:
        moment = moment.astimezone(timezone.utc)
    return moment.strftime(RUN_ID_FORMAT)


def validate_job_name(job_name: str) -> str:
    if not job_name or not job_name.strip():
        raise InvalidJobNameError("Job name must be non-empty")
    if "/" in job_name or "\\" in job_name or job_name in (".", ".."):
        raise InvalidJobNameError(
            "Job name must not contain path separators", context={"job": job_name}
        )
    return job_name


def triggered_root(environment: JobsEnvironment, file_system: FileSystem) -> Path:
    return file_system.join_path(environment.jobs_data_path, TRIGGERED_PATH)


def job_history_path(
    environment: JobsEnvironment, job_name: str, file_system: FileSystem
) -> Path:
    return file_system.join_path(triggered_root(environment, file_system), job_name)


def run_dir_for(
    environment: JobsEnvironment,
    job_name: str,
    run_id: str,
    file_system: FileSystem,
) -> Path:
    return file_system.join_path(
        job_history_path(environment, job_name, file_system), run_id
    )
