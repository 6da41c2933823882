"""Per-run logger for triggered jobs.

Each run owns ``<jobs_data_path>/triggered/<job>/<run_id>/`` holding a JSON
status record plus ``output.log`` and ``error.log``. Status changes are a
read-modify-write of the status file; log appends never raise.
"""

from __future__ import annotations

from datetime import datetime
from pathlib import Path
from typing import Any, Callable, Optional

from jr_common.errors import RunDirectoryError, wrap_error
from jr_common.logging import get_tracer
from jr_logger.models.config import JobsEnvironment
from jr_logger.models.status import JobRunState, RunStatus
from jr_logger.paths import (
    ERROR_LOG,
    OUTPUT_LOG,
    STATUS_FILE,
    generate_run_id,
    run_dir_for,
    validate_job_name,
)
from jr_logger.services.filesystem import FileSystem, LocalFileSystem
from jr_logger.services.formatting import (
    LogLevel,
    format_plain_line,
    format_system_message,
    safe_append,
    short_instance_id,
    utc_now,
)
from jr_logger.services.status_store import JsonStatusStore

Clock = Callable[[], datetime]


class RunLogger:
    """Record status and output of a single triggered job run.

    Not thread-safe: one instance is meant to be driven by one job execution.
    """

    def __init__(
        self,
        job_name: str,
        run_id: str,
        run_dir: Path,
        environment: JobsEnvironment,
        *,
        file_system: FileSystem,
        status_store: JsonStatusStore,
        tracer: Any,
        clock: Clock,
    ) -> None:
        self.job_name = job_name
        self.run_id = run_id
        self.run_dir = run_dir
        self._environment = environment
        self._file_system = file_system
        self._status_store = status_store
        self._tracer = tracer
        self._clock = clock
        self._instance_id = environment.instance_id or short_instance_id()

        self.status_path = file_system.join_path(run_dir, STATUS_FILE)
        self.output_path = file_system.join_path(run_dir, OUTPUT_LOG)
        self.error_path = file_system.join_path(run_dir, ERROR_LOG)

    @classmethod
    def start_new_run(
        cls,
        job_name: str,
        environment: JobsEnvironment,
        *,
        file_system: FileSystem | None = None,
        status_store: JsonStatusStore | None = None,
        tracer: Any | None = None,
        clock: Clock | None = None,
    ) -> "RunLogger":
        """Create the run directory, write the initial status and return a logger."""
        validate_job_name(job_name)
        fs = file_system or LocalFileSystem()
        tracer = tracer or get_tracer(__name__)
        store = status_store or JsonStatusStore(fs, tracer)
        clock = clock or utc_now

        started = clock()
        run_id, run_dir = _claim_run_dir(environment, job_name, generate_run_id(started), fs)
        logger = cls(
            job_name,
            run_id,
            run_dir,
            environment,
            file_system=fs,
            status_store=store,
            tracer=tracer,
            clock=clock,
        )
        logger._persist(RunStatus(status=JobRunState.INITIALIZING, start_time=started))
        tracer.debug("job_run_started", job=job_name, run_id=run_id, path=str(run_dir))
        return logger

    def read_status(self) -> Optional[RunStatus]:
        return self._status_store.read_status(self.status_path)

    def report_status(self, status: str) -> None:
        record = self._read_or_default()
        record.status = status
        self._persist(record)

    def report_end_run(self) -> None:
        record = self._read_or_default()
        record.end_time = self._clock()
        self._persist(record, log_status=False)

    def log_error(self, message: str) -> None:
        try:
            record = self._read_or_default()
            record.status = JobRunState.FAILED
            self._persist(record)
        finally:
            # The message is kept even when the status update fails.
            self._log(LogLevel.ERR, message, is_system=True)

    def log_warning(self, message: str) -> None:
        self._log(LogLevel.WARN, message, is_system=True)

    def log_information(self, message: str) -> None:
        self._log(LogLevel.INFO, message, is_system=True)

    def log_standard_output(self, message: str) -> bool:
        self._log(LogLevel.INFO, message)
        return True

    def log_standard_error(self, message: str) -> bool:
        self._log(LogLevel.ERR, message)
        return True

    def _read_or_default(self) -> RunStatus:
        if self._environment.strict_status:
            # Missing is fine; a present but unreadable record is not.
            if not self._file_system.exists(self.status_path):
                return RunStatus()
            return self._status_store.load_status(self.status_path)
        return self._status_store.read_status(self.status_path) or RunStatus()

    def _persist(self, record: RunStatus, *, log_status: bool = True) -> None:
        self._status_store.write_status(self.status_path, record)
        if log_status:
            self.log_information(f"Status changed to {record.status}")

    def _log(self, level: LogLevel, message: str, *, is_system: bool = False) -> bool:
        now = self._clock()
        if is_system:
            text = format_system_message(level, message, now, self._instance_id)
        else:
            text = format_plain_line(message, now)
        path = self.error_path if level is LogLevel.ERR else self.output_path
        return safe_append(self._file_system, path, text, self._tracer)


def _claim_run_dir(
    environment: JobsEnvironment,
    job_name: str,
    base_id: str,
    file_system: FileSystem,
) -> tuple[str, Path]:
    run_id = base_id
    suffix = 0
    while file_system.exists(run_dir_for(environment, job_name, run_id, file_system)):
        suffix += 1
        run_id = f"{base_id}_{suffix}"
    run_dir = run_dir_for(environment, job_name, run_id, file_system)
    try:
        file_system.ensure_directory(run_dir)
    except OSError as exc:
        raise wrap_error(
            RunDirectoryError,
            "Unable to create run directory",
            context={"job": job_name, "path": run_dir},
            cause=exc,
        ) from exc
    return run_id, run_dir
