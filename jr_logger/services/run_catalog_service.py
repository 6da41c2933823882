"""Service for listing and inspecting triggered job runs.

Runs are stored under ``<jobs_data_path>/triggered/<job>/<run_id>/``.
This service gives the CLI a stable way to discover them. It never writes.
"""

from __future__ import annotations

from pathlib import Path
from typing import List, Optional

from jr_logger.models.config import JobsEnvironment
from jr_logger.models.run_entry import RunEntry
from jr_logger.paths import (
    ERROR_LOG,
    OUTPUT_LOG,
    STATUS_FILE,
    job_history_path,
    triggered_root,
    validate_job_name,
)
from jr_logger.services.filesystem import FileSystem, LocalFileSystem
from jr_logger.services.status_store import JsonStatusStore


def _run_sort_key(run_id: str) -> tuple[str, int, str]:
    # Same-second runs carry a numeric suffix: "<ts>_2" sorts before "<ts>_10".
    base, _, suffix = run_id.partition("_")
    return base, int(suffix) if suffix.isdigit() else 0, run_id


class RunCatalogService:
    """Discover job run directories and their status records."""

    def __init__(
        self,
        environment: JobsEnvironment,
        *,
        file_system: FileSystem | None = None,
        status_store: JsonStatusStore | None = None,
    ) -> None:
        self.environment = environment
        self._file_system = file_system or LocalFileSystem()
        self._status_store = status_store or JsonStatusStore(self._file_system)

    def list_jobs(self) -> List[str]:
        root = triggered_root(self.environment, self._file_system)
        return sorted(entry.name for entry in self._file_system.list_dirs(root))

    def list_runs(self, job_name: str) -> List[RunEntry]:
        """Return all runs of ``job_name``, newest first."""
        history = job_history_path(
            self.environment, validate_job_name(job_name), self._file_system
        )
        entries = [
            self._build_entry(job_name, run_dir.name, run_dir)
            for run_dir in self._file_system.list_dirs(history)
        ]
        entries.sort(key=lambda entry: _run_sort_key(entry.run_id), reverse=True)
        return entries

    def get_run(self, job_name: str, run_id: str) -> Optional[RunEntry]:
        history = job_history_path(
            self.environment, validate_job_name(job_name), self._file_system
        )
        if not run_id or run_id in (".", "..") or "/" in run_id or "\\" in run_id:
            return None
        run_dir = self._file_system.join_path(history, run_id)
        if not self._file_system.exists(run_dir):
            return None
        return self._build_entry(job_name, run_id, run_dir)

    def latest_run(self, job_name: str) -> Optional[RunEntry]:
        runs = self.list_runs(job_name)
        return runs[0] if runs else None

    def _build_entry(self, job_name: str, run_id: str, run_dir: Path) -> RunEntry:
        status_path = self._file_system.join_path(run_dir, STATUS_FILE)
        return RunEntry(
            job_name=job_name,
            run_id=run_id,
            run_dir=run_dir,
            status=self._status_store.read_status(status_path),
            output_path=self._existing_or_none(run_dir, OUTPUT_LOG),
            error_path=self._existing_or_none(run_dir, ERROR_LOG),
        )

    def _existing_or_none(self, run_dir: Path, name: str) -> Optional[Path]:
        path = self._file_system.join_path(run_dir, name)
        return path if self._file_system.exists(path) else None
