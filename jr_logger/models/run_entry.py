"""Read-side metadata about a single job run."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import timedelta
from pathlib import Path
from typing import Optional

from jr_logger.models.status import RunStatus


@dataclass(frozen=True)
class RunEntry:
    """Lightweight view of a run directory and its status record."""

    job_name: str
    run_id: str
    run_dir: Path
    status: Optional[RunStatus]
    output_path: Optional[Path]
    error_path: Optional[Path]

    @property
    def state(self) -> str:
        if self.status is None or not self.status.status:
            return "Unknown"
        return self.status.status

    @property
    def duration(self) -> Optional[timedelta]:
        if self.status is None:
            return None
        if self.status.start_time is None or self.status.end_time is None:
            return None
        return self.status.end_time - self.status.start_time
