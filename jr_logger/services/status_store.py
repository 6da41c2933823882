"""JSON persistence for run status records."""

from __future__ import annotations

from typing import Any, Optional

from pydantic import ValidationError

from jr_common.errors import StatusReadError, StatusWriteError, error_to_payload, wrap_error
from jr_common.logging import get_tracer
from jr_logger.models.status import RunStatus
from jr_logger.services.filesystem import FileSystem, LocalFileSystem, PathLike


class JsonStatusStore:
    """Read and write ``RunStatus`` records as JSON files."""

    def __init__(
        self,
        file_system: FileSystem | None = None,
        tracer: Any | None = None,
    ) -> None:
        self._file_system = file_system or LocalFileSystem()
        self._tracer = tracer or get_tracer(__name__)

    def read_status(self, path: PathLike) -> Optional[RunStatus]:
        """Return the stored record, or None when it is missing or unusable."""
        if not self._file_system.exists(path):
            self._tracer.debug("status_file_missing", path=str(path))
            return None
        try:
            return self.load_status(path)
        except StatusReadError as exc:
            self._tracer.warning("status_file_unreadable", **error_to_payload(exc))
            return None

    def load_status(self, path: PathLike) -> RunStatus:
        """Return the stored record, raising StatusReadError on any failure."""
        try:
            raw = self._file_system.read_text(path)
        except (OSError, UnicodeDecodeError) as exc:
            raise wrap_error(
                StatusReadError,
                "Unable to read status file",
                context={"path": path, "reason": str(exc)},
                cause=exc,
            ) from exc
        try:
            return RunStatus.from_json(raw)
        except ValidationError as exc:
            raise wrap_error(
                StatusReadError,
                "Status file is corrupt",
                context={"path": path, "reason": str(exc)},
                cause=exc,
            ) from exc

    def write_status(self, path: PathLike, record: RunStatus) -> None:
        try:
            self._file_system.write_text(path, record.to_json())
        except OSError as exc:
            raise wrap_error(
                StatusWriteError,
                "Unable to write status file",
                context={"path": path, "status": record.status},
                cause=exc,
            ) from exc
