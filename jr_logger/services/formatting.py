"""Line formatting and the failure-isolated append primitive."""

from __future__ import annotations

import hashlib
import socket
from datetime import datetime, timezone
from enum import Enum
from typing import Any

from jr_logger.services.filesystem import FileSystem, PathLike


class LogLevel(str, Enum):
    ERR = "ERR"
    WARN = "WARN"
    INFO = "INFO"


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def format_timestamp(moment: datetime) -> str:
    """Render ``moment`` as ISO-8601 UTC at second precision, e.g. 2024-01-02T03:04:05Z."""
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=timezone.utc)
    return moment.astimezone(timezone.utc).strftime("%Y-%m-%dT%H:%M:%SZ")


def format_plain_line(message: str, moment: datetime) -> str:
    return f"[{format_timestamp(moment)}] {message}\r\n"


def format_system_message(
    level: LogLevel, message: str, moment: datetime, instance_id: str
) -> str:
    """Format a line emitted by the logger itself rather than the job process."""
    return f"[{format_timestamp(moment)} > {instance_id}: SYS {level.value}] {message}\r\n"


def short_instance_id(host: str | None = None) -> str:
    """Return a stable 6-character id derived from the host name."""
    name = host or socket.gethostname()
    return hashlib.sha256(name.encode("utf-8")).hexdigest()[:6]


def safe_append(file_system: FileSystem, path: PathLike, text: str, tracer: Any) -> bool:
    """Append ``text`` to ``path``; never raises.

    Returns False when the write failed. The failure is reported to
    ``tracer`` as a ``log_append_failed`` event.
    """
    try:
        file_system.append_line(path, text)
    except Exception as exc:  # noqa: BLE001
        try:
            tracer.warning("log_append_failed", path=str(path), error=str(exc))
        except Exception:  # noqa: BLE001
            pass
        return False
    return True
