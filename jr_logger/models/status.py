"""Status record persisted once per job run."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_serializer, field_validator


class JobRunState:
    INITIALIZING = "Initializing"
    RUNNING = "Running"
    FAILED = "Failed"
    SUCCESS = "Success"


def _as_utc(value: datetime) -> datetime:
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


class RunStatus(BaseModel):
    """Lifecycle status of a single triggered job run.

    The status text is open ended: the well-known values live on
    ``JobRunState`` but callers may report anything. Timestamps are always
    normalized to UTC; naive datetimes are assumed to already be UTC.
    """

    status: str = Field(default="", description="Current status text")
    start_time: Optional[datetime] = Field(default=None, alias="startTime")
    end_time: Optional[datetime] = Field(default=None, alias="endTime")

    model_config = ConfigDict(populate_by_name=True, extra="ignore", validate_assignment=True)

    @field_validator("start_time", "end_time")
    @classmethod
    def _normalize_utc(cls, value: Optional[datetime]) -> Optional[datetime]:
        if value is None:
            return None
        return _as_utc(value)

    @field_serializer("start_time", "end_time")
    def _serialize_utc(self, value: Optional[datetime]) -> Optional[str]:
        if value is None:
            return None
        return value.isoformat().replace("+00:00", "Z")

    def to_json(self) -> str:
        """Serialize with the on-disk key names (``startTime``/``endTime``)."""
        return self.model_dump_json(by_alias=True, indent=2)

    @classmethod
    def from_json(cls, raw: str | bytes) -> "RunStatus":
        return cls.model_validate_json(raw)
