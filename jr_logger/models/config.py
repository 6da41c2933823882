"""Jobs environment configuration (data root, instance id, status policy)."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Any, Dict, Optional

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from jr_common.config.env import parse_bool_env, parse_str_env
from jr_common.errors import ConfigurationError

logger = logging.getLogger(__name__)

ENV_DATA_PATH = "JR_JOBS_DATA_PATH"
ENV_INSTANCE_ID = "JR_INSTANCE_ID"
ENV_STRICT_STATUS = "JR_STRICT_STATUS"
ENV_CONFIG = "JR_CONFIG"


class JobsEnvironment(BaseModel):
    """Where job data lives and how run loggers should behave."""

    jobs_data_path: Path = Field(description="Root directory holding job history")
    instance_id: Optional[str] = Field(
        default=None,
        description="Short instance identifier used in system log lines",
    )
    strict_status: bool = Field(
        default=False,
        description="Treat a corrupt status file as fatal instead of starting fresh",
    )

    model_config = ConfigDict(extra="ignore")

    @field_validator("jobs_data_path")
    @classmethod
    def _expand_path(cls, value: Path) -> Path:
        return value.expanduser()

    @field_validator("instance_id")
    @classmethod
    def _blank_instance_id(cls, value: Optional[str]) -> Optional[str]:
        if value is None or not value.strip():
            return None
        return value.strip()


def _read_config_file(path: Path) -> Dict[str, Any]:
    try:
        loaded = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    except (OSError, yaml.YAMLError) as exc:
        raise ConfigurationError(
            "Unable to read jobs configuration",
            context={"path": path},
            cause=exc,
        ) from exc
    if not isinstance(loaded, dict):
        raise ConfigurationError(
            "Jobs configuration must be a mapping",
            context={"path": path, "type": type(loaded).__name__},
        )
    section = loaded.get("jobs", loaded)
    if not isinstance(section, dict):
        raise ConfigurationError(
            "'jobs' section must be a mapping", context={"path": path}
        )
    return dict(section)


def _read_env_overrides() -> Dict[str, Any]:
    overrides: Dict[str, Any] = {}
    data_path = parse_str_env(os.environ.get(ENV_DATA_PATH))
    if data_path:
        overrides["jobs_data_path"] = data_path
    instance_id = parse_str_env(os.environ.get(ENV_INSTANCE_ID))
    if instance_id:
        overrides["instance_id"] = instance_id
    strict = parse_bool_env(os.environ.get(ENV_STRICT_STATUS))
    if strict is not None:
        overrides["strict_status"] = strict
    return overrides


def load_environment(
    config_path: Path | str | None = None,
    *,
    data_path: Path | str | None = None,
) -> JobsEnvironment:
    """Build a JobsEnvironment.

    Priority: explicit ``data_path`` > environment variables > config file.
    The config file defaults to ``$JR_CONFIG`` when no path is given.
    """
    values: Dict[str, Any] = {}
    resolved_config = config_path or parse_str_env(os.environ.get(ENV_CONFIG))
    if resolved_config:
        cfg_path = Path(resolved_config).expanduser()
        values.update(_read_config_file(cfg_path))
        logger.debug("Loaded jobs configuration from %s", cfg_path)
    values.update(_read_env_overrides())
    if data_path is not None:
        values["jobs_data_path"] = data_path

    if not values.get("jobs_data_path"):
        raise ConfigurationError(
            f"No jobs data path configured; pass one explicitly or set {ENV_DATA_PATH}"
        )
    try:
        return JobsEnvironment.model_validate(values)
    except ValidationError as exc:
        raise ConfigurationError(
            "Invalid jobs configuration",
            context={"errors": [err.get("msg") for err in exc.errors()]},
            cause=exc,
        ) from exc
