"""Tests for run history discovery."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone
from pathlib import Path

import pytest

from jr_logger.run_logger import RunLogger
from jr_logger.services.run_catalog_service import RunCatalogService


pytestmark = pytest.mark.unit_logger


def _clock_at(moment: datetime):
    return lambda: moment


def _seed_runs(env) -> list[RunLogger]:
    base = datetime(2024, 1, 2, 3, 4, 5, tzinfo=timezone.utc)
    first = RunLogger.start_new_run("backup", env, clock=_clock_at(base))
    first.report_status("Success")
    second = RunLogger.start_new_run("backup", env, clock=_clock_at(base + timedelta(hours=1)))
    second.report_status("Running")
    RunLogger.start_new_run("reindex", env, clock=_clock_at(base))
    return [first, second]


def test_list_jobs_sorted(jobs_env) -> None:
    _seed_runs(jobs_env)
    assert RunCatalogService(jobs_env).list_jobs() == ["backup", "reindex"]


def test_list_jobs_empty_when_no_history(jobs_env) -> None:
    assert RunCatalogService(jobs_env).list_jobs() == []
    assert RunCatalogService(jobs_env).list_runs("backup") == []


def test_list_runs_newest_first(jobs_env) -> None:
    _seed_runs(jobs_env)
    runs = RunCatalogService(jobs_env).list_runs("backup")
    assert [r.run_id for r in runs] == ["20240102040405", "20240102030405"]
    assert [r.state for r in runs] == ["Running", "Success"]
    assert runs[0].output_path is not None
    assert runs[0].error_path is None


def test_get_run_and_duration(jobs_env) -> None:
    base = datetime(2024, 1, 2, 3, 4, 5, tzinfo=timezone.utc)
    ticks = iter([base, base, base + timedelta(seconds=90)])
    logger = RunLogger.start_new_run("backup", jobs_env, clock=lambda: next(ticks))
    logger.report_end_run()

    entry = RunCatalogService(jobs_env).get_run("backup", logger.run_id)
    assert entry is not None
    assert entry.run_dir == logger.run_dir
    assert entry.duration == timedelta(seconds=90)


def test_get_run_missing_or_unsafe(jobs_env) -> None:
    _seed_runs(jobs_env)
    catalog = RunCatalogService(jobs_env)
    assert catalog.get_run("backup", "19990101000000") is None
    assert catalog.get_run("backup", "../reindex") is None
    assert catalog.get_run("backup", "..") is None
    assert catalog.get_run("backup", ".") is None


def test_latest_run(jobs_env) -> None:
    _, second = _seed_runs(jobs_env)
    latest = RunCatalogService(jobs_env).latest_run("backup")
    assert latest.run_id == second.run_id
    assert RunCatalogService(jobs_env).latest_run("unknown") is None


def test_corrupt_status_is_reported_as_unknown(jobs_env) -> None:
    first, _ = _seed_runs(jobs_env)
    Path(first.status_path).write_text("{", encoding="utf-8")
    entry = RunCatalogService(jobs_env).get_run("backup", first.run_id)
    assert entry.status is None
    assert entry.state == "Unknown"
    assert entry.duration is None


def test_list_runs_tolerates_undecodable_status(jobs_env) -> None:
    first, second = _seed_runs(jobs_env)
    Path(first.status_path).write_bytes(b"\xff\xfe\x00\x01")
    runs = RunCatalogService(jobs_env).list_runs("backup")
    assert [r.run_id for r in runs] == [second.run_id, first.run_id]
    assert runs[1].state == "Unknown"


def test_list_runs_orders_same_second_suffixes_numerically(jobs_env) -> None:
    moment = datetime(2024, 1, 2, 3, 4, 5, tzinfo=timezone.utc)
    loggers = [
        RunLogger.start_new_run("backup", jobs_env, clock=_clock_at(moment))
        for _ in range(12)
    ]
    assert loggers[-1].run_id == "20240102030405_11"

    runs = RunCatalogService(jobs_env).list_runs("backup")
    assert [r.run_id for r in runs][:4] == [
        "20240102030405_11",
        "20240102030405_10",
        "20240102030405_9",
        "20240102030405_8",
    ]
    assert runs[-1].run_id == "20240102030405"
    assert RunCatalogService(jobs_env).latest_run("backup").run_id == "20240102030405_11"
