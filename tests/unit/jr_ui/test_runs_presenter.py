from datetime import datetime, timedelta, timezone
from pathlib import Path

import pytest
from rich.console import Console

from jr_logger.api import RunEntry, RunStatus
from jr_ui.presenters.runs import build_run_details_table, build_runs_table, format_duration


pytestmark = pytest.mark.unit_ui


def _render(table) -> str:
    console = Console(width=200, record=True)
    console.print(table)
    return console.export_text()


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        (None, "-"),
        (timedelta(seconds=5), "5s"),
        (timedelta(minutes=2, seconds=3), "2m03s"),
        (timedelta(hours=1, minutes=0, seconds=9), "1h00m09s"),
        (timedelta(seconds=-3), "0s"),
    ],
)
def test_format_duration(value, expected) -> None:
    assert format_duration(value) == expected


def test_runs_table_handles_missing_status() -> None:
    start = datetime(2024, 1, 2, 3, 4, 5, tzinfo=timezone.utc)
    entries = [
        RunEntry(
            job_name="job",
            run_id="20240102030405",
            run_dir=Path("/data/triggered/job/20240102030405"),
            status=RunStatus(status="[Success]", start_time=start, end_time=start + timedelta(seconds=61)),
            output_path=None,
            error_path=None,
        ),
        RunEntry(
            job_name="job",
            run_id="20240101000000",
            run_dir=Path("/data/triggered/job/20240101000000"),
            status=None,
            output_path=None,
            error_path=None,
        ),
    ]
    text = _render(build_runs_table("job", entries))
    assert "[Success]" in text
    assert "1m01s" in text
    assert "Unknown" in text


def test_details_table_lists_paths() -> None:
    entry = RunEntry(
        job_name="job",
        run_id="20240102030405",
        run_dir=Path("/data/triggered/job/20240102030405"),
        status=RunStatus(status="Running"),
        output_path=Path("/data/triggered/job/20240102030405/output.log"),
        error_path=None,
    )
    text = _render(build_run_details_table(entry))
    assert "output.log" in text
    assert "Running" in text
