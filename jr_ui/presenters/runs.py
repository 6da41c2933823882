"""Presenters turning run catalog entries into rich tables."""

from __future__ import annotations

from datetime import datetime, timedelta
from typing import Iterable, Optional

from rich.table import Table
from rich.text import Text

from jr_logger.api import RunEntry

_MISSING = "-"


def _fmt_time(value: Optional[datetime]) -> str:
    if value is None:
        return _MISSING
    return value.strftime("%Y-%m-%d %H:%M:%S")


def format_duration(value: Optional[timedelta]) -> str:
    if value is None:
        return _MISSING
    total = max(0, int(value.total_seconds()))
    hours, remainder = divmod(total, 3600)
    minutes, seconds = divmod(remainder, 60)
    if hours:
        return f"{hours}h{minutes:02d}m{seconds:02d}s"
    if minutes:
        return f"{minutes}m{seconds:02d}s"
    return f"{seconds}s"


def build_runs_table(job_name: str, entries: Iterable[RunEntry]) -> Table:
    table = Table(title=f"Runs of {job_name}", show_header=True, header_style="bold magenta")
    table.add_column("Run ID", style="cyan", no_wrap=True)
    table.add_column("Status")
    table.add_column("Started (UTC)")
    table.add_column("Ended (UTC)")
    table.add_column("Duration", justify="right")
    for entry in entries:
        status = entry.status
        table.add_row(
            Text(entry.run_id),
            Text(entry.state),
            Text(_fmt_time(status.start_time if status else None)),
            Text(_fmt_time(status.end_time if status else None)),
            Text(format_duration(entry.duration)),
        )
    return table


def build_run_details_table(entry: RunEntry) -> Table:
    status = entry.status
    rows = [
        ("Job", entry.job_name),
        ("Run ID", entry.run_id),
        ("Status", entry.state),
        ("Started (UTC)", _fmt_time(status.start_time if status else None)),
        ("Ended (UTC)", _fmt_time(status.end_time if status else None)),
        ("Duration", format_duration(entry.duration)),
        ("Directory", str(entry.run_dir)),
        ("Output log", str(entry.output_path or _MISSING)),
        ("Error log", str(entry.error_path or _MISSING)),
    ]
    table = Table(title="Run Details", show_header=True, header_style="bold magenta")
    table.add_column("Field", style="cyan")
    table.add_column("Value")
    for field, value in rows:
        table.add_row(Text(field), Text(value))
    return table
