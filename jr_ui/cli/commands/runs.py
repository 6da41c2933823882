from __future__ import annotations

from typing import NoReturn

import typer
from rich.markup import escape

from jr_common.api import ConfigurationError, JobRunError
from jr_logger.api import RunEntry
from jr_ui.presenters.runs import build_run_details_table, build_runs_table
from jr_ui.wiring.dependencies import UIContext


def _fail(ctx: UIContext, message: str) -> NoReturn:
    ctx.console.print(f"[red]Error:[/red] {escape(message)}")
    raise typer.Exit(1)


def _resolve_entry(ctx: UIContext, job: str, run_id: str) -> RunEntry:
    try:
        entry = (
            ctx.catalog.latest_run(job)
            if run_id == "latest"
            else ctx.catalog.get_run(job, run_id)
        )
    except JobRunError as exc:
        _fail(ctx, str(exc))
    if entry is None:
        _fail(ctx, f"Run '{run_id}' of job '{job}' not found")
    return entry


def create_runs_app(ctx: UIContext) -> typer.Typer:
    """Build the runs Typer app (jobs/list/show/logs)."""
    app = typer.Typer(help="Inspect triggered job run history.", no_args_is_help=True)

    @app.command("jobs")
    def runs_jobs() -> None:
        """List jobs that have recorded runs."""
        try:
            jobs = ctx.catalog.list_jobs()
        except ConfigurationError as exc:
            _fail(ctx, str(exc))
        if not jobs:
            ctx.console.print(
                f"No jobs found under {ctx.environment.jobs_data_path}", markup=False
            )
            return
        for job in jobs:
            ctx.console.print(job, markup=False)

    @app.command("list")
    def runs_list(
        job: str = typer.Argument(..., help="Job name."),
    ) -> None:
        """List runs of a job, newest first."""
        try:
            entries = ctx.catalog.list_runs(job)
        except JobRunError as exc:
            _fail(ctx, str(exc))
        if not entries:
            ctx.console.print(f"No runs found for job '{job}'", markup=False)
            return
        ctx.console.print(build_runs_table(job, entries))

    @app.command("show")
    def runs_show(
        job: str = typer.Argument(..., help="Job name."),
        run_id: str = typer.Argument(
            "latest", help="Run identifier (folder name) or 'latest'."
        ),
    ) -> None:
        """Show details for a single run."""
        entry = _resolve_entry(ctx, job, run_id)
        ctx.console.print(build_run_details_table(entry))

    @app.command("logs")
    def runs_logs(
        job: str = typer.Argument(..., help="Job name."),
        run_id: str = typer.Argument(
            "latest", help="Run identifier (folder name) or 'latest'."
        ),
        errors: bool = typer.Option(
            False, "--errors", "-e", help="Print the error log instead of the output log."
        ),
    ) -> None:
        """Print the output (or error) log of a run."""
        entry = _resolve_entry(ctx, job, run_id)
        path = entry.error_path if errors else entry.output_path
        if path is None:
            return
        typer.echo(path.read_text(encoding="utf-8"), nl=False)

    return app
