"""
Command-line interface for jobrun-logs.

Exposes read-only commands to inspect the history written by run loggers.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer

from jr_ui.cli.commands.runs import create_runs_app
from jr_ui.wiring.dependencies import UIContext, configure_logging

ctx_store = UIContext()

runs_app = create_runs_app(ctx_store)

app = typer.Typer(help="Inspect triggered job runs recorded on disk.", no_args_is_help=True)


@app.callback()
def entry(
    data_path: Optional[Path] = typer.Option(
        None,
        "--data-path",
        "-d",
        help="Jobs data root (overrides JR_JOBS_DATA_PATH and the config file).",
    ),
    config: Optional[Path] = typer.Option(
        None,
        "--config",
        "-c",
        help="YAML config file (defaults to $JR_CONFIG).",
    ),
    debug: bool = typer.Option(False, "--debug", help="Enable debug logging."),
) -> None:
    """Global options shared by every command."""
    configure_logging(debug=debug, force=True)
    ctx_store.reset(data_path=data_path, config_path=config)


app.add_typer(runs_app, name="runs")


def main() -> None:
    """Console script entrypoint (Typer app)."""
    app()


if __name__ == "__main__":
    main()
