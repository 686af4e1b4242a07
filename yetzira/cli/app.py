"""Main Typer application - imports and registers all CLI commands.

Entry point: ``yetzira`` (configured via pyproject.toml scripts).
"""

from __future__ import annotations

import logging
import os
import subprocess
import sys
from pathlib import Path

import typer
from rich.logging import RichHandler

from yetzira.cli.commands.seed import seed_cmd
from yetzira.cli.commands.show import (
    grid_cmd,
    logistics_cmd,
    overview_cmd,
    production_cmd,
    validate_cmd,
)
from yetzira.config import config

app = typer.Typer(
    name="yetzira",
    help="Yetzira Towers: production and shipping status dashboard.",
    no_args_is_help=True,
    rich_markup_mode="rich",
    add_completion=False,
)


@app.callback()
def main_callback(
    log_level: str = typer.Option(
        None,
        "--log-level",
        help="Logging level (defaults to YETZIRA_LOG_LEVEL).",
    ),
) -> None:
    """Configure logging once for every subcommand."""
    logging.basicConfig(
        level=(log_level or config.log_level).upper(),
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(rich_tracebacks=config.debug, show_path=False)],
    )


# Register subcommands
app.command(name="overview", help="Show overall project progress.")(overview_cmd)
app.command(name="logistics", help="Show containers and shipments.")(logistics_cmd)
app.command(name="production", help="Show unit production status.")(production_cmd)
app.command(name="grid", help="Show the floor x facade project map.")(grid_cmd)
app.command(name="validate", help="Check project data for inconsistencies.")(validate_cmd)
app.command(name="seed", help="Load records into the record store.")(seed_cmd)


@app.command(name="ui", help="Launch the Streamlit dashboard.")
def ui_cmd(
    store: Path = typer.Option(
        None, "--store", "-s", help="Path to the record store database."
    ),
    port: int = typer.Option(None, "--port", help="Port to serve on."),
) -> None:
    """Launch the Yetzira dashboard (requires the ``dashboard`` extra)."""
    from yetzira.dashboard import app as dashboard_app

    if not dashboard_app.HAS_STREAMLIT:
        dashboard_app.create_dashboard()
        raise typer.Exit(code=1)

    env = dict(os.environ)
    if store is not None:
        env["YETZIRA_STORE_PATH"] = str(store)
    cmd = [
        sys.executable,
        "-m",
        "streamlit",
        "run",
        dashboard_app.__file__,
        "--server.address",
        config.host,
        "--server.port",
        str(port or config.port),
    ]
    raise typer.Exit(code=subprocess.call(cmd, env=env))


def main() -> None:
    """CLI entry point."""
    app()


if __name__ == "__main__":
    main()
