"""``yetzira overview|logistics|production|grid`` - one dashboard tab each.

Every command loads one snapshot from the record store, derives the view,
and prints the matching panel.  A failed load prints the error and exits
with code 1; nothing partial is shown.
"""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import typer
from rich.console import Console
from rich.panel import Panel

from yetzira.config import config
from yetzira.core.loader import SnapshotLoadError
from yetzira.core.record_store import SqliteRecordStore
from yetzira.monitor.projection import DashboardProjection, DashboardView
from yetzira.monitor.renderer import DashboardRenderer

console = Console()

StoreOption = typer.Option(
    None,
    "--store",
    "-s",
    help="Path to the record store SQLite database (defaults to YETZIRA_STORE_PATH).",
)


def load_view(store_path: Path | None, renderer: DashboardRenderer) -> DashboardView:
    """Load a view from the store, exiting with code 1 on any failure."""
    db_path = Path(store_path or config.store_path)
    if not db_path.exists():
        console.print(f"[bold red]Record store not found:[/bold red] {db_path}")
        console.print("[dim]Create one first with: yetzira seed --demo[/dim]")
        raise typer.Exit(code=1)

    projection = DashboardProjection(
        SqliteRecordStore(db_path), config.floors, config.facades
    )
    try:
        return projection.view()
    except SnapshotLoadError as exc:
        renderer.print_load_failure(exc)
        raise typer.Exit(code=1)


def _show(store_path: Path | None, pick: Callable[[DashboardRenderer, DashboardView], Panel]) -> None:
    renderer = DashboardRenderer(console=console)
    view = load_view(store_path, renderer)
    console.print(pick(renderer, view))


def overview_cmd(store: Path = StoreOption) -> None:
    """Overall progress, completed and remaining units."""
    _show(store, DashboardRenderer.render_overview)


def logistics_cmd(store: Path = StoreOption) -> None:
    """Containers, their ships and logistics status."""
    _show(store, DashboardRenderer.render_logistics)


def production_cmd(store: Path = StoreOption) -> None:
    """Unit records with status and progress."""
    _show(store, DashboardRenderer.render_production)


def grid_cmd(store: Path = StoreOption) -> None:
    """The floor x facade project map."""
    _show(store, DashboardRenderer.render_grid)


def validate_cmd(store: Path = StoreOption) -> None:
    """Check the snapshot for duplicate ids, duplicate positions and
    unknown labels.  Exits with code 2 when any warning is found."""
    renderer = DashboardRenderer(console=console)
    view = load_view(store, renderer)
    renderer.print_warnings(view.warnings)
    if view.warnings:
        raise typer.Exit(code=2)
