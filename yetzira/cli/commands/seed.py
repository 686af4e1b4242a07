"""``yetzira seed`` - load records into the SQLite record store.

Either the built-in demo project (``--demo``) or a JSON fixture with
``ships``, ``containers`` and ``units`` arrays.
"""

from __future__ import annotations

from pathlib import Path

import typer
from pydantic import ValidationError
from rich.console import Console

from yetzira.config import config
from yetzira.core.record_store import RecordStoreError, SqliteRecordStore
from yetzira.demo import DEMO_FIXTURE, RecordFixture

console = Console()


def seed_cmd(
    fixture: Path = typer.Argument(
        None,
        exists=True,
        dir_okay=False,
        help="JSON file with ships, containers and units arrays.",
    ),
    demo: bool = typer.Option(
        False,
        "--demo",
        help="Load the built-in demo project instead of a file.",
    ),
    replace: bool = typer.Option(
        False,
        "--replace",
        help="Delete all existing records first.",
    ),
    store: Path = typer.Option(
        None,
        "--store",
        "-s",
        help="Path to the record store SQLite database (defaults to YETZIRA_STORE_PATH).",
    ),
) -> None:
    """Seed the record store from a fixture file or the demo project."""
    if fixture is None and not demo:
        console.print("[bold red]Give a fixture file or --demo.[/bold red]")
        raise typer.Exit(code=1)

    if demo:
        records = DEMO_FIXTURE
    else:
        try:
            records = RecordFixture.from_file(fixture)
        except ValidationError as exc:
            console.print(f"[bold red]Invalid fixture:[/bold red] {exc}")
            raise typer.Exit(code=1)

    db_path = Path(store or config.store_path)
    try:
        record_store = SqliteRecordStore(db_path)
        if replace:
            record_store.clear()
        n_ships = record_store.add_ships(records.ships)
        n_containers = record_store.add_containers(records.containers)
        n_units = record_store.add_units(records.units)
    except RecordStoreError as exc:
        console.print(f"[bold red]Store error:[/bold red] {exc}")
        raise typer.Exit(code=1)

    console.print(
        f"[bold green]Seeded[/bold green] {db_path}: "
        f"{n_ships} ship(s), {n_containers} container(s), {n_units} unit(s)"
    )
