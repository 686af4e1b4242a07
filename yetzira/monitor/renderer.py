"""Rich terminal renderer for the Yetzira project dashboard.

Turns ``DashboardView`` into Rich renderables, one per dashboard tab:
overview, logistics, production and the floor x facade project grid.

Color scheme
------------
- red       : danger (waiting for materials)
- yellow    : warning (customs)
- blue      : info (ready to cut, in transit)
- dark orange : in-progress (production)
- green     : success (complete, in warehouse)
- dim       : neutral (unrecognised status)
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from rich.console import Console, Group
from rich.panel import Panel
from rich.progress_bar import ProgressBar
from rich.table import Table
from rich.text import Text

from yetzira.core.classifier import grid_tone
from yetzira.models.status import StatusCategory

if TYPE_CHECKING:
    from yetzira.core.grid import ProjectGrid
    from yetzira.monitor.projection import DashboardView


# ---------------------------------------------------------------------------
# Category -> Rich style mapping
# ---------------------------------------------------------------------------

_CATEGORY_STYLES: dict[StatusCategory, str] = {
    StatusCategory.DANGER: "bold red",
    StatusCategory.WARNING: "bold yellow",
    StatusCategory.INFO: "bold blue",
    StatusCategory.IN_PROGRESS: "bold dark_orange",
    StatusCategory.SUCCESS: "bold green",
    StatusCategory.NEUTRAL: "dim",
}

_EMPTY_CELL = "[dim]-[/dim]"


def _badge(status: str, category: StatusCategory) -> str:
    style = _CATEGORY_STYLES.get(category, "")
    return f"[{style}]{status or '?'}[/{style}]"


class DashboardRenderer:
    """Renders ``DashboardView`` as Rich terminal output.

    Parameters
    ----------
    console:
        Rich Console instance.  A new one is created if not provided.
    """

    def __init__(self, console: Console | None = None) -> None:
        self.console = console or Console()

    # ------------------------------------------------------------------
    # Overview
    # ------------------------------------------------------------------

    def render_overview(self, view: DashboardView) -> Panel:
        """Progress card plus the remaining-work summary."""
        m = view.metrics

        cards = Table.grid(expand=True, padding=(0, 2))
        for _ in range(4):
            cards.add_column(justify="center")
        cards.add_row(
            "[bold]Overall progress[/bold]",
            "[bold]Completed[/bold]",
            "[bold]In production[/bold]",
            "[bold]Ships en route[/bold]",
        )
        cards.add_row(
            f"[bold blue]{m.overall_progress}%[/bold blue]",
            f"[bold green]{m.completed_units}[/bold green] [dim]of {m.total_units} units[/dim]",
            f"[bold dark_orange]{m.in_production_units}[/bold dark_orange] [dim]units[/dim]",
            f"[bold blue]{view.ships_en_route}[/bold blue]",
        )

        remaining = Table(show_header=False, box=None, expand=True)
        remaining.add_column("Item")
        remaining.add_column("Units", justify="right")
        remaining.add_row("Units remaining", f"[bold]{m.remaining_units}[/bold]")
        remaining.add_row(
            "Waiting for materials", f"[bold red]{m.waiting_units} units[/bold red]"
        )

        parts = [
            cards,
            ProgressBar(total=100, completed=m.overall_progress),
            Text(""),
            Text.from_markup("[bold]Left until project completion[/bold]"),
            remaining,
        ]
        if view.warnings:
            parts.append(Text(""))
            parts.append(
                Text.from_markup(
                    f"[yellow][bold]Data warnings:[/bold] {len(view.warnings)}[/yellow]"
                )
            )

        return Panel(
            Group(*parts),
            title="[bold]Yetzira Towers - Overview[/bold]",
            subtitle=f"Last updated: {view.last_updated.strftime('%Y-%m-%d %H:%M:%S UTC')}",
            border_style="blue",
            padding=(1, 2),
        )

    # ------------------------------------------------------------------
    # Logistics
    # ------------------------------------------------------------------

    def render_logistics(self, view: DashboardView) -> Panel:
        """Containers with their ship and classified status."""
        table = Table(show_header=True, header_style="bold cyan", expand=True)
        table.add_column("Container", no_wrap=True)
        table.add_column("Ship", min_width=12)
        table.add_column("Status", justify="center", min_width=10)

        for cc in view.containers:
            table.add_row(
                cc.container.id,
                cc.container.ship or "[dim]-[/dim]",
                _badge(cc.container.status, cc.category),
            )

        if view.container_counts:
            summary = "  |  ".join(
                f"[bold]{label.value}:[/bold] {count}"
                for label, count in view.container_counts.items()
            )
        else:
            summary = "[dim]No containers.[/dim]"

        return Panel(
            Group(table, Text(""), Text.from_markup(summary)),
            title="[bold]Containers & Shipments[/bold]",
            border_style="blue",
            padding=(1, 2),
        )

    # ------------------------------------------------------------------
    # Production
    # ------------------------------------------------------------------

    def render_production(self, view: DashboardView) -> Panel:
        """Every unit record with status and its own progress bar."""
        table = Table(show_header=True, header_style="bold cyan", expand=True)
        table.add_column("Unit", no_wrap=True)
        table.add_column("Floor", justify="right", width=5)
        table.add_column("Facade", justify="center", width=6)
        table.add_column("Qty", justify="right", width=5)
        table.add_column("Status", justify="center", min_width=10)
        table.add_column("Progress", min_width=12)

        for cu in view.units:
            unit = cu.unit
            qty = str(unit.qty) if unit.qty is not None else "[dim]-[/dim]"
            table.add_row(
                unit.id,
                str(unit.floor),
                unit.facade,
                qty,
                _badge(unit.status, cu.category),
                Group(
                    ProgressBar(total=100, completed=unit.progress, width=10),
                    Text(f"{unit.progress}%", style="dim"),
                ),
            )

        return Panel(
            table,
            title="[bold]Work Types & Readiness[/bold]",
            border_style="blue",
            padding=(1, 2),
        )

    # ------------------------------------------------------------------
    # Project grid
    # ------------------------------------------------------------------

    def render_grid(self, view: DashboardView) -> Panel:
        """Floors x facades, one unit (or a dash) per cell."""
        grid = view.grid
        table = self._build_grid_table(grid)

        parts: list = [table]
        if grid.unplaced:
            parts.append(Text(""))
            parts.append(
                Text.from_markup(
                    "[yellow][bold]Not on plan:[/bold] "
                    + ", ".join(
                        f"{u.id} (floor {u.floor}, facade {u.facade})"
                        for u in grid.unplaced
                    )
                    + "[/yellow]"
                )
            )
        if grid.shadowed:
            parts.append(
                Text.from_markup(
                    "[yellow][bold]Hidden duplicates:[/bold] "
                    + ", ".join(u.id for u in grid.shadowed)
                    + "[/yellow]"
                )
            )

        return Panel(
            Group(*parts),
            title="[bold]Project Map (floors x facades)[/bold]",
            border_style="blue",
            padding=(1, 2),
        )

    def _build_grid_table(self, grid: ProjectGrid) -> Table:
        table = Table(show_header=True, header_style="bold cyan", show_lines=True)
        table.add_column("Floor", justify="center", style="bold")
        for facade in grid.facades:
            table.add_column(f"Facade {facade}", justify="center", min_width=12)

        for row in grid.rows:
            cells: list[str] = []
            for cell in row.cells:
                if cell.unit is None:
                    cells.append(_EMPTY_CELL)
                    continue
                style = _CATEGORY_STYLES[grid_tone(cell.unit.status)]
                cells.append(
                    f"[{style}]{cell.unit.id}[/{style}]\n{cell.unit.quantity} units"
                )
            table.add_row(f"Floor {row.floor}", *cells)

        return table

    # ------------------------------------------------------------------
    # Standalone print
    # ------------------------------------------------------------------

    def print_view(self, view: DashboardView) -> None:
        """Print all four tabs, one after another."""
        for panel in (
            self.render_overview(view),
            self.render_logistics(view),
            self.render_production(view),
            self.render_grid(view),
        ):
            self.console.print(panel)

    def print_warnings(self, warnings: list[str]) -> None:
        if not warnings:
            self.console.print("[green]Snapshot is consistent.[/green]")
            return
        for warning in warnings:
            self.console.print(f"[yellow]-[/yellow] {warning}")

    def print_load_failure(self, exc: Exception) -> None:
        self.console.print(f"[bold red]Could not load project data:[/bold red] {exc}")
