"""Integration test: seed a SQLite store, load a snapshot, derive the view,
and render every tab."""

from __future__ import annotations

from pathlib import Path

from rich.console import Console

from yetzira.core.record_store import SqliteRecordStore
from yetzira.demo import DEMO_FIXTURE
from yetzira.models.records import Unit
from yetzira.models.status import StatusCategory, StatusLabel
from yetzira.monitor.projection import DashboardProjection
from yetzira.monitor.renderer import DashboardRenderer


def _seed(path: Path) -> SqliteRecordStore:
    store = SqliteRecordStore(path)
    store.add_ships(DEMO_FIXTURE.ships)
    store.add_containers(DEMO_FIXTURE.containers)
    store.add_units(DEMO_FIXTURE.units)
    return store


class TestFullDashboard:
    def test_demo_project_end_to_end(self, tmp_path: Path, floors, facades):
        store = _seed(tmp_path / "records.db")
        view = DashboardProjection(store, floors, facades).view()

        m = view.metrics
        assert (m.total_units, m.completed_units, m.overall_progress) == (55, 19, 35)
        assert m.in_production_units == 22
        assert m.waiting_units == 8
        assert m.remaining_units == 36
        assert view.ships_en_route == 2
        assert view.healthy

        assert view.grid.cell(3, "B").unit.id == "U-3B"
        assert view.grid.cell(5, "B").is_empty
        assert len(view.grid.occupied_cells) == 6

        assert view.container_counts[StatusLabel.IN_CUSTOMS] == 1
        assert {cc.category for cc in view.containers} == {
            StatusCategory.INFO,
            StatusCategory.WARNING,
            StatusCategory.SUCCESS,
        }

        console = Console(file=None, force_terminal=False, width=140)
        with console.capture() as capture:
            DashboardRenderer(console=console).print_view(view)
        output = capture.get()
        assert "35%" in output
        assert "ZIMU-2290114" in output

    def test_off_plan_unit_counts_but_is_not_placed(self, tmp_path: Path, floors, facades):
        store = _seed(tmp_path / "records.db")
        store.add_units([Unit(id="U-1A", floor=1, facade="A", qty=5, status="complete")])

        view = DashboardProjection(store, floors, facades).view()

        # Aggregates cover every unit; the grid only covers the plan.
        assert view.metrics.total_units == 60
        assert view.metrics.completed_units == 24
        assert [u.id for u in view.grid.unplaced] == ["U-1A"]
        assert all(c.unit.id != "U-1A" for c in view.grid.occupied_cells)
