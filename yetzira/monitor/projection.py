"""DashboardProjection - pure read-only view over the record store.

The projection never keeps state between calls.  Every ``view()`` fetches a
fresh snapshot and recomputes everything from it; ``build_view`` is the pure
function behind that and can be called directly on a snapshot.
"""

from __future__ import annotations

from collections.abc import Sequence
from datetime import datetime, timezone

from pydantic import BaseModel, ConfigDict, Field

from yetzira.core.aggregation import ProjectMetrics, compute_metrics
from yetzira.core.classifier import classify, count_by_label, grid_tone
from yetzira.core.grid import ProjectGrid, build_grid
from yetzira.core.loader import load_snapshot
from yetzira.core.record_store import RecordStore
from yetzira.core.validation import validate_snapshot
from yetzira.models.records import Container, Ship, Unit
from yetzira.models.snapshot import ProjectSnapshot
from yetzira.models.status import StatusCategory, StatusLabel


class ClassifiedContainer(BaseModel):
    """A container paired with its display category."""

    model_config = ConfigDict(frozen=True)

    container: Container
    category: StatusCategory


class ClassifiedUnit(BaseModel):
    """A unit paired with its display category and grid tone."""

    model_config = ConfigDict(frozen=True)

    unit: Unit
    category: StatusCategory
    tone: StatusCategory


class DashboardView(BaseModel):
    """Everything the presentation layer needs, computed from one snapshot.

    Never persisted.  Rebuilt on every ``DashboardProjection.view()`` call.
    """

    model_config = ConfigDict(frozen=True)

    metrics: ProjectMetrics = ProjectMetrics()
    grid: ProjectGrid = ProjectGrid()
    ships: list[Ship] = []
    containers: list[ClassifiedContainer] = []
    units: list[ClassifiedUnit] = []
    container_counts: dict[StatusLabel, int] = {}
    warnings: list[str] = []
    last_updated: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc)
    )

    @property
    def ships_en_route(self) -> int:
        """Number of ships shown on the map."""
        return len(self.ships)

    @property
    def healthy(self) -> bool:
        return not self.warnings


def build_view(
    snapshot: ProjectSnapshot,
    floors: Sequence[int] | None = None,
    facades: Sequence[str] | None = None,
) -> DashboardView:
    """Derive a DashboardView from a snapshot.  Pure."""
    return DashboardView(
        metrics=compute_metrics(snapshot.units),
        grid=build_grid(snapshot.units, floors, facades),
        ships=list(snapshot.ships),
        containers=[
            ClassifiedContainer(container=c, category=classify(c.status))
            for c in snapshot.containers
        ],
        units=[
            ClassifiedUnit(unit=u, category=classify(u.status), tone=grid_tone(u.status))
            for u in snapshot.units
        ],
        container_counts=count_by_label(snapshot.containers),
        warnings=validate_snapshot(snapshot),
        last_updated=snapshot.fetched_at,
    )


class DashboardProjection:
    """Pure read-only projection over a RecordStore.

    Parameters
    ----------
    store:
        The record store to project from.
    floors:
        Grid row axis.  Defaults to ``config.floors``.
    facades:
        Grid column axis.  Defaults to ``config.facades``.
    """

    def __init__(
        self,
        store: RecordStore,
        floors: Sequence[int] | None = None,
        facades: Sequence[str] | None = None,
    ) -> None:
        self._store = store
        self._floors = list(floors) if floors is not None else None
        self._facades = list(facades) if facades is not None else None

    def snapshot(self) -> ProjectSnapshot:
        """Fetch a fresh snapshot.  Raises ``SnapshotLoadError`` on failure."""
        return load_snapshot(self._store)

    def view(self) -> DashboardView:
        """Fetch a fresh snapshot and derive the dashboard view from it."""
        return build_view(self.snapshot(), self._floors, self._facades)
