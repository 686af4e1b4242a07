"""Grid Mapper - projects units onto the floor x facade planning matrix.

The axes are a fixed display plan taken from configuration, never inferred
from the data.  A unit outside the axes cannot be placed; rather than being
dropped silently it is reported on ``ProjectGrid.unplaced``.  When two units
claim the same cell the first one in collection order wins and the loser is
reported on ``ProjectGrid.shadowed``.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence

from pydantic import BaseModel, ConfigDict

from yetzira.models.records import Unit

logger = logging.getLogger(__name__)


class GridCell(BaseModel):
    """One (floor, facade) cell.  ``unit`` is None when the cell is unoccupied."""

    model_config = ConfigDict(frozen=True)

    floor: int
    facade: str
    unit: Unit | None = None

    @property
    def is_empty(self) -> bool:
        """True for an unoccupied cell (distinct from a unit with qty 0)."""
        return self.unit is None


class GridRow(BaseModel):
    """All cells of one floor, in facade order."""

    model_config = ConfigDict(frozen=True)

    floor: int
    cells: list[GridCell] = []


class ProjectGrid(BaseModel):
    """Row-major floor x facade grid."""

    model_config = ConfigDict(frozen=True)

    floors: list[int] = []
    facades: list[str] = []
    rows: list[GridRow] = []
    unplaced: list[Unit] = []  # outside the configured axes
    shadowed: list[Unit] = []  # lost a cell to an earlier unit

    def cell(self, floor: int, facade: str) -> GridCell:
        """Return the cell at (floor, facade).

        Raises
        ------
        KeyError
            If the coordinates are not on the grid's axes.
        """
        for row in self.rows:
            if row.floor != floor:
                continue
            for cell in row.cells:
                if cell.facade == facade:
                    return cell
        raise KeyError((floor, facade))

    @property
    def occupied_cells(self) -> list[GridCell]:
        return [c for row in self.rows for c in row.cells if not c.is_empty]


def build_grid(
    units: Iterable[Unit],
    floors: Sequence[int] | None = None,
    facades: Sequence[str] | None = None,
) -> ProjectGrid:
    """Place every unit on the grid by exact (floor, facade) match.

    Parameters
    ----------
    units:
        The unit collection, in store order.
    floors:
        Row axis in display order.  Defaults to ``config.floors``.
    facades:
        Column axis in display order.  Defaults to ``config.facades``.
    """
    if floors is None or facades is None:
        from yetzira.config import config

        floors = config.floors if floors is None else floors
        facades = config.facades if facades is None else facades

    floor_axis = list(floors)
    facade_axis = list(facades)
    on_axes = {(f, fc) for f in floor_axis for fc in facade_axis}

    placed: dict[tuple[int, str], Unit] = {}
    unplaced: list[Unit] = []
    shadowed: list[Unit] = []

    for unit in units:
        key = unit.position
        if key not in on_axes:
            unplaced.append(unit)
        elif key in placed:
            shadowed.append(unit)
        else:
            placed[key] = unit

    if unplaced:
        logger.warning(
            "%d unit(s) outside grid axes floors=%s facades=%s: %s",
            len(unplaced),
            floor_axis,
            facade_axis,
            ", ".join(u.id for u in unplaced),
        )
    for unit in shadowed:
        winner = placed[unit.position]
        logger.warning(
            "Unit %s shadowed by %s at floor %s facade %s.",
            unit.id,
            winner.id,
            unit.floor,
            unit.facade,
        )

    rows = [
        GridRow(
            floor=floor,
            cells=[
                GridCell(floor=floor, facade=facade, unit=placed.get((floor, facade)))
                for facade in facade_axis
            ],
        )
        for floor in floor_axis
    ]

    return ProjectGrid(
        floors=floor_axis,
        facades=facade_axis,
        rows=rows,
        unplaced=unplaced,
        shadowed=shadowed,
    )
