"""Aggregation Engine - project-level metrics over the unit collection.

Every figure is a sum of ``qty`` (null read as 0), never a count of records.
All functions are pure: the same units in any order give the same result.
"""

from __future__ import annotations

from collections.abc import Iterable

from pydantic import BaseModel, ConfigDict

from yetzira.models.records import Unit
from yetzira.models.status import StatusLabel

# Statuses grouped as "actively being worked"
_ACTIVE_LABELS = frozenset({StatusLabel.PRODUCTION, StatusLabel.READY_CUT})


class ProjectMetrics(BaseModel):
    """Scalar project metrics handed to the presentation layer."""

    model_config = ConfigDict(frozen=True)

    total_units: int = 0
    completed_units: int = 0
    overall_progress: int = 0
    in_production_units: int = 0
    waiting_units: int = 0
    remaining_units: int = 0


def _sum_qty(units: Iterable[Unit], labels: frozenset[StatusLabel] | None = None) -> int:
    return sum(
        u.quantity
        for u in units
        if labels is None or u.status_label in labels
    )


def total_units(units: Iterable[Unit]) -> int:
    return _sum_qty(units)


def completed_units(units: Iterable[Unit]) -> int:
    return _sum_qty(units, frozenset({StatusLabel.COMPLETE}))


def in_production_units(units: Iterable[Unit]) -> int:
    """Units in ``production`` or ``ready-cut``."""
    return _sum_qty(units, _ACTIVE_LABELS)


def waiting_units(units: Iterable[Unit]) -> int:
    """Units blocked waiting for materials."""
    return _sum_qty(units, frozenset({StatusLabel.WAITING}))


def remaining_units(units: Iterable[Unit]) -> int:
    units = list(units)
    return total_units(units) - completed_units(units)


def progress_percent(completed: int, total: int) -> int:
    """Whole-number completion percentage, rounding halves up.

    Integer arithmetic, so 12.5% is always 13 and never subject to float
    error.  An empty project (``total == 0``) is 0%.
    """
    if total <= 0:
        return 0
    return (200 * completed + total) // (2 * total)


def overall_progress(units: Iterable[Unit]) -> int:
    units = list(units)
    return progress_percent(completed_units(units), total_units(units))


def compute_metrics(units: Iterable[Unit]) -> ProjectMetrics:
    """Compute every project metric in one pass over the collection."""
    total = completed = active = waiting = 0
    for unit in units:
        qty = unit.quantity
        label = unit.status_label
        total += qty
        if label is StatusLabel.COMPLETE:
            completed += qty
        elif label in _ACTIVE_LABELS:
            active += qty
        elif label is StatusLabel.WAITING:
            waiting += qty

    return ProjectMetrics(
        total_units=total,
        completed_units=completed,
        overall_progress=progress_percent(completed, total),
        in_production_units=active,
        waiting_units=waiting,
        remaining_units=total - completed,
    )
