"""Soft-invariant checks over a snapshot.

None of these conditions stop the dashboard from rendering.  They come back
as warning strings, the same way the projection surfaces them.
"""

from __future__ import annotations

import logging
from collections.abc import Hashable, Iterable
from typing import Any

from yetzira.models.records import Unit
from yetzira.models.snapshot import ProjectSnapshot
from yetzira.models.status import StatusLabel

logger = logging.getLogger(__name__)


def _repeated(keys: Iterable[Hashable]) -> list[Any]:
    seen: set[Hashable] = set()
    repeated: list[Any] = []
    for key in keys:
        if key in seen and key not in repeated:
            repeated.append(key)
        seen.add(key)
    return repeated


def find_duplicate_ids(records: Iterable[Any]) -> list[str]:
    """Ids that occur more than once, in first-repeat order."""
    return _repeated(r.id for r in records)


def find_duplicate_positions(units: Iterable[Unit]) -> list[tuple[int, str]]:
    """(floor, facade) pairs held by more than one unit."""
    return _repeated(u.position for u in units)


def validate_snapshot(snapshot: ProjectSnapshot) -> list[str]:
    """Return warnings for every soft invariant the snapshot violates."""
    warnings: list[str] = []

    for cid in find_duplicate_ids(snapshot.containers):
        warnings.append(f"Duplicate container id: {cid}")

    for uid in find_duplicate_ids(snapshot.units):
        warnings.append(f"Duplicate unit id: {uid}")

    for floor, facade in find_duplicate_positions(snapshot.units):
        warnings.append(
            f"More than one unit at floor {floor} facade {facade}; "
            f"the grid shows the first"
        )

    for container in snapshot.containers:
        if container.status_label is StatusLabel.UNKNOWN:
            warnings.append(
                f"Container {container.id} has unknown status {container.status!r}"
            )
    for unit in snapshot.units:
        if unit.status_label is StatusLabel.UNKNOWN:
            warnings.append(f"Unit {unit.id} has unknown status {unit.status!r}")

    ship_names = {s.name for s in snapshot.ships if s.name}
    for container in snapshot.containers:
        if container.ship and container.ship not in ship_names:
            warnings.append(
                f"Container {container.id} refers to unknown ship {container.ship!r}"
            )

    for warning in warnings:
        logger.warning(warning)
    return warnings
