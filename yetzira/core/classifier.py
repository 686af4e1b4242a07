"""Status Classifier - maps raw status labels to display categories.

Total over its input: every label, including ``None`` and garbage, maps to
exactly one ``StatusCategory``.  Unrecognised labels land on NEUTRAL, which
no real label uses.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Protocol

from yetzira.models.status import StatusCategory, StatusLabel

# Every StatusLabel member must appear here.
_CATEGORY_BY_LABEL: dict[StatusLabel, StatusCategory] = {
    StatusLabel.WAITING: StatusCategory.DANGER,
    StatusLabel.CUSTOMS: StatusCategory.WARNING,
    StatusLabel.READY_CUT: StatusCategory.INFO,
    StatusLabel.PRODUCTION: StatusCategory.IN_PROGRESS,
    StatusLabel.COMPLETE: StatusCategory.SUCCESS,
    StatusLabel.IN_TRANSIT: StatusCategory.INFO,
    StatusLabel.IN_CUSTOMS: StatusCategory.WARNING,
    StatusLabel.IN_WAREHOUSE: StatusCategory.SUCCESS,
    StatusLabel.UNKNOWN: StatusCategory.NEUTRAL,
}


class _HasStatus(Protocol):
    status: str


def classify(status: str | StatusLabel | None) -> StatusCategory:
    """Return the display category for a raw status label."""
    return _CATEGORY_BY_LABEL[StatusLabel.parse(status)]


def grid_tone(status: str | StatusLabel | None) -> StatusCategory:
    """Coarse three-tone colouring used by project-grid cells.

    Only ``complete`` and ``production`` get their own tone; every other
    label, ready-cut included, is shown as needing attention.
    """
    label = StatusLabel.parse(status)
    if label is StatusLabel.COMPLETE:
        return StatusCategory.SUCCESS
    if label is StatusLabel.PRODUCTION:
        return StatusCategory.IN_PROGRESS
    return StatusCategory.DANGER


def count_by_label(records: Iterable[_HasStatus]) -> dict[StatusLabel, int]:
    """Count records per parsed label (record counts, not quantities)."""
    counts: dict[StatusLabel, int] = {}
    for record in records:
        label = StatusLabel.parse(record.status)
        counts[label] = counts.get(label, 0) + 1
    return counts
