"""Yetzira data models - all Pydantic v2, all frozen (immutable)."""

from yetzira.models.records import Container, Ship, Unit
from yetzira.models.snapshot import ProjectSnapshot
from yetzira.models.status import StatusCategory, StatusLabel

__all__ = [
    # records
    "Ship",
    "Container",
    "Unit",
    # snapshot
    "ProjectSnapshot",
    # status
    "StatusLabel",
    "StatusCategory",
]
