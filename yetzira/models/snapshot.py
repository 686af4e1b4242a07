"""ProjectSnapshot - the immutable set of records fetched at one point in time."""

from __future__ import annotations

from datetime import datetime, timezone

from pydantic import BaseModel, ConfigDict, Field

from yetzira.models.records import Container, Ship, Unit


class ProjectSnapshot(BaseModel):
    """Ships, containers and units as returned by one combined fetch.

    Passed explicitly into every computation; nothing derived from it is
    stored back on it.
    """

    model_config = ConfigDict(frozen=True)

    ships: list[Ship] = []
    containers: list[Container] = []
    units: list[Unit] = []
    fetched_at: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc)
    )
