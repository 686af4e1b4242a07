"""Sample project data for ``yetzira seed --demo`` and local development."""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, ConfigDict

from yetzira.models.records import Container, Ship, Unit

DEMO_SHIPS: list[Ship] = [
    Ship(id="1", name="MSC Aurora", lat=35.0, lng=70.0),
    Ship(id="2", name="Zim Haifa", lat=55.0, lng=40.0),
]

DEMO_CONTAINERS: list[Container] = [
    Container(id="MSCU-4471203", ship="MSC Aurora", status="בדרך"),
    Container(id="MSCU-4471877", ship="MSC Aurora", status="במכס"),
    Container(id="ZIMU-2290114", ship="Zim Haifa", status="במחסן"),
]

DEMO_UNITS: list[Unit] = [
    Unit(id="U-5A", floor=5, facade="A", qty=8, status="waiting", progress=0),
    Unit(id="U-4B", floor=4, facade="B", qty=10, status="ready-cut", progress=10),
    Unit(id="U-3B", floor=3, facade="B", qty=12, status="production", progress=45),
    Unit(id="U-3C", floor=3, facade="C", qty=6, status="customs", progress=0),
    Unit(id="U-2A", floor=2, facade="A", qty=10, status="complete", progress=100),
    Unit(id="U-2C", floor=2, facade="C", qty=9, status="complete", progress=100),
]


class RecordFixture(BaseModel):
    """The three collections as one JSON document, for seeding a store."""

    model_config = ConfigDict(frozen=True)

    ships: list[Ship] = []
    containers: list[Container] = []
    units: list[Unit] = []

    @classmethod
    def from_file(cls, path: Path) -> RecordFixture:
        return cls.model_validate_json(Path(path).read_text(encoding="utf-8"))


DEMO_FIXTURE = RecordFixture(
    ships=DEMO_SHIPS, containers=DEMO_CONTAINERS, units=DEMO_UNITS
)
