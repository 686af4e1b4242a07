"""Shared test fixtures for Yetzira."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path
from typing import Any

import pytest

from yetzira.core.record_store import InMemoryRecordStore, SqliteRecordStore
from yetzira.models.records import Container, Ship, Unit
from yetzira.models.snapshot import ProjectSnapshot

FLOORS = [5, 4, 3, 2]
FACADES = ["A", "B", "C"]


@pytest.fixture
def floors() -> list[int]:
    return list(FLOORS)


@pytest.fixture
def facades() -> list[str]:
    return list(FACADES)


@pytest.fixture
def sqlite_store(tmp_path: Path) -> SqliteRecordStore:
    """Provide a fresh SqliteRecordStore backed by a temp database."""
    return SqliteRecordStore(tmp_path / "records.db")


# ---------------------------------------------------------------------------
# Record factories - shared across test modules
# ---------------------------------------------------------------------------


@pytest.fixture
def make_unit() -> Callable[..., Unit]:
    """Factory fixture: build a Unit with sensible defaults."""
    counter = {"n": 0}

    def _factory(**overrides: Any) -> Unit:
        counter["n"] += 1
        defaults: dict[str, Any] = {
            "id": f"U-{counter['n']}",
            "floor": 3,
            "facade": "B",
            "qty": 1,
            "status": "production",
            "progress": 0,
        }
        defaults.update(overrides)
        return Unit(**defaults)

    return _factory


@pytest.fixture
def make_container() -> Callable[..., Container]:
    """Factory fixture: build a Container with sensible defaults."""
    counter = {"n": 0}

    def _factory(**overrides: Any) -> Container:
        counter["n"] += 1
        defaults: dict[str, Any] = {
            "id": f"CONT-{counter['n']:04d}",
            "ship": "MSC Aurora",
            "status": "בדרך",
        }
        defaults.update(overrides)
        return Container(**defaults)

    return _factory


@pytest.fixture
def scenario_units(make_unit: Callable[..., Unit]) -> list[Unit]:
    """complete x10, production x5, waiting x3 on distinct cells."""
    return [
        make_unit(floor=2, facade="A", status="complete", qty=10),
        make_unit(floor=3, facade="B", status="production", qty=5),
        make_unit(floor=4, facade="C", status="waiting", qty=3),
    ]


@pytest.fixture
def snapshot(
    scenario_units: list[Unit], make_container: Callable[..., Container]
) -> ProjectSnapshot:
    """A consistent snapshot: one ship, two containers, the scenario units."""
    return ProjectSnapshot(
        ships=[Ship(id="1", name="MSC Aurora", lat=30.0, lng=60.0)],
        containers=[make_container(), make_container(status="במחסן")],
        units=scenario_units,
    )


@pytest.fixture
def memory_store(snapshot: ProjectSnapshot) -> InMemoryRecordStore:
    return InMemoryRecordStore(
        ships=snapshot.ships,
        containers=snapshot.containers,
        units=snapshot.units,
    )
