"""Record Store Accessor - full-collection reads of ships, containers, units.

``RecordStore`` is the Protocol the loader consumes.  Two implementations
ship with the package:

- ``SqliteRecordStore`` - one table per collection, WAL journal mode.
- ``InMemoryRecordStore`` - fixed sequences, for tests and demos.

Each fetch returns the whole current collection.  No pagination, no
filtering.  A store may return ``None`` for "no data"; the loader treats
that as an empty collection.
"""

from __future__ import annotations

import logging
import sqlite3
from collections.abc import Iterable, Sequence
from pathlib import Path
from typing import Protocol, runtime_checkable

from pydantic import ValidationError

from yetzira.models.records import Container, Ship, Unit

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Protocol
# ---------------------------------------------------------------------------


@runtime_checkable
class RecordStore(Protocol):
    """Protocol for record store backends.

    Any object with these three methods satisfies it.
    """

    def fetch_ships(self) -> Sequence[Ship] | None: ...

    def fetch_containers(self) -> Sequence[Container] | None: ...

    def fetch_units(self) -> Sequence[Unit] | None: ...


class RecordStoreError(RuntimeError):
    """Raised when a store cannot produce a collection."""


# ---------------------------------------------------------------------------
# In-memory
# ---------------------------------------------------------------------------


class InMemoryRecordStore:
    """Serves fixed collections.  ``None`` is passed through as-is."""

    def __init__(
        self,
        ships: Sequence[Ship] | None = (),
        containers: Sequence[Container] | None = (),
        units: Sequence[Unit] | None = (),
    ) -> None:
        self._ships = ships
        self._containers = containers
        self._units = units

    def fetch_ships(self) -> Sequence[Ship] | None:
        return self._ships

    def fetch_containers(self) -> Sequence[Container] | None:
        return self._containers

    def fetch_units(self) -> Sequence[Unit] | None:
        return self._units


# ---------------------------------------------------------------------------
# SQLite
# ---------------------------------------------------------------------------

_CREATE_SHIPS = """
CREATE TABLE IF NOT EXISTS ships (
    seq     INTEGER PRIMARY KEY AUTOINCREMENT,
    id      TEXT UNIQUE,
    name    TEXT,
    lat     REAL NOT NULL DEFAULT 0,
    lng     REAL NOT NULL DEFAULT 0
);
"""

_CREATE_CONTAINERS = """
CREATE TABLE IF NOT EXISTS containers (
    seq     INTEGER PRIMARY KEY AUTOINCREMENT,
    id      TEXT NOT NULL UNIQUE,
    ship    TEXT,
    status  TEXT
);
"""

_CREATE_UNITS = """
CREATE TABLE IF NOT EXISTS units (
    seq       INTEGER PRIMARY KEY AUTOINCREMENT,
    id        TEXT NOT NULL UNIQUE,
    floor     INTEGER NOT NULL,
    facade    TEXT NOT NULL,
    qty       INTEGER,
    status    TEXT,
    progress  INTEGER
);
"""


class SqliteRecordStore:
    """SQLite-backed record store.

    Rows are returned in insertion order.  Writes upsert by ``id`` so a
    fixture can be re-seeded without duplicating records.

    Parameters
    ----------
    db_path:
        Path to the SQLite database file. Created if it does not exist.
    """

    def __init__(self, db_path: Path) -> None:
        self._db_path = Path(db_path)
        self._db_path.parent.mkdir(parents=True, exist_ok=True)
        self._init_schema()

    @property
    def db_path(self) -> Path:
        return self._db_path

    def _connect(self) -> sqlite3.Connection:
        conn = sqlite3.connect(str(self._db_path), check_same_thread=False)
        conn.execute("PRAGMA journal_mode=WAL")
        return conn

    def _init_schema(self) -> None:
        with self._connect() as conn:
            conn.execute(_CREATE_SHIPS)
            conn.execute(_CREATE_CONTAINERS)
            conn.execute(_CREATE_UNITS)
            conn.commit()

    # ------------------------------------------------------------------
    # Reads
    # ------------------------------------------------------------------

    def fetch_ships(self) -> list[Ship]:
        rows = self._select("SELECT id, name, lat, lng FROM ships ORDER BY seq")
        return self._to_models(
            Ship, rows, ("id", "name", "lat", "lng"), "ships"
        )

    def fetch_containers(self) -> list[Container]:
        rows = self._select(
            "SELECT id, ship, status FROM containers ORDER BY seq"
        )
        return self._to_models(
            Container, rows, ("id", "ship", "status"), "containers"
        )

    def fetch_units(self) -> list[Unit]:
        rows = self._select(
            "SELECT id, floor, facade, qty, status, progress FROM units ORDER BY seq"
        )
        return self._to_models(
            Unit, rows, ("id", "floor", "facade", "qty", "status", "progress"), "units"
        )

    def _select(self, sql: str) -> list[tuple]:
        try:
            with self._connect() as conn:
                return conn.execute(sql).fetchall()
        except sqlite3.Error as exc:
            raise RecordStoreError(f"Query failed on {self._db_path}: {exc}") from exc

    @staticmethod
    def _to_models(model, rows: list[tuple], columns: tuple[str, ...], table: str) -> list:
        try:
            return [model(**dict(zip(columns, row))) for row in rows]
        except ValidationError as exc:
            raise RecordStoreError(f"Malformed row in '{table}': {exc}") from exc

    # ------------------------------------------------------------------
    # Writes (seeding only - the dashboard itself never writes)
    # ------------------------------------------------------------------

    def add_ships(self, ships: Iterable[Ship]) -> int:
        rows = [(s.id, s.name, s.lat, s.lng) for s in ships]
        self._executemany(
            "INSERT INTO ships (id, name, lat, lng) VALUES (?, ?, ?, ?) "
            "ON CONFLICT(id) DO UPDATE SET name=excluded.name, "
            "lat=excluded.lat, lng=excluded.lng",
            rows,
        )
        logger.info("Stored %d ship(s) in %s", len(rows), self._db_path)
        return len(rows)

    def add_containers(self, containers: Iterable[Container]) -> int:
        rows = [(c.id, c.ship, c.status) for c in containers]
        self._executemany(
            "INSERT INTO containers (id, ship, status) VALUES (?, ?, ?) "
            "ON CONFLICT(id) DO UPDATE SET ship=excluded.ship, status=excluded.status",
            rows,
        )
        logger.info("Stored %d container(s) in %s", len(rows), self._db_path)
        return len(rows)

    def add_units(self, units: Iterable[Unit]) -> int:
        rows = [
            (u.id, u.floor, u.facade, u.qty, u.status, u.progress) for u in units
        ]
        self._executemany(
            "INSERT INTO units (id, floor, facade, qty, status, progress) "
            "VALUES (?, ?, ?, ?, ?, ?) "
            "ON CONFLICT(id) DO UPDATE SET floor=excluded.floor, "
            "facade=excluded.facade, qty=excluded.qty, status=excluded.status, "
            "progress=excluded.progress",
            rows,
        )
        logger.info("Stored %d unit(s) in %s", len(rows), self._db_path)
        return len(rows)

    def clear(self) -> None:
        """Delete every record from all three tables."""
        with self._connect() as conn:
            conn.execute("DELETE FROM ships")
            conn.execute("DELETE FROM containers")
            conn.execute("DELETE FROM units")
            conn.commit()
        logger.info("Cleared all records in %s", self._db_path)

    def _executemany(self, sql: str, rows: list[tuple]) -> None:
        try:
            with self._connect() as conn:
                conn.executemany(sql, rows)
                conn.commit()
        except sqlite3.Error as exc:
            raise RecordStoreError(f"Write failed on {self._db_path}: {exc}") from exc
