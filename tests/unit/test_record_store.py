"""Unit tests for the SQLite and in-memory record stores."""

from __future__ import annotations

import sqlite3

import pytest

from yetzira.core.record_store import (
    InMemoryRecordStore,
    RecordStore,
    RecordStoreError,
    SqliteRecordStore,
)
from yetzira.models.records import Container, Ship, Unit


class TestProtocol:
    def test_both_stores_satisfy_protocol(self, sqlite_store: SqliteRecordStore):
        assert isinstance(sqlite_store, RecordStore)
        assert isinstance(InMemoryRecordStore(), RecordStore)


class TestSqliteRecordStore:
    def test_empty_store_returns_empty_lists(self, sqlite_store: SqliteRecordStore):
        assert sqlite_store.fetch_ships() == []
        assert sqlite_store.fetch_containers() == []
        assert sqlite_store.fetch_units() == []

    def test_write_then_read_preserves_order_and_nulls(
        self, sqlite_store: SqliteRecordStore
    ):
        units = [
            Unit(id="U-b", floor=4, facade="B", qty=None, status="waiting"),
            Unit(id="U-a", floor=3, facade="A", qty=12, status="complete", progress=100),
        ]
        sqlite_store.add_units(units)
        assert sqlite_store.fetch_units() == units

    def test_upsert_by_id(self, sqlite_store: SqliteRecordStore):
        sqlite_store.add_containers([Container(id="C1", ship="A", status="בדרך")])
        sqlite_store.add_containers([Container(id="C1", ship="A", status="במחסן")])

        containers = sqlite_store.fetch_containers()
        assert len(containers) == 1
        assert containers[0].status == "במחסן"

    def test_ships_round_trip(self, sqlite_store: SqliteRecordStore):
        ships = [Ship(id="1", name="Zim Haifa", lat=12.5, lng=80.0)]
        sqlite_store.add_ships(ships)
        assert sqlite_store.fetch_ships() == ships

    def test_clear(self, sqlite_store: SqliteRecordStore):
        sqlite_store.add_units([Unit(id="U1", floor=2, facade="A", qty=1)])
        sqlite_store.clear()
        assert sqlite_store.fetch_units() == []

    def test_malformed_row_raises_store_error(self, sqlite_store: SqliteRecordStore):
        with sqlite3.connect(sqlite_store.db_path) as conn:
            conn.execute(
                "INSERT INTO units (id, floor, facade, qty, status, progress) "
                "VALUES ('bad', 3, 'A', -4, 'waiting', 0)"
            )
            conn.commit()

        with pytest.raises(RecordStoreError, match="units"):
            sqlite_store.fetch_units()

    def test_creates_parent_directory(self, tmp_path):
        store = SqliteRecordStore(tmp_path / "nested" / "dir" / "records.db")
        assert store.db_path.exists()


class TestInMemoryRecordStore:
    def test_passes_none_through(self):
        store = InMemoryRecordStore(ships=None, containers=None, units=None)
        assert store.fetch_ships() is None
        assert store.fetch_units() is None
