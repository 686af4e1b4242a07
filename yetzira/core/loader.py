"""Snapshot loader - one combined, fail-atomic fetch of all three collections.

The three fetches are independent, so they run concurrently on worker
threads.  Nothing downstream sees data until all three have returned: a
failure in any one of them fails the whole load, and no partial snapshot
is ever produced.  There are no retries and no timeout.
"""

from __future__ import annotations

import asyncio
import logging
import time
from collections.abc import Callable, Sequence
from typing import TypeVar

from yetzira.core.record_store import RecordStore
from yetzira.models.snapshot import ProjectSnapshot

logger = logging.getLogger(__name__)

T = TypeVar("T")


class SnapshotLoadError(RuntimeError):
    """Raised when any of the three collections cannot be fetched."""


async def _fetch(name: str, fetch: Callable[[], Sequence[T] | None]) -> list[T]:
    started = time.monotonic()
    records = await asyncio.to_thread(fetch)
    logger.debug(
        "Fetched %s in %.3fs (%s)",
        name,
        time.monotonic() - started,
        "no data" if records is None else f"{len(records)} record(s)",
    )
    return list(records) if records is not None else []


async def fetch_snapshot(store: RecordStore) -> ProjectSnapshot:
    """Fetch ships, containers and units concurrently into one snapshot.

    Raises
    ------
    SnapshotLoadError
        If any fetch fails.  The original exception is chained.
    """
    try:
        ships, containers, units = await asyncio.gather(
            _fetch("ships", store.fetch_ships),
            _fetch("containers", store.fetch_containers),
            _fetch("units", store.fetch_units),
        )
    except Exception as exc:
        logger.error("Snapshot load failed: %s", exc)
        raise SnapshotLoadError(f"Could not load project snapshot: {exc}") from exc

    return ProjectSnapshot(ships=ships, containers=containers, units=units)


def load_snapshot(store: RecordStore) -> ProjectSnapshot:
    """Synchronous wrapper around ``fetch_snapshot``."""
    return asyncio.run(fetch_snapshot(store))
