"""Execution scope - one external call against the farm store."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from asset_farms.farming.cache import FarmSnapshotCache
from asset_farms.farming.registry import FarmRegistry
from asset_farms.interfaces.clock import Clock
from asset_farms.interfaces.store import FarmStore

log = logging.getLogger(__name__)


@asynccontextmanager
async def farm_execution(store: FarmStore, clock: Clock) -> AsyncIterator[FarmRegistry]:
    """Yield a registry backed by a fresh snapshot cache.

    The clock is read once on entry. Writes are committed when the block
    exits cleanly and rolled back when it raises.
    """
    now = clock.now()
    registry = FarmRegistry(store, FarmSnapshotCache(store, now))
    try:
        yield registry
    except BaseException:
        await store.rollback()
        log.debug("Execution at %d rolled back", now)
        raise
    await store.commit()
