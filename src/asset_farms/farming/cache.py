"""Per-execution snapshot cache for farms."""

from __future__ import annotations

import logging

from asset_farms.farming.accrual import advance_farm
from asset_farms.interfaces.store import FarmStore
from asset_farms.models.farm import AssetFarm, VAssetFarm
from asset_farms.models.farm_id import FarmId

log = logging.getLogger(__name__)


class FarmSnapshotCache:
    """Memoizes advanced farm snapshots for the lifetime of one execution.

    A farm is loaded and advanced to ``now`` at most once; every later read
    gets a clone of the same snapshot. A ``None`` entry records that the farm
    does not exist. Create a fresh cache per execution and drop it afterwards.
    """

    def __init__(self, store: FarmStore, now: int) -> None:
        self._store = store
        self._now = now
        self._entries: dict[FarmId, AssetFarm | None] = {}

    @property
    def now(self) -> int:
        return self._now

    def __contains__(self, farm_id: FarmId) -> bool:
        return farm_id in self._entries

    async def get_or_load(self, farm_id: FarmId) -> AssetFarm | None:
        if farm_id in self._entries:
            cached = self._entries[farm_id]
            log.debug("Farm cache hit for %s", farm_id)
            return cached.clone() if cached is not None else None

        raw = await self._store.get_farm_record(str(farm_id))
        farm: AssetFarm | None = None
        if raw is not None:
            farm = VAssetFarm.decode(raw, self._store, farm_id).unwrap()
            advance_farm(farm, self._now)
        log.debug("Farm cache miss for %s (found=%s)", farm_id, farm is not None)
        self._entries[farm_id] = farm.clone() if farm is not None else None
        return farm

    async def set(self, farm_id: FarmId, farm: AssetFarm) -> None:
        """Write ``farm`` to the store and the cache."""
        farm.inactive_rewards.bind(self._store, farm_id)
        await farm.inactive_rewards.flush()
        await self._store.put_farm_record(str(farm_id), VAssetFarm(farm).encode())
        self._entries[farm_id] = farm.clone()
