"""Farm registry - the sanctioned read/write path for farm snapshots."""

from __future__ import annotations

import logging

from asset_farms.errors import FarmNotFoundError, InvalidPageError
from asset_farms.farming.cache import FarmSnapshotCache
from asset_farms.interfaces.store import FarmStore
from asset_farms.models.farm import AssetFarm
from asset_farms.models.farm_id import FarmId

log = logging.getLogger(__name__)


class FarmRegistry:
    """Reads and writes farms through one execution's snapshot cache.

    Reading the store directly would bypass the one-accrual-per-execution
    guarantee, so every lookup goes through the cache.
    """

    def __init__(self, store: FarmStore, cache: FarmSnapshotCache) -> None:
        self._store = store
        self._cache = cache

    @property
    def now(self) -> int:
        return self._cache.now

    async def get(self, farm_id: FarmId) -> AssetFarm | None:
        return await self._cache.get_or_load(farm_id)

    async def unwrap_get(self, farm_id: FarmId) -> AssetFarm:
        farm = await self.get(farm_id)
        if farm is None:
            raise FarmNotFoundError(farm_id)
        return farm

    async def contains(self, farm_id: FarmId) -> bool:
        return await self.get(farm_id) is not None

    async def get_many(self, farm_ids: list[FarmId]) -> list[tuple[FarmId, AssetFarm]]:
        """Farms for ``farm_ids`` in order. Unknown ids are skipped."""
        result = []
        for farm_id in farm_ids:
            farm = await self.get(farm_id)
            if farm is not None:
                result.append((farm_id, farm))
        return result

    async def get_page(
        self, from_index: int | None = None, limit: int | None = None
    ) -> list[tuple[FarmId, AssetFarm]]:
        """Farms for a page of the underlying asset index.

        Each asset expands to its supplied and borrowed farm, so up to
        ``2 * limit`` pairs come back. The next page starts at
        ``from_index + limit``.
        """
        from_index = from_index or 0
        if from_index < 0:
            raise InvalidPageError(f"from_index must not be negative: {from_index}")
        if limit is None:
            limit = await self._store.count_asset_ids()
        elif limit < 0:
            raise InvalidPageError(f"limit must not be negative: {limit}")
        farm_ids: list[FarmId] = []
        for token_id in await self._store.get_asset_ids(from_index, limit):
            farm_ids.append(FarmId.supplied(token_id))
            farm_ids.append(FarmId.borrowed(token_id))
        return await self.get_many(farm_ids)

    async def set(self, farm_id: FarmId, farm: AssetFarm) -> None:
        await self._cache.set(farm_id, farm)

    async def configure(self, farm_id: FarmId) -> AssetFarm:
        """Create an empty farm stamped with the current time if it is missing."""
        farm = await self.get(farm_id)
        if farm is not None:
            return farm
        farm = AssetFarm(block_timestamp=self.now)
        await self.set(farm_id, farm)
        log.info("Configured farm %s", farm_id)
        return farm
