"""Read-only query surface over the farm registry."""

from __future__ import annotations

import logging

from asset_farms.farming.execution import farm_execution
from asset_farms.interfaces.clock import Clock
from asset_farms.interfaces.store import FarmStore
from asset_farms.models.farm import AssetFarm
from asset_farms.models.farm_id import FarmId
from asset_farms.models.reward import AssetFarmReward

log = logging.getLogger(__name__)


class FarmQueryAPI:
    """Public farm queries. Each call runs as its own execution."""

    def __init__(self, store: FarmStore, clock: Clock) -> None:
        self._store = store
        self._clock = clock

    async def get_farm(self, farm_id: FarmId) -> AssetFarm | None:
        """Returns an asset farm for a given farm ID."""
        async with farm_execution(self._store, self._clock) as registry:
            return await registry.get(farm_id)

    async def get_farms(self, farm_ids: list[FarmId]) -> list[tuple[FarmId, AssetFarm]]:
        """Returns (farm ID, asset farm) pairs for the farm IDs that exist."""
        async with farm_execution(self._store, self._clock) as registry:
            return await registry.get_many(farm_ids)

    async def get_farms_paged(
        self, from_index: int | None = None, limit: int | None = None
    ) -> list[tuple[FarmId, AssetFarm]]:
        """Returns (farm ID, asset farm) pairs for a page of underlying assets.

        Note, the number of returned elements may be twice larger than the
        limit. To continue to the next page use ``from_index + limit``.
        """
        async with farm_execution(self._store, self._clock) as registry:
            return await registry.get_page(from_index, limit)

    async def get_inactive_reward(
        self, farm_id: FarmId, token_id: str
    ) -> AssetFarmReward | None:
        """Returns a retired reward of a farm, if any."""
        async with farm_execution(self._store, self._clock) as registry:
            farm = await registry.get(farm_id)
            if farm is None:
                return None
            return await farm.get_inactive_reward(token_id)
