"""Durable-backed map of a farm's retired rewards."""

from __future__ import annotations

import json
import logging

from asset_farms.interfaces.store import FarmStore
from asset_farms.models.farm_id import FarmId
from asset_farms.models.reward import AssetFarmReward, VAssetFarmReward

log = logging.getLogger(__name__)


class InactiveRewards:
    """Lazily read map from token id to retired reward.

    Reads go to the store, writes are staged locally (``None`` marks a
    removal) until ``flush`` pushes them into the store. Staged entries are
    kept as encoded envelopes so that ``copy`` can produce an independent
    map by serializing and deserializing them.
    """

    def __init__(
        self,
        store: FarmStore | None = None,
        farm_id: FarmId | None = None,
        staged: dict[str, str | None] | None = None,
    ) -> None:
        self._store = store
        self._farm_id = farm_id
        self._staged: dict[str, str | None] = staged if staged is not None else {}

    def bind(self, store: FarmStore, farm_id: FarmId) -> None:
        self._store = store
        self._farm_id = farm_id

    @property
    def staged(self) -> dict[str, str | None]:
        return dict(self._staged)

    async def get(self, token_id: str) -> AssetFarmReward | None:
        if token_id in self._staged:
            raw = self._staged[token_id]
        elif self._store is not None and self._farm_id is not None:
            raw = await self._store.get_inactive_record(str(self._farm_id), token_id)
        else:
            raw = None
        return VAssetFarmReward.decode(raw).unwrap() if raw is not None else None

    async def remove(self, token_id: str) -> AssetFarmReward | None:
        reward = await self.get(token_id)
        if reward is not None:
            self._staged[token_id] = None
        return reward

    def set(self, token_id: str, reward: AssetFarmReward) -> None:
        self._staged[token_id] = VAssetFarmReward(reward).encode()

    async def flush(self) -> None:
        """Write staged changes to the store. The caller commits."""
        if not self._staged:
            return
        assert self._store is not None and self._farm_id is not None, (
            "InactiveRewards not bound to a store. Call bind() first."
        )
        farm_key = str(self._farm_id)
        for token_id, raw in self._staged.items():
            if raw is None:
                await self._store.delete_inactive_record(farm_key, token_id)
            else:
                await self._store.put_inactive_record(farm_key, token_id, raw)
        log.debug("Flushed %d inactive reward change(s) for %s", len(self._staged), farm_key)
        self._staged.clear()

    def copy(self) -> InactiveRewards:
        """Independent copy sharing only the store handle."""
        staged = json.loads(json.dumps(self._staged))
        return InactiveRewards(self._store, self._farm_id, staged)
