"""Reward snapshot of one farm and its durable envelope."""

from __future__ import annotations

import copy
from dataclasses import dataclass, field
from typing import Any

from asset_farms.interfaces.store import FarmStore
from asset_farms.models.envelope import CURRENT, decode_envelope, encode_envelope
from asset_farms.models.farm_id import FarmId
from asset_farms.models.inactive import InactiveRewards
from asset_farms.models.reward import AssetFarmReward, check_u128


@dataclass
class AssetFarm:
    """Active rewards of a farm as of ``block_timestamp`` (nanoseconds)."""

    block_timestamp: int = 0
    rewards: dict[str, AssetFarmReward] = field(default_factory=dict)
    inactive_rewards: InactiveRewards = field(default_factory=InactiveRewards)

    # ── Inactive rewards ───────────────────────────────────

    async def get_inactive_reward(self, token_id: str) -> AssetFarmReward | None:
        return await self.inactive_rewards.get(token_id)

    async def remove_inactive_reward(self, token_id: str) -> AssetFarmReward | None:
        return await self.inactive_rewards.remove(token_id)

    def set_inactive_reward(self, token_id: str, reward: AssetFarmReward) -> None:
        self.inactive_rewards.set(token_id, reward)

    # ── Copies & views ─────────────────────────────────────

    def clone(self) -> AssetFarm:
        return AssetFarm(
            block_timestamp=self.block_timestamp,
            rewards=copy.deepcopy(self.rewards),
            inactive_rewards=self.inactive_rewards.copy(),
        )

    def to_dict(self) -> dict[str, Any]:
        """External JSON view. Inactive rewards are only reachable by token."""
        return {
            "block_timestamp": str(self.block_timestamp),
            "rewards": {token_id: r.to_dict() for token_id, r in self.rewards.items()},
        }

    def to_payload(self) -> dict[str, Any]:
        return {
            "block_timestamp": str(self.block_timestamp),
            "rewards": {token_id: r.to_payload() for token_id, r in self.rewards.items()},
        }


@dataclass(frozen=True)
class VAssetFarm:
    """Versioned envelope for a durable farm record."""

    current: AssetFarm

    def encode(self) -> str:
        return encode_envelope(CURRENT, self.current.to_payload())

    @classmethod
    def decode(cls, raw: str, store: FarmStore, farm_id: FarmId) -> VAssetFarm:
        """Decode a farm record, attaching its inactive rewards to ``store``."""

        def _current(data: dict[str, Any]) -> VAssetFarm:
            return cls(
                AssetFarm(
                    block_timestamp=check_u128(int(data["block_timestamp"]), "block_timestamp"),
                    rewards={
                        token_id: AssetFarmReward.from_payload(r)
                        for token_id, r in data["rewards"].items()
                    },
                    inactive_rewards=InactiveRewards(store, farm_id),
                )
            )

        return decode_envelope(raw, {CURRENT: _current})

    def unwrap(self) -> AssetFarm:
        return self.current
