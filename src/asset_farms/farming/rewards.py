"""Reward configuration entry points used by asset and staking management."""

from __future__ import annotations

import logging

from asset_farms.errors import InvalidRewardError
from asset_farms.farming.registry import FarmRegistry
from asset_farms.models.farm_id import FarmId
from asset_farms.models.reward import AssetFarmReward, check_u128

log = logging.getLogger(__name__)


async def add_farm_reward(
    registry: FarmRegistry,
    farm_id: FarmId,
    token_id: str,
    reward_per_day: int,
    booster_log_base: int,
    amount: int,
) -> AssetFarmReward:
    """Add ``amount`` of budget for ``token_id`` to a configured farm.

    An inactive reward is brought back with its accumulator intact.
    """
    if amount <= 0:
        raise InvalidRewardError("Reward amount must be positive")
    check_u128(reward_per_day, "reward_per_day")
    check_u128(booster_log_base, "booster_log_base")
    check_u128(amount, "amount")

    farm = await registry.unwrap_get(farm_id)
    reward = farm.rewards.get(token_id)
    if reward is None:
        reward = await farm.remove_inactive_reward(token_id)
        if reward is not None:
            log.info("Reactivating reward %s on %s", token_id, farm_id)
        else:
            reward = AssetFarmReward()
            log.info("New reward %s on %s", token_id, farm_id)

    reward.reward_per_day = reward_per_day
    reward.booster_log_base = booster_log_base
    reward.remaining_rewards = check_u128(reward.remaining_rewards + amount, "remaining_rewards")
    farm.rewards[token_id] = reward
    await registry.set(farm_id, farm)
    return reward


async def set_boosted_shares(
    registry: FarmRegistry, farm_id: FarmId, token_id: str, boosted_shares: int
) -> AssetFarmReward:
    """Overwrite the total boosted shares of an active reward."""
    check_u128(boosted_shares, "boosted_shares")
    farm = await registry.unwrap_get(farm_id)
    reward = farm.rewards.get(token_id)
    if reward is None:
        raise InvalidRewardError(f"No active reward {token_id} on {farm_id}")
    reward.boosted_shares = boosted_shares
    await registry.set(farm_id, farm)
    return reward
