"""Time-weighted accrual of a farm's active rewards."""

from __future__ import annotations

import logging
from decimal import Decimal, localcontext

from asset_farms.errors import TimestampOrderError
from asset_farms.models.farm import AssetFarm
from asset_farms.models.reward import check_u128

log = logging.getLogger(__name__)

NANOS_PER_DAY = 24 * 60 * 60 * 10**9

# Significant digits used when growing the reward-per-share accumulator.
REWARD_PER_SHARE_PRECISION = 100


def u128_ratio(a: int, b: int, c: int) -> int:
    """``a * b // c`` with the result checked against the u128 range."""
    return check_u128(a * b // c, "u128_ratio")


def advance_farm(farm: AssetFarm, now: int) -> list[str]:
    """Bring every active reward of ``farm`` up to ``now``.

    Rewards without boosted shares are left untouched. Rewards whose budget
    runs out move to the farm's inactive rewards. Returns the token ids
    retired by this step.
    """
    if now == farm.block_timestamp:
        return []
    if now < farm.block_timestamp:
        raise TimestampOrderError(now, farm.block_timestamp)

    time_diff = now - farm.block_timestamp
    farm.block_timestamp = now

    retired: list[str] = []
    with localcontext() as ctx:
        ctx.prec = REWARD_PER_SHARE_PRECISION
        for token_id, reward in farm.rewards.items():
            if reward.boosted_shares == 0:
                continue
            acquired = min(
                reward.remaining_rewards,
                u128_ratio(reward.reward_per_day, time_diff, NANOS_PER_DAY),
            )
            reward.remaining_rewards -= acquired
            reward.reward_per_share += Decimal(acquired) / Decimal(reward.boosted_shares)
            if reward.remaining_rewards == 0:
                retired.append(token_id)

    for token_id in retired:
        reward = farm.rewards.pop(token_id)
        farm.set_inactive_reward(token_id, reward)
        log.info("Reward %s exhausted at %d, moved to inactive", token_id, now)

    log.debug("Advanced farm by %d ns (%d active reward(s))", time_diff, len(farm.rewards))
    return retired
