"""Accrual of active rewards over elapsed time."""

from __future__ import annotations

from decimal import Decimal, localcontext

import pytest

from asset_farms.errors import ArithmeticOverflowError, TimestampOrderError
from asset_farms.farming.accrual import NANOS_PER_DAY, advance_farm, u128_ratio
from asset_farms.models.reward import U128_MAX

from tests.conftest import ONE_DAY, T0
from tests.factories import make_farm, make_reward

TOKEN = "reward.near"


# ── Daily budget example ──────────────────────────────────────────


async def test_one_day_distributes_daily_budget():
    farm = make_farm(T0, {TOKEN: make_reward()})

    assert advance_farm(farm, T0 + ONE_DAY) == []

    reward = farm.rewards[TOKEN]
    assert reward.remaining_rewards == 8_640_000
    assert reward.reward_per_share == Decimal("8.64")
    assert farm.block_timestamp == T0 + ONE_DAY


async def test_second_day_exhausts_and_retires():
    farm = make_farm(T0, {TOKEN: make_reward()})
    advance_farm(farm, T0 + ONE_DAY)

    assert advance_farm(farm, T0 + 2 * ONE_DAY) == [TOKEN]

    assert TOKEN not in farm.rewards
    retired = await farm.get_inactive_reward(TOKEN)
    assert retired is not None
    assert retired.remaining_rewards == 0
    assert retired.reward_per_share == Decimal("17.28")
    assert retired.boosted_shares == 1_000_000
    assert retired.booster_log_base == 100 * 10**18


async def test_budget_clamped_to_remaining():
    farm = make_farm(T0, {TOKEN: make_reward(remaining_rewards=13_640_000)})
    advance_farm(farm, T0 + ONE_DAY)
    assert farm.rewards[TOKEN].remaining_rewards == 5_000_000

    advance_farm(farm, T0 + 2 * ONE_DAY)

    retired = await farm.get_inactive_reward(TOKEN)
    # 8.64 from day one, then only the 5_000_000 left over on day two
    assert retired.reward_per_share == Decimal("13.64")


# ── Idempotence & ordering ────────────────────────────────────────


async def test_same_timestamp_is_noop():
    once = make_farm(T0, {TOKEN: make_reward()})
    twice = make_farm(T0, {TOKEN: make_reward()})

    advance_farm(once, T0 + ONE_DAY // 3)
    advance_farm(twice, T0 + ONE_DAY // 3)
    advance_farm(twice, T0 + ONE_DAY // 3)

    assert once.to_payload() == twice.to_payload()


async def test_backwards_time_raises():
    farm = make_farm(T0, {TOKEN: make_reward()})

    with pytest.raises(TimestampOrderError):
        advance_farm(farm, T0 - 1)

    assert farm.block_timestamp == T0
    assert farm.rewards[TOKEN].remaining_rewards == 17_280_000


async def test_timestamp_moves_without_rewards():
    farm = make_farm(T0)
    advance_farm(farm, T0 + 5)
    assert farm.block_timestamp == T0 + 5


# ── Zero shares ───────────────────────────────────────────────────


async def test_zero_shares_freeze_reward():
    farm = make_farm(T0, {TOKEN: make_reward(boosted_shares=0)})

    advance_farm(farm, T0 + 10 * ONE_DAY)

    reward = farm.rewards[TOKEN]
    assert reward.remaining_rewards == 17_280_000
    assert reward.reward_per_share == 0
    assert farm.block_timestamp == T0 + 10 * ONE_DAY


async def test_idle_period_is_not_paid_later():
    farm = make_farm(T0, {TOKEN: make_reward(boosted_shares=0)})
    advance_farm(farm, T0 + ONE_DAY)

    farm.rewards[TOKEN].boosted_shares = 1_000_000
    advance_farm(farm, T0 + ONE_DAY + ONE_DAY // 2)

    assert farm.rewards[TOKEN].remaining_rewards == 17_280_000 - 4_320_000


# ── Conservation & monotonicity ───────────────────────────────────


async def test_conservation_and_monotonic_accumulator():
    original = 1_000_003
    farm = make_farm(
        T0, {TOKEN: make_reward(reward_per_day=500_000, remaining_rewards=original, boosted_shares=3)}
    )
    shares_history = [3, 7, 0, 11, 1, 0, 13]
    steps = [1, 999_999_937, ONE_DAY // 7, 12_345, ONE_DAY // 3, 1, ONE_DAY]

    now = T0
    last_rps = Decimal(0)
    distributed = 0
    for shares, dt in zip(shares_history, steps):
        reward = farm.rewards[TOKEN]
        reward.boosted_shares = shares
        before = reward.remaining_rewards
        now += dt
        advance_farm(farm, now)
        reward = farm.rewards[TOKEN]
        distributed += before - reward.remaining_rewards
        assert reward.reward_per_share >= last_rps
        last_rps = reward.reward_per_share

    assert distributed == original - farm.rewards[TOKEN].remaining_rewards
    assert distributed <= original

    advance_farm(farm, now + 10 * ONE_DAY)
    retired = await farm.get_inactive_reward(TOKEN)
    assert retired is not None
    assert retired.remaining_rewards == 0


async def test_accumulator_keeps_fractions():
    farm = make_farm(T0, {TOKEN: make_reward(reward_per_day=NANOS_PER_DAY, boosted_shares=3)})

    for i in range(1, 4):
        advance_farm(farm, T0 + i)

    # 3 x (1 / 3) without integer truncation
    assert abs(farm.rewards[TOKEN].reward_per_share - 1) < Decimal("1e-50")


async def test_large_accumulator_keeps_fraction_digits():
    start = Decimal(2**100)
    farm = make_farm(
        T0,
        {TOKEN: make_reward(reward_per_day=NANOS_PER_DAY, boosted_shares=3, reward_per_share=start)},
    )

    advance_farm(farm, T0 + 1)

    with localcontext() as ctx:
        ctx.prec = 200
        gained = farm.rewards[TOKEN].reward_per_share - start
        # 31 integer digits leave room for well over 60 fractional ones
        assert abs(gained * 3 - 1) < Decimal("1e-60")


# ── u128_ratio ────────────────────────────────────────────────────


def test_u128_ratio_widens_before_dividing():
    assert u128_ratio(U128_MAX, NANOS_PER_DAY, NANOS_PER_DAY) == U128_MAX
    assert u128_ratio(8_640_000, NANOS_PER_DAY // 2, NANOS_PER_DAY) == 4_320_000


def test_u128_ratio_truncates():
    assert u128_ratio(10, 1, 3) == 3


def test_u128_ratio_overflow():
    with pytest.raises(ArithmeticOverflowError):
        u128_ratio(U128_MAX, 2, 1)
