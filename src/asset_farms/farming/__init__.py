"""Reward accrual, snapshot caching and the farm registry."""

from asset_farms.farming.accrual import NANOS_PER_DAY, advance_farm, u128_ratio
from asset_farms.farming.cache import FarmSnapshotCache
from asset_farms.farming.execution import farm_execution
from asset_farms.farming.registry import FarmRegistry
from asset_farms.farming.rewards import add_farm_reward, set_boosted_shares

__all__ = [
    "NANOS_PER_DAY", "advance_farm", "u128_ratio",
    "FarmSnapshotCache",
    "farm_execution",
    "FarmRegistry",
    "add_farm_reward", "set_boosted_shares",
]
