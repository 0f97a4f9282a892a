"""Data models for asset farms."""

from asset_farms.models.config import FarmsConfig
from asset_farms.models.farm import AssetFarm, VAssetFarm
from asset_farms.models.farm_id import FarmId, FarmKind
from asset_farms.models.inactive import InactiveRewards
from asset_farms.models.reward import AssetFarmReward, VAssetFarmReward, U128_MAX

__all__ = [
    "FarmsConfig",
    "AssetFarm", "VAssetFarm",
    "FarmId", "FarmKind",
    "InactiveRewards",
    "AssetFarmReward", "VAssetFarmReward", "U128_MAX",
]
