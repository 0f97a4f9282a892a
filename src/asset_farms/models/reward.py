"""Per-token reward records and their durable envelope."""

from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal
from typing import Any

from asset_farms.errors import ArithmeticOverflowError
from asset_farms.models.envelope import CURRENT, decode_envelope, encode_envelope

U128_MAX = 2**128 - 1


def check_u128(value: int, name: str = "value") -> int:
    """Return ``value`` if it fits an unsigned 128-bit integer, else raise."""
    if value < 0 or value > U128_MAX:
        raise ArithmeticOverflowError(f"{name} out of u128 range: {value}")
    return value


@dataclass
class AssetFarmReward:
    """State of one reward token distributed by a farm."""

    reward_per_day: int = 0  # smallest units per 24h of elapsed time
    booster_log_base: int = 0  # fixed-point, carries the booster's decimals
    remaining_rewards: int = 0
    boosted_shares: int = 0  # maintained by the staking side
    reward_per_share: Decimal = field(default_factory=Decimal)

    def to_dict(self) -> dict[str, str]:
        """External JSON view. The accumulator is internal and left out."""
        return {
            "reward_per_day": str(self.reward_per_day),
            "booster_log_base": str(self.booster_log_base),
            "remaining_rewards": str(self.remaining_rewards),
            "boosted_shares": str(self.boosted_shares),
        }

    def to_payload(self) -> dict[str, str]:
        payload = self.to_dict()
        payload["reward_per_share"] = str(self.reward_per_share)
        return payload

    @classmethod
    def from_payload(cls, data: dict[str, Any]) -> AssetFarmReward:
        return cls(
            reward_per_day=check_u128(int(data["reward_per_day"]), "reward_per_day"),
            booster_log_base=check_u128(int(data["booster_log_base"]), "booster_log_base"),
            remaining_rewards=check_u128(int(data["remaining_rewards"]), "remaining_rewards"),
            boosted_shares=check_u128(int(data["boosted_shares"]), "boosted_shares"),
            reward_per_share=Decimal(data.get("reward_per_share", "0")),
        )


@dataclass(frozen=True)
class VAssetFarmReward:
    """Versioned envelope for a durable (inactive) reward record."""

    current: AssetFarmReward

    def encode(self) -> str:
        return encode_envelope(CURRENT, self.current.to_payload())

    @classmethod
    def decode(cls, raw: str) -> VAssetFarmReward:
        return decode_envelope(raw, _REWARD_DECODERS)

    def unwrap(self) -> AssetFarmReward:
        return self.current


_REWARD_DECODERS = {
    CURRENT: lambda data: VAssetFarmReward(AssetFarmReward.from_payload(data)),
}
