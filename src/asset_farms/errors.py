"""Exception hierarchy for farm accrual and storage.

Every error here is fatal to the current execution. Best-effort lookups
report absence with ``None`` instead of raising.
"""

from __future__ import annotations


class FarmError(Exception):
    """Base class for all asset_farms errors."""


class FarmNotFoundError(FarmError):
    """A farm that must already be configured does not exist."""

    def __init__(self, farm_id: object) -> None:
        super().__init__(f"Asset farm not found: {farm_id}")
        self.farm_id = farm_id


class TimestampOrderError(FarmError):
    """The clock went backwards relative to a farm's last update."""

    def __init__(self, now: int, block_timestamp: int) -> None:
        super().__init__(
            f"Timestamp {now} is earlier than last farm update {block_timestamp}"
        )
        self.now = now
        self.block_timestamp = block_timestamp


class ArithmeticOverflowError(FarmError):
    """A balance left the unsigned 128-bit range."""


class UnknownRecordVersionError(FarmError):
    """A durable record carries a version tag this build cannot decode."""


class InvalidFarmIdError(FarmError, ValueError):
    """A farm identifier string could not be parsed."""


class InvalidRewardError(FarmError, ValueError):
    """A reward configuration request was rejected."""


class InvalidPageError(FarmError, ValueError):
    """A page of the asset index was requested with a negative bound."""
