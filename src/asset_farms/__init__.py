"""asset_farms - time-weighted reward accrual for boosted-share asset farms."""

__version__ = "0.1.0"
