"""API components - read-only farm queries."""

from asset_farms.api.farms_api import FarmQueryAPI

__all__ = ["FarmQueryAPI"]
