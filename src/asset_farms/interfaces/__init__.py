"""Protocol interfaces for asset_farms collaborators."""

from asset_farms.interfaces.clock import Clock
from asset_farms.interfaces.store import FarmStore

__all__ = ["Clock", "FarmStore"]
