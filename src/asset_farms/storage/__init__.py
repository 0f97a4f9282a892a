"""Durable storage backends."""

from asset_farms.storage.sqlite import SQLiteFarmStore

__all__ = ["SQLiteFarmStore"]
