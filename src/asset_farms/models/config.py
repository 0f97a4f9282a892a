"""Configuration models."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class FarmsConfig:
    """Complete asset_farms configuration."""

    # Storage
    db_path: str = "~/.asset_farms/farms.db"

    # Logging
    log_level: str = "info"
