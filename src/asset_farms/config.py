"""Configuration loading: TOML file + environment variables."""

from __future__ import annotations

import os
from pathlib import Path

try:
    import tomllib  # Python 3.11+
except ModuleNotFoundError:
    import tomli as tomllib  # type: ignore[no-redef]

from asset_farms.models.config import FarmsConfig


def load_config(
    config_path: str | Path | None = None,
    env_prefix: str = "ASSET_FARMS_",
) -> FarmsConfig:
    """Load configuration from a TOML file and env vars.

    Priority (highest wins):
        1. Environment variables (ASSET_FARMS_DB_PATH, ASSET_FARMS_LOG_LEVEL)
        2. TOML config file
        3. Defaults from FarmsConfig
    """
    raw: dict = {}
    if config_path is not None:
        p = Path(config_path).expanduser()
        if p.exists():
            with open(p, "rb") as f:
                raw = tomllib.load(f)

    cfg = FarmsConfig()

    # ── Storage section ────────────────────────────────────
    storage = raw.get("storage", {})
    if v := storage.get("db_path"):
        cfg.db_path = str(v)

    # ── Logging section ────────────────────────────────────
    logging_raw = raw.get("logging", {})
    if v := logging_raw.get("log_level"):
        cfg.log_level = str(v)

    # ── Environment variable overrides (highest priority) ──
    if db_path := os.environ.get(f"{env_prefix}DB_PATH"):
        cfg.db_path = db_path
    if level := os.environ.get(f"{env_prefix}LOG_LEVEL"):
        cfg.log_level = level

    if cfg.db_path != ":memory:":
        cfg.db_path = str(Path(cfg.db_path).expanduser())

    return cfg
