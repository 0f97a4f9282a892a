"""Configuration loading from TOML and environment."""

from __future__ import annotations

from asset_farms.config import load_config


def test_defaults(monkeypatch):
    monkeypatch.delenv("ASSET_FARMS_DB_PATH", raising=False)
    monkeypatch.delenv("ASSET_FARMS_LOG_LEVEL", raising=False)
    cfg = load_config(None)
    assert cfg.db_path.endswith("farms.db")
    assert "~" not in cfg.db_path
    assert cfg.log_level == "info"


def test_toml_then_env(tmp_path, monkeypatch):
    path = tmp_path / "farms.toml"
    path.write_text('[storage]\ndb_path = "/tmp/x/farms.db"\n\n[logging]\nlog_level = "warning"\n')
    monkeypatch.delenv("ASSET_FARMS_DB_PATH", raising=False)
    monkeypatch.setenv("ASSET_FARMS_LOG_LEVEL", "debug")

    cfg = load_config(path)

    assert cfg.db_path == "/tmp/x/farms.db"
    assert cfg.log_level == "debug"


def test_missing_file_uses_defaults(tmp_path, monkeypatch):
    monkeypatch.setenv("ASSET_FARMS_DB_PATH", ":memory:")
    cfg = load_config(tmp_path / "absent.toml")
    assert cfg.db_path == ":memory:"
