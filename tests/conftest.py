"""Shared fixtures: keep tests away from the user's real settings."""

import pytest


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    """Point the config dir at a temp directory and clear year overrides."""
    config_dir = tmp_path / "config"
    monkeypatch.setenv("TAKEHOME_CONFIG_PATH", str(config_dir))
    monkeypatch.delenv("TAKEHOME_TAX_YEAR", raising=False)
    return config_dir
