"""Shared fixtures: isolate every test from the user's real settings."""

import pytest


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    """Point config at an empty temp directory and use bundled rules."""
    config_dir = tmp_path / "config"
    config_dir.mkdir()
    monkeypatch.setenv("VNTAX_CONFIG_PATH", str(config_dir))
    monkeypatch.delenv("VNTAX_RULES_PATH", raising=False)
    return config_dir
