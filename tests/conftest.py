"""Shared test fixtures."""

from pathlib import Path

import pytest
from devnav.config import Config, LiveReloadConfig, ServerConfig, SettingsConfig
from devnav.core.types import ShortcutMap

SHORTCUTS = {
    "dev": "https://app.dev.com",
    "prod": "https://app.com",
    "staging": "https://staging.example.com",
    "staging-server": "https://staging-server.com",
    "api": "api/v1",
    "admin": "admin/dashboard",
}


@pytest.fixture
def shortcuts() -> ShortcutMap:
    """Shortcut map with base URLs and path shortcuts."""
    return dict(SHORTCUTS)


@pytest.fixture
def test_config(tmp_path: Path) -> Config:
    """Create a test configuration backed by a devnav.toml in tmp_path.

    Live reload is disabled so tests don't start file watchers.
    """
    config_path = tmp_path / "devnav.toml"
    config_path.write_text("")
    return Config(
        server=ServerConfig(),
        settings=SettingsConfig(),
        live_reload=LiveReloadConfig(enabled=False),
        tokens=dict(SHORTCUTS),
        config_path=config_path,
    )
