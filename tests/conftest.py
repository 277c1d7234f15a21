from datetime import datetime

import pytest

from status_clock.config import Config
from status_clock.settings import SettingsStore

# Class attributes that use_directory() and reload() may rewrite
CONFIG_ATTRS = (
    "CONFIG_DIR",
    "CONFIG_JSON_FILE",
    "SETTINGS_FILE",
    "LOG_FILE",
    "REFRESH_INTERVAL",
    "STATUS_BAR_ALIGNMENT",
    "STATUS_BAR_PRIORITY",
    "WELCOME_MESSAGE",
    "SHOW_STARTUP_BANNER",
    "PROMPT_SYMBOL",
    "PROMPT_STYLES",
    "COMPLETION_STYLES",
    "PANEL_STYLES",
    "THEME_ICONS",
)


@pytest.fixture
def config_home(tmp_path, monkeypatch):
    for attr in CONFIG_ATTRS:
        monkeypatch.setattr(Config, attr, getattr(Config, attr))
    monkeypatch.setattr(
        Config, "THEME_ICONS", {"clock": "C", "check": "+", "gear": "G", "edit": "E"}
    )
    Config.use_directory(tmp_path)
    return tmp_path


@pytest.fixture
def store(config_home):
    return SettingsStore(config_home / "settings.json")


@pytest.fixture
def now():
    return datetime(2026, 10, 16, 14, 5, 9)
