import json

from status_clock.config import Config
from status_clock.log import setup_logging


def test_ensure_directories_writes_defaults(config_home):
    Config.ensure_directories()

    data = json.loads(Config.CONFIG_JSON_FILE.read_text(encoding="utf-8"))
    assert data["general"]["refresh_interval"] == Config.REFRESH_INTERVAL
    assert data["status_bar"] == {"alignment": "right", "priority": 100}


def test_json_overrides_are_loaded(config_home):
    Config.CONFIG_JSON_FILE.write_text(
        json.dumps(
            {
                "general": {"refresh_interval": 0.5},
                "status_bar": {"alignment": "left"},
                "ui": {"theme_icons": {"clock": "T"}},
            }
        ),
        encoding="utf-8",
    )

    assert Config.reload() is True
    assert Config.get_refresh_interval() == 0.5
    assert Config.STATUS_BAR_ALIGNMENT == "left"
    assert Config.THEME_ICONS["clock"] == "T"
    assert Config.THEME_ICONS["gear"] == "G"


def test_invalid_json_keeps_defaults(config_home):
    Config.CONFIG_JSON_FILE.write_text("{oops", encoding="utf-8")

    assert Config.reload() is False
    assert Config.STATUS_BAR_PRIORITY == 100


def test_bad_refresh_interval_falls_back(config_home, monkeypatch):
    monkeypatch.setattr(Config, "REFRESH_INTERVAL", "soon")
    assert Config.get_refresh_interval() == 1.0
    monkeypatch.setattr(Config, "REFRESH_INTERVAL", -2)
    assert Config.get_refresh_interval() == 1.0


def test_debug_flag(monkeypatch):
    monkeypatch.setenv("STATUS_CLOCK_DEBUG", "1")
    assert Config.is_debug()
    monkeypatch.setenv("STATUS_CLOCK_DEBUG", "off")
    assert not Config.is_debug()


def test_setup_logging_writes_to_log_file(config_home):
    logger = setup_logging()
    try:
        logger.getChild("test").info("clock started")
        for handler in logger.handlers:
            handler.flush()

        assert "clock started" in Config.LOG_FILE.read_text(encoding="utf-8")
    finally:
        for handler in list(logger.handlers):
            handler.close()
            logger.removeHandler(handler)
        logger.propagate = True
