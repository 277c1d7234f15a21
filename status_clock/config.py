#!/usr/bin/env python3
import json
import logging
import os
from pathlib import Path

logger = logging.getLogger(__name__)


def _default_config_dir() -> Path:
    env_home = os.getenv("STATUS_CLOCK_HOME")
    if env_home:
        return Path(env_home).expanduser()
    return Path.home() / ".status_clock"


class Config:
    # Refresh cadence of the status bar, in seconds
    REFRESH_INTERVAL = 1.0

    STATUS_BAR_ALIGNMENT = "right"
    STATUS_BAR_PRIORITY = 100

    CONFIG_DIR = _default_config_dir()
    CONFIG_JSON_FILE = CONFIG_DIR / "config.json"
    SETTINGS_FILE = CONFIG_DIR / "settings.json"
    LOG_FILE = CONFIG_DIR / "status_clock.log"

    WELCOME_MESSAGE = "Status Clock"
    SHOW_STARTUP_BANNER = True

    PROMPT_SYMBOL = "❯"

    HELP_KEYBINDS = [
        ("F2", "Open the clock menu"),
        ("Esc+t", "Show the status bar tooltip"),
        ("Ctrl+C / Ctrl+D", "Quit"),
    ]

    # Nerd font glyphs used for $(name) theme icons
    THEME_ICONS = {
        "clock": "",
        "check": "",
        "gear": "",
        "edit": "",
    }

    PROMPT_STYLES = {
        "prompt_symbol": "#f2d5cf bold",
        "prompt_border": "#737994",
        "bottom-toolbar": "bg:#303446 #c6d0f5 noreverse",
        "bottom-toolbar.text": "",
        "status_clock": "#c6d0f5 bold",
        "status_clock.left": "#737994",
    }

    COMPLETION_STYLES = {
        "completion-menu.completion": "bg:#0a0a0a fg:#aaaaaa bold",
        "completion-menu.completion.current": "bg:#888888 fg:#0a0a0a",
        "completion-menu.meta.completion": "bg:#0a0a0a fg:#aaaaaa",
        "completion-menu.meta.completion.current": "bg:#888888",
    }

    PANEL_STYLES = {
        "default": {
            "border_style": "#888888",
            "padding": (0, 1),
            "title_align": "left",
            "expand": False,
        },
        "info": {
            "border_style": "#8caaee",
            "padding": (0, 1),
            "title_align": "left",
            "expand": False,
        },
        "success": {
            "border_style": "#a6d189",
            "padding": (0, 1),
            "title_align": "left",
            "expand": False,
        },
        "error": {
            "border_style": "#e78284",
            "padding": (0, 1),
            "title_align": "left",
            "expand": False,
        },
        "warning": {
            "border_style": "#e5c890",
            "padding": (0, 1),
            "title_align": "left",
            "expand": False,
        },
    }

    @classmethod
    def use_directory(cls, directory) -> None:
        cls.CONFIG_DIR = Path(directory).expanduser()
        cls.CONFIG_JSON_FILE = cls.CONFIG_DIR / "config.json"
        cls.SETTINGS_FILE = cls.CONFIG_DIR / "settings.json"
        cls.LOG_FILE = cls.CONFIG_DIR / "status_clock.log"

    @classmethod
    def ensure_directories(cls):
        cls.CONFIG_DIR.mkdir(parents=True, exist_ok=True)

        if not cls.CONFIG_JSON_FILE.exists():
            cls._write_default_json_config()

    @classmethod
    def get_refresh_interval(cls) -> float:
        try:
            interval = float(cls.REFRESH_INTERVAL)
        except (TypeError, ValueError):
            return 1.0
        return interval if interval > 0 else 1.0

    @classmethod
    def is_debug(cls) -> bool:
        value = os.getenv("STATUS_CLOCK_DEBUG", "").strip().lower()
        return value in {"1", "true", "yes", "on"}

    @classmethod
    def _load_external_config(cls) -> None:
        cls._load_json_config()

    @classmethod
    def _load_json_config(cls) -> bool:
        if not cls.CONFIG_JSON_FILE.exists():
            return False

        try:
            with cls.CONFIG_JSON_FILE.open("r", encoding="utf-8") as f:
                config_data = json.load(f)
        except (json.JSONDecodeError, OSError) as e:
            logger.warning("Could not load %s: %s", cls.CONFIG_JSON_FILE, e)
            return False

        def get_nested(data, *keys, default=None):
            current = data
            for key in keys:
                if isinstance(current, dict) and key in current:
                    current = current[key]
                else:
                    return default
            return current

        cls.WELCOME_MESSAGE = get_nested(
            config_data, "general", "welcome_message", default=cls.WELCOME_MESSAGE
        )
        cls.SHOW_STARTUP_BANNER = get_nested(
            config_data,
            "general",
            "show_startup_banner",
            default=cls.SHOW_STARTUP_BANNER,
        )
        cls.REFRESH_INTERVAL = get_nested(
            config_data, "general", "refresh_interval", default=cls.REFRESH_INTERVAL
        )

        cls.STATUS_BAR_ALIGNMENT = get_nested(
            config_data, "status_bar", "alignment", default=cls.STATUS_BAR_ALIGNMENT
        )
        cls.STATUS_BAR_PRIORITY = get_nested(
            config_data, "status_bar", "priority", default=cls.STATUS_BAR_PRIORITY
        )

        theme_icons = get_nested(config_data, "ui", "theme_icons", default=None)
        if isinstance(theme_icons, dict):
            cls.THEME_ICONS = {**cls.THEME_ICONS, **theme_icons}

        prompt_styles = get_nested(config_data, "ui", "prompt_styles", default=None)
        if isinstance(prompt_styles, dict):
            cls.PROMPT_STYLES = {**cls.PROMPT_STYLES, **prompt_styles}

        completion_styles = get_nested(
            config_data, "ui", "completion_styles", default=None
        )
        if isinstance(completion_styles, dict):
            cls.COMPLETION_STYLES = {**cls.COMPLETION_STYLES, **completion_styles}

        panel_styles = get_nested(config_data, "ui", "panel_styles", default=None)
        if isinstance(panel_styles, dict):
            cls.PANEL_STYLES = {**cls.PANEL_STYLES, **panel_styles}

        cls.PROMPT_SYMBOL = get_nested(
            config_data, "ui", "prompt_symbol", default=cls.PROMPT_SYMBOL
        )

        return True

    @classmethod
    def _write_default_json_config(cls) -> None:
        config_data = {
            "general": {
                "welcome_message": cls.WELCOME_MESSAGE,
                "show_startup_banner": cls.SHOW_STARTUP_BANNER,
                "refresh_interval": cls.REFRESH_INTERVAL,
            },
            "status_bar": {
                "alignment": cls.STATUS_BAR_ALIGNMENT,
                "priority": cls.STATUS_BAR_PRIORITY,
            },
            "ui": {
                "theme_icons": cls.THEME_ICONS,
                "prompt_styles": cls.PROMPT_STYLES,
                "completion_styles": cls.COMPLETION_STYLES,
                "panel_styles": cls.PANEL_STYLES,
                "prompt_symbol": cls.PROMPT_SYMBOL,
            },
        }

        try:
            with cls.CONFIG_JSON_FILE.open("w", encoding="utf-8") as f:
                json.dump(config_data, f, indent=2, ensure_ascii=False)
        except OSError as e:
            logger.warning("Could not write %s: %s", cls.CONFIG_JSON_FILE, e)

    @classmethod
    def reload(cls) -> bool:
        try:
            cls.ensure_directories()
            return cls._load_json_config()
        except OSError:
            logger.exception("Configuration reload failed")
            return False


Config._load_external_config()
