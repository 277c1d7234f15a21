#!/usr/bin/env python3
"""Clock orchestration.

``ClockController`` owns the status bar item and the refresh timer for the
lifetime of one activation, and maps every clock command onto settings
updates followed by a status bar refresh.
"""
import logging
from datetime import datetime
from typing import Callable, List, Optional

from . import commands as cmd
from .commands import CommandRegistry
from .config import Config
from .events import ConfigurationChangeEvent
from .formatter import TimeFormatConfig, render_status_text
from .ports import InputBox, QuickPick, QuickPickItem, SettingsView
from .settings import SECTION, SettingsStore
from .timer import IntervalTimer
from .ui.status_bar import StatusBarItem
from .ui.tooltip import build_tooltip

logger = logging.getLogger(__name__)

ENABLE = f"{SECTION}.enable"
SHOW_DATE = f"{SECTION}.showDate"
MILITARY_TIME = f"{SECTION}.militaryTime"
CUSTOM_TIME_FORMAT = f"{SECTION}.customTimeFormat"

MENU_PLACEHOLDER = "Status Clock"

ACTION_TOGGLE_ENABLE = "toggleEnable"
ACTION_TOGGLE_SHOW_DATE = "toggleShowDate"
ACTION_TOGGLE_MILITARY_TIME = "toggleMilitaryTime"
ACTION_SET_CUSTOM_FORMAT = "setCustomTimeFormat"
ACTION_OPEN_SETTINGS = "openSettings"


class ExtensionContext:
    """Collects disposables created during activation."""

    def __init__(self) -> None:
        self.subscriptions: list = []

    def dispose(self) -> None:
        while self.subscriptions:
            subscription = self.subscriptions.pop()
            try:
                subscription.dispose()
            except Exception:
                logger.exception("Failed to dispose %r", subscription)


class ClockController:
    def __init__(
        self,
        settings: SettingsStore,
        commands: CommandRegistry,
        quick_pick: QuickPick,
        input_box: InputBox,
        settings_view: SettingsView,
        clock: Callable[[], datetime] = datetime.now,
        refresh_interval: Optional[float] = None,
    ) -> None:
        self.settings = settings
        self.commands = commands
        self.quick_pick = quick_pick
        self.input_box = input_box
        self.settings_view = settings_view
        self.clock = clock
        self._fixed_interval = refresh_interval
        self.refresh_interval = refresh_interval or Config.get_refresh_interval()
        self.status_bar: Optional[StatusBarItem] = None
        self._timer: Optional[IntervalTimer] = None
        self._context: Optional[ExtensionContext] = None

    @property
    def is_active(self) -> bool:
        return self._context is not None

    def activate(self, context: Optional[ExtensionContext] = None) -> ExtensionContext:
        if self._context is not None:
            return self._context

        context = context or ExtensionContext()
        self._context = context

        self.status_bar = StatusBarItem(
            alignment=Config.STATUS_BAR_ALIGNMENT, priority=Config.STATUS_BAR_PRIORITY
        )
        context.subscriptions.append(self.status_bar)

        self.update()

        self._timer = IntervalTimer(self.refresh_interval, self._tick)
        self._timer.start()
        context.subscriptions.append(self._timer)

        context.subscriptions.append(self.settings.on_did_change(self._on_settings_changed))

        context.subscriptions.extend(
            [
                self.commands.register(cmd.TOGGLE_ENABLE, self.toggle_enable),
                self.commands.register(cmd.TOGGLE_SHOW_DATE, self.toggle_show_date),
                self.commands.register(cmd.TOGGLE_MILITARY_TIME, self.toggle_military_time),
                self.commands.register(cmd.SET_CUSTOM_TIME_FORMAT, self.set_custom_time_format),
                self.commands.register(cmd.OPEN_MENU, self.open_quick_menu),
                self.commands.register(cmd.OPEN_SETTINGS, self.open_settings),
            ]
        )

        logger.info("Clock activated (refresh every %.2fs)", self.refresh_interval)
        return context

    def deactivate(self) -> None:
        context, self._context = self._context, None
        if context is not None:
            context.dispose()
        self._timer = None
        logger.info("Clock deactivated")

    def reconfigure(self) -> None:
        """Apply reloaded Config values to the live item and timer."""
        self.refresh_interval = self._fixed_interval or Config.get_refresh_interval()
        if self._context is None:
            return
        self.deactivate()
        self.activate()

    def update(self) -> None:
        item = self.status_bar
        if item is None:
            return

        if not self.settings.get(ENABLE, True):
            item.hide()
            return

        text = render_status_text(
            self.clock(),
            TimeFormatConfig.from_settings(self.settings),
            show_date=bool(self.settings.get(SHOW_DATE, False)),
        )
        item.text = text
        item.tooltip = build_tooltip(self.settings)
        item.command = cmd.OPEN_MENU
        item.show()

    def _tick(self) -> None:
        self.settings.refresh_from_disk()
        self.update()

    def _on_settings_changed(self, event: ConfigurationChangeEvent) -> None:
        if event.affects_configuration(SECTION):
            self.update()

    def toggle_setting(self, key: str) -> bool:
        value = self.settings.toggle(key)
        self.update()
        return value

    def toggle_enable(self) -> bool:
        return self.toggle_setting(ENABLE)

    def toggle_show_date(self) -> bool:
        return self.toggle_setting(SHOW_DATE)

    def toggle_military_time(self) -> bool:
        return self.toggle_setting(MILITARY_TIME)

    def set_custom_time_format(self) -> Optional[str]:
        current = self.settings.get(CUSTOM_TIME_FORMAT, "") or ""
        value = self.input_box.ask(
            "Custom time format",
            value=current,
            placeholder="Tokens: HH H hh h mm m ss s a A (empty for locale default)",
        )
        if value is None:
            return None

        value = value.strip()
        self.settings.update(CUSTOM_TIME_FORMAT, value)
        self.update()
        return value

    def open_settings(self, query: str = SECTION) -> None:
        self.settings_view.show_settings(query)

    def menu_items(self) -> List[QuickPickItem]:
        enabled = bool(self.settings.get(ENABLE, True))
        show_date = bool(self.settings.get(SHOW_DATE, False))
        military = bool(self.settings.get(MILITARY_TIME, False))
        custom_format = self.settings.get(CUSTOM_TIME_FORMAT, "") or ""

        def check(on: bool) -> str:
            return "$(check) " if on else ""

        return [
            QuickPickItem(
                label=f"{check(enabled)}Enable clock",
                description="Enabled" if enabled else "Disabled",
                action=ACTION_TOGGLE_ENABLE,
            ),
            QuickPickItem(
                label=f"{check(show_date)}Show date in status bar",
                description="Shown" if show_date else "Hidden",
                action=ACTION_TOGGLE_SHOW_DATE,
            ),
            QuickPickItem(
                label=f"{check(military)}Military time (24h)",
                description="On" if military else "Off",
                action=ACTION_TOGGLE_MILITARY_TIME,
            ),
            QuickPickItem(
                label="$(edit) Custom time format…",
                description=custom_format or "Locale default",
                action=ACTION_SET_CUSTOM_FORMAT,
            ),
            QuickPickItem(label="$(gear) Open settings…", action=ACTION_OPEN_SETTINGS),
        ]

    def open_quick_menu(self) -> Optional[str]:
        pick = self.quick_pick.pick(self.menu_items(), placeholder=MENU_PLACEHOLDER)
        if pick is None:
            return None

        if pick.action == ACTION_TOGGLE_ENABLE:
            self.toggle_enable()
        elif pick.action == ACTION_TOGGLE_SHOW_DATE:
            self.toggle_show_date()
        elif pick.action == ACTION_TOGGLE_MILITARY_TIME:
            self.toggle_military_time()
        elif pick.action == ACTION_SET_CUSTOM_FORMAT:
            self.set_custom_time_format()
        elif pick.action == ACTION_OPEN_SETTINGS:
            self.commands.execute(cmd.OPEN_SETTINGS, SECTION)
        return pick.action
