#!/usr/bin/env python3
import logging
from datetime import datetime
from typing import Callable, Optional

from prompt_toolkit import PromptSession
from prompt_toolkit.application import get_app
from prompt_toolkit.completion import WordCompleter
from prompt_toolkit.key_binding import KeyBindings
from rich.console import Console

from .commands import CommandRegistry, OPEN_MENU
from .config import Config
from .controller import ClockController
from .errors import StatusClockError, UnknownCommandError
from .log import setup_logging
from .settings import SettingsStore
from .ui.manager import UIManager
from .ui.menu import DialogInputBox, DialogQuickPick

logger = logging.getLogger(__name__)

TOOLTIP = "tooltip"
HELP = "help"
RELOAD = "reload"
EXIT_WORDS = {"exit", "quit"}


class StatusClockApp:
    def __init__(
        self,
        settings: Optional[SettingsStore] = None,
        console: Optional[Console] = None,
        clock: Callable[[], datetime] = datetime.now,
    ) -> None:
        self.console = console or Console()
        self.settings = settings or SettingsStore()
        self.ui = UIManager(self.console, self.settings)
        self.commands = CommandRegistry()

        style = self.ui.get_style()
        self.controller = ClockController(
            settings=self.settings,
            commands=self.commands,
            quick_pick=DialogQuickPick(style=style),
            input_box=DialogInputBox(style=style),
            settings_view=self.ui,
            clock=clock,
        )

        self.session: Optional[PromptSession] = None
        self._setup_keybindings()

    def _setup_keybindings(self) -> None:
        self.bindings = KeyBindings()

        @self.bindings.add("f2")
        def open_menu(event):
            event.app.exit(result=OPEN_MENU)

        @self.bindings.add("escape", "t")
        def show_tooltip(event):
            event.app.exit(result=TOOLTIP)

    def _on_status_bar_click(self, command: str) -> None:
        app = get_app()
        if app.is_running:
            app.exit(result=command)

    def _bottom_toolbar(self):
        return self.ui.get_toolbar_text(
            self.controller.status_bar, self._on_status_bar_click
        )

    def handle_input(self, user_input: str) -> bool:
        """Run one line of input; returns False when the loop should stop."""
        normalized = user_input.strip()
        if not normalized:
            return True

        if normalized in EXIT_WORDS:
            return False

        if normalized in {HELP, "/help"}:
            self.ui.show_help(self.commands.ids())
            return True

        if normalized == TOOLTIP:
            item = self.controller.status_bar
            self.ui.show_tooltip(item.tooltip if item and item.visible else None)
            return True

        if normalized in {RELOAD, "/config_reload"}:
            self._reload_configuration()
            return True

        try:
            self.commands.dispatch(normalized)
        except UnknownCommandError as e:
            self.ui.display_warning(f"{e}. Type [cyan]help[/cyan] for the list.")
        except StatusClockError as e:
            self.ui.display_error(normalized, str(e))
        except Exception as e:
            logger.exception("Command %s failed", normalized)
            self.ui.display_error(normalized, f"{type(e).__name__}: {e}")
        return True

    def _reload_configuration(self) -> None:
        with self.ui.create_status("Reloading configuration..."):
            success = Config.reload()
            self.settings.refresh_from_disk()

        if not success:
            self.ui.display_error(
                "reload",
                f"Failed to reload configuration. Check {Config.CONFIG_JSON_FILE} for errors.",
            )
            return

        self.controller.reconfigure()
        self.ui.display_message(
            f"[green]Configuration reloaded from[/green] [cyan]{Config.CONFIG_JSON_FILE}[/cyan]"
        )

    def _completer(self):
        words = self.commands.ids() + [HELP, TOOLTIP, RELOAD, "exit"]
        return WordCompleter(words, sentence=True)

    def run(self) -> None:
        if self.session is None:
            self.session = PromptSession()
        self.controller.activate()
        self.ui.show_welcome()

        try:
            while True:
                try:
                    user_input = self.session.prompt(
                        message=self.ui.get_prompt_text,
                        key_bindings=self.bindings,
                        style=self.ui.get_style(),
                        bottom_toolbar=self._bottom_toolbar,
                        refresh_interval=self.controller.refresh_interval,
                        completer=self._completer(),
                        complete_while_typing=True,
                        mouse_support=True,
                    )
                except (EOFError, KeyboardInterrupt):
                    break

                if not self.handle_input(user_input):
                    break
        finally:
            self.controller.deactivate()
            self.ui.display_goodbye()


def main() -> None:
    Config.ensure_directories()
    setup_logging()

    app = StatusClockApp()
    app.run()


if __name__ == "__main__":
    main()
