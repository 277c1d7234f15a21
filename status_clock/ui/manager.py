#!/usr/bin/env python3
from typing import Iterable, List, Optional

from prompt_toolkit.application import get_app
from prompt_toolkit.formatted_text import (
    FormattedText,
    HTML,
    fragment_list_width,
)
from prompt_toolkit.styles import Style, merge_styles
from prompt_toolkit.styles.defaults import default_ui_style
from rich.console import Console
from rich.status import Status
from rich.table import Table
from rich.text import Text

from ..config import Config
from ..settings import SettingsStore
from .status_bar import ALIGN_LEFT, StatusBarItem
from .theme import PanelTheme, render_theme_icons
from .tooltip import MarkdownString


class UIManager:
    def __init__(self, console: Console, settings: Optional[SettingsStore] = None) -> None:
        self.console = console
        self.settings = settings

    def get_style(self) -> Style:
        custom_style = Style.from_dict(
            {**Config.PROMPT_STYLES, **Config.COMPLETION_STYLES}
        )
        return merge_styles([default_ui_style(), custom_style])

    def get_prompt_text(self) -> HTML:
        prompt_symbol_text = getattr(Config, "PROMPT_SYMBOL", "❯") or "❯"
        return HTML(
            "<prompt_border>╰─</prompt_border>"
            f"<prompt_symbol>{prompt_symbol_text}</prompt_symbol> "
        )

    def get_toolbar_text(self, item: Optional[StatusBarItem], on_click=None) -> FormattedText:
        if item is None:
            return FormattedText([])

        fragments = item.fragments(on_click)
        if not fragments or item.alignment == ALIGN_LEFT:
            return FormattedText(fragments)

        try:
            total_width = get_app().output.get_size().columns
        except Exception:
            total_width = 100

        padding_width = max(total_width - fragment_list_width(fragments), 0)
        return FormattedText([("class:status_clock.left", " " * padding_width)] + fragments)

    def show_welcome(self) -> None:
        if not Config.SHOW_STARTUP_BANNER:
            return

        welcome_parts: List[str] = [Config.WELCOME_MESSAGE]
        welcome_parts.append(
            "\nType a command id (Tab completes), [cyan]help[/cyan] or [cyan]exit[/cyan]."
        )
        welcome_parts.append("Press [cyan]F2[/cyan] or click the clock for the menu.")

        self.console.print(
            PanelTheme.build("\n".join(welcome_parts), style="info", fit=True)
        )
        self.console.print()

    def show_help(self, command_ids: Iterable[str] = ()) -> None:
        keybindings_lines = ["[bold]Keybindings[/bold]"]
        for keybind, description in Config.HELP_KEYBINDS:
            keybindings_lines.append(f"  • [cyan]{keybind}[/cyan] – {description}")

        commands_lines = ["\n[bold]Commands[/bold]"]
        for command_id in command_ids:
            commands_lines.append(f"  • [cyan]{command_id}[/cyan]")
        commands_lines.extend(
            [
                "  • [cyan]command:<id>?<json>[/cyan] – Run a tooltip link",
                "  • [cyan]tooltip[/cyan] – Show the status bar tooltip",
                "  • [cyan]help[/cyan] – Show this help",
                "  • [cyan]exit[/cyan] – Quit",
            ]
        )

        help_text = "\n".join(keybindings_lines + commands_lines)

        self.console.print()
        self.console.print(
            PanelTheme.build(help_text, title="Help", style="info", fit=True)
        )
        self.console.print()

    def show_tooltip(self, tooltip: Optional[MarkdownString]) -> None:
        if tooltip is None:
            self.console.print("[dim]The clock is hidden.[/dim]")
            return

        self.console.print(
            PanelTheme.build(tooltip.to_rich(), title="Status Clock", style="info", fit=True)
        )
        links = tooltip.command_links()
        if links:
            table = Table(show_header=False, box=None, padding=(0, 1))
            table.add_column(style="bold")
            table.add_column(style="cyan")
            for label, target in links:
                table.add_row(label, target)
            self.console.print(table)

    def build_settings_table(self, query: str = "") -> Table:
        table = Table(title=f"Settings ({self.settings.path})" if self.settings else "Settings")
        table.add_column("Setting", style="cyan", no_wrap=True)
        table.add_column("Value", style="bold")
        table.add_column("Default", style="dim")
        table.add_column("Description")

        if self.settings is None:
            return table

        for definition, value, is_set in self.settings.inspect():
            if query and query not in definition.key:
                continue
            shown = repr(value) if isinstance(value, str) else str(value).lower()
            default = (
                repr(definition.default)
                if isinstance(definition.default, str)
                else str(definition.default).lower()
            )
            table.add_row(
                definition.key,
                Text(shown, style="green" if is_set else ""),
                default,
                definition.description,
            )
        return table

    def show_settings(self, query: str = "") -> None:
        self.console.print(self.build_settings_table(query))

    def display_message(self, message: str, title: str = "Status Clock", style: str = "success") -> None:
        self.console.print(
            PanelTheme.build(render_theme_icons(message), title=title, style=style, fit=True)
        )

    def display_warning(self, message: str) -> None:
        self.display_message(f"[yellow]{message}[/yellow]", style="warning")

    def display_error(self, command: str, error_msg: str) -> None:
        self.console.print(
            PanelTheme.build(
                f"[red]{error_msg}[/red]",
                title=f" {command}",
                style="error",
                fit=True,
            )
        )

    def display_goodbye(self) -> None:
        self.console.print("[yellow]Goodbye![/yellow]")

    def create_status(self, message: str) -> Status:
        return Status(f"[bold green]{message}", console=self.console)
