#!/usr/bin/env python3
import re
from dataclasses import dataclass
from typing import List, Tuple

from rich.markdown import Markdown

from ..commands import (
    COMMAND_SCHEME,
    OPEN_MENU,
    OPEN_SETTINGS,
    SET_CUSTOM_TIME_FORMAT,
    TOGGLE_ENABLE,
    TOGGLE_MILITARY_TIME,
    TOGGLE_SHOW_DATE,
    command_uri,
)
from ..settings import SECTION
from .theme import render_theme_icons

LINK_PATTERN = re.compile(r"\[([^\]]+)\]\(([^)\s]+)\)")


@dataclass
class MarkdownString:
    value: str = ""
    is_trusted: bool = False
    support_theme_icons: bool = False

    def links(self) -> List[Tuple[str, str]]:
        return LINK_PATTERN.findall(self.value)

    def command_links(self) -> List[Tuple[str, str]]:
        """Links that may run a command; untrusted markdown has none."""
        if not self.is_trusted:
            return []
        return [(label, target) for label, target in self.links() if target.startswith(COMMAND_SCHEME)]

    def rendered_text(self) -> str:
        text = self.value
        if self.support_theme_icons:
            text = render_theme_icons(text)
        if not self.is_trusted:
            text = LINK_PATTERN.sub(
                lambda m: m.group(1) if m.group(2).startswith(COMMAND_SCHEME) else m.group(0),
                text,
            )
        return text

    def to_rich(self) -> Markdown:
        return Markdown(self.rendered_text())


def _checkbox(checked: bool, label: str, command: str) -> str:
    mark = "x" if checked else " "
    return f"- [{mark}] {label} — [Toggle]({command_uri(command)})"


def build_tooltip(settings) -> MarkdownString:
    enabled = bool(settings.get(f"{SECTION}.enable"))
    show_date = bool(settings.get(f"{SECTION}.showDate"))
    military = bool(settings.get(f"{SECTION}.militaryTime"))
    custom_format = settings.get(f"{SECTION}.customTimeFormat") or ""

    if military:
        format_line = "Time format: `HH:mm` (military time)"
    elif custom_format:
        format_line = f"Time format: `{custom_format}`"
    else:
        format_line = "Time format: locale default"

    open_settings = f"[Open settings]({command_uri(OPEN_SETTINGS, SECTION)})"
    lines = [
        "**Status Clock**",
        "",
        "Settings:",
        "",
        _checkbox(enabled, "Enable clock", TOGGLE_ENABLE),
        _checkbox(show_date, "Show date", TOGGLE_SHOW_DATE),
        _checkbox(military, "Military time", TOGGLE_MILITARY_TIME),
        "",
        f"{format_line} — [Change]({command_uri(SET_CUSTOM_TIME_FORMAT)})",
        "",
        f"[Open menu…]({command_uri(OPEN_MENU)})  |  {open_settings}",
    ]
    return MarkdownString("\n".join(lines), is_trusted=True, support_theme_icons=True)
