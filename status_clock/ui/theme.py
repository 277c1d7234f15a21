#!/usr/bin/env python3
import re
from dataclasses import dataclass
from typing import Any, Dict, Mapping, Optional
from rich.panel import Panel
from rich.text import Text
from ..config import Config

THEME_ICON_PATTERN = re.compile(r"\$\(([a-z0-9-]+)\)")


def render_theme_icons(text: str, icons: Optional[Mapping[str, str]] = None) -> str:
    """Swap ``$(name)`` placeholders for glyphs; unknown names are dropped."""
    table = Config.THEME_ICONS if icons is None else icons

    def _replace(match: "re.Match[str]") -> str:
        return table.get(match.group(1), "")

    return THEME_ICON_PATTERN.sub(_replace, text).strip()


@dataclass(frozen=True)
class PanelStyle:
    border_style: str
    padding: Optional[tuple[int, int]] = (0, 1)
    title_style: Optional[str] = None
    title_align: str = "left"
    expand: bool = False


class PanelTheme:
    @staticmethod
    def get_style(name: str) -> PanelStyle:
        theme = Config.PANEL_STYLES.get(name, Config.PANEL_STYLES["default"])
        default_theme = Config.PANEL_STYLES["default"]

        border_style = theme.get(
            "border_style", default_theme.get("border_style", "#888888")
        )
        padding = theme.get("padding", default_theme.get("padding"))
        if isinstance(padding, list):
            padding = tuple(padding)

        return PanelStyle(
            border_style=border_style,
            padding=padding,
            title_style=theme.get("title_style"),
            title_align=theme.get("title_align", default_theme.get("title_align", "left")),
            expand=theme.get("expand", default_theme.get("expand", False)),
        )

    @staticmethod
    def build(
        renderable: Any,
        title: str | Text = "",
        style: str = "default",
        *,
        fit: bool = False,
        **overrides: Any,
    ) -> Panel:
        panel_style = PanelTheme.get_style(style)

        panel_kwargs: Dict[str, Any] = {"border_style": panel_style.border_style}
        if panel_style.padding is not None:
            panel_kwargs["padding"] = panel_style.padding
        if panel_style.title_align:
            panel_kwargs["title_align"] = panel_style.title_align
        if panel_style.expand:
            panel_kwargs["expand"] = panel_style.expand

        panel_kwargs.update(overrides)

        title_value = title
        if isinstance(title, str) and panel_style.title_style:
            title_value = Text(title, style=panel_style.title_style)

        if fit:
            return Panel.fit(renderable, title=title_value, **panel_kwargs)

        return Panel(renderable, title=title_value, **panel_kwargs)
