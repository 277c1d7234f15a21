#!/usr/bin/env python3
from typing import Optional, Sequence

from prompt_toolkit.shortcuts import input_dialog, radiolist_dialog
from prompt_toolkit.styles import BaseStyle

from ..ports import QuickPickItem
from .theme import render_theme_icons


class DialogQuickPick:
    def __init__(self, title: str = "Status Clock", style: Optional[BaseStyle] = None):
        self.title = title
        self.style = style

    def pick(
        self, items: Sequence[QuickPickItem], placeholder: str = ""
    ) -> Optional[QuickPickItem]:
        if not items:
            return None

        values = []
        for item in items:
            label = render_theme_icons(item.label)
            if item.description:
                label = f"{label}  ({item.description})"
            values.append((item, label))

        return radiolist_dialog(
            title=self.title,
            text=placeholder,
            values=values,
            default=items[0],
            style=self.style,
        ).run()


class DialogInputBox:
    def __init__(self, title: str = "Status Clock", style: Optional[BaseStyle] = None):
        self.title = title
        self.style = style

    def ask(self, prompt: str, value: str = "", placeholder: str = "") -> Optional[str]:
        text = prompt if not placeholder else f"{prompt}\n{placeholder}"
        return input_dialog(
            title=self.title,
            text=text,
            default=value,
            style=self.style,
        ).run()
