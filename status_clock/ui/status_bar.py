#!/usr/bin/env python3
import threading
from dataclasses import dataclass
from typing import Callable, List, Optional

from prompt_toolkit.mouse_events import MouseEvent, MouseEventType

from .theme import render_theme_icons
from .tooltip import MarkdownString

ALIGN_LEFT = "left"
ALIGN_RIGHT = "right"


@dataclass(frozen=True)
class StatusBarSnapshot:
    text: str
    tooltip: Optional[MarkdownString]
    command: Optional[str]
    visible: bool


class StatusBarItem:
    """A single-line status bar entry with a tooltip and a click command.

    The refresh timer writes to it from its own thread while the prompt
    redraws from another, so every field goes through the lock.
    """

    def __init__(self, alignment: str = ALIGN_RIGHT, priority: int = 0) -> None:
        self.alignment = ALIGN_LEFT if alignment == ALIGN_LEFT else ALIGN_RIGHT
        self.priority = priority
        self._lock = threading.Lock()
        self._text = ""
        self._tooltip: Optional[MarkdownString] = None
        self._command: Optional[str] = None
        self._visible = False
        self._disposed = False

    @property
    def text(self) -> str:
        with self._lock:
            return self._text

    @text.setter
    def text(self, value: str) -> None:
        with self._lock:
            self._text = value

    @property
    def tooltip(self) -> Optional[MarkdownString]:
        with self._lock:
            return self._tooltip

    @tooltip.setter
    def tooltip(self, value: Optional[MarkdownString]) -> None:
        with self._lock:
            self._tooltip = value

    @property
    def command(self) -> Optional[str]:
        with self._lock:
            return self._command

    @command.setter
    def command(self, value: Optional[str]) -> None:
        with self._lock:
            self._command = value

    @property
    def visible(self) -> bool:
        with self._lock:
            return self._visible and not self._disposed

    @property
    def disposed(self) -> bool:
        return self._disposed

    def show(self) -> None:
        with self._lock:
            if not self._disposed:
                self._visible = True

    def hide(self) -> None:
        with self._lock:
            self._visible = False

    def dispose(self) -> None:
        with self._lock:
            self._visible = False
            self._disposed = True

    def snapshot(self) -> StatusBarSnapshot:
        with self._lock:
            return StatusBarSnapshot(
                text=self._text,
                tooltip=self._tooltip,
                command=self._command,
                visible=self._visible and not self._disposed,
            )

    def fragments(
        self, on_click: Optional[Callable[[str], None]] = None, style: str = "class:status_clock"
    ) -> List[tuple]:
        snap = self.snapshot()
        if not snap.visible or not snap.text:
            return []

        text = f" {render_theme_icons(snap.text)} "
        if on_click is None or not snap.command:
            return [(style, text)]

        command = snap.command

        def _handler(mouse_event: MouseEvent):
            if mouse_event.event_type == MouseEventType.MOUSE_UP:
                on_click(command)
                return None
            return NotImplemented

        return [(style, text, _handler)]
