#!/usr/bin/env python3
"""UI ports the clock controller talks to.

The terminal app plugs in prompt_toolkit dialogs and rich output; tests plug
in small fakes.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Protocol, Sequence, runtime_checkable


@dataclass(frozen=True)
class QuickPickItem:
    label: str
    action: str
    description: str = ""


@runtime_checkable
class QuickPick(Protocol):
    """Transient list-selection surface."""

    def pick(
        self, items: Sequence[QuickPickItem], placeholder: str = ""
    ) -> Optional[QuickPickItem]:
        """Return the chosen item, or None when dismissed."""


@runtime_checkable
class InputBox(Protocol):
    """Single-line text input surface."""

    def ask(self, prompt: str, value: str = "", placeholder: str = "") -> Optional[str]:
        """Return the entered text, or None when cancelled."""


@runtime_checkable
class SettingsView(Protocol):
    """Surface listing the stored settings."""

    def show_settings(self, query: str = "") -> None:
        """Display settings whose key contains ``query``."""
