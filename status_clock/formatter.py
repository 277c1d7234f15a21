#!/usr/bin/env python3
"""Clock text formatting.

``format_time`` is the only piece of the clock with real logic: a single
left-to-right scan over the custom format that expands the longest token at
each position and never rescans what it emitted.
"""
from dataclasses import dataclass
from datetime import datetime
from typing import Callable, Dict


CLOCK_ICON = "$(clock)"


@dataclass(frozen=True)
class TimeFormatConfig:
    military_time: bool = False
    custom_format: str = ""

    @classmethod
    def from_settings(cls, settings) -> "TimeFormatConfig":
        return cls(
            military_time=bool(settings.get("statusClock.militaryTime")),
            custom_format=str(settings.get("statusClock.customTimeFormat") or ""),
        )


def _twelve_hour(hour: int) -> int:
    return hour % 12 or 12


_TOKENS: Dict[str, Callable[[datetime], str]] = {
    "HH": lambda t: f"{t.hour:02d}",
    "H": lambda t: str(t.hour),
    "hh": lambda t: f"{_twelve_hour(t.hour):02d}",
    "h": lambda t: str(_twelve_hour(t.hour)),
    "mm": lambda t: f"{t.minute:02d}",
    "m": lambda t: str(t.minute),
    "ss": lambda t: f"{t.second:02d}",
    "s": lambda t: str(t.second),
    "a": lambda t: "PM" if t.hour >= 12 else "AM",
    "A": lambda t: "PM" if t.hour >= 12 else "AM",
}

# Longest first so "HH" wins over "H" at the same position.
_TOKEN_LENGTHS = sorted({len(token) for token in _TOKENS}, reverse=True)


def expand_tokens(fmt: str, now: datetime) -> str:
    parts = []
    i = 0
    while i < len(fmt):
        for length in _TOKEN_LENGTHS:
            candidate = fmt[i : i + length]
            if len(candidate) == length and candidate in _TOKENS:
                parts.append(_TOKENS[candidate](now))
                i += length
                break
        else:
            parts.append(fmt[i])
            i += 1
    return "".join(parts)


def format_time(now: datetime, config: TimeFormatConfig) -> str:
    if config.military_time:
        return f"{now.hour:02d}:{now.minute:02d}"

    if config.custom_format:
        return expand_tokens(config.custom_format, now)

    return now.strftime("%X")


def format_date(now: datetime) -> str:
    return now.strftime("%x")


def render_status_text(
    now: datetime, config: TimeFormatConfig, show_date: bool = False
) -> str:
    text = f"{CLOCK_ICON} {format_time(now, config)}"
    if show_date:
        text = f"{text} {format_date(now)}"
    return text
