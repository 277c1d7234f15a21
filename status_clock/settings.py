#!/usr/bin/env python3
"""Persistent store for the clock's user settings.

Settings live in a flat JSON object keyed by dotted names
(``statusClock.enable``). Only values that were explicitly set are written;
everything else falls back to the declared default.
"""
import json
import logging
import threading
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional, Tuple

from .config import Config
from .errors import UnknownSettingError
from .events import ConfigurationChangeEvent, Disposable, EventEmitter

logger = logging.getLogger(__name__)

SECTION = "statusClock"


@dataclass(frozen=True)
class SettingDefinition:
    key: str
    default: Any
    type: type
    description: str

    @property
    def name(self) -> str:
        return self.key.split(".", 1)[-1]

    def accepts(self, value: Any) -> bool:
        if self.type is bool:
            return isinstance(value, bool)
        return isinstance(value, self.type)


SETTINGS: Tuple[SettingDefinition, ...] = (
    SettingDefinition(
        f"{SECTION}.enable", True, bool, "Show the clock in the status bar."
    ),
    SettingDefinition(
        f"{SECTION}.showDate", False, bool, "Append the local date after the time."
    ),
    SettingDefinition(
        f"{SECTION}.militaryTime",
        False,
        bool,
        "Use 24-hour HH:mm. Overrides the custom time format.",
    ),
    SettingDefinition(
        f"{SECTION}.customTimeFormat",
        "",
        str,
        "Time format using HH H hh h mm m ss s a A. Empty uses the locale default.",
    ),
)

DEFINITIONS: Dict[str, SettingDefinition] = {d.key: d for d in SETTINGS}


class SettingsStore:
    def __init__(self, path: Optional[Path] = None) -> None:
        self.path = Path(path or Config.SETTINGS_FILE)
        self._values: Dict[str, Any] = {}
        self._mtime: Optional[float] = None
        self._lock = threading.RLock()
        self._on_change: EventEmitter[ConfigurationChangeEvent] = EventEmitter()
        self._values = self._read()

    def on_did_change(
        self, listener: Callable[[ConfigurationChangeEvent], None]
    ) -> Disposable:
        return self._on_change.subscribe(listener)

    def get(self, key: str, default: Any = None) -> Any:
        with self._lock:
            if key in self._values:
                return self._values[key]
        definition = DEFINITIONS.get(key)
        if definition is not None:
            return definition.default
        return default

    def update(self, key: str, value: Any) -> None:
        definition = DEFINITIONS.get(key)
        if definition is None:
            raise UnknownSettingError(key)
        if not definition.accepts(value):
            raise TypeError(
                f"{key} expects {definition.type.__name__}, got {type(value).__name__}"
            )

        with self._lock:
            previous = self.get(key)
            self._values[key] = value
            self._write()

        logger.debug("Setting %s updated to %r", key, value)
        if previous != value:
            self._on_change.fire(ConfigurationChangeEvent(frozenset({key})))

    def toggle(self, key: str) -> bool:
        value = not bool(self.get(key))
        self.update(key, value)
        return value

    def inspect(self) -> List[Tuple[SettingDefinition, Any, bool]]:
        """Each definition with its effective value and whether it was set."""
        with self._lock:
            return [(d, self.get(d.key), d.key in self._values) for d in SETTINGS]

    def reset(self) -> None:
        with self._lock:
            before = {d.key: self.get(d.key) for d in SETTINGS}
            self._values = {}
            self._write()
            changed = {k for k, v in before.items() if self.get(k) != v}

        if changed:
            self._on_change.fire(ConfigurationChangeEvent(frozenset(changed)))

    def refresh_from_disk(self) -> bool:
        """Reload the file if it changed on disk since the last read or write."""
        mtime = self._stat_mtime()
        with self._lock:
            if mtime == self._mtime:
                return False
            before = {d.key: self.get(d.key) for d in SETTINGS}
            self._values = self._read()
            changed = {k for k, v in before.items() if self.get(k) != v}

        if changed:
            logger.info("Settings changed on disk: %s", ", ".join(sorted(changed)))
            self._on_change.fire(ConfigurationChangeEvent(frozenset(changed)))
        return bool(changed)

    def _stat_mtime(self) -> Optional[float]:
        try:
            return self.path.stat().st_mtime
        except OSError:
            return None

    def _read(self) -> Dict[str, Any]:
        self._mtime = self._stat_mtime()
        if self._mtime is None:
            return {}

        try:
            with self.path.open("r", encoding="utf-8") as f:
                data = json.load(f)
        except (json.JSONDecodeError, OSError) as e:
            logger.warning("Could not load settings from %s: %s", self.path, e)
            return {}

        if not isinstance(data, dict):
            logger.warning("Ignoring %s: expected a JSON object", self.path)
            return {}

        values = {}
        for key, value in data.items():
            definition = DEFINITIONS.get(key)
            if definition is None:
                logger.debug("Ignoring unknown setting %s", key)
                continue
            if not definition.accepts(value):
                logger.warning("Ignoring %s=%r: expected %s", key, value, definition.type.__name__)
                continue
            values[key] = value
        return values

    def _write(self) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        tmp = self.path.with_suffix(self.path.suffix + ".tmp")
        with tmp.open("w", encoding="utf-8") as f:
            json.dump(self._values, f, indent=2, ensure_ascii=False)
        tmp.replace(self.path)
        self._mtime = self._stat_mtime()
