#!/usr/bin/env python3
import logging
from dataclasses import dataclass, field
from typing import Callable, Generic, List, Optional, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")


class Disposable:
    def __init__(self, on_dispose: Optional[Callable[[], None]] = None):
        self._on_dispose = on_dispose
        self.disposed = False

    def dispose(self) -> None:
        if self.disposed:
            return
        self.disposed = True
        if self._on_dispose is not None:
            self._on_dispose()


class EventEmitter(Generic[T]):
    """Fan an event out to every subscribed listener.

    A listener that raises is logged and skipped so the others still run.
    """

    def __init__(self) -> None:
        self._listeners: List[Callable[[T], None]] = []

    def subscribe(self, listener: Callable[[T], None]) -> Disposable:
        self._listeners.append(listener)

        def _remove():
            try:
                self._listeners.remove(listener)
            except ValueError:
                pass

        return Disposable(_remove)

    def fire(self, event: T) -> None:
        for listener in list(self._listeners):
            try:
                listener(event)
            except Exception:
                logger.exception("Event listener %r failed", listener)

    def __len__(self) -> int:
        return len(self._listeners)


@dataclass(frozen=True)
class ConfigurationChangeEvent:
    keys: frozenset = field(default_factory=frozenset)

    def affects_configuration(self, section: str) -> bool:
        return any(key == section or key.startswith(section + ".") for key in self.keys)
