#!/usr/bin/env python3
import json
import logging
from typing import Any, Callable, Dict, List, Tuple
from urllib.parse import quote, unquote

from .errors import UnknownCommandError
from .events import Disposable

logger = logging.getLogger(__name__)

COMMAND_SCHEME = "command:"

TOGGLE_ENABLE = "statusClock.toggleEnable"
TOGGLE_SHOW_DATE = "statusClock.toggleShowDate"
TOGGLE_MILITARY_TIME = "statusClock.toggleMilitaryTime"
SET_CUSTOM_TIME_FORMAT = "statusClock.setCustomTimeFormat"
OPEN_MENU = "statusClock.openMenu"
OPEN_SETTINGS = "statusClock.openSettings"


def command_uri(command: str, *args: Any) -> str:
    """Build a ``command:`` link target, args as URL-encoded JSON."""
    if not args:
        return f"{COMMAND_SCHEME}{command}"
    payload = args[0] if len(args) == 1 else list(args)
    return f"{COMMAND_SCHEME}{command}?{quote(json.dumps(payload), safe='')}"


def parse_command_uri(uri: str) -> Tuple[str, List[Any]]:
    if not uri.startswith(COMMAND_SCHEME):
        raise UnknownCommandError(uri)

    target = uri[len(COMMAND_SCHEME) :]
    command, _, query = target.partition("?")
    if not command:
        raise UnknownCommandError(uri)
    if not query:
        return command, []

    try:
        payload = json.loads(unquote(query))
    except json.JSONDecodeError:
        raise UnknownCommandError(uri) from None

    if isinstance(payload, list):
        return command, payload
    return command, [payload]


class CommandRegistry:
    """Dispatch table from command id to handler."""

    def __init__(self) -> None:
        self._handlers: Dict[str, Callable[..., Any]] = {}

    def register(self, command: str, handler: Callable[..., Any]) -> Disposable:
        if command in self._handlers:
            logger.warning("Command %s registered twice, replacing handler", command)
        self._handlers[command] = handler

        def _unregister():
            if self._handlers.get(command) is handler:
                del self._handlers[command]

        return Disposable(_unregister)

    def has(self, command: str) -> bool:
        return command in self._handlers

    def ids(self) -> List[str]:
        return sorted(self._handlers)

    def execute(self, command: str, *args: Any) -> Any:
        handler = self._handlers.get(command)
        if handler is None:
            raise UnknownCommandError(command)
        logger.debug("Executing %s %r", command, args)
        return handler(*args)

    def execute_uri(self, uri: str) -> Any:
        command, args = parse_command_uri(uri)
        return self.execute(command, *args)

    def dispatch(self, text: str) -> Any:
        """Run either a bare command id or a ``command:`` URI."""
        text = text.strip()
        if text.startswith(COMMAND_SCHEME):
            return self.execute_uri(text)
        return self.execute(text)
