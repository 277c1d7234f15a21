#!/usr/bin/env python3
"""Exceptions raised by the clock host glue."""


class StatusClockError(Exception):
    pass


class UnknownCommandError(StatusClockError, KeyError):
    def __init__(self, command: str):
        super().__init__(command)
        self.command = command

    def __str__(self) -> str:
        return f"Unknown command: {self.command}"


class UnknownSettingError(StatusClockError, KeyError):
    def __init__(self, key: str):
        super().__init__(key)
        self.key = key

    def __str__(self) -> str:
        return f"Unknown setting: {self.key}"
