#!/usr/bin/env python3
"""Status Clock - a live clock in a terminal status bar."""

__version__ = "1.0.0"

from .formatter import TimeFormatConfig, format_time

__all__ = ["TimeFormatConfig", "format_time", "__version__"]
