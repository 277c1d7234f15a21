#!/usr/bin/env python3
import logging
from pathlib import Path
from typing import Optional

from .config import Config

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def setup_logging(log_file: Optional[Path] = None) -> logging.Logger:
    """Send the package's log records to the log file.

    The terminal belongs to the prompt, so no stream handler is attached.
    """
    root = logging.getLogger("status_clock")
    root.setLevel(logging.DEBUG if Config.is_debug() else logging.INFO)

    target = Path(log_file or Config.LOG_FILE)
    for handler in list(root.handlers):
        if isinstance(handler, logging.FileHandler) and Path(
            handler.baseFilename
        ) == target.resolve():
            return root

    try:
        target.parent.mkdir(parents=True, exist_ok=True)
        handler = logging.FileHandler(target, encoding="utf-8")
    except OSError:
        root.addHandler(logging.NullHandler())
        return root

    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    root.addHandler(handler)
    root.propagate = False
    return root
