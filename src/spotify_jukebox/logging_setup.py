"""Logging setup for the jukebox console.

Both run modes own the terminal (the TUI draws full screen, ``-c`` prints one
result), so the console handler only carries warnings by default and the full
INFO trail goes to the rotating log file.
"""

from __future__ import annotations

import logging
from logging.handlers import RotatingFileHandler
import os
from pathlib import Path
from typing import Optional

FILE_HANDLER_NAME = "jukebox-file"
CONSOLE_HANDLER_NAME = "jukebox-console"
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def _default_log_dir() -> Path:
    local_appdata = os.getenv("LOCALAPPDATA")
    if local_appdata:
        return Path(local_appdata) / "SpotifyJukebox" / "logs"
    return Path.home() / ".spotify_jukebox" / "logs"


def _level_from_env() -> int:
    level = logging.getLevelName(os.getenv("JUKEBOX_LOG_LEVEL", "INFO").upper())
    return level if isinstance(level, int) else logging.INFO


def _find_handler(root: logging.Logger, name: str) -> Optional[logging.Handler]:
    for handler in root.handlers:
        if handler.get_name() == name:
            return handler
    return None


def init_logging(console_level: Optional[int] = logging.WARNING) -> Path:
    """Initialize logging and return the log file path.

    ``console_level`` of None leaves stderr without a handler.
    """
    log_path = _default_log_dir() / "app.log"
    level = _level_from_env()
    formatter = logging.Formatter(LOG_FORMAT)
    root = logging.getLogger()
    root.setLevel(level)

    if _find_handler(root, FILE_HANDLER_NAME) is None:
        try:
            log_path.parent.mkdir(parents=True, exist_ok=True)
            file_handler = RotatingFileHandler(
                log_path, maxBytes=2_000_000, backupCount=5, encoding="utf-8"
            )
        except OSError as exc:
            # Fall back to stderr so failures are still visible.
            console_level = logging.WARNING if console_level is None else console_level
            logging.getLogger(__name__).warning(
                "Cannot write log file %s: %s", log_path, exc
            )
        else:
            file_handler.set_name(FILE_HANDLER_NAME)
            file_handler.setLevel(level)
            file_handler.setFormatter(formatter)
            root.addHandler(file_handler)

    console = _find_handler(root, CONSOLE_HANDLER_NAME)
    if console_level is None:
        if console is not None:
            root.removeHandler(console)
    elif console is None:
        console = logging.StreamHandler()
        console.set_name(CONSOLE_HANDLER_NAME)
        console.setFormatter(formatter)
        console.setLevel(console_level)
        root.addHandler(console)
    else:
        console.setLevel(console_level)

    logging.getLogger(__name__).info("Logging initialized at %s", log_path)
    return log_path
