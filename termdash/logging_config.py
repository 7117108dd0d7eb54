"""termdash logging configuration.

The curses screen owns the terminal, so logs go to a file by default
(`~/.local/state/termdash/termdash.log`). Set `TERMDASH_LOG_PATH=-` to log
to stderr instead, and `TERMDASH_LOG_LEVEL` to change the level.
"""

from __future__ import annotations

import logging
import os
import sys
from pathlib import Path
from typing import Optional

from termdash.constants import DEFAULT_LOG_PATH

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def setup_logging(level: Optional[str] = None, path: Optional[str] = None) -> logging.Handler:
    """Configure termdash logging.

    Args:
        level: Optional override for `TERMDASH_LOG_LEVEL`.
        path: Log file, or "-" for stderr (default: `TERMDASH_LOG_PATH` or the config value).

    Returns:
        The installed handler
    """
    if level:
        os.environ["TERMDASH_LOG_LEVEL"] = level
    if path:
        os.environ["TERMDASH_LOG_PATH"] = path

    level_name = os.getenv("TERMDASH_LOG_LEVEL", "INFO").upper()
    numeric_level = logging.getLevelName(level_name)
    if not isinstance(numeric_level, int):
        raise ValueError(f"Unknown log level: {level_name}")

    target = os.getenv("TERMDASH_LOG_PATH") or DEFAULT_LOG_PATH
    handler: logging.Handler
    if target == "-":
        handler = logging.StreamHandler(sys.stderr)
    else:
        log_file = Path(target).expanduser()
        log_file.parent.mkdir(parents=True, exist_ok=True)
        handler = logging.FileHandler(log_file, encoding="utf-8")
    handler.setFormatter(logging.Formatter(LOG_FORMAT))

    logger = logging.getLogger("termdash")
    for old in list(logger.handlers):
        logger.removeHandler(old)
        old.close()
    logger.addHandler(handler)
    logger.setLevel(numeric_level)
    logger.propagate = False
    return handler
