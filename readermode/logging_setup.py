"""Logging for the reader mode server: console plus a per-run log file."""
from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Optional

LOG_DIR = Path(os.getenv("APP_LOG_DIR", "logs"))
LOG_FILENAME = os.getenv("APP_LOG_FILENAME", "latest-run.log")
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s - %(message)s"


def normalise_level(level: Optional[str | int]) -> int:
    """Map ``LOG_LEVEL`` values (``"debug"``, ``"WARN"``, ``"15"``) to a level number."""
    if isinstance(level, int):
        return level
    if level and level.strip().isdigit():
        return int(level)
    mapped = logging.getLevelName(str(level or "").strip().upper())
    return mapped if isinstance(mapped, int) else logging.INFO


def configure_logging(level: Optional[str | int] = None, log_dir: Optional[Path] = None) -> Path:
    """Send records to stderr and to a log file truncated on each call.

    Existing root handlers are closed and replaced, so configuring twice
    never duplicates output.
    """

    log_path = (log_dir or LOG_DIR) / LOG_FILENAME
    log_path.parent.mkdir(parents=True, exist_ok=True)

    for handler in logging.root.handlers[:]:
        logging.root.removeHandler(handler)
        handler.close()

    logging.basicConfig(
        level=normalise_level(level),
        format=LOG_FORMAT,
        handlers=[
            logging.StreamHandler(),
            logging.FileHandler(log_path, mode="w", encoding="utf-8"),
        ],
    )
    return log_path
