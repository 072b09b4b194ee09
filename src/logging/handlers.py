# src/logging/handlers.py — v2
"""Size-based rotating file handler for the LOG_FILE setting."""

from __future__ import annotations

import logging
import re
from logging.handlers import RotatingFileHandler
from pathlib import Path

_SIZE_RE = re.compile(r"^(\d+)\s*(B|KB|MB|GB)?$", re.IGNORECASE)
_UNITS = {"B": 1, "KB": 1024, "MB": 1024**2, "GB": 1024**3}


def parse_size(size: str) -> int:
    """Parse '10MB', '512 KB' or a bare byte count into bytes."""
    match = _SIZE_RE.match(size.strip())
    if not match:
        raise ValueError(f"Invalid size format: {size!r}. Use e.g. '10MB'.")
    return int(match.group(1)) * _UNITS[(match.group(2) or "B").upper()]


def create_rotating_handler(
    log_file: str | Path,
    rotation: str = "10MB",
    retention: int = 30,
) -> logging.Handler:
    """Rotating handler writing UTF-8 to ``log_file``.

    ``retention`` is the number of rotated backups kept next to the file.
    """
    path = Path(log_file).expanduser()
    path.parent.mkdir(parents=True, exist_ok=True)
    return RotatingFileHandler(
        filename=str(path),
        maxBytes=parse_size(rotation),
        backupCount=max(retention, 0),
        encoding="utf-8",
    )
