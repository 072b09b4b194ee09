# src/logging/logger.py — v3
"""Logger setup for the detector: JSON or text records on stderr.

Every record carries the analysis context (fingerprint, provider, step) set
by the orchestrator. Provider credentials that end up in a message, e.g.
inside an SDK error string, are masked before the record is written.
"""

from __future__ import annotations

import json
import logging
import re
import sys
from datetime import datetime, timezone
from typing import Any

from aidetector.logging.context import get_context

ROOT_LOGGER = "aidetector"

# Anthropic (sk-ant-...) and OpenRouter (sk-or-...) credentials.
_SECRET_RE = re.compile(r"\bsk-(?:ant|or)-[A-Za-z0-9_\-]{4,}")
_REDACTED = "sk-***"


def redact(message: str) -> str:
    """Mask provider credentials in a log message."""
    return _SECRET_RE.sub(_REDACTED, message)


class _DetectorFormatter(logging.Formatter):
    def message(self, record: logging.LogRecord) -> str:
        return redact(record.getMessage())


class JsonFormatter(_DetectorFormatter):
    """One JSON object per line."""

    def format(self, record: logging.LogRecord) -> str:
        entry: dict[str, Any] = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": self.message(record),
        }
        context = get_context().as_dict()
        if context:
            entry["context"] = context

        data = getattr(record, "data", None)
        if data:
            entry["data"] = data

        if record.exc_info and record.exc_info[1] is not None:
            entry["exception"] = redact(self.formatException(record.exc_info))

        return json.dumps(entry, default=str)


class TextFormatter(_DetectorFormatter):
    """Single-line format for local runs."""

    def format(self, record: logging.LogRecord) -> str:
        ctx = get_context()
        line = (
            f"{datetime.now(timezone.utc):%Y-%m-%d %H:%M:%S} "
            f"[{record.levelname:8s}] {record.name}"
        )
        if ctx.fingerprint:
            line += f" [{ctx.fingerprint[:12]}]"
        if ctx.step:
            line += f" ({ctx.step})"
        return f"{line} — {self.message(record)}"


def get_logger(name: str) -> logging.Logger:
    """Child of the package logger, e.g. ``get_logger("cli")``."""
    return logging.getLogger(f"{ROOT_LOGGER}.{name}")


def setup_logging(
    level: str = "INFO",
    log_format: str = "json",
    log_file: str | None = None,
    rotation: str = "10MB",
    retention: int = 30,
) -> None:
    """Configure the package logger. Safe to call more than once.

    Args:
        level: DEBUG, INFO, WARNING or ERROR; unknown names mean INFO.
        log_format: "json" or "text".
        log_file: Optional file that also receives every record.
        rotation: Size that triggers rotation of ``log_file`` (e.g. "10MB").
        retention: Rotated files kept next to ``log_file``.
    """
    package_logger = logging.getLogger(ROOT_LOGGER)
    package_logger.setLevel(getattr(logging, level.upper(), logging.INFO))
    package_logger.handlers.clear()

    formatter = JsonFormatter() if log_format == "json" else TextFormatter()

    # stdout is reserved for CLI output
    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stderr)]
    if log_file:
        from aidetector.logging.handlers import create_rotating_handler

        handlers.append(
            create_rotating_handler(log_file, rotation=rotation, retention=retention)
        )
    for handler in handlers:
        handler.setFormatter(formatter)
        package_logger.addHandler(handler)

    # SDK transport chatter
    for noisy in ("httpx", "httpcore", "anthropic", "openai"):
        logging.getLogger(noisy).setLevel(logging.WARNING)
