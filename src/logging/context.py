# src/logging/context.py — v2
"""Contextual logging support — attach fingerprint, provider, step to log records.

Context variables are task-local under asyncio, so concurrent analyses do not
see each other's context.
"""

from __future__ import annotations

import contextvars
from dataclasses import dataclass
from typing import Any

_fingerprint: contextvars.ContextVar[str | None] = contextvars.ContextVar(
    "fingerprint", default=None
)
_provider: contextvars.ContextVar[str | None] = contextvars.ContextVar(
    "provider", default=None
)
_step: contextvars.ContextVar[str | None] = contextvars.ContextVar(
    "step", default=None
)


@dataclass(frozen=True)
class LogContext:
    """Immutable snapshot of current logging context."""

    fingerprint: str | None = None
    provider: str | None = None
    step: str | None = None

    def as_dict(self) -> dict[str, Any]:
        """Return non-None fields as dict for JSON log injection."""
        return {k: v for k, v in self.__dict__.items() if v is not None}


def get_context() -> LogContext:
    """Snapshot current context variables."""
    return LogContext(
        fingerprint=_fingerprint.get(),
        provider=_provider.get(),
        step=_step.get(),
    )


def set_analysis_context(fingerprint: str, provider: str) -> None:
    """Set analysis-level context (called once per request)."""
    _fingerprint.set(fingerprint)
    _provider.set(provider)


def set_step(step: str | None) -> None:
    """Set the current pipeline step (lookup, judge, combine, persist)."""
    _step.set(step)


def clear_context() -> None:
    """Reset all context variables."""
    _fingerprint.set(None)
    _provider.set(None)
    _step.set(None)
