# src/core/errors.py — v1
"""Error taxonomy shared by the detection engine.

Every failure surfaced by the core is a DetectorError subclass. Judge
failures share the JudgeError base so callers can treat "the LLM could not
give an opinion" as one case.
"""

from __future__ import annotations


class DetectorError(Exception):
    """Base class for all detection engine errors."""

    @property
    def public_message(self) -> str:
        """Message safe to show to end users (no raw provider payloads)."""
        return str(self)


class InvalidInput(DetectorError):
    """Document rejected before any analysis work (blank or oversize)."""


class JudgeError(DetectorError):
    """Base class for LLM judge failures."""


class ProviderUnavailable(JudgeError):
    """No credential is configured for the selected provider."""


class ProviderError(JudgeError):
    """Remote judge returned a failure status or an unusable envelope."""

    def __init__(
        self,
        provider: str,
        detail: str,
        status_code: int | None = None,
    ) -> None:
        self.provider = provider
        self.detail = detail
        self.status_code = status_code
        prefix = f"{provider} {status_code}" if status_code else provider
        super().__init__(f"{prefix}: {detail}")

    @property
    def public_message(self) -> str:
        if self.status_code:
            return f"LLM API error ({self.provider}, HTTP {self.status_code})"
        return f"LLM API error ({self.provider})"


class ProviderTimeout(ProviderError):
    """Judge call did not complete within its timeout."""

    def __init__(self, provider: str, timeout_s: float | None = None) -> None:
        self.timeout_s = timeout_s
        detail = (
            f"request timed out after {timeout_s:g}s"
            if timeout_s is not None
            else "request timed out"
        )
        super().__init__(provider, detail)

    @property
    def public_message(self) -> str:
        return f"LLM API timeout ({self.provider})"


class ParseError(JudgeError):
    """Judge reply could not be read as a score/confidence JSON object."""

    def __init__(self, message: str, raw: str) -> None:
        self.raw = raw
        super().__init__(f"{message}, raw: {raw}")

    @property
    def public_message(self) -> str:
        return "LLM returned an unreadable score"


class StoreError(DetectorError):
    """Result store read or write failure."""


class InternalError(DetectorError):
    """Unexpected failure inside the heuristic worker."""
