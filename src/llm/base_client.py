# src/llm/base_client.py — v2
"""Abstract LLM judge interface.

``judge()`` is shared by every adapter: credential check, timeout,
error normalization and reply parsing live here once. Adapters only build
and send the provider request (``_complete``) and translate their SDK's
exceptions into the core error taxonomy.
"""

from __future__ import annotations

import asyncio
import logging
from abc import ABC, abstractmethod
from typing import Any

import httpx

from aidetector.core.errors import (
    JudgeError,
    ProviderError,
    ProviderTimeout,
    ProviderUnavailable,
)
from aidetector.core.models import LlmResult
from aidetector.llm.models import JudgeReply
from aidetector.llm.parsing import parse_score
from aidetector.llm.prompts import DEFAULT_MAX_TOKENS, DEFAULT_TEMPERATURE

logger = logging.getLogger(__name__)


class BaseLLMJudge(ABC):
    """Unified interface for all LLM judge providers."""

    def __init__(
        self,
        model: str,
        api_key: str = "",
        timeout_s: float = 30.0,
        temperature: float = DEFAULT_TEMPERATURE,
        max_tokens: int = DEFAULT_MAX_TOKENS,
    ) -> None:
        self._model = model
        self._api_key = api_key
        self._timeout_s = timeout_s
        self._temperature = temperature
        self._max_tokens = max_tokens

    async def judge(self, text: str) -> LlmResult:
        """Ask the provider to grade ``text`` and return a clamped result.

        Raises:
            ProviderUnavailable: No credential configured.
            ProviderTimeout: The call exceeded the configured timeout.
            ProviderError: Non-success status or unusable response envelope.
            ParseError: Reply is not the expected score/confidence JSON.
        """
        if not self._api_key:
            raise ProviderUnavailable(
                f"{self.provider_name} credential not configured"
            )

        try:
            reply = await asyncio.wait_for(
                self._complete(text), timeout=self._timeout_s
            )
        except asyncio.TimeoutError:
            raise ProviderTimeout(self.provider_name, self._timeout_s) from None
        except JudgeError:
            raise
        except Exception as e:
            # Anything the adapter did not translate is still a provider failure.
            raise ProviderError(self.provider_name, f"Request failed: {e}") from e

        result = parse_score(reply.content)
        logger.info(
            "LLM judge %s/%s: score=%d confidence=%.2f (%d ms)",
            reply.provider, reply.model, result.score, result.confidence,
            reply.latency_ms,
        )
        return result

    @abstractmethod
    async def _complete(self, text: str) -> JudgeReply:
        """Send the rubric + document and return the model's text reply."""

    @property
    @abstractmethod
    def provider_name(self) -> str:
        """Provider identifier (anthropic, openrouter)."""

    @property
    def model(self) -> str:
        return self._model


def status_error_detail(error: Any) -> str:
    """Response body of an SDK status error, for operator diagnosis.

    Works for both the anthropic and openai ``APIStatusError`` types.
    """
    try:
        return error.response.text
    except (AttributeError, httpx.ResponseNotRead):
        body = getattr(error, "body", None)
        return str(body if body is not None else error)
