# src/llm/adapters/anthropic_adapter.py — v3
"""Anthropic Claude judge adapter.

Uses the official anthropic SDK (Messages API). Two credential kinds are
accepted: regular API keys, sent as ``x-api-key``, and OAuth setup tokens
(prefix ``sk-ant-oat01-``), sent as a bearer token together with the OAuth
beta header.
"""

from __future__ import annotations

import logging
import time
from typing import Any

import anthropic
import httpx

from aidetector.core.errors import ProviderError, ProviderTimeout
from aidetector.llm.base_client import BaseLLMJudge, status_error_detail
from aidetector.llm.models import JudgeReply, Message
from aidetector.llm.prompts import SYSTEM_RUBRIC, build_user_prompt

logger = logging.getLogger(__name__)

OAUTH_TOKEN_PREFIX = "sk-ant-oat01-"
OAUTH_BETA_HEADER = "oauth-2025-04-20"
DEFAULT_MODEL = "claude-sonnet-4-5-20250929"


def is_oauth_token(api_key: str) -> bool:
    """OAuth setup tokens need bearer auth instead of x-api-key."""
    return api_key.startswith(OAUTH_TOKEN_PREFIX)


class AnthropicJudge(BaseLLMJudge):
    """Judge backed by Anthropic Claude models."""

    def __init__(
        self,
        model: str = DEFAULT_MODEL,
        api_key: str = "",
        timeout_s: float = 30.0,
        http_client: httpx.AsyncClient | None = None,
        client: Any = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(model=model, api_key=api_key, timeout_s=timeout_s, **kwargs)
        self._http_client = http_client
        self.__client = client  # Lazy initialization

    @property
    def _client(self):
        """Lazy-init Anthropic client (only on first API call)."""
        if self.__client is None:
            self.__client = anthropic.AsyncAnthropic(**self._client_kwargs())
        return self.__client

    def _client_kwargs(self) -> dict[str, Any]:
        kwargs: dict[str, Any] = {
            "timeout": self._timeout_s,
            "max_retries": 0,
        }
        if is_oauth_token(self._api_key):
            kwargs["auth_token"] = self._api_key
            kwargs["default_headers"] = {"anthropic-beta": OAUTH_BETA_HEADER}
        else:
            kwargs["api_key"] = self._api_key
        if self._http_client is not None:
            kwargs["http_client"] = self._http_client
        return kwargs

    async def _complete(self, text: str) -> JudgeReply:
        """Grade text via the Anthropic Messages API."""
        message = Message(role="user", content=build_user_prompt(text))
        kwargs: dict[str, Any] = {
            "model": self._model,
            "system": SYSTEM_RUBRIC,
            "messages": [{"role": message.role, "content": message.content}],
            "temperature": self._temperature,
            "max_tokens": self._max_tokens,
        }

        start = time.monotonic()
        try:
            response = await self._client.messages.create(**kwargs)
        except anthropic.APITimeoutError as e:
            raise ProviderTimeout(self.provider_name, self._timeout_s) from e
        except anthropic.APIStatusError as e:
            raise ProviderError(
                self.provider_name, status_error_detail(e), status_code=e.status_code
            ) from e
        except anthropic.APIConnectionError as e:
            raise ProviderError(
                self.provider_name, f"Anthropic request failed: {e}"
            ) from e
        latency_ms = int((time.monotonic() - start) * 1000)

        return JudgeReply(
            content=self._extract_content(response),
            model=getattr(response, "model", None) or self._model,
            provider=self.provider_name,
            latency_ms=latency_ms,
            raw_response=response,
        )

    @property
    def provider_name(self) -> str:
        return "anthropic"

    # --- Internal helpers ---

    def _extract_content(self, response: Any) -> str:
        """Return the first text block of the response."""
        for block in getattr(response, "content", None) or []:
            if getattr(block, "type", None) == "text":
                return block.text.strip()
        raise ProviderError(self.provider_name, "Empty content array from Anthropic")

