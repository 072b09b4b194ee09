# src/llm/adapters/openrouter_adapter.py — v2
"""OpenRouter judge adapter.

OpenRouter exposes an OpenAI-compatible chat completions API, so this
adapter drives it with the official openai SDK pointed at the OpenRouter
base URL. Auth is a bearer key; OpenRouter also asks callers to identify
themselves with ``HTTP-Referer`` and ``X-Title``.
"""

from __future__ import annotations

import time
from typing import Any

import httpx
import openai

from aidetector.core.errors import ProviderError, ProviderTimeout
from aidetector.llm.base_client import BaseLLMJudge, status_error_detail
from aidetector.llm.models import JudgeReply, Message
from aidetector.llm.prompts import SYSTEM_RUBRIC, build_user_prompt

OPENROUTER_BASE_URL = "https://openrouter.ai/api/v1"
APP_REFERER = "https://aidetector.local"
APP_TITLE = "AI Content Detector"


class OpenRouterJudge(BaseLLMJudge):
    """Judge backed by any chat model routed through OpenRouter."""

    def __init__(
        self,
        model: str = "",
        api_key: str = "",
        timeout_s: float = 30.0,
        base_url: str = OPENROUTER_BASE_URL,
        http_client: httpx.AsyncClient | None = None,
        client: Any = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(model=model, api_key=api_key, timeout_s=timeout_s, **kwargs)
        self._base_url = base_url
        self._http_client = http_client
        self.__client = client

    @property
    def _client(self):
        if self.__client is None:
            self.__client = openai.AsyncOpenAI(**self._client_kwargs())
        return self.__client

    def _client_kwargs(self) -> dict[str, Any]:
        kwargs: dict[str, Any] = {
            "api_key": self._api_key,
            "base_url": self._base_url,
            "default_headers": {"HTTP-Referer": APP_REFERER, "X-Title": APP_TITLE},
            "timeout": self._timeout_s,
            "max_retries": 0,
        }
        if self._http_client is not None:
            kwargs["http_client"] = self._http_client
        return kwargs

    async def _complete(self, text: str) -> JudgeReply:
        messages = [
            Message(role="system", content=SYSTEM_RUBRIC),
            Message(role="user", content=build_user_prompt(text)),
        ]

        t0 = time.monotonic()
        try:
            resp = await self._client.chat.completions.create(
                model=self._model,
                messages=[{"role": m.role, "content": m.content} for m in messages],
                temperature=self._temperature,
                max_tokens=self._max_tokens,
            )
        except openai.APITimeoutError as e:
            raise ProviderTimeout(self.provider_name, self._timeout_s) from e
        except openai.APIStatusError as e:
            raise ProviderError(
                self.provider_name, status_error_detail(e), status_code=e.status_code
            ) from e
        except openai.APIConnectionError as e:
            raise ProviderError(self.provider_name, f"Request failed: {e}") from e
        latency = int((time.monotonic() - t0) * 1000)

        choices = getattr(resp, "choices", None) or []
        if not choices:
            raise ProviderError(self.provider_name, "Empty choices array from LLM")
        content = choices[0].message.content
        if not content:
            raise ProviderError(self.provider_name, "Empty message content from LLM")

        return JudgeReply(
            content=content.strip(),
            model=self._model,
            provider=self.provider_name,
            latency_ms=latency,
            raw_response=resp,
        )

    @property
    def provider_name(self) -> str:
        return "openrouter"
