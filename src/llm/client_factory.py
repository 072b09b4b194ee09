# src/llm/client_factory.py — v4
"""Factory: instantiate the LLM judge for a resolved provider selection.

Called once at startup (see llm/config.py resolution); the orchestrator
receives the judge and never re-dispatches on provider per call.
"""

from __future__ import annotations

import importlib
import logging
from typing import Any

from aidetector.config.settings import Settings
from aidetector.llm.base_client import BaseLLMJudge
from aidetector.llm.config import LLMProvider, ProviderSelection

logger = logging.getLogger(__name__)

# Registry of provider name → adapter class path (lazy import).
_PROVIDER_REGISTRY: dict[str, str] = {
    "anthropic": "aidetector.llm.adapters.anthropic_adapter.AnthropicJudge",
    "openrouter": "aidetector.llm.adapters.openrouter_adapter.OpenRouterJudge",
}


class UnsupportedProviderError(ValueError):
    """Raised when a provider is not registered."""


def create_judge(
    selection: ProviderSelection,
    settings: Settings | None = None,
    **kwargs: Any,
) -> BaseLLMJudge | None:
    """Instantiate the adapter for ``selection``.

    Args:
        selection: Provider resolved at startup.
        settings: Application settings (timeout, sampling, base URLs).
        **kwargs: Extra adapter arguments (e.g. a shared ``http_client``).

    Returns:
        Configured judge, or None in heuristics-only mode.

    Raises:
        UnsupportedProviderError: If the provider is not registered.
    """
    if selection.provider is LLMProvider.NONE:
        return None

    name = selection.provider.value
    if name not in _PROVIDER_REGISTRY:
        raise UnsupportedProviderError(
            f"Unsupported LLM provider: {name!r}. "
            f"Available: {', '.join(sorted(_PROVIDER_REGISTRY))}"
        )
    adapter_cls = _import_class(_PROVIDER_REGISTRY[name])

    init_kwargs = dict(kwargs)
    init_kwargs["model"] = selection.model
    init_kwargs["api_key"] = selection.api_key
    if settings is not None:
        init_kwargs.setdefault("timeout_s", settings.llm_timeout_seconds)
        init_kwargs.setdefault("temperature", settings.llm_temperature)
        init_kwargs.setdefault("max_tokens", settings.llm_max_tokens)
        if selection.provider is LLMProvider.OPENROUTER:
            init_kwargs.setdefault("base_url", settings.openrouter_base_url)

    logger.debug("Creating LLM judge: provider=%s, model=%s", name, selection.model)
    return adapter_cls(**init_kwargs)


def register_judge(name: str, class_path: str) -> None:
    """Replace the adapter class used for a known provider.

    Providers are a closed set (see LLMProvider), so only the adapter
    behind an existing name can be swapped, e.g. for a proxy or a test
    double.

    Args:
        name: Provider identifier, an LLMProvider value other than "none".
        class_path: Fully qualified class path implementing BaseLLMJudge.

    Raises:
        UnsupportedProviderError: If ``name`` is not a known provider.
    """
    if name not in _PROVIDER_REGISTRY:
        raise UnsupportedProviderError(
            f"Unknown LLM provider: {name!r}. "
            f"Available: {', '.join(sorted(_PROVIDER_REGISTRY))}"
        )
    _PROVIDER_REGISTRY[name] = class_path
    logger.info("Registered LLM judge: %s → %s", name, class_path)


def _import_class(class_path: str) -> type:
    """Dynamically import a class from its fully qualified path."""
    module_path, class_name = class_path.rsplit(".", 1)
    module = importlib.import_module(module_path)
    return getattr(module, class_name)
