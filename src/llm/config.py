# src/llm/config.py — v2
"""Provider selection with explicit override and auto-detect cascade.

Resolution order:
  1. PRIMARY_AI_PROVIDER names a provider → use it; missing credential fails.
  2. Auto-detect: Anthropic if any credential resolves, else OpenRouter.
  3. No credential at all → heuristics-only mode (LLMProvider.NONE).

Resolved once at startup into an immutable ProviderSelection that is
injected into the orchestrator; nothing re-reads the environment per call.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum

from aidetector.config.auth_profiles import read_claude_token
from aidetector.config.settings import Settings
from aidetector.core.errors import ProviderUnavailable

logger = logging.getLogger(__name__)

_FALLBACK_ANTHROPIC_MODEL = "claude-sonnet-4-5-20250929"

_PROVIDER_ALIASES = {
    "anthropic": "anthropic",
    "claude": "anthropic",
    "openrouter": "openrouter",
}


class LLMProvider(str, Enum):
    ANTHROPIC = "anthropic"
    OPENROUTER = "openrouter"
    NONE = "none"


@dataclass(frozen=True)
class ProviderSelection:
    """Resolved judge provider, model and credential."""

    provider: LLMProvider
    model: str = ""
    api_key: str = ""
    source: str = "none"  # "explicit", "auto", or "none"

    @property
    def heuristics_only(self) -> bool:
        return self.provider is LLMProvider.NONE

    def __repr__(self) -> str:
        # Never leak the credential into logs.
        return (
            f"ProviderSelection(provider={self.provider.value!r}, "
            f"model={self.model!r}, source={self.source!r})"
        )


def anthropic_credential(settings: Settings) -> str:
    """Setup token > API key > auth-profiles file."""
    if settings.anthropic_max_setup_token:
        return settings.anthropic_max_setup_token
    if settings.anthropic_api_key:
        return settings.anthropic_api_key
    return read_claude_token(settings.claude_auth_profiles) or ""


def anthropic_model(settings: Settings) -> str:
    return (
        settings.anthropic_max_model
        or settings.anthropic_api_model
        or _FALLBACK_ANTHROPIC_MODEL
    )


def resolve_provider(settings: Settings) -> ProviderSelection:
    """Resolve the judge provider for this process.

    Raises:
        ProviderUnavailable: An explicitly requested provider has no credential.
    """
    anthropic_key = anthropic_credential(settings)
    openrouter_key = settings.openrouter_api_key
    requested = settings.primary_ai_provider

    # Level 1: Explicit override
    explicit = _PROVIDER_ALIASES.get(requested)
    if explicit == "anthropic":
        if not anthropic_key:
            raise ProviderUnavailable(
                "PRIMARY_AI_PROVIDER=anthropic but no token found. "
                "Set ANTHROPIC_API_KEY or ANTHROPIC_MAX_SETUP_TOKEN"
            )
        selection = ProviderSelection(
            LLMProvider.ANTHROPIC, anthropic_model(settings), anthropic_key, "explicit"
        )
    elif explicit == "openrouter":
        if not openrouter_key:
            raise ProviderUnavailable(
                "PRIMARY_AI_PROVIDER=openrouter but OPENROUTER_API_KEY is empty"
            )
        selection = ProviderSelection(
            LLMProvider.OPENROUTER, settings.openrouter_api_model, openrouter_key,
            "explicit",
        )
    else:
        if requested and requested != "auto":
            logger.warning(
                "Unknown PRIMARY_AI_PROVIDER=%r, falling back to auto-detect",
                requested,
            )
        # Level 2: Auto-detect
        if anthropic_key:
            selection = ProviderSelection(
                LLMProvider.ANTHROPIC, anthropic_model(settings), anthropic_key, "auto"
            )
        elif openrouter_key:
            selection = ProviderSelection(
                LLMProvider.OPENROUTER, settings.openrouter_api_model,
                openrouter_key, "auto",
            )
        else:
            # Level 3: Heuristics only
            logger.warning(
                "No LLM provider configured — running in heuristics-only mode. "
                "Set ANTHROPIC_API_KEY, ANTHROPIC_MAX_SETUP_TOKEN, or "
                "OPENROUTER_API_KEY to enable LLM analysis."
            )
            selection = ProviderSelection(LLMProvider.NONE)

    logger.info("LLM provider: %s", selection)
    return selection
