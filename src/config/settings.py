# src/config/settings.py — v2
"""Typed configuration loaded from .env via pydantic-settings.

Single source of truth for all deployment-specific settings. Field names map
to upper-case environment variables (ANTHROPIC_API_KEY, PRIMARY_AI_PROVIDER,
...).
"""

from __future__ import annotations

from pathlib import Path
from typing import Literal

from pydantic import field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class ConfigurationError(Exception):
    """Raised when configuration is internally inconsistent."""


class Settings(BaseSettings):
    """Application settings loaded from .env file."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # === LLM PROVIDERS ===
    # "anthropic" / "claude" / "openrouter"; empty or "auto" = auto-detect
    primary_ai_provider: str = ""

    # Anthropic: setup token > API key > ~/.claude/auth-profiles.json
    anthropic_max_setup_token: str = ""
    anthropic_api_key: str = ""
    anthropic_max_model: str = ""
    anthropic_api_model: str = ""
    claude_auth_profiles: Path = Path("~/.claude/auth-profiles.json")

    # OpenRouter
    openrouter_api_key: str = ""
    openrouter_api_model: str = ""
    openrouter_base_url: str = "https://openrouter.ai/api/v1"

    # Judge call parameters
    llm_timeout_seconds: float = 30.0
    llm_temperature: float = 0.1
    llm_max_tokens: int = 100

    # === Document limits ===
    max_content_chars: int = 50_000

    # === Result store ===
    store_backend: Literal["sqlite", "redis"] = "sqlite"
    store_sqlite_path: Path = Path("data.db")
    store_redis_url: str = ""

    # === Logging ===
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"
    log_format: Literal["json", "text"] = "json"
    log_file: Path | None = None
    log_rotation: str = "10MB"
    log_retention: int = 30

    # --- Validators ---

    @field_validator("primary_ai_provider")
    @classmethod
    def normalize_provider(cls, v: str) -> str:  # noqa: N805
        return v.strip().lower()

    @model_validator(mode="after")
    def validate_config_consistency(self) -> Settings:
        """Validate cross-field consistency rules."""
        errors: list[str] = []

        if self.llm_timeout_seconds <= 0:
            errors.append("LLM_TIMEOUT_SECONDS must be > 0")

        if self.llm_max_tokens <= 0:
            errors.append("LLM_MAX_TOKENS must be > 0")

        if self.max_content_chars <= 0:
            errors.append("MAX_CONTENT_CHARS must be > 0")

        if self.store_backend == "redis" and not self.store_redis_url:
            errors.append("STORE_BACKEND=redis requires STORE_REDIS_URL")

        if errors:
            raise ConfigurationError("; ".join(errors))

        return self


def load_settings(**overrides: object) -> Settings:
    """Load settings from .env with optional overrides.

    Args:
        **overrides: Field-level overrides (for testing or per-process config).

    Returns:
        Validated Settings instance.

    Raises:
        ConfigurationError: If configuration is internally inconsistent.
    """
    return Settings(**overrides)  # type: ignore[arg-type]
