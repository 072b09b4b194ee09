# tests/conftest.py — v2
"""Shared test fixtures for all unit tests.

Provides sample posts, isolated settings, an in-memory result store and a
mock LLM judge. No network access — every provider call is mocked.
"""

from __future__ import annotations

import logging
from unittest.mock import AsyncMock, MagicMock

import pytest

from aidetector.cache.sqlite_store import SqliteResultStore
from aidetector.config.settings import Settings
from aidetector.core.models import Document, LlmResult, Platform
from aidetector.llm.base_client import BaseLLMJudge
from aidetector.logging.context import clear_context
from aidetector.logging.logger import ROOT_LOGGER


# === FIXTURES: Environment isolation ===


@pytest.fixture(autouse=True)
def _isolate_env(monkeypatch):
    """Keep developer credentials and .env overrides out of the tests."""
    for field in Settings.model_fields:
        monkeypatch.delenv(field.upper(), raising=False)


@pytest.fixture(autouse=True)
def _restore_package_logger():
    """Undo setup_logging() calls and log context set by a test."""
    root = logging.getLogger(ROOT_LOGGER)
    level, handlers = root.level, list(root.handlers)
    yield
    for handler in root.handlers:
        if handler not in handlers:
            handler.close()
    root.handlers[:] = handlers
    root.setLevel(level)
    clear_context()


@pytest.fixture
def settings(tmp_path) -> Settings:
    """Settings with no credentials, no .env file and a temp SQLite path."""
    return Settings(
        _env_file=None,
        claude_auth_profiles=tmp_path / "missing-auth-profiles.json",
        store_sqlite_path=tmp_path / "data.db",
    )


# === FIXTURES: Sample posts ===


@pytest.fixture
def casual_text() -> str:
    return "lol this is wild!! cant believe what happened today."


@pytest.fixture
def cliche_text() -> str:
    return (
        "In today's world, it's important to note that... Furthermore... "
        "leveraging these best practices..."
    )


@pytest.fixture
def ai_text() -> str:
    return (
        "In today's fast-paced world, Rust has emerged as a transformative "
        "force in systems programming. Furthermore, its robust ownership model "
        "fosters memory safety without sacrificing performance. It's important "
        "to note that the ecosystem is a testament to the community. Moreover, "
        "developers can leverage cutting-edge tooling to navigate the "
        "complexities of concurrency — seamlessly."
    )


@pytest.fixture
def human_text() -> str:
    return (
        "Spent the whole weekend fighting the borrow checker on my side project. "
        "Turns out I was holding a mutable ref across an await, which the "
        "compiler flagged about forty times before I got it. "
        "Rewrote the cache as an Arc<Mutex<..>> and it finally compiled. "
        "Benchmarks are fine, not amazing. "
        "Next up is figuring out why my CI takes eleven minutes to build a crate "
        "with three dependencies"
    )


@pytest.fixture
def make_document():
    """Factory for Document instances with sensible defaults."""

    def _make(content: str, platform: Platform = Platform.TWITTER, **kwargs) -> Document:
        return Document(content=content, platform=platform, **kwargs)

    return _make


# === FIXTURES: Stores and judges ===


@pytest.fixture
def memory_store():
    store = SqliteResultStore(":memory:")
    yield store
    store.close()


@pytest.fixture
def mock_judge() -> MagicMock:
    """Mock BaseLLMJudge returning a confident AI-leaning opinion."""
    judge = MagicMock(spec=BaseLLMJudge)
    judge.provider_name = "anthropic"
    judge.model = "claude-sonnet-4-5-20250929"
    judge.judge = AsyncMock(return_value=LlmResult(score=8, confidence=0.9))
    return judge
